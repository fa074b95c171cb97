"""Value model for parsed configuration trees.

A configuration tree is a :class:`Block` whose entries map statement keys and
block names to one of three value kinds:

* :class:`Scalar` for a single ``key value;`` statement (``value`` is empty for
  flag statements such as ``vlan-tagging;``),
* :class:`ScalarList` when the same key occurs several times in one block,
* :class:`Block` for a nested ``name { ... }`` group.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias

from juniper_config.exceptions import DuplicateKeyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Scalar:
    kind: ClassVar[str] = "scalar"

    value: str = ""

    @property
    def is_flag(self) -> bool:
        return not self.value


@dataclass(frozen=True, slots=True)
class ScalarList:
    """Values of a key repeated within one block, in source order."""

    kind: ClassVar[str] = "list"

    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def appended(self, value: str) -> ScalarList:
        return ScalarList((*self.values, value))


@dataclass(frozen=True, slots=True, eq=False)
class Block(Mapping[str, "ConfigValue"]):
    """Named group of statements and nested blocks.

    Behaves as a read-only mapping. Two blocks are equal only when they hold
    the same entries in the same order.
    """

    kind: ClassVar[str] = "block"

    entries: dict[str, ConfigValue] = field(default_factory=dict)

    def __getitem__(self, key: str) -> ConfigValue:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return list(self.entries.items()) == list(other.entries.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Block({self.entries!r})"


ConfigValue: TypeAlias = Scalar | ScalarList | Block


def _scalar_values(value: Scalar | ScalarList) -> tuple[str, ...]:
    if isinstance(value, Scalar):
        return (value.value,)
    return value.values


def merge_value(
    existing: ConfigValue | None,
    new: ConfigValue,
    *,
    key: str = "",
    strict: bool = False,
) -> ConfigValue:
    """Combine a value with the one already stored under the same key.

    * nothing stored yet: ``new`` is kept as is,
    * scalar then scalar: both are collected into a :class:`ScalarList`,
    * list then scalar: the scalar is appended,
    * any other mix of scalars and lists: the values are concatenated in order
      (this happens when a repeated block is merged into an earlier one),
    * block then block: the blocks are merged entry by entry.

    Any other pairing mixes value kinds. The later value wins and a warning
    is logged, unless ``strict`` is set, in which case
    :class:`DuplicateKeyError` is raised.
    """
    match existing, new:
        case None, _:
            return new
        case Scalar(), Scalar():
            return ScalarList((existing.value, new.value))
        case ScalarList(), Scalar():
            return existing.appended(new.value)
        case Scalar() | ScalarList(), Scalar() | ScalarList():
            return ScalarList((*_scalar_values(existing), *_scalar_values(new)))
        case Block(), Block():
            return merge_blocks(existing, new, strict=strict)
        case _:
            if strict:
                raise DuplicateKeyError(key, existing.kind, new.kind)
            logger.warning(
                f"Key {key!r} redefined from {existing.kind} to {new.kind}, "
                "keeping the later value"
            )
            return new


def merge_blocks(first: Block, second: Block, *, strict: bool = False) -> Block:
    """Return a new block holding the entries of ``first`` then ``second``."""
    entries = dict(first.entries)
    for key, value in second.entries.items():
        entries[key] = merge_value(entries.get(key), value, key=key, strict=strict)
    return Block(entries)


def insert_value(
    entries: dict[str, ConfigValue],
    key: str,
    value: ConfigValue,
    *,
    strict: bool = False,
) -> None:
    """Store ``value`` under ``key`` in a mapping that is being built."""
    entries[key] = merge_value(entries.get(key), value, key=key, strict=strict)


__all__ = [
    "Block",
    "ConfigValue",
    "Scalar",
    "ScalarList",
    "insert_value",
    "merge_blocks",
    "merge_value",
]
