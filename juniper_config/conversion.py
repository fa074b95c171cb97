"""
Conversion between configuration trees and plain Python data.

Blocks become dictionaries, repeated keys become lists of strings and single
statements become strings, the same nested representation that JSON can hold.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from juniper_config.exceptions import NestingTooDeepError
from juniper_config.options import MAX_NESTING_DEPTH
from juniper_config.values import Block, ConfigValue, Scalar, ScalarList

PlainValue = str | list[str] | dict[str, Any]


def to_python(value: ConfigValue, _depth: int = 0) -> PlainValue:
    """Convert a tree (or any value within it) to dicts, lists and strings."""
    if _depth > MAX_NESTING_DEPTH:
        raise NestingTooDeepError(MAX_NESTING_DEPTH)
    match value:
        case Scalar():
            return value.value
        case ScalarList():
            return list(value.values)
        case Block():
            return {key: to_python(item, _depth + 1) for key, item in value.items()}
        case _:
            raise TypeError(f"Not a configuration value: {type(value).__name__}")


def from_python(data: Any, _depth: int = 0) -> ConfigValue:
    """Build a tree from the structure produced by :func:`to_python`."""
    if _depth > MAX_NESTING_DEPTH:
        raise NestingTooDeepError(MAX_NESTING_DEPTH)
    match data:
        case str():
            return Scalar(data)
        case list() | tuple():
            for item in data:
                if not isinstance(item, str):
                    raise TypeError(
                        f"List items must be strings, got {type(item).__name__}"
                    )
            return ScalarList(tuple(data))
        case Mapping():
            entries: dict[str, ConfigValue] = {}
            for key, item in data.items():
                if not isinstance(key, str):
                    raise TypeError(f"Keys must be strings, got {type(key).__name__}")
                entries[key] = from_python(item, _depth + 1)
            return Block(entries)
        case _:
            raise TypeError(
                f"Cannot convert {type(data).__name__} to a configuration value"
            )
