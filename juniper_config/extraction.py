"""Single pass partitioning of configuration lines into blocks and statements.

The pass is a fold over the lines: :func:`step` takes the current
:class:`ExtractionState` and one line and returns the next state together with
at most one event describing what the line was. :func:`extract_blocks` drives
the fold and groups the events into top-level statements and the bodies of
top-level blocks, which the parser then handles recursively.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, TypeAlias

from juniper_config.exceptions import UnbalancedBracesError
from juniper_config.statement import parse_statement

logger = logging.getLogger(__name__)

OPEN_BRACE = "{"
CLOSE_BRACE = "}"


class SourceLine(NamedTuple):
    number: int
    text: str


@dataclass(frozen=True, slots=True)
class ExtractionState:
    """Brace depth and the name of the block being collected, if any."""

    depth: int = 0
    block: str | None = None


@dataclass(frozen=True, slots=True)
class BlockOpened:
    name: str


@dataclass(frozen=True, slots=True)
class BodyLine:
    line: SourceLine


@dataclass(frozen=True, slots=True)
class BlockClosed:
    pass


@dataclass(frozen=True, slots=True)
class Statement:
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class StrayBrace:
    pass


Event: TypeAlias = BlockOpened | BodyLine | BlockClosed | Statement | StrayBrace


@dataclass(slots=True)
class ExtractedBlock:
    """A top-level block name and the lines between its braces."""

    name: str
    lines: list[SourceLine] = field(default_factory=list)


def block_name(text: str) -> str:
    return text.replace(OPEN_BRACE, "").strip()


def step(
    state: ExtractionState, line: SourceLine
) -> tuple[ExtractionState, Event | None]:
    """Advance the extraction by one line."""
    text = line.text
    if not text.strip():
        return state, None

    closes = CLOSE_BRACE in text
    depth = state.depth
    if OPEN_BRACE in text:
        depth += 1
    if closes:
        depth -= 1

    if depth < 0:
        return ExtractionState(), StrayBrace()

    if state.block is None:
        if depth == 1:
            name = block_name(text)
            return ExtractionState(depth=1, block=name), BlockOpened(name)
        if closes:
            # "name { }" on a single line opens and closes at once.
            return ExtractionState(), None
        key, value = parse_statement(text)
        return ExtractionState(), Statement(key, value)

    if depth == 0:
        return ExtractionState(), BlockClosed()
    return ExtractionState(depth=depth, block=state.block), BodyLine(line)


def extract_blocks(
    lines: Iterable[SourceLine], *, strict: bool = False
) -> list[ExtractedBlock | Statement]:
    """Split lines into top-level statements and top-level block bodies.

    Entries are returned in source order. Nested blocks stay inside the body
    of their enclosing top-level block.
    """
    entries: list[ExtractedBlock | Statement] = []
    state = ExtractionState()
    current: ExtractedBlock | None = None
    opened_at: SourceLine | None = None

    for line in lines:
        state, event = step(state, line)
        match event:
            case None:
                continue
            case BlockOpened(name=name):
                logger.debug(f"Line {line.number}: block {name!r} opened")
                current = ExtractedBlock(name=name)
                entries.append(current)
                opened_at = line
            case BodyLine():
                if current is not None:
                    current.lines.append(line)
            case BlockClosed():
                current = None
            case Statement():
                entries.append(event)
            case StrayBrace():
                if strict:
                    raise UnbalancedBracesError(
                        f"Unexpected {CLOSE_BRACE!r}", lineno=line.number
                    )
                logger.warning(
                    f"Line {line.number}: ignoring unmatched {CLOSE_BRACE!r}"
                )

    if state.block is not None:
        lineno = opened_at.number if opened_at is not None else None
        if strict:
            raise UnbalancedBracesError(
                f"Block {state.block!r} is never closed", lineno=lineno
            )
        logger.warning(
            f"Line {lineno}: block {state.block!r} is never closed, "
            "keeping the lines read so far"
        )
    return entries
