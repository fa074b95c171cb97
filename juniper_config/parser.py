import logging
from pathlib import Path

from juniper_config.exceptions import NestingTooDeepError
from juniper_config.extraction import (
    CLOSE_BRACE,
    OPEN_BRACE,
    ExtractedBlock,
    SourceLine,
    extract_blocks,
)
from juniper_config.options import DEFAULT_OPTIONS, ParseOptions
from juniper_config.statement import is_comment, parse_statement
from juniper_config.values import Block, ConfigValue, Scalar, insert_value

logger = logging.getLogger(__name__)


def source_lines(text: str) -> list[SourceLine]:
    """Number the lines of a document and drop full-line comments."""
    return [
        SourceLine(number, line)
        for number, line in enumerate(text.split("\n"), start=1)
        if not is_comment(line)
    ]


def _has_braces(lines: list[SourceLine]) -> bool:
    return any(OPEN_BRACE in line.text or CLOSE_BRACE in line.text for line in lines)


def lines_to_block(
    lines: list[SourceLine], options: ParseOptions = DEFAULT_OPTIONS, depth: int = 0
) -> Block:
    """Build the block described by a sequence of comment-free lines."""
    if depth > options.max_depth:
        raise NestingTooDeepError(options.max_depth)

    entries: dict[str, ConfigValue] = {}
    if not _has_braces(lines):
        for line in lines:
            if line.text.strip():
                key, value = parse_statement(line.text)
                insert_value(entries, key, Scalar(value), strict=options.strict)
        return Block(entries)

    for entry in extract_blocks(lines, strict=options.strict):
        if isinstance(entry, ExtractedBlock):
            logger.debug(
                f"Parsing block {entry.name!r} at depth {depth + 1} "
                f"({len(entry.lines)} lines)"
            )
            value: ConfigValue = lines_to_block(entry.lines, options, depth + 1)
            insert_value(entries, entry.name, value, strict=options.strict)
        else:
            insert_value(
                entries, entry.key, Scalar(entry.value), strict=options.strict
            )
    return Block(entries)


def parse(text: str, options: ParseOptions | None = None) -> Block:
    """Parse configuration text into a tree rooted at a :class:`Block`."""
    return lines_to_block(source_lines(text), options or DEFAULT_OPTIONS)


def parse_file(path: str | Path, options: ParseOptions | None = None) -> Block:
    """Read a configuration file as UTF-8 and parse it."""
    return parse(Path(path).read_text(encoding="utf-8"), options)
