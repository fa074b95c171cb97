"""Exercise the block extraction fold one line at a time and as a whole."""

import logging

import pytest

from juniper_config.exceptions import UnbalancedBracesError
from juniper_config.extraction import (
    BlockClosed,
    BlockOpened,
    BodyLine,
    ExtractedBlock,
    ExtractionState,
    SourceLine,
    Statement,
    StrayBrace,
    extract_blocks,
    step,
)


def lines(text: str) -> list[SourceLine]:
    return [
        SourceLine(number, line)
        for number, line in enumerate(text.split("\n"), start=1)
    ]


def test_step_statement_at_top_level():
    state, event = step(ExtractionState(), SourceLine(1, "version 12.3;"))
    assert state == ExtractionState()
    assert event == Statement("version", "12.3")


def test_step_skips_blank_lines():
    state = ExtractionState(depth=1, block="system")
    assert step(state, SourceLine(3, "   ")) == (state, None)


def test_step_opens_block():
    state, event = step(ExtractionState(), SourceLine(1, "  system {"))
    assert state == ExtractionState(depth=1, block="system")
    assert event == BlockOpened("system")


def test_step_collects_nested_lines():
    state = ExtractionState(depth=1, block="interfaces")
    line = SourceLine(2, "  ge-0/0/0 {")
    state, event = step(state, line)
    assert state == ExtractionState(depth=2, block="interfaces")
    assert event == BodyLine(line)

    line = SourceLine(3, "  }")
    state, event = step(state, line)
    assert state == ExtractionState(depth=1, block="interfaces")
    assert event == BodyLine(line)


def test_step_closes_block():
    state, event = step(ExtractionState(depth=1, block="system"), SourceLine(4, "}"))
    assert state == ExtractionState()
    assert event == BlockClosed()


def test_step_stray_brace():
    state, event = step(ExtractionState(), SourceLine(1, "}"))
    assert state == ExtractionState()
    assert event == StrayBrace()


def test_step_single_line_braces_produce_nothing():
    assert step(ExtractionState(), SourceLine(1, "empty { }")) == (
        ExtractionState(),
        None,
    )


def test_extract_blocks_partitions_in_source_order():
    text = "version 1;\nsystem {\n  host-name a;\n  services {\n    ssh;\n  }\n}\nlast;"
    entries = extract_blocks(lines(text))
    assert entries == [
        Statement("version", "1"),
        ExtractedBlock(
            name="system",
            lines=[
                SourceLine(3, "  host-name a;"),
                SourceLine(4, "  services {"),
                SourceLine(5, "    ssh;"),
                SourceLine(6, "  }"),
            ],
        ),
        Statement("last", ""),
    ]


def test_extract_blocks_excludes_brace_lines_from_body():
    entries = extract_blocks(lines("a {\n}\n"))
    assert entries == [ExtractedBlock(name="a", lines=[])]


def test_extract_blocks_ignores_stray_brace(caplog):
    with caplog.at_level(logging.WARNING):
        entries = extract_blocks(lines("}\nkey value;"))
    assert entries == [Statement("key", "value")]
    assert "unmatched" in caplog.text


def test_extract_blocks_keeps_unterminated_block(caplog):
    with caplog.at_level(logging.WARNING):
        entries = extract_blocks(lines("system {\n  host-name a;"))
    assert entries == [
        ExtractedBlock(name="system", lines=[SourceLine(2, "  host-name a;")])
    ]
    assert "never closed" in caplog.text


def test_extract_blocks_strict_stray_brace():
    with pytest.raises(UnbalancedBracesError) as excinfo:
        extract_blocks(lines("a;\n}"), strict=True)
    assert excinfo.value.lineno == 2


def test_extract_blocks_strict_unterminated_block():
    with pytest.raises(UnbalancedBracesError, match="never closed"):
        extract_blocks(lines("a;\nsystem {\n  b;"), strict=True)
