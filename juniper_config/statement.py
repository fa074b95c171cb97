"""Leaf statement and comment line handling."""

from __future__ import annotations

TERMINATOR = ";"
COMMENT_MARKER = "#"


def is_comment(line: str) -> bool:
    """Full-line comments only; a ``#`` after a statement stays in the value."""
    return line.lstrip().startswith(COMMENT_MARKER)


def _strip_terminator(text: str) -> str:
    if text.endswith(TERMINATOR):
        return text[: -len(TERMINATOR)]
    return text


def parse_statement(line: str) -> tuple[str, str]:
    """Split a ``key[ value];`` line into its key and value.

    ``instance-type vrf;`` gives ``("instance-type", "vrf")`` and the flag
    statement ``vlan-tagging;`` gives ``("vlan-tagging", "")``. Everything
    after the first run of whitespace is the value, so quoted descriptions
    keep their inner spaces and quotes. A blank line gives ``("", "")``.
    """
    parts = line.split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return _strip_terminator(parts[0]), ""
    key, value = parts
    return key, _strip_terminator(value.strip()).strip()
