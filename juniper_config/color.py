from __future__ import annotations

import os
import sys

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import Comment, Name, Punctuation, String, Text, Whitespace


class JuniperConfigLexer(RegexLexer):
    """Lexer for brace-delimited Juniper style configuration files."""

    name = "Juniper configuration"
    aliases = ["juniper", "junos"]
    filenames = ["*.conf"]

    tokens = {
        "root": [
            (r"^[ \t]*#.*?$", Comment.Single),
            (
                r"^([ \t]*)([^\n{};]+?)([ \t]*)(\{)",
                bygroups(Whitespace, Name.Namespace, Whitespace, Punctuation),
            ),
            (r"\}", Punctuation),
            (
                r"^([ \t]*)([^\s{};]+)([ \t]+)([^\n{};]*)(;)",
                bygroups(Whitespace, Name.Attribute, Whitespace, String, Punctuation),
            ),
            (
                r"^([ \t]*)([^\s{};]+)(;)",
                bygroups(Whitespace, Name.Attribute, Punctuation),
            ),
            (r"\n", Whitespace),
            (r"[ \t]+", Whitespace),
            (r".", Text),
        ]
    }


def colorize_config(code: str) -> str:
    """Highlight configuration text for terminals that want colour."""
    if (not code) or (os.getenv("NO_COLOR") == "1") or (not sys.stdout.isatty()):
        return code
    return highlight(code, JuniperConfigLexer(), TerminalFormatter())


__all__ = ["JuniperConfigLexer", "colorize_config"]
