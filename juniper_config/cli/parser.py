"""Argument parsing for the juniper-config command line."""

from __future__ import annotations

import argparse
import sys

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def with_file_argument(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Let every subcommand read from a file or, by default, from stdin."""
    parser.add_argument(
        "-f",
        "--file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (default: stdin)",
    )
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="juniper-config",
        description="Parse and rebuild brace-delimited Juniper style configuration",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug output"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unbalanced braces and conflicting duplicate keys",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum block nesting accepted while parsing",
    )

    subparsers = parser.add_subparsers(dest="command")
    with_file_argument(
        subparsers.add_parser("format", help="Parse and print normalized text")
    )
    with_file_argument(
        subparsers.add_parser("json", help="Parse and print the tree as JSON")
    )
    with_file_argument(
        subparsers.add_parser(
            "from-json", help="Read a JSON tree and print configuration text"
        )
    )
    with_file_argument(
        subparsers.add_parser("test", help="Check that the file survives a round trip")
    )
    return parser
