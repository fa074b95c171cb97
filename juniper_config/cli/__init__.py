"""CLI package for the juniper-config entrypoints."""

from juniper_config.cli.main import main
from juniper_config.cli.parser import build_parser, with_file_argument

__all__ = ["build_parser", "main", "with_file_argument"]
