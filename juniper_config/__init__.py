"""
juniper-config

Parse brace-delimited Juniper style configuration text into a tree of
scalars, lists and blocks, and serialize such trees back into the same text.
"""

from juniper_config.conversion import from_python, to_python
from juniper_config.exceptions import (
    DuplicateKeyError,
    JuniperConfigError,
    JuniperSyntaxError,
    NestingTooDeepError,
    UnbalancedBracesError,
)
from juniper_config.options import ParseOptions
from juniper_config.parser import parse, parse_file
from juniper_config.serializer import serialize
from juniper_config.values import Block, ConfigValue, Scalar, ScalarList

__all__ = [
    "Block",
    "ConfigValue",
    "DuplicateKeyError",
    "JuniperConfigError",
    "JuniperSyntaxError",
    "NestingTooDeepError",
    "ParseOptions",
    "Scalar",
    "ScalarList",
    "UnbalancedBracesError",
    "from_python",
    "parse",
    "parse_file",
    "serialize",
    "to_python",
]
