"""
Command line entrypoint for parsing and rebuilding configuration files.
"""

import json
import logging
import sys

from pydantic import ValidationError

from juniper_config.cli.parser import build_parser
from juniper_config.color import colorize_config
from juniper_config.conversion import from_python, to_python
from juniper_config.exceptions import JuniperConfigError
from juniper_config.options import ParseOptions
from juniper_config.parser import parse
from juniper_config.serializer import serialize

logger = logging.getLogger(__name__)


def configure_logging(log_level: str, verbose: bool) -> None:
    logging_level = getattr(logging, log_level)
    if verbose and logging_level > logging.DEBUG:
        logging_level = logging.DEBUG
    logging.basicConfig(level=logging_level, format="%(levelname)s: %(message)s")


def options_from_args(args) -> ParseOptions:
    if args.max_depth is None:
        return ParseOptions(strict=args.strict)
    return ParseOptions(strict=args.strict, max_depth=args.max_depth)


def main(args=None) -> int:
    """Return CLI exit codes so automation can distinguish success from failure."""
    parser = build_parser()
    args = parser.parse_args(args)
    configure_logging(args.log_level, args.verbose)

    try:
        options = options_from_args(args)
    except ValidationError as exc:
        print(f"error: invalid options: {exc}", file=sys.stderr)
        return 2

    try:
        match args.command:
            case "format":
                tree = parse(args.file.read(), options)
                print(colorize_config(serialize(tree)), end="")
                return 0
            case "json":
                tree = parse(args.file.read(), options)
                print(json.dumps(to_python(tree), indent=2))
                return 0
            case "from-json":
                data = json.load(args.file)
                tree = from_python(data)
                print(colorize_config(serialize(tree)), end="")
                return 0
            case "test":
                tree = parse(args.file.read(), options)
                rebuilt = serialize(tree)
                if parse(rebuilt, options) == tree:
                    print("OK")
                    return 0
                logger.debug(f"Round trip produced a different tree:\n{rebuilt}")
                print("Fail")
                return 1
            case _:
                parser.print_help(sys.stderr)
                return 2
    except (JuniperConfigError, TypeError, json.JSONDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
