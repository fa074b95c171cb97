"""Render configuration trees back into brace-delimited text."""

from __future__ import annotations

from juniper_config.exceptions import NestingTooDeepError
from juniper_config.options import MAX_NESTING_DEPTH
from juniper_config.values import Block, ConfigValue, Scalar, ScalarList

INDENT = "  "


def _statement(indent: str, key: str, value: str) -> str:
    if not value:
        return f"{indent}{key};\n"
    return f"{indent}{key} {value};\n"


def serialize(
    tree: ConfigValue, name: str | None = None, indent_level: int = 0
) -> str:
    """Return the configuration text for ``tree``.

    The root of a document is written without a ``name`` and therefore without
    enclosing braces. Nested blocks are written as ``name {`` ... ``}`` with
    their body indented one level (two spaces) deeper than the braces.
    """
    if indent_level > MAX_NESTING_DEPTH:
        raise NestingTooDeepError(MAX_NESTING_DEPTH)

    indent = INDENT * indent_level
    match tree:
        case Scalar(value=value):
            if name is None:
                raise TypeError("A scalar can only be serialized with a name")
            return _statement(indent, name, value)
        case ScalarList(values=values):
            if name is None:
                raise TypeError("A list can only be serialized with a name")
            return "".join(_statement(indent, name, value) for value in values)
        case Block():
            body_level = indent_level if name is None else indent_level + 1
            body = "".join(
                serialize(value, key, body_level) for key, value in tree.items()
            )
            if name is None:
                return body
            return f"{indent}{name} {{\n{body}{indent}}}\n"
        case _:
            raise TypeError(f"Cannot serialize {type(tree).__name__}")
