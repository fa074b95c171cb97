"""Parser configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_NESTING_DEPTH = 128


class ParseOptions(BaseModel):
    """Knobs accepted by :func:`juniper_config.parser.parse`.

    The default instance is permissive: malformed text produces whatever tree
    the brace counting derives and a warning is logged. ``strict=True`` turns
    those warnings into :class:`~juniper_config.exceptions.JuniperSyntaxError`
    and repeated keys of different kinds into
    :class:`~juniper_config.exceptions.DuplicateKeyError`.

    ``max_depth`` is capped at ``MAX_NESTING_DEPTH``, the limit the serializer
    and the conversion helpers apply, so every parsed tree can be written back.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strict: bool = False
    max_depth: int = Field(default=MAX_NESTING_DEPTH, ge=1, le=MAX_NESTING_DEPTH)


DEFAULT_OPTIONS = ParseOptions()
