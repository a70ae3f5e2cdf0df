from __future__ import annotations

from .errors import InvalidSpanError, SpanError, SpanFormatError
from .spans import (
    Positionable,
    Span,
    SpanLike,
    enclosing,
    enclosing_from_inclusive_to_exclusive_start,
    gap,
    overlaps,
    parse,
    try_parse,
)

__all__ = [
    "InvalidSpanError",
    "Positionable",
    "Span",
    "SpanError",
    "SpanFormatError",
    "SpanLike",
    "enclosing",
    "enclosing_from_inclusive_to_exclusive_start",
    "gap",
    "overlaps",
    "parse",
    "try_parse",
]
