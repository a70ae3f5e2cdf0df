from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from .errors import InvalidSpanError, SpanFormatError


logger = logging.getLogger(__name__)

_SPAN_RE = re.compile(r"\[(?P<start>[0-9]+):(?P<end>[0-9]+)\]")


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range [start, start + length) of offsets into a source text.

    A zero-length span is a point; any number of them may sit at one offset.
    """

    start: int
    length: int

    def __post_init__(self) -> None:
        for name in ("start", "length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if self.start < 0:
            raise InvalidSpanError("start", self.start)
        if self.length < 0:
            raise InvalidSpanError("length", self.length)

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.start + self.length

    def format(self) -> str:
        return f"[{self.start}:{self.end}]"

    def __str__(self) -> str:
        return self.format()


@runtime_checkable
class Positionable(Protocol):
    """Anything that occupies a span of source, e.g. a token or a syntax node."""

    @property
    def span(self) -> Span: ...


SpanLike = Union[Span, Positionable]


def _as_span(obj: SpanLike) -> Span:
    if isinstance(obj, Span):
        return obj
    span = getattr(obj, "span", None)
    if isinstance(span, Span):
        return span
    raise TypeError(f"expected a Span or an object with a .span, got {type(obj).__name__}")


def _in_order(a: Span, b: Span) -> bool:
    return a.start <= b.start


def enclosing(a: SpanLike, b: SpanLike) -> Span:
    """Span from the start of the earlier input to the end of the later one.

    Inputs are ordered by start only. The result ends where the later-starting
    span ends, so if the earlier span reaches further the result is shorter
    than it. This is not a union.
    """
    a, b = _as_span(a), _as_span(b)
    if not _in_order(a, b):
        a, b = b, a
    return Span(a.start, b.end - a.start)


def gap(a: SpanLike, b: SpanLike) -> Span:
    """Span strictly between the two inputs.

    Raises InvalidSpanError when the inputs overlap.
    """
    a, b = _as_span(a), _as_span(b)
    if not _in_order(a, b):
        a, b = b, a
    return Span(a.end, b.start - a.end)


def enclosing_from_inclusive_to_exclusive_start(inclusive: SpanLike, exclusive: SpanLike) -> Span:
    """Span from the start of ``inclusive`` up to the start of ``exclusive``.

    When ``exclusive`` starts first the result runs from the end of
    ``exclusive`` to the end of ``inclusive`` instead. The operation is not
    commutative.
    """
    inclusive, exclusive = _as_span(inclusive), _as_span(exclusive)
    if _in_order(inclusive, exclusive):
        return Span(inclusive.start, exclusive.start - inclusive.start)

    start = exclusive.end
    return Span(start, inclusive.end - start)


def overlaps(a: SpanLike, b: SpanLike) -> bool:
    a, b = _as_span(a), _as_span(b)
    # Points never overlap, not even an identical point.
    if a.length == 0 or b.length == 0:
        return False
    if not _in_order(a, b):
        a, b = b, a
    return b.start >= a.start and b.start < a.end


def try_parse(text: str | None) -> Span | None:
    """Parse ``[<start>:<end>]``; return None instead of raising."""
    if not isinstance(text, str):
        return None

    m = _SPAN_RE.fullmatch(text)
    if m is None:
        logger.debug("rejected span text %r: no match", text)
        return None

    try:
        start = int(m.group("start"))
        end = int(m.group("end"))
    except ValueError:
        logger.debug("rejected span text %r: offset is not a convertible integer", text[:64])
        return None
    if end < start:
        logger.debug("rejected span text %r: end before start", text)
        return None
    return Span(start, end - start)


def parse(text: str) -> Span:
    span = try_parse(text)
    if span is None:
        raise SpanFormatError(text)
    return span
