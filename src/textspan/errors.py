from __future__ import annotations

from dataclasses import dataclass


class SpanError(ValueError):
    """Base class for everything that can go wrong building or reading a span."""


@dataclass(slots=True, eq=False)
class InvalidSpanError(SpanError):
    """A span was constructed with a negative start or length.

    This signals a bug in whatever computed the offsets; callers are not
    expected to recover from it.
    """

    name: str
    value: int

    def __str__(self) -> str:
        return f"{self.name} must not be negative (got {self.value})"


@dataclass(slots=True, eq=False)
class SpanFormatError(SpanError):
    text: object

    def __str__(self) -> str:
        return f"the specified text span string {self.text!r} is not valid"
