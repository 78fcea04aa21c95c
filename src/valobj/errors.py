"""Validation errors raised when a value object cannot be constructed or combined."""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Which validation rule failed."""

    BELOW_MINIMUM_LENGTH = "below_minimum_length"
    EMPTY_COMPONENT = "empty_component"
    PATTERN_MISMATCH = "pattern_mismatch"
    INCOMPATIBLE_CLASSIFICATION = "incompatible_classification"


class ValueObjectError(ValueError):
    """Base error: no value object exists for the given input."""

    kind: ErrorKind

    def __init__(self, description: str, field: str | None = None) -> None:
        self.description = description
        self.field = field
        super().__init__(description)


class BelowMinimumLength(ValueObjectError):
    """Text shorter than the required minimum."""

    kind = ErrorKind.BELOW_MINIMUM_LENGTH

    def __init__(self, field: str, minimum: int, actual: int) -> None:
        self.minimum = minimum
        self.actual = actual
        super().__init__(
            f"{field} must be at least {minimum} characters (got {actual})", field
        )


class EmptyComponent(ValueObjectError):
    """A required part was supplied as empty text."""

    kind = ErrorKind.EMPTY_COMPONENT

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} must not be empty", field)


class PatternMismatch(ValueObjectError):
    """Text contains characters outside the accepted alphabet."""

    kind = ErrorKind.PATTERN_MISMATCH

    def __init__(self, field: str, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"{field} must match {pattern}", field)


class IncompatibleClassification(ValueObjectError):
    """
    Combination attempted across different classification tags
    (e.g. adding JPY to USD).
    """

    kind = ErrorKind.INCOMPATIBLE_CLASSIFICATION

    def __init__(self, left: Any, right: Any, field: str | None = None) -> None:
        self.left = left
        self.right = right
        super().__init__(f"cannot combine {left!r} with {right!r}", field)
