"""User-facing identifiers."""
from __future__ import annotations

from dataclasses import dataclass

from valobj.domain import ValueObject, min_length, not_empty


@dataclass(frozen=True)
class UserName(ValueObject):
    """Display name; at least MIN_LENGTH characters."""

    value: str

    MIN_LENGTH = 3
    rules = {"value": (min_length(MIN_LENGTH),)}

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserId(ValueObject):
    """Opaque identifier."""

    value: str

    rules = {"value": (not_empty(),)}

    def __str__(self) -> str:
        return self.value
