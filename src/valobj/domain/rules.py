"""Validation rules: a pure predicate over a raw value plus the error it raises."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from valobj.errors import BelowMinimumLength, EmptyComponent, PatternMismatch, ValueObjectError


@dataclass(frozen=True)
class Rule:
    """One named check. `error` builds the exception from (field, value) when the predicate fails."""

    name: str
    predicate: Callable[[Any], bool]
    error: Callable[[str, Any], ValueObjectError]

    def check(self, field: str, value: Any) -> None:
        if not self.predicate(value):
            raise self.error(field, value)


def not_empty() -> Rule:
    return Rule(
        name="not_empty",
        predicate=lambda value: len(value) > 0,
        error=lambda field, value: EmptyComponent(field),
    )


def min_length(minimum: int) -> Rule:
    return Rule(
        name=f"min_length({minimum})",
        predicate=lambda value: len(value) >= minimum,
        error=lambda field, value: BelowMinimumLength(field, minimum, len(value)),
    )


def matches(pattern: str) -> Rule:
    """Whole value must match pattern (anchored at both ends)."""
    compiled = re.compile(pattern)
    return Rule(
        name=f"matches({pattern})",
        predicate=lambda value: compiled.fullmatch(value) is not None,
        error=lambda field, value: PatternMismatch(field, pattern),
    )
