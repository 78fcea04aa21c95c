"""ValueObject — value without identity; equality by fields, valid from construction on."""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, TypeVar

from valobj.domain.result import Created, Rejected, Result
from valobj.domain.rules import Rule
from valobj.errors import ValueObjectError

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="ValueObject")


@dataclass(frozen=True)
class ValueObject:
    """
    Value object: equality by all fields (via dataclass), frozen, validated in __post_init__.
    Subclasses are frozen dataclasses; they declare `rules` per field and/or override
    _normalized() and validate(). Rules of parent classes run first.
    """

    rules: ClassVar[Mapping[str, tuple[Rule, ...]]] = {}

    def __post_init__(self) -> None:
        try:
            for name, value in self._normalized().items():
                object.__setattr__(self, name, value)
            for field, field_rules in self.declared_rules().items():
                value = getattr(self, field)
                for rule in field_rules:
                    rule.check(f"{type(self).__name__}.{field}", value)
            self.validate()
        except ValueObjectError as exc:
            logger.debug("Rejected %s: %s", type(self).__name__, exc.description)
            raise

    @classmethod
    def declared_rules(cls) -> dict[str, tuple[Rule, ...]]:
        """Rules from the whole class hierarchy, merged per field, base classes first."""
        merged: dict[str, tuple[Rule, ...]] = {}
        for klass in reversed(cls.__mro__):
            for field, field_rules in vars(klass).get("rules", {}).items():
                merged[field] = merged.get(field, ()) + tuple(field_rules)
        return merged

    @classmethod
    def try_create(cls: type[V], *args: Any, **kwargs: Any) -> Result[V]:
        """Construct without raising on validation failure."""
        try:
            return Created(cls(*args, **kwargs))
        except ValueObjectError as exc:
            return Rejected(exc)

    def _normalized(self) -> dict[str, Any]:
        """Hook: coerced replacements for raw attributes, applied once before rules run."""
        return {}

    def validate(self) -> None:
        """Hook: checks that do not fit a per-field rule."""

    def replace(self: V, **changes: Any) -> V:
        """New instance with changed fields, validated again. Self is untouched."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            out[f.name] = value.to_dict() if isinstance(value, ValueObject) else value
        return out
