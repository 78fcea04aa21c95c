"""Combinable — value objects that add up when their classification tags match."""
from __future__ import annotations

import logging
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, localcontext
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from valobj.domain.value_object import ValueObject
from valobj.errors import IncompatibleClassification

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="Combinable")


@dataclass(frozen=True)
class Combinable(ValueObject):
    """
    Subclasses name the field holding the numeric payload and the field holding
    the tag (e.g. currency). combine() never changes either operand.
    """

    quantity_field: ClassVar[str]
    classification_field: ClassVar[str]

    def classification(self) -> Any:
        return getattr(self, self.classification_field)

    def quantity(self) -> Any:
        return getattr(self, self.quantity_field)

    def combine(self: C, other: C) -> C:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        if self.classification() != other.classification():
            logger.debug(
                "Refused to combine %s: %r != %r",
                type(self).__name__,
                self.classification(),
                other.classification(),
            )
            raise IncompatibleClassification(
                self.classification(),
                other.classification(),
                f"{type(self).__name__}.{self.classification_field}",
            )
        # Decimal sums must be exact, not rounded to the default 28 digits.
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            total = self.quantity() + other.quantity()
        return self.replace(**{self.quantity_field: total})

    def __add__(self: C, other: object) -> C:
        if type(other) is not type(self):
            return NotImplemented
        return self.combine(other)  # type: ignore[arg-type]
