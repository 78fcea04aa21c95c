"""Monetary amounts: Decimal payload tagged with a currency code."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from valobj.domain import Combinable, not_empty
from valobj.errors import PatternMismatch

Number = Union[Decimal, int, float, str]


def _to_decimal(value: Number) -> Decimal:
    amount = _convert(value)
    if not amount.is_finite():
        raise PatternMismatch("MonetaryAmount.amount", "finite decimal number")
    return amount


def _convert(value: Number) -> Decimal:
    if isinstance(value, bool):
        raise TypeError("amount must be a number, not bool")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise PatternMismatch("MonetaryAmount.amount", "decimal number") from None
    raise TypeError(f"amount must be a number, got {type(value).__name__}")


@dataclass(frozen=True)
class MonetaryAmount(Combinable):
    """Amount of money in one currency. Amounts add only within the same currency."""

    amount: Decimal
    currency: str

    quantity_field = "amount"
    classification_field = "currency"
    rules = {"currency": (not_empty(),)}

    def _normalized(self) -> dict[str, Any]:
        return {"amount": _to_decimal(self.amount)}

    def add(self, money: MonetaryAmount) -> MonetaryAmount:
        return self.combine(money)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
