"""Product model numbers: product code, branch and lot joined with dashes."""
from __future__ import annotations

from dataclasses import dataclass

from valobj.domain import ValueObject, matches, not_empty
from valobj.errors import PatternMismatch

SEPARATOR = "-"
_PART = (not_empty(), matches(r"[^-]+"))


@dataclass(frozen=True)
class ModelNumber(ValueObject):
    product_code: str
    branch: str
    lot: str

    rules = {"product_code": _PART, "branch": _PART, "lot": _PART}

    @classmethod
    def parse(cls, text: str) -> ModelNumber:
        """Inverse of to_string(): "a20421-100-1" -> ModelNumber("a20421", "100", "1")."""
        parts = text.split(SEPARATOR)
        if len(parts) != 3:
            raise PatternMismatch("ModelNumber", "product-branch-lot")
        return cls(*parts)

    def to_string(self) -> str:
        return SEPARATOR.join((self.product_code, self.branch, self.lot))

    def __str__(self) -> str:
        return self.to_string()
