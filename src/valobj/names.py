"""Person names: validated parts and the composites built from them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from valobj.domain import ValueObject, matches, not_empty

ALPHABETIC = r"[a-zA-Z]+"


@dataclass(frozen=True)
class FirstName(ValueObject):
    value: str

    rules = {"value": (not_empty(),)}

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LastName(ValueObject):
    value: str

    rules = {"value": (not_empty(),)}

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name(ValueObject):
    """Single name part, ASCII letters only."""

    value: str

    rules = {"value": (not_empty(), matches(ALPHABETIC))}

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PersonName(ValueObject):
    """First and last name as raw text; both required."""

    first_name: str
    last_name: str

    rules = {
        "first_name": (not_empty(),),
        "last_name": (not_empty(),),
    }

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class AlphabeticPersonName(PersonName):
    """PersonName whose parts are letters only."""

    rules = {
        "first_name": (matches(ALPHABETIC),),
        "last_name": (matches(ALPHABETIC),),
    }


@dataclass(frozen=True)
class FullName(ValueObject):
    """
    Composite of two validated parts: Name, or FirstName / LastName for the
    respective slot. The parts are already valid by construction, so only
    their types are checked here.
    """

    first_name: Name | FirstName
    last_name: Name | LastName

    part_types: ClassVar[dict[str, tuple[type, ...]]] = {
        "first_name": (Name, FirstName),
        "last_name": (Name, LastName),
    }

    def validate(self) -> None:
        for field, accepted in self.part_types.items():
            part = getattr(self, field)
            if not isinstance(part, accepted):
                names = " or ".join(t.__name__ for t in accepted)
                raise TypeError(f"FullName.{field} must be {names}, got {type(part).__name__}")

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"
