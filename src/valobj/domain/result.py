"""Construction result: Created(value) or Rejected(error), for callers that prefer not to catch."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, NoReturn, TypeVar, Union

from valobj.errors import ErrorKind, ValueObjectError

T = TypeVar("T")


@dataclass(frozen=True)
class Created(Generic[T]):
    value: T
    ok: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Rejected:
    error: ValueObjectError
    ok: ClassVar[bool] = False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def description(self) -> str:
        return self.error.description

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Created[T], Rejected]
