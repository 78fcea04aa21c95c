"""
valobj — validated immutable value objects.
Every instance is valid from construction, compared by its fields, and never mutated.
"""
from valobj.catalog import ModelNumber
from valobj.domain import Combinable, Created, Rejected, Rule, ValueObject
from valobj.errors import (
    BelowMinimumLength,
    EmptyComponent,
    ErrorKind,
    IncompatibleClassification,
    PatternMismatch,
    ValueObjectError,
)
from valobj.money import MonetaryAmount
from valobj.names import AlphabeticPersonName, FirstName, FullName, LastName, Name, PersonName
from valobj.users import UserId, UserName

__all__ = [
    "ValueObject",
    "Combinable",
    "Rule",
    "Created",
    "Rejected",
    "ValueObjectError",
    "ErrorKind",
    "BelowMinimumLength",
    "EmptyComponent",
    "PatternMismatch",
    "IncompatibleClassification",
    "FirstName",
    "LastName",
    "Name",
    "PersonName",
    "AlphabeticPersonName",
    "FullName",
    "MonetaryAmount",
    "ModelNumber",
    "UserName",
    "UserId",
]
