"""Domain building blocks: ValueObject, Combinable, validation rules, construction results."""
from valobj.domain.combination import Combinable
from valobj.domain.result import Created, Rejected, Result
from valobj.domain.rules import Rule, matches, min_length, not_empty
from valobj.domain.value_object import ValueObject

__all__ = [
    "ValueObject",
    "Combinable",
    "Rule",
    "not_empty",
    "min_length",
    "matches",
    "Created",
    "Rejected",
    "Result",
]
