"""Test the error taxonomy."""

import pytest

from valobj.errors import (
    BelowMinimumLength,
    EmptyComponent,
    ErrorKind,
    IncompatibleClassification,
    PatternMismatch,
    ValueObjectError,
)


@pytest.mark.parametrize(
    "error, kind",
    [
        (BelowMinimumLength("UserName.value", 3, 2), ErrorKind.BELOW_MINIMUM_LENGTH),
        (EmptyComponent("PersonName.last_name"), ErrorKind.EMPTY_COMPONENT),
        (PatternMismatch("Name.value", "[a-zA-Z]+"), ErrorKind.PATTERN_MISMATCH),
        (IncompatibleClassification("JPY", "USD"), ErrorKind.INCOMPATIBLE_CLASSIFICATION),
    ],
)
def test_kind_and_hierarchy(error, kind):
    assert error.kind is kind
    assert isinstance(error, ValueObjectError)
    assert isinstance(error, ValueError)
    assert str(error) == error.description


def test_descriptions():
    assert BelowMinimumLength("UserName.value", 3, 2).description == (
        "UserName.value must be at least 3 characters (got 2)"
    )
    assert EmptyComponent("PersonName.last_name").description == "PersonName.last_name must not be empty"
    assert IncompatibleClassification("JPY", "USD").description == "cannot combine 'JPY' with 'USD'"


def test_attributes():
    err = BelowMinimumLength("UserName.value", 3, 2)
    assert (err.field, err.minimum, err.actual) == ("UserName.value", 3, 2)
    err = IncompatibleClassification("JPY", "USD", "MonetaryAmount.currency")
    assert (err.left, err.right, err.field) == ("JPY", "USD", "MonetaryAmount.currency")
