"""Shared fixtures for the valobj test suite."""

from __future__ import annotations

import pytest

from valobj import FullName, MonetaryAmount, ModelNumber, Name, PersonName, UserName


@pytest.fixture
def yen() -> MonetaryAmount:
    return MonetaryAmount(1000, "JPY")


@pytest.fixture
def allowance() -> MonetaryAmount:
    return MonetaryAmount(3000, "JPY")


@pytest.fixture
def dollars() -> MonetaryAmount:
    return MonetaryAmount(3000, "USD")


@pytest.fixture
def person_name() -> PersonName:
    return PersonName("yosei", "yamagishi")


@pytest.fixture
def full_name() -> FullName:
    return FullName(Name("yosei"), Name("yamagishi"))


@pytest.fixture
def model_number() -> ModelNumber:
    return ModelNumber("a20421", "100", "1")


@pytest.fixture
def user_name() -> UserName:
    return UserName("sasaki")
