"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

import re
from typing import Any

import pytest
from hypothesis import strategies as st

from accumulating_validation import Failure, Left, Result, Right, Success

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for plain values carried by a Result
values = st.one_of(st.none(), st.integers(), st.text(max_size=20), st.booleans())

# Strategy for a single opaque error payload
error_payloads = st.text(min_size=1, max_size=30)

# Strategy for non-empty error lists
error_lists = st.lists(error_payloads, min_size=1, max_size=5)


def results(value_strategy: st.SearchStrategy[Any] = values) -> st.SearchStrategy[Result[Any, Any]]:
    """Strategy producing both Success and Failure Results."""
    return st.one_of(
        value_strategy.map(Success),
        st.builds(Failure, value_strategy, error_lists),
    )


# Strategy for list-valued Results
list_results = results(st.lists(st.integers(), max_size=5))

# Strategy for Either-like values
eithers = st.one_of(values.map(Right), error_lists.map(Left), error_payloads.map(Left))


# -----------------------------------------------------------------------------
# Sample Validators
# -----------------------------------------------------------------------------


def trim(value: str) -> Right[str]:
    """Validator that always passes, replacing the value with its trimmed form."""
    return Right(value.strip())


def is_not_empty(value: str) -> Left[str] | Right[str]:
    """Validator that fails for empty strings."""
    return Right(value) if len(value) > 0 else Left("Can't be empty")


def has_numbers(value: str) -> Left[str] | Right[str]:
    """Validator that fails for strings without digits."""
    return Right(value) if re.search(r"[0-9]", value) else Left("Must have numbers")


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def zipcode_validators() -> list[Any]:
    """Trim, then require a non-empty value with digits."""
    return [trim, is_not_empty, has_numbers]


@pytest.fixture
def user_record() -> dict[str, Any]:
    """A record with one present, one null and one missing field."""
    return {"name": "Ada", "age": 36, "email": None}
