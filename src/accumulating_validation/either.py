"""Folding externally supplied Either-like values into Results.

An Either-like is anything with ``fold(on_left, on_right)``. A right branch
replaces the current value; a left branch adds errors while keeping it.
Nothing here inspects an Either beyond calling ``fold``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, TypeVar

from accumulating_validation import combinators
from accumulating_validation.currying import curried
from accumulating_validation.protocols import EitherLike, Validator
from accumulating_validation.results import Failure, Result, Success, as_errors

__all__ = [
    "Left",
    "Right",
    "from_either",
    "validate",
    "validate_all",
    "validate_either",
    "validate_either_list",
]

E = TypeVar("E")
V = TypeVar("V")
T = TypeVar("T")


@curried
def from_either(initial_value: V, either: EitherLike[Any, V]) -> Result[Any, V]:
    """Turn an Either-like into a Result.

    Args:
        initial_value: Value to carry when the Either is a left.
        either: The Either-like to fold.

    Returns:
        ``Success(right)`` for a right branch, or
        ``Failure(initial_value, errors)`` for a left branch. A left payload
        that is not a list or tuple becomes a single error.
    """
    return either.fold(
        lambda errors: Failure(initial_value, as_errors(errors)),
        lambda value: Success(value),
    )


@curried
def validate_either(result: Result[E, V], either: EitherLike[Any, V]) -> Result[E, V]:
    """Fold ``either`` into a Result and append it to ``result``.

    The running Result's errors come first. A right branch replaces the
    value, a left branch keeps the current one.
    """
    return combinators.concat_errors(from_either(result.value, either), result)


@curried
def validate_either_list(
    result: Result[E, V], eithers: Iterable[EitherLike[Any, V]]
) -> Result[E, V]:
    """Apply :func:`validate_either` for each Either, left to right."""
    return reduce(lambda acc, either: validate_either(acc, either), eithers, result)


@curried
def validate(result: Result[E, V], validator: Validator) -> Result[E, V]:
    """Run ``validator`` on the current value and fold in its outcome."""
    return validate_either(result, validator(result.value))


@curried
def validate_all(result: Result[E, V], validators: Iterable[Validator]) -> Result[E, V]:
    """Run each validator in turn, threading the Result through.

    Each validator sees the value left by the previous one, so a validator
    that returns a right branch with a cleaned value (trimming, casting)
    feeds that value to the rest.

    Example:
        trim = lambda s: Right(s.strip())
        def has_digits(s):
            return Right(s) if any(c.isdigit() for c in s) else Left("Must have numbers")

        validate_all(Success(" hi "), [trim, has_digits])
        # Failure(value="hi", errors=("Must have numbers",))
    """
    return reduce(lambda acc, validator: validate(acc, validator), validators, result)


@dataclass(frozen=True)
class Left(Generic[E]):
    """Minimal Either-like left branch, carrying errors."""

    errors: E

    def fold(self, on_left: Callable[[E], T], on_right: Callable[[Any], T]) -> T:
        return on_left(self.errors)


@dataclass(frozen=True)
class Right(Generic[V]):
    """Minimal Either-like right branch, carrying a value."""

    value: V

    def fold(self, on_left: Callable[[Any], T], on_right: Callable[[V], T]) -> T:
        return on_right(self.value)
