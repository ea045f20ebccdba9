"""Combinators over Results.

Pure functions that transform or combine Results. Each one takes the
Result it operates on as its last argument and is decorated with
:func:`~accumulating_validation.currying.curried`, so it can be partially
applied.

Error ordering is the same everywhere: errors of the earlier Result come
first, then errors of the later one. The value, on the other hand, is
always taken from the later Result, so a pipeline keeps replacing its
value while its errors only ever grow.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from typing import Any, Callable, TypeVar

from accumulating_validation.currying import curried
from accumulating_validation.results import Failure, Result, Success, as_errors

__all__ = [
    "ap",
    "as_list",
    "chain",
    "concat",
    "concat_errors",
    "errors_or",
    "fold",
    "map",
    "map_error",
    "map_errors",
    "sequence",
]

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


def as_list(value: Any) -> list[Any]:
    """Return ``value`` if it is a list, otherwise a one-element list."""
    if isinstance(value, list):
        return value
    return [value]


@curried
def errors_or(alt: T, result: Result[E, Any]) -> tuple[E, ...] | T:
    """Return the errors of a Failure, or ``alt`` for a Success."""
    if isinstance(result, Failure):
        return result.errors
    return alt


@curried
def map(fn: Callable[[A], B], result: Result[E, A]) -> Result[E, B]:  # noqa: A001
    """Apply ``fn`` to the current value, keeping the variant and errors."""
    if isinstance(result, Failure):
        return Failure(fn(result.value), result.errors)
    return Success(fn(result.value))


@curried
def ap(result_fn: Result[E, Callable[[A], B]], result_arg: Result[E, A]) -> Result[E, B]:
    """Apply a wrapped function to a wrapped argument.

    The value is computed whatever the variants are. The outcome is a
    Success only when both sides are; otherwise the argument's errors come
    first, then the function's.

    Args:
        result_fn: Result carrying a unary function.
        result_arg: Result carrying the argument.

    Returns:
        Result carrying ``result_fn.value(result_arg.value)``.
    """
    value = result_fn.value(result_arg.value)
    if result_arg.is_success() and result_fn.is_success():
        return Success(value)
    return Failure(value, result_arg.errors_or(()) + result_fn.errors_or(()))


@curried
def concat_errors(result_b: Result[E, B], result_a: Result[E, Any]) -> Result[E, B]:
    """Combine two Results whose values are not collections.

    ``result_a`` is the earlier Result and ``result_b`` the later one. The
    value always comes from ``result_b``; errors are ``result_a.errors``
    followed by ``result_b.errors``.

    Args:
        result_b: The later Result, whose value is kept.
        result_a: The earlier Result, whose errors come first.

    Returns:
        ``Success(result_b.value)`` if both are Successes, otherwise a
        Failure with the concatenated errors.

    Example:
        concat_errors(Failure("a", ["e1"]), Failure("b", ["e2"]))
        # Failure(value="a", errors=("e2", "e1"))
    """
    if result_a.is_success() and result_b.is_success():
        return result_b
    return Failure(result_b.value, result_a.errors_or(()) + result_b.errors_or(()))


@curried
def concat(
    result_list_a: Result[E, list[A]], result_list_b: Result[E, list[A]]
) -> Result[E, list[A]]:
    """Combine two list-valued Results.

    Errors concatenate as in :func:`concat_errors`, ``result_list_a``'s
    first. The values concatenate when ``result_list_b`` is a Success; a
    failed ``result_list_b`` contributes no items, so the value falls back
    to ``result_list_a.value``.

    Args:
        result_list_a: The earlier Result.
        result_list_b: The later Result.

    Returns:
        Result of the combined list.
    """
    if result_list_b.is_success():
        value = [*result_list_a.value, *result_list_b.value]
    else:
        value = list(result_list_a.value)
    return concat_errors(map(lambda _: value, result_list_b), result_list_a)


def sequence(results: Iterable[Result[E, A]]) -> Result[E, list[A]]:
    """Turn a sequence of Results into a Result of a list.

    Successful values are collected in order; Failures add their errors but
    none of their values. A Success holding a list contributes its items,
    so list values are flattened one level:
    ``sequence([Success([1]), Success([2])])`` is ``Success([1, 2])``.

    Example:
        sequence([Success(10), Failure(-5, ["TooLow"]), Success(8)])
        # Failure(value=[10, 8], errors=("TooLow",))
    """
    seed: Result[E, list[A]] = Success([])
    return reduce(lambda acc, result: concat(acc, map(as_list, result)), results, seed)


@curried
def chain(fn: Callable[[A], Result[E, B]], result: Result[E, A]) -> Result[E, B]:
    """Run ``fn`` on the current value and merge the derived Result.

    The derived value wins; the original errors stay in front of the
    derived ones. A Failure stays a Failure even when ``fn`` succeeds.
    """
    return concat_errors(fn(result.value), result)


@curried
def fold(
    on_failure: Callable[[tuple[E, ...], A], T],
    on_success: Callable[[A], T],
    result: Result[E, A],
) -> T:
    """Collapse a Result into a plain value.

    ``on_failure`` receives ``(errors, value)``, ``on_success`` receives
    ``value``.
    """
    if isinstance(result, Failure):
        return on_failure(result.errors, result.value)
    return on_success(result.value)


@curried
def map_errors(fn: Callable[[tuple[E, ...]], Any], result: Result[E, A]) -> Result[Any, A]:
    """Replace the whole error sequence of a Failure.

    The return value of ``fn`` is normalized like any error payload: a
    list or tuple is taken as-is, anything else becomes a single error.
    Mapping to an empty sequence raises
    :class:`~accumulating_validation.exceptions.EmptyErrorsError`.
    A Success is returned unchanged.
    """
    if isinstance(result, Failure):
        return Failure(result.value, as_errors(fn(result.errors)))
    return result


@curried
def map_error(fn: Callable[[E], B], result: Result[E, A]) -> Result[B, A]:
    """Apply ``fn`` to each error of a Failure."""
    if isinstance(result, Failure):
        return Failure(result.value, tuple(fn(error) for error in result.errors))
    return result
