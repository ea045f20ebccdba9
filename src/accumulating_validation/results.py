"""Result containers.

A Result pairs a current value with either success or a non-empty,
ordered sequence of errors. Both variants are immutable; every operation
returns a new Result.

The methods on :class:`Result` are thin forwards to the free functions in
:mod:`accumulating_validation.combinators` and
:mod:`accumulating_validation.either`, with ``self`` as the Result argument.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Generic, TypeVar

from accumulating_validation.currying import curried
from accumulating_validation.exceptions import EmptyErrorsError

if TYPE_CHECKING:
    from accumulating_validation.protocols import EitherLike, Validator

__all__ = [
    "Failure",
    "Result",
    "Success",
    "Variant",
    "as_errors",
    "empty",
    "failure",
    "is_failure",
    "is_success",
    "of",
    "success",
]

E = TypeVar("E")
V = TypeVar("V")
B = TypeVar("B")
T = TypeVar("T")


class Variant(Enum):
    """Tag distinguishing the two Result variants."""

    SUCCESS = "Success"
    FAILURE = "Failure"


def as_errors(payload: Any) -> tuple[Any, ...]:
    """Normalize an error payload into a tuple of errors.

    Lists and tuples are taken element-wise; anything else (strings
    included) is a single error.
    """
    if isinstance(payload, (list, tuple)):
        return tuple(payload)
    return (payload,)


class Result(Generic[E, V]):
    """Common surface of :class:`Success` and :class:`Failure`.

    Not meant to be instantiated directly.
    """

    variant: ClassVar[Variant]
    value: V

    def is_success(self) -> bool:
        """True for a Success."""
        return self.variant is Variant.SUCCESS

    def is_failure(self) -> bool:
        """True for a Failure."""
        return self.variant is Variant.FAILURE

    def errors_or(self, alt: T) -> tuple[E, ...] | T:
        return combinators.errors_or(alt, self)

    def map(self, fn: Callable[[V], B]) -> Result[E, B]:
        return combinators.map(fn, self)

    def map_errors(self, fn: Callable[[tuple[E, ...]], Any]) -> Result[Any, V]:
        return combinators.map_errors(fn, self)

    def map_error(self, fn: Callable[[E], Any]) -> Result[Any, V]:
        return combinators.map_error(fn, self)

    def ap(self, result_fn: Result[E, Callable[[V], B]]) -> Result[E, B]:
        """Apply the function carried by ``result_fn`` to this value."""
        return combinators.ap(result_fn, self)

    def chain(self, fn: Callable[[V], Result[E, B]]) -> Result[E, B]:
        return combinators.chain(fn, self)

    def concat(self, other: Result[E, list[Any]]) -> Result[E, list[Any]]:
        """Append this value to the list carried by ``other``.

        A bare value is treated as a one-item list. ``other`` is the earlier
        operand: its errors come first, and its list is kept alone when this
        Result has failed.
        """
        return combinators.concat(other, combinators.map(combinators.as_list, self))

    def concat_errors(self, later: Result[E, B]) -> Result[E, B]:
        """Combine with a later Result: its value wins, errors keep order."""
        return combinators.concat_errors(later, self)

    def fold(
        self,
        on_failure: Callable[[tuple[E, ...], V], T],
        on_success: Callable[[V], T],
    ) -> T:
        return combinators.fold(on_failure, on_success, self)

    def validate_either(self, either: EitherLike[Any, V]) -> Result[E, V]:
        return _either.validate_either(self, either)

    def validate_either_list(self, eithers: Iterable[EitherLike[Any, V]]) -> Result[E, V]:
        return _either.validate_either_list(self, eithers)

    def validate(self, validator: Validator) -> Result[E, V]:
        return _either.validate(self, validator)

    def validate_all(self, validators: Iterable[Validator]) -> Result[E, V]:
        return _either.validate_all(self, validators)


@dataclass(frozen=True)
class Success(Result[E, V]):
    """A Result with no errors."""

    value: V

    variant: ClassVar[Variant] = Variant.SUCCESS


@dataclass(frozen=True)
class Failure(Result[E, V]):
    """A Result carrying a best-effort value and at least one error.

    ``errors`` is stored as a tuple. A bare payload is wrapped into a
    one-element tuple; an empty sequence raises :class:`EmptyErrorsError`.

    Example:
        Failure("", ["Empty value"]).errors  # ("Empty value",)
        Failure("", "Empty value").errors    # ("Empty value",)
        Failure("", [])                      # raises EmptyErrorsError
    """

    value: V
    errors: tuple[E, ...]

    variant: ClassVar[Variant] = Variant.FAILURE

    def __post_init__(self) -> None:
        errors = as_errors(self.errors)
        if not errors:
            raise EmptyErrorsError(self.value)
        object.__setattr__(self, "errors", errors)


def success(value: V) -> Success[Any, V]:
    """Wrap ``value`` in a Success."""
    return Success(value)


@curried
def failure(value: V, errors: Any) -> Failure[Any, V]:
    """Wrap ``value`` in a Failure carrying ``errors``.

    Curried: ``failure(value)`` returns a function awaiting the errors.
    """
    return Failure(value, errors)


def of(value: Any, errors: Any = None) -> Result[E, Any]:
    """Lift a plain value into a Result.

    A value that already is a Result is returned unchanged. Otherwise the
    result is a Failure when ``errors`` is non-empty and a Success when it
    is empty or omitted.
    ``errors`` is normalized like any error payload, so a single string is
    one error.
    """
    if isinstance(value, Result):
        return value
    error_list = as_errors(errors) if errors is not None else ()
    return Failure(value, error_list) if error_list else Success(value)


def empty() -> Success[Any, list[Any]]:
    """The identity for list concatenation: ``Success([])``."""
    return Success([])


def is_success(result: Result[Any, Any]) -> bool:
    return result.is_success()


def is_failure(result: Result[Any, Any]) -> bool:
    return result.is_failure()


# The combinator modules import the Result types above.
from accumulating_validation import combinators  # noqa: E402
from accumulating_validation import either as _either  # noqa: E402
