"""Protocols for the shapes this package consumes.

Either-like values and validator callables come from callers; these
definitions exist for type hints and ``isinstance`` checks only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from accumulating_validation.results import Result

__all__ = ["EitherLike", "ResultValidator", "Validator"]

L = TypeVar("L", covariant=True)
R = TypeVar("R", covariant=True)
T = TypeVar("T")


@runtime_checkable
class EitherLike(Protocol[L, R]):
    """Protocol for a two-branch disjunction.

    Only ``fold`` is ever called. The left branch carries one error or a
    sequence of errors, the right branch carries a replacement value.

    Example:
        class Right:
            def __init__(self, value):
                self.value = value

            def fold(self, on_left, on_right):
                return on_right(self.value)
    """

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        """Dispatch to exactly one of the two callbacks."""
        ...


Validator = Callable[[Any], EitherLike[Any, Any]]
"""A rule over a single value, reporting its outcome as an Either-like."""

ResultValidator = Callable[[Any], "Result[Any, Any]"]
"""A rule over a single value, reporting its outcome as a Result."""
