"""Exceptions raised on misuse of the Result constructors."""

from __future__ import annotations

__all__ = ["EmptyErrorsError"]


class EmptyErrorsError(ValueError):
    """Raised when a Failure would be built from an empty error sequence.

    A Failure always carries at least one error; there is no implicit
    fallback to Success.
    """

    def __init__(self, value: object = None) -> None:
        self.value = value
        super().__init__(
            "Tried to construct Failure with an empty sequence of errors "
            f"(value={value!r})"
        )
