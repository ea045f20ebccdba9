"""Point-free application support.

Every multi-argument combinator in this package takes the Result (or the
collection it operates on) as its last argument. Decorating it with
:func:`curried` lets callers leave that argument out and get back a
unary function instead, so ``op(a, b)`` and ``op(a)(b)`` are the same call.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

__all__ = ["curried"]

F = TypeVar("F", bound=Callable[..., Any])


class _Missing:
    """Marker for an argument the caller left out."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def curried(func: F) -> F:
    """Make the last parameter of ``func`` optional.

    When the last parameter is omitted (or passed as :data:`MISSING`), the
    decorated function returns a unary function awaiting it. ``None`` is a
    regular argument and is never treated as omission.

    The remaining arguments are bound eagerly, so a call with too few or
    unknown arguments fails at the first call rather than at the second.

    Args:
        func: Function whose final parameter is the deferred one.

    Returns:
        The wrapped function.

    Example:
        @curried
        def add(a, b):
            return a + b

        add(1, 2) == add(1)(2)  # True
    """
    signature = inspect.signature(func)
    last = list(signature.parameters.values())[-1]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        bound = signature.bind_partial(*args, **kwargs)
        if bound.arguments.get(last.name, MISSING) is not MISSING:
            return func(*args, **kwargs)

        bound.arguments.pop(last.name, None)
        # Fail fast on a malformed partial application.
        signature.bind(*bound.args, **bound.kwargs, **{last.name: MISSING})
        head_args = bound.args
        head_kwargs = bound.kwargs

        def awaiting(arg: Any) -> Any:
            return func(*head_args, **head_kwargs, **{last.name: arg})

        awaiting.__name__ = f"{func.__name__}_awaiting_{last.name}"
        awaiting.__qualname__ = awaiting.__name__
        awaiting.__doc__ = func.__doc__
        return awaiting

    return wrapper  # type: ignore[return-value]
