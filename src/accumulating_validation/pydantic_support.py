"""Pydantic integration.

Adapts pydantic validation to the Either-like shape consumed by
:func:`~accumulating_validation.either.validate` and friends, so a pydantic
model or any type pydantic understands can be used as one validator in a
``validate_all`` pipeline.

Example:
    from pydantic import BaseModel, PositiveInt

    class Address(BaseModel):
        street: str
        number: PositiveInt

    result = Success({"street": "Main", "number": -1}).validate(model_validator(Address))
    result.errors[0]
    # FieldError(field='number', message='Input should be greater than 0', value=-1)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from accumulating_validation.either import Left, Right, from_either
from accumulating_validation.protocols import EitherLike, Validator
from accumulating_validation.results import Result

__all__ = [
    "FieldError",
    "field_errors",
    "model_result",
    "model_validator",
    "type_validator",
]

ROOT_FIELD = "__root__"


@dataclass(frozen=True)
class FieldError:
    """A single pydantic validation error, as an opaque error payload.

    Attributes:
        field: Dotted location of the failing field, or ``"__root__"``.
        message: Human-readable message from pydantic.
        value: The offending input.
    """

    field: str
    message: str
    value: Any = None


def field_errors(exc: ValidationError) -> list[FieldError]:
    """Convert a pydantic ``ValidationError`` into ``FieldError`` payloads.

    Errors keep the order pydantic reports them in.
    """
    return [
        FieldError(
            field=".".join(str(part) for part in error["loc"]) or ROOT_FIELD,
            message=error["msg"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]


def model_validator(model: type[BaseModel], *, strict: bool | None = None) -> Validator:
    """Build a validator that validates its input against ``model``.

    Args:
        model: Pydantic model class.
        strict: Passed through to ``model_validate``.

    Returns:
        A function returning ``Right(instance)`` on success or
        ``Left(list[FieldError])`` when pydantic rejects the input.
    """

    def validator(value: Any) -> EitherLike[list[FieldError], BaseModel]:
        try:
            instance = model.model_validate(value, strict=strict)
        except ValidationError as exc:
            return Left(field_errors(exc))
        return Right(instance)

    validator.__name__ = f"validate_{model.__name__}"
    return validator


def type_validator(tp: Any, *, strict: bool | None = None) -> Validator:
    """Build a validator for any type pydantic can validate.

    Uses a ``TypeAdapter``, so constrained types, unions and containers all
    work. The adapter is built once, when the validator is created.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(tp)

    def validator(value: Any) -> EitherLike[list[FieldError], Any]:
        try:
            validated = adapter.validate_python(value, strict=strict)
        except ValidationError as exc:
            return Left(field_errors(exc))
        return Right(validated)

    return validator


def model_result(model: type[BaseModel], data: Any) -> Result[FieldError, Any]:
    """Validate ``data`` against ``model`` straight into a Result.

    On failure the Result carries ``data`` unchanged as its value.
    """
    return from_either(data, model_validator(model)(data))
