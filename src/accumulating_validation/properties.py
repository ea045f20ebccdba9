"""Per-field validation of records.

Build one Result per field with :func:`property`, refine each with
:func:`validate_properties`, then merge them into a Result for the whole
record with :func:`all_properties`.

Records are mappings. Any other object (a pydantic model, a dataclass) is
read by attribute.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from accumulating_validation import combinators
from accumulating_validation.currying import curried
from accumulating_validation.protocols import ResultValidator
from accumulating_validation.results import Failure, Result, Success

__all__ = [
    "PROPERTY_MISSING_MESSAGE",
    "all_properties",
    "property",
    "validate_properties",
]

PROPERTY_MISSING_MESSAGE = 'Property "{name}" not found or null.'


def _read_field(name: str, record: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


@curried
def property(name: str, record: Any) -> Result[str, Any]:  # noqa: A001
    """Read one field of ``record`` into a Result.

    Args:
        name: Field to read.
        record: Mapping or object holding the field.

    Returns:
        ``Success(value)`` when the field is present and not ``None``,
        otherwise ``Failure(None, ['Property "<name>" not found or null.'])``.

    Example:
        property("age", {"age": 10})    # Success(value=10)
        property("name", {"age": 10})
        # Failure(value=None, errors=('Property "name" not found or null.',))
    """
    value = _read_field(name, record)
    if value is None:
        return Failure(value, [PROPERTY_MISSING_MESSAGE.format(name=name)])
    return Success(value)


def all_properties(results: Mapping[str, Result[Any, Any]]) -> Result[Any, dict[str, Any]]:
    """Merge a mapping of per-field Results into a Result of a dict.

    Keys are processed in iteration order. A successful field contributes
    its value, ``None`` included. A failed field contributes only its
    errors; its key is left out of the assembled dict.

    Example:
        all_properties({"a": Failure(None, ["error1"]), "b": Success("hi")})
        # Failure(value={"b": "hi"}, errors=("error1",))
    """
    assembled = {key: result.value for key, result in results.items() if result.is_success()}
    errors = [error for result in results.values() for error in result.errors_or(())]
    if errors:
        return Failure(assembled, errors)
    return Success(assembled)


@curried
def validate_properties(
    validators: Mapping[str, ResultValidator], record: Any
) -> dict[str, Result[Any, Any]]:
    """Read and validate each configured field of ``record``.

    Each field is read with :func:`property` and chained through its
    validator. The per-field Results are returned as a dict keyed like
    ``validators``; pass it to :func:`all_properties` to merge them.

    Args:
        validators: Field name to a function returning a Result.
        record: Mapping or object to read.

    Returns:
        Dict of field name to Result.
    """
    return {
        name: combinators.chain(validator, property(name, record))
        for name, validator in validators.items()
    }
