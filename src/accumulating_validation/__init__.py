"""Accumulating-error validation.

A Result pairs a current value with either success or a non-empty list of
errors. Combinators transform and merge Results so that errors accumulate
in order while the value is replaced step by step.

Every operation is available as a free, curried function, as a method on
:class:`Result`, and on the :data:`Validation` namespace:

    from accumulating_validation import Validation, Success, map

    Success(42).map(lambda x: x + 1) == map(lambda x: x + 1, Success(42))
    map(lambda x: x + 1)(Success(42)) == Validation.map(lambda x: x + 1, Success(42))
"""

from types import SimpleNamespace

from accumulating_validation.results import (
    Failure,
    Result,
    Success,
    Variant,
    as_errors,
    empty,
    failure,
    is_failure,
    is_success,
    of,
    success,
)
from accumulating_validation.combinators import (
    ap,
    as_list,
    chain,
    concat,
    concat_errors,
    errors_or,
    fold,
    map,
    map_error,
    map_errors,
    sequence,
)
from accumulating_validation.currying import curried
from accumulating_validation.either import (
    Left,
    Right,
    from_either,
    validate,
    validate_all,
    validate_either,
    validate_either_list,
)
from accumulating_validation.exceptions import EmptyErrorsError
from accumulating_validation.properties import (
    PROPERTY_MISSING_MESSAGE,
    all_properties,
    property,
    validate_properties,
)
from accumulating_validation.protocols import EitherLike, ResultValidator, Validator
from accumulating_validation.pydantic_support import (
    FieldError,
    field_errors,
    model_result,
    model_validator,
    type_validator,
)

Validation = SimpleNamespace(
    Variant=Variant,
    Success=Success,
    Failure=Failure,
    success=success,
    failure=failure,
    of=of,
    empty=empty,
    is_success=is_success,
    is_failure=is_failure,
    errors_or=errors_or,
    map=map,
    map_errors=map_errors,
    map_error=map_error,
    ap=ap,
    chain=chain,
    concat=concat,
    concat_errors=concat_errors,
    sequence=sequence,
    fold=fold,
    from_either=from_either,
    validate_either=validate_either,
    validate_either_list=validate_either_list,
    validate=validate,
    validate_all=validate_all,
    property=property,
    all_properties=all_properties,
    validate_properties=validate_properties,
)
"""Namespace exposing the same callables as the free functions."""

__all__ = [
    # Result variants and constructors
    "Result",
    "Success",
    "Failure",
    "Variant",
    "success",
    "failure",
    "of",
    "empty",
    "is_success",
    "is_failure",
    "as_errors",
    "EmptyErrorsError",
    # Combinators
    "errors_or",
    "map",
    "map_errors",
    "map_error",
    "ap",
    "chain",
    "concat",
    "concat_errors",
    "sequence",
    "fold",
    "as_list",
    # Either integration
    "EitherLike",
    "Left",
    "Right",
    "Validator",
    "ResultValidator",
    "from_either",
    "validate_either",
    "validate_either_list",
    "validate",
    "validate_all",
    # Record helpers
    "PROPERTY_MISSING_MESSAGE",
    "property",
    "all_properties",
    "validate_properties",
    # Point-free adapter
    "curried",
    # Namespace
    "Validation",
    # pydantic adapters
    "FieldError",
    "field_errors",
    "model_result",
    "model_validator",
    "type_validator",
]

__version__ = "0.1.0"
