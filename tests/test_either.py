"""Tests for folding Either-like values into Results."""

from __future__ import annotations

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from accumulating_validation import (
    EitherLike,
    Failure,
    Left,
    Right,
    Success,
    from_either,
    of,
    validate,
    validate_all,
    validate_either,
    validate_either_list,
)

from .conftest import eithers, has_numbers, is_not_empty, results, trim, values

# =============================================================================
# Either-like Unit Tests
# =============================================================================


class TestEitherLikeUnit:
    """Unit tests for the reference Left/Right pair and the protocol."""

    def test_left_and_right_fold(self) -> None:
        """Left folds into on_left and Right into on_right."""
        assert Left("e").fold(lambda x: ("left", x), lambda x: ("right", x)) == ("left", "e")
        assert Right(1).fold(lambda x: ("left", x), lambda x: ("right", x)) == ("right", 1)

    def test_runtime_protocol(self) -> None:
        """Any object with fold satisfies the protocol."""

        class Custom:
            def fold(self, on_left: Any, on_right: Any) -> Any:
                return on_right("custom")

        assert isinstance(Left("e"), EitherLike)
        assert isinstance(Custom(), EitherLike)
        assert from_either(None, Custom()) == Success("custom")


# =============================================================================
# from_either Unit Tests
# =============================================================================


class TestFromEitherUnit:
    """Unit tests for from_either."""

    def test_right_ignores_initial_value(self) -> None:
        """A right branch gives a Success of its value."""
        assert from_either(3, Right(10)) == Success(10)

    def test_left_uses_initial_value(self) -> None:
        """A left branch keeps the initial value."""
        assert from_either(3, Left(["errorMessage"])) == Failure(3, ["errorMessage"])

    def test_left_wraps_bare_payload(self) -> None:
        """A bare left payload becomes one error."""
        assert from_either(3, Left("errorMessage")) == Failure(3, ["errorMessage"])

    def test_curried(self) -> None:
        """from_either can be partially applied."""
        assert from_either(3)(Left("errorMessage")) == Failure(3, ["errorMessage"])


# =============================================================================
# validate_either Unit Tests
# =============================================================================


class TestValidateEitherUnit:
    """Unit tests for validate_either and validate_either_list."""

    def test_left_onto_success(self) -> None:
        """A left turns a Success into a Failure."""
        assert Success("").validate_either(Left(["Empty value"])) == Failure("", ["Empty value"])

    def test_left_onto_failure_appends(self) -> None:
        """A left adds its errors after existing ones."""
        result = Failure("", ["error"]).validate_either(Left(["Empty value"]))

        assert result == Failure("", ["error", "Empty value"])

    def test_right_replaces_value_of_success(self) -> None:
        """A right replaces the value of a Success."""
        assert validate_either(Success(42), Right(10)) == Success(10)

    def test_right_replaces_value_of_failure(self) -> None:
        """A right replaces the value of a Failure and keeps its errors."""
        assert validate_either(Failure(42, ["error"]), Right(10)) == Failure(10, ["error"])

    def test_empty_list_is_identity(self) -> None:
        """No Eithers leave the Result unchanged."""
        valid = Success(10)
        invalid = Failure(10, ["Must have letters"])

        assert valid.validate_either_list([]) == valid
        assert invalid.validate_either_list([]) == invalid

    def test_list_collects_all_lefts_onto_success(self) -> None:
        """Every left is collected onto a Success."""
        result = Success("wrong zipcode").validate_either_list(
            [Left(["Must be one word"]), Right(""), Left(["Must have numbers"])]
        )

        assert result.errors_or([]) == ("Must be one word", "Must have numbers")

    def test_list_collects_all_lefts_onto_failure(self) -> None:
        """Every left is appended onto a Failure."""
        result = validate_either_list(
            Failure("wrong zipcode", ["Must have numbers"]),
            [Left(["Must be one word"]), Right("")],
        )

        assert result.errors_or([]) == ("Must have numbers", "Must be one word")

    def test_list_keeps_last_right_value(self) -> None:
        """The last right branch sets the value."""
        result = Success("wrong zipcode").validate_either_list(
            [Left(["Must be one word"]), Right(""), Left(["Must have numbers"]), Right("10")]
        )

        assert result.value == "10"

    def test_list_example(self) -> None:
        """Mixed lefts and rights accumulate in order."""
        result = Success("wrong zipcode").validate_either_list(
            [Left(["Must have numbers"]), Right("")]
        )

        assert result == Failure("", ["Must have numbers"])


# =============================================================================
# validate / validate_all Unit Tests
# =============================================================================


class TestValidateUnit:
    """Unit tests for validate and validate_all."""

    def test_success_with_passing_validator(self) -> None:
        """A passing validator keeps a Success."""
        assert Success("wrong zipcode").validate(is_not_empty) == Success("wrong zipcode")

    def test_success_with_failing_validator(self) -> None:
        """A failing validator turns a Success into a Failure."""
        result = validate(Success("wrong zipcode"), has_numbers)

        assert result == Failure("wrong zipcode", ["Must have numbers"])

    def test_failure_with_passing_validator(self) -> None:
        """A passing validator keeps existing errors."""
        result = Failure("wrong zipcode", ["Must have numbers"]).validate(is_not_empty)

        assert result == Failure("wrong zipcode", ["Must have numbers"])

    def test_failure_with_failing_validator(self) -> None:
        """A failing validator appends its error."""
        result = Failure("", ["Can't be empty"]).validate(has_numbers)

        assert result == Failure("", ["Can't be empty", "Must have numbers"])

    def test_validate_all_empty_is_identity(self) -> None:
        """No validators leave the Result unchanged."""
        assert Success("10").validate_all([]) == Success("10")
        assert validate_all(Failure("", ["Can't be empty"]), []) == Failure("", ["Can't be empty"])

    def test_validate_all_success(self) -> None:
        """Passing validators keep a Success."""
        assert Success("10").validate_all([is_not_empty, has_numbers]) == Success("10")

    def test_validate_all_accumulates_onto_failure(self) -> None:
        """Validator errors are appended to existing ones."""
        result = Failure("", ["Must have numbers"]).validate_all([is_not_empty, has_numbers])

        assert result == Failure("", ["Must have numbers", "Can't be empty", "Must have numbers"])

    def test_later_validators_see_replaced_value(self) -> None:
        """Each validator sees the value left by the previous one."""
        result = Success(" hi ").validate_all([trim, has_numbers])

        assert result == Failure("hi", ["Must have numbers"])

    def test_replaced_value_on_failure(self) -> None:
        """A cleaned value is kept even when a later validator fails."""
        result = Failure("  ", ["Must have numbers"]).validate_all([trim, is_not_empty])

        assert result == Failure("", ["Must have numbers", "Can't be empty"])

    def test_zipcode_examples(self, zipcode_validators: list[Any]) -> None:
        """Zipcode validation accumulates every failing rule."""
        assert of("123456").validate_all(zipcode_validators) == Success("123456")
        assert of("123456 ").validate_all(zipcode_validators) == Success("123456")
        assert of("wrong zipcode").validate_all(zipcode_validators) == Failure(
            "wrong zipcode", ["Must have numbers"]
        )
        assert of("   ").validate_all(zipcode_validators) == Failure(
            "", ["Can't be empty", "Must have numbers"]
        )


# =============================================================================
# Either Integration Property-Based Tests
# =============================================================================


class TestEitherProperties:
    """Property-based tests for the Either integration."""

    @given(result=results(), items=st.lists(eithers, max_size=6))
    @settings(max_examples=100)
    def test_validate_either_list_is_a_left_fold(self, result: Any, items: list[Any]) -> None:
        """The list form equals applying validate_either one Either at a time."""
        expected = result
        for either in items:
            expected = validate_either(expected, either)

        assert validate_either_list(result, items) == expected

    @given(result=results(), items=st.lists(eithers, max_size=6))
    @settings(max_examples=100)
    def test_errors_only_grow(self, result: Any, items: list[Any]) -> None:
        """The running Result's errors always stay at the front."""
        combined = validate_either_list(result, items)
        original = result.errors_or(())

        assert combined.errors_or(())[: len(original)] == original

    @given(result=results())
    @settings(max_examples=50)
    def test_validate_all_without_validators(self, result: Any) -> None:
        """validate_all with no validators is the identity."""
        assert validate_all(result, []) == result

    @given(initial=values, value=values)
    @settings(max_examples=50)
    def test_from_either_right(self, initial: Any, value: Any) -> None:
        """A right branch ignores the initial value."""
        assert from_either(initial, Right(value)) == Success(value)
