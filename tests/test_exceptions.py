"""Tests for the guardclauses exception hierarchy."""

import pytest

from guardclauses import (
    GuardClauseError,
    GuardClausesConfigError,
    InvalidFormatError,
    NullReferenceError,
    OutOfRangeError,
    ValidationError,
    ensure_not_none,
    ensure_positive,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [GuardClausesConfigError, OutOfRangeError, ValidationError, InvalidFormatError, NullReferenceError],
    )
    def test_all_errors_share_base(self, error_type):
        assert issubclass(error_type, GuardClauseError)

    @pytest.mark.parametrize(
        "error_type", [OutOfRangeError, ValidationError, InvalidFormatError, NullReferenceError]
    )
    def test_guard_failures_are_value_errors(self, error_type):
        assert issubclass(error_type, ValueError)

    def test_config_error_is_not_a_value_error(self):
        assert not issubclass(GuardClausesConfigError, ValueError)

    def test_invalid_format_is_validation_error(self):
        assert issubclass(InvalidFormatError, ValidationError)

    def test_catch_with_base_class(self):
        with pytest.raises(GuardClauseError):
            ensure_positive(0)

    def test_catch_as_value_error(self):
        with pytest.raises(ValueError):
            ensure_not_none(None)


class TestAttributes:
    def test_str_is_message(self):
        error = GuardClauseError("Iets ging mis", parameter="x", method="f")
        assert str(error) == "Iets ging mis"
        assert error.args == ("Iets ging mis",)

    def test_defaults(self):
        error = OutOfRangeError("bericht")
        assert error.parameter == ""
        assert error.method == ""
        assert error.actual_value is None
        assert error.bounds == ()

    def test_out_of_range_carries_value_and_bounds(self):
        error = OutOfRangeError("bericht", parameter="age", method="register", actual_value=150, bounds=(0, 130))
        assert error.actual_value == 150
        assert error.bounds == (0, 130)
        assert error.parameter == "age"
        assert error.method == "register"

    def test_validation_error_carries_expectation(self):
        error = InvalidFormatError("bericht", actual_value="x", expected="version 7")
        assert error.expected == "version 7"
        assert error.actual_value == "x"

    def test_null_reference_type_name(self):
        assert NullReferenceError("bericht").type_name == "object"
        assert NullReferenceError("bericht", type_name="Customer").type_name == "Customer"

    def test_raised_error_is_populated(self):
        balance = -3
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_positive(balance)

        error = exc_info.value
        assert error.actual_value == -3
        assert error.bounds == (0,)
        assert error.parameter == "balance"
        assert error.method == "test_raised_error_is_populated"
        assert str(error) == error.message
