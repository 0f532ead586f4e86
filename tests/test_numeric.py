"""Tests for the numeric guards."""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from guardclauses import (
    GuardClauseError,
    OutOfRangeError,
    ensure_greater_than,
    ensure_in_range,
    ensure_not_negative,
    ensure_positive,
    ensure_smaller_than,
)


class TestEnsurePositive:
    def test_returns_value(self):
        result = ensure_positive(10)
        assert result == 10

    def test_zero_fails(self):
        amount = 0
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_positive(amount)

        message = str(exc_info.value)
        assert "Ongeldige waarde 0 voor amount" in message
        assert "in methode test_zero_fails" in message
        assert "Waarde moet strikt positief zijn." in message

    def test_error_attributes(self):
        balance = -3
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_positive(balance)

        error = exc_info.value
        assert error.parameter == "balance"
        assert error.method == "test_error_attributes"
        assert error.actual_value == -3
        assert error.bounds == (0,)

    def test_is_value_error(self):
        """Guard failures can be caught as ValueError or GuardClauseError."""
        with pytest.raises(ValueError):
            ensure_positive(-1)
        with pytest.raises(GuardClauseError):
            ensure_positive(-1)

    def test_works_with_decimal_and_fraction(self):
        price = Decimal("0.01")
        share = Fraction(1, 3)
        assert ensure_positive(price) is price
        assert ensure_positive(share) is share


class TestEnsureNotNegative:
    def test_zero_passes(self):
        result = ensure_not_negative(0)
        assert result == 0

    def test_negative_float_uses_decimal_comma(self):
        ratio = -0.3
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_not_negative(ratio)

        message = str(exc_info.value)
        assert "Ongeldige waarde -0,3 voor ratio" in message
        assert "test_negative_float_uses_decimal_comma" in message
        assert "Waarde mag niet negatief zijn." in message


class TestEnsureGreaterThan:
    def test_custom_message_passes_value_through(self):
        result = ensure_greater_than(1, -1, "Custom message")
        assert result == 1

    def test_custom_message_replaces_default(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_greater_than(1, 2, "Custom Message")

        assert str(exc_info.value) == "Custom Message"

    def test_boundary_is_inclusive(self):
        result = ensure_greater_than(5, 5)
        assert result == 5

    def test_default_message_names_bound(self):
        count = 1
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_greater_than(count, 2)

        message = str(exc_info.value)
        assert "Waarde moet groter of gelijk zijn aan 2." in message
        assert exc_info.value.bounds == (2,)


class TestEnsureSmallerThan:
    def test_decimal_passes_through_unchanged(self):
        value = Decimal("0.50")
        result = ensure_smaller_than(value, 1, "Custom message")
        assert result is value

    def test_custom_message_replaces_default(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_smaller_than(2, 1, "Custom Message")

        assert str(exc_info.value) == "Custom Message"

    def test_boundary_is_inclusive(self):
        result = ensure_smaller_than(2.5, 2.5)
        assert result == 2.5

    def test_default_message_formats_bound(self):
        temperature = 40.0
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_smaller_than(temperature, 37.5)

        assert "Waarde moet kleiner of gelijk zijn aan 37,5." in str(exc_info.value)


class TestEnsureInRange:
    def test_pi_between_three_and_five(self):
        result = ensure_in_range(math.pi, 3, 5, "Custom message")
        assert result == math.pi

    def test_custom_message_replaces_default(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_in_range(math.e, -1, 0, "Custom message")

        assert str(exc_info.value) == "Custom message"

    @pytest.mark.parametrize("value", [1, 3, 5])
    def test_bounds_are_inclusive(self, value):
        result = ensure_in_range(value, 1, 5)
        assert result == value

    def test_default_message_names_both_bounds(self):
        percentage = 120
        with pytest.raises(OutOfRangeError) as exc_info:
            ensure_in_range(percentage, 0, 100)

        error = exc_info.value
        assert "Ongeldige waarde 120 voor percentage" in str(error)
        assert "Waarde moet tussen 0 en 100 liggen." in str(error)
        assert error.bounds == (0, 100)
