"""Tests for the presence guards."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

import pytest

from guardclauses import (
    NullReferenceError,
    ValidationError,
    ensure_not_default,
    ensure_not_none,
    ensure_not_null,
)
from guardclauses.presence import default_for


@dataclass
class Customer:
    name: str


@dataclass
class Order:
    customer: Customer | None = None
    reference: Optional[str] = None


def register(customer: Customer | None) -> Customer:
    return ensure_not_none(customer)


class CustomerService:
    def activate(self, customer: Optional[Customer]) -> Customer:
        return ensure_not_none(customer)


class NeedsArguments:
    def __init__(self, required):
        self.required = required


class TestEnsureNotNone:
    def test_present_value_passes_through(self):
        customer = Customer("Ada")
        result = ensure_not_none(customer)
        assert result is customer

    def test_falsy_values_are_present(self):
        """Only None is absent; 0, '' and [] are values."""
        assert ensure_not_none(0) == 0
        assert ensure_not_none("") == ""
        assert ensure_not_none([]) == []

    def test_optional_field_names_declared_type(self):
        order = Order()
        with pytest.raises(NullReferenceError) as exc_info:
            ensure_not_none(order.customer)

        error = exc_info.value
        assert "Ongeldige waarde" in str(error)
        assert "order.customer" in str(error)
        assert "test_optional_field_names_declared_type" in str(error)
        assert "Customer mag niet null zijn." in str(error)
        assert error.type_name == "Customer"

    def test_typing_optional_field(self):
        order = Order()
        with pytest.raises(NullReferenceError) as exc_info:
            ensure_not_none(order.reference)

        assert exc_info.value.type_name == "str"

    def test_function_parameter_annotation(self):
        with pytest.raises(NullReferenceError) as exc_info:
            register(None)

        error = exc_info.value
        assert error.parameter == "customer"
        assert error.method == "register"
        assert error.type_name == "Customer"

    def test_method_parameter_annotation(self):
        with pytest.raises(NullReferenceError) as exc_info:
            CustomerService().activate(None)

        assert exc_info.value.method == "activate"
        assert exc_info.value.type_name == "Customer"

    def test_unannotated_expression_names_object(self):
        value = None
        with pytest.raises(NullReferenceError) as exc_info:
            ensure_not_none(value)

        assert exc_info.value.type_name == "object"

    def test_explicit_type(self):
        with pytest.raises(NullReferenceError) as exc_info:
            ensure_not_none(None, type_=Customer)
        assert "Customer mag niet null zijn." in str(exc_info.value)

        with pytest.raises(NullReferenceError) as exc_info:
            ensure_not_none(None, type_="Klant")
        assert exc_info.value.type_name == "Klant"

    def test_custom_message_replaces_default(self):
        with pytest.raises(NullReferenceError) as exc_info:
            ensure_not_none(None, "Klant ontbreekt")

        assert str(exc_info.value) == "Klant ontbreekt"

    def test_not_null_alias(self):
        assert ensure_not_null is ensure_not_none


class TestEnsureNotDefault:
    def test_non_default_passes(self):
        valid = 3
        result = ensure_not_default(valid)
        assert result == valid

    def test_zero_int_fails(self):
        invalid = 0
        with pytest.raises(ValidationError) as exc_info:
            ensure_not_default(invalid)

        message = str(exc_info.value)
        assert "Ongeldige waarde" in message
        assert "test_zero_int_fails" in message
        assert "int" in message
        assert "default waarde" in message
        assert "'0'" in message

    @pytest.mark.parametrize(
        "value, rendered",
        [
            (0.0, "'0,0'"),
            ("", "''"),
            (Decimal("0"), "'0'"),
            (UUID(int=0), "'00000000-0000-0000-0000-000000000000'"),
            ((), "'()'"),
        ],
    )
    def test_type_defaults(self, value, rendered):
        with pytest.raises(ValidationError) as exc_info:
            ensure_not_default(value)

        assert rendered in str(exc_info.value)

    def test_non_default_uuid_passes(self):
        identifier = uuid4()
        assert ensure_not_default(identifier) is identifier

    def test_explicit_default(self):
        assert ensure_not_default(0, default=-1) == 0
        with pytest.raises(ValidationError):
            ensure_not_default(-1, default=-1)

    def test_unknown_default_is_type_error(self):
        with pytest.raises(TypeError, match="pass default= explicitly"):
            ensure_not_default(NeedsArguments(1))


class TestDefaultFor:
    def test_known_defaults(self):
        assert default_for(int) == 0
        assert default_for(str) == ""
        assert default_for(UUID) == UUID(int=0)
        assert default_for(datetime) == datetime.min
        assert default_for(date) == date.min
