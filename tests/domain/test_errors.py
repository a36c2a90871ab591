"""Tests for domain error classes."""

from fleet_lite.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from fleet_lite.domain.truck import (
    FilterValidationError,
    PagingValidationError,
    TruckValidationError,
)


class TestDomainError:
    def test_creates_error_with_message(self) -> None:
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_merges_context(self) -> None:
        error = DomainError("Test error", field="license_number", value="B 1")

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "license_number",
            "value": "B 1",
        }

    def test_str_representation(self) -> None:
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    def test_default_message_without_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.error_code == "VALIDATION_ERROR"

    def test_field_errors_switch_default_message(self) -> None:
        errors = [{"field": "production_year", "message": "Must be >= 1900"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        assert ValidationError("Simple error").to_dict() == {
            "message": "Simple error",
            "code": "VALIDATION_ERROR",
        }

    def test_truck_specific_errors_are_validation_errors(self) -> None:
        for error_class in (FilterValidationError, PagingValidationError, TruckValidationError):
            error = error_class("bad input")

            assert isinstance(error, ValidationError)
            assert error.error_code == "VALIDATION_ERROR"


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Truck", "123")

        assert error.message == "Truck with identifier '123' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.to_dict() == {
            "message": "Truck with identifier '123' not found",
            "code": "NOT_FOUND",
            "resource": "Truck",
            "identifier": "123",
        }

    def test_message_without_identifier(self) -> None:
        error = NotFoundError("Truck")

        assert error.message == "Truck not found"
        assert error.context["identifier"] is None


def test_conflict_and_internal_error_codes() -> None:
    assert ConflictError("License number taken").error_code == "CONFLICT"
    assert InternalError("Unexpected condition").error_code == "INTERNAL_ERROR"
