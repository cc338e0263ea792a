"""Tests for domain error classes."""

from dealership_lite.domain.errors import (
    DomainError,
    InternalError,
    InvalidInput,
    NotFoundError,
    ValidationError,
)


class TestDomainError:
    def test_creates_error_with_message(self) -> None:
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}
        assert str(error) == "Something went wrong"

    def test_to_dict_includes_context(self) -> None:
        error = DomainError("Quote failed", vehicle_id="abc")

        assert error.to_dict() == {
            "message": "Quote failed",
            "code": "DOMAIN_ERROR",
            "vehicle_id": "abc",
        }


class TestValidationError:
    def test_default_message_without_field_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.to_dict() == {"message": "Validation error", "code": "VALIDATION_ERROR"}

    def test_field_errors_use_validation_failed_message(self) -> None:
        errors = [{"field": "principal", "message": "principal must be > 0", "code": "INVALID_VALUE"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }


class TestInvalidInput:
    def test_is_a_validation_error(self) -> None:
        error = InvalidInput(errors=[{"field": "term_years", "message": "bad", "code": "INVALID_TERM"}])

        assert isinstance(error, ValidationError)
        assert error.error_code == "VALIDATION_ERROR"

    def test_fields_lists_offending_fields_in_order(self) -> None:
        error = InvalidInput(
            errors=[
                {"field": "principal", "message": "bad", "code": "INVALID_VALUE"},
                {"field": "annual_rate_percent", "message": "bad", "code": "INVALID_VALUE"},
            ]
        )

        assert error.fields() == ["principal", "annual_rate_percent"]

    def test_fields_is_empty_without_field_errors(self) -> None:
        assert InvalidInput("nope").fields() == []


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Vehicle", "123")

        assert error.message == "Vehicle with identifier '123' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "Vehicle", "identifier": "123"}

    def test_message_without_identifier(self) -> None:
        error = NotFoundError("FinancingOption")

        assert error.message == "FinancingOption not found"
        assert error.context["identifier"] is None


def test_internal_error_code() -> None:
    assert InternalError("Unexpected condition").error_code == "INTERNAL_ERROR"
