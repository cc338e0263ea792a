"""Tests for error response schemas."""

from dealership_lite.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


def test_error_response_without_field_errors() -> None:
    response = ErrorResponse(detail="FinancingOption not found", code="NOT_FOUND")

    assert response.errors is None
    assert response.model_dump(exclude_none=True) == {
        "detail": "FinancingOption not found",
        "code": "NOT_FOUND",
    }


def test_error_response_with_field_errors() -> None:
    response = ErrorResponse(
        detail="Validation failed",
        code="VALIDATION_ERROR",
        errors=[
            ErrorDetail(
                field="down_payment",
                message="down_payment must be <= principal",
                code="EXCEEDS_PRINCIPAL",
            )
        ],
    )

    assert response.errors is not None
    assert response.errors[0].field == "down_payment"


def test_error_detail_code_is_optional() -> None:
    assert ErrorDetail(field="term_years", message="Required").code is None


def test_error_response_schema_has_examples() -> None:
    schema = ErrorResponse.model_json_schema()

    assert "examples" in schema
    assert schema["properties"]["detail"]["type"] == "string"
