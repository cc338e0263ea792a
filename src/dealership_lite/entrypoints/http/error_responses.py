"""REST API error response models (documentation schemas for OpenAPI)."""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error: which input failed and why."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "down_payment",
                "message": "down_payment must be <= principal",
                "code": "EXCEEDS_PRINCIPAL",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    ``errors`` is present only for validation failures that name fields.
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier '...' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "term_years",
                            "message": "term_years must be between 1 and 7",
                            "code": "INVALID_TERM",
                        },
                        {
                            "field": "principal",
                            "message": "principal must be > 0",
                            "code": "INVALID_VALUE",
                        },
                    ],
                },
            ]
        }
    )
