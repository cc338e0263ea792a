"""Domain error classes.

Protocol-agnostic errors raised by the financing and catalog use cases.
The HTTP entrypoint translates them into structured JSON responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message, a stable ``error_code`` and any
    extra context the caller wants surfaced alongside it.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context (e.g., resource names, identifiers)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - down_payment greater than principal
        - term_years outside the offered range
        - term above a financing option's maximum

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-level errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "principal", "message": "Must be > 0", "code": "INVALID_VALUE"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class InvalidInput(ValidationError):
    """Loan parameters that cannot produce a meaningful quote.

    Raised instead of letting NaN, Infinity or a negative loan amount
    flow into the amortization formula. Never silently corrected.
    """

    def fields(self) -> list[str]:
        """Names of the offending fields, in the order they were reported."""
        return [error["field"] for error in self.errors or []]


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Vehicle with ID not found
        - Financing option not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Unexpected condition inside the domain. Always logged.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
