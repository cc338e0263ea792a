from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from dealership_lite.domain.errors import InvalidInput


MONTHS_PER_YEAR = 12
MIN_TERM_YEARS = 1
MAX_TERM_YEARS = 7

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Any) -> Decimal | None:
    """
    Coerce a numeric input to Decimal.

    Floats go through ``str()`` so 8.5 becomes Decimal("8.5") rather than
    its binary expansion. Returns None for anything that is not a finite
    number (including bools, NaN and Infinity).
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, str)):
        try:
            number = Decimal(value)
        except InvalidOperation:
            return None
    elif isinstance(value, float):
        number = Decimal(str(value))
    else:
        return None

    if not number.is_finite():
        return None
    return number


def _field_error(field: str, message: str, code: str = "INVALID_VALUE") -> dict[str, str]:
    return {"field": field, "message": message, "code": code}


@dataclass(frozen=True, slots=True)
class LoanQuoteRequest:
    """Snapshot of the loan form inputs, validated at the boundary."""

    principal: Any
    down_payment: Any
    term_years: Any
    annual_rate_percent: Any

    def validate(self) -> ValidatedLoanTerms:
        """
        Validate every field and return the Decimal-normalized terms.

        All violations are collected before raising, so the caller can show
        every bad field at once.

        Raises:
            InvalidInput: If any field is non-numeric, out of range, or the
                down payment exceeds the principal
        """
        errors: list[dict[str, str]] = []

        principal = to_decimal(self.principal)
        if principal is None:
            errors.append(_field_error("principal", "Must be a finite number", "INVALID_NUMBER"))
        elif principal <= 0:
            errors.append(_field_error("principal", "principal must be > 0"))

        down_payment = to_decimal(self.down_payment)
        if down_payment is None:
            errors.append(_field_error("down_payment", "Must be a finite number", "INVALID_NUMBER"))
        elif down_payment < 0:
            errors.append(_field_error("down_payment", "down_payment must be >= 0"))
        elif principal is not None and principal > 0 and down_payment > principal:
            errors.append(
                _field_error("down_payment", "down_payment must be <= principal", "EXCEEDS_PRINCIPAL")
            )

        term = to_decimal(self.term_years)
        if term is None or term != term.to_integral_value():
            errors.append(_field_error("term_years", "Must be a whole number of years", "INVALID_TERM"))
        elif not MIN_TERM_YEARS <= term <= MAX_TERM_YEARS:
            errors.append(
                _field_error(
                    "term_years",
                    f"term_years must be between {MIN_TERM_YEARS} and {MAX_TERM_YEARS}",
                    "INVALID_TERM",
                )
            )

        rate = to_decimal(self.annual_rate_percent)
        if rate is None:
            errors.append(
                _field_error("annual_rate_percent", "Must be a finite number", "INVALID_NUMBER")
            )
        elif rate < 0:
            errors.append(_field_error("annual_rate_percent", "annual_rate_percent must be >= 0"))

        if (
            errors
            or principal is None
            or down_payment is None
            or term is None
            or rate is None
        ):
            raise InvalidInput(errors=errors)

        return ValidatedLoanTerms(
            principal=principal,
            down_payment=down_payment,
            term_years=int(term),
            annual_rate_percent=rate,
        )


@dataclass(frozen=True, slots=True)
class ValidatedLoanTerms:
    principal: Decimal
    down_payment: Decimal
    term_years: int
    annual_rate_percent: Decimal

    @property
    def number_of_payments(self) -> int:
        return self.term_years * MONTHS_PER_YEAR


@dataclass(frozen=True, slots=True)
class LoanQuote:
    """
    Result of one amortization run. Never persisted.

    Invariants:
    - loan_amount == principal - down_payment
    - total_amount == monthly_payment * number_of_payments
      (exactly loan_amount when the rate is zero)
    - total_interest == total_amount - loan_amount
    """

    principal: Decimal
    down_payment: Decimal
    term_years: int
    annual_rate_percent: Decimal
    number_of_payments: int
    loan_amount: Decimal
    monthly_rate: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_amount: Decimal

    @property
    def down_payment_percent(self) -> Decimal:
        return self.down_payment / self.principal * HUNDRED
