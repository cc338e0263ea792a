from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from dealership_lite.domain.errors import InvalidInput
from dealership_lite.domain.loan import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ZERO,
    LoanQuote,
    LoanQuoteRequest,
)

logger = logging.getLogger(__name__)

ONE = Decimal("1")


def amortized_monthly_payment(
    loan_amount: Decimal, monthly_rate: Decimal, number_of_payments: int
) -> Decimal:
    """
    Fixed payment that retires ``loan_amount`` in ``number_of_payments`` periods.

    M = P * (r * (1+r)^n) / ((1+r)^n - 1), or P / n when r == 0.

    Raises:
        InvalidInput: If number_of_payments <= 0 or monthly_rate < 0
    """
    if number_of_payments <= 0:
        raise InvalidInput(
            errors=[
                {
                    "field": "number_of_payments",
                    "message": "number_of_payments must be > 0",
                    "code": "INVALID_TERM",
                }
            ]
        )
    if monthly_rate < 0:
        raise InvalidInput(
            errors=[
                {
                    "field": "monthly_rate",
                    "message": "monthly_rate must be >= 0",
                    "code": "INVALID_VALUE",
                }
            ]
        )

    periods = Decimal(number_of_payments)
    if monthly_rate == 0:
        return loan_amount / periods

    factor = (ONE + monthly_rate) ** periods
    return loan_amount * (monthly_rate * factor) / (factor - ONE)


def compute_loan_quote(
    principal: Any,
    down_payment: Any,
    term_years: Any,
    annual_rate_percent: Any,
) -> LoanQuote:
    """
    Compute a loan quote from the current form inputs.

    Pure: no I/O, no shared state, safe to call on every input change.
    Nothing is rounded here; formatting belongs to the presentation layer.

    Raises:
        InvalidInput: If the inputs cannot produce a meaningful quote
    """
    terms = LoanQuoteRequest(
        principal=principal,
        down_payment=down_payment,
        term_years=term_years,
        annual_rate_percent=annual_rate_percent,
    ).validate()

    loan_amount = terms.principal - terms.down_payment
    monthly_rate = terms.annual_rate_percent / HUNDRED / MONTHS_PER_YEAR
    number_of_payments = terms.number_of_payments

    monthly_payment = amortized_monthly_payment(loan_amount, monthly_rate, number_of_payments)

    if monthly_rate == 0:
        total_amount = loan_amount
        total_interest = ZERO
    else:
        total_amount = monthly_payment * number_of_payments
        total_interest = total_amount - loan_amount

    return LoanQuote(
        principal=terms.principal,
        down_payment=terms.down_payment,
        term_years=terms.term_years,
        annual_rate_percent=terms.annual_rate_percent,
        number_of_payments=number_of_payments,
        loan_amount=loan_amount,
        monthly_rate=monthly_rate,
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        total_amount=total_amount,
    )


@dataclass(frozen=True, slots=True)
class ComputeLoanQuote:
    """
    Use case wrapper around ``compute_loan_quote`` for the HTTP layer.

    Every call is independent; a later quote simply supersedes an earlier
    one in whatever is rendering it.
    """

    def execute(self, request: LoanQuoteRequest) -> LoanQuote:
        quote = compute_loan_quote(
            principal=request.principal,
            down_payment=request.down_payment,
            term_years=request.term_years,
            annual_rate_percent=request.annual_rate_percent,
        )

        logger.debug(
            "Loan quote computed",
            extra={
                "loan_amount": str(quote.loan_amount),
                "term_years": quote.term_years,
                "annual_rate_percent": str(quote.annual_rate_percent),
                "monthly_payment": str(quote.monthly_payment),
            },
        )

        return quote
