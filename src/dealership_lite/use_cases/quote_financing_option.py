from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dealership_lite.domain.errors import InvalidInput, NotFoundError
from dealership_lite.domain.financing_option import FinancingOption
from dealership_lite.domain.loan import LoanQuote, LoanQuoteRequest
from dealership_lite.ports.financing_option_repository import FinancingOptionRepository
from dealership_lite.use_cases.compute_loan_quote import compute_loan_quote


@dataclass(frozen=True, slots=True)
class QuoteFinancingOptionRequest:
    option_id: str
    principal: Any
    down_payment: Any
    term_years: Any


@dataclass(frozen=True, slots=True)
class QuoteFinancingOptionResponse:
    option: FinancingOption
    quote: LoanQuote


class QuoteFinancingOption:
    """
    Quote a loan under a specific financing product.

    The product fixes the annual rate and constrains the term and the
    minimum down payment. Plain loan validation still applies first.
    """

    def __init__(self, financing_option_repository: FinancingOptionRepository) -> None:
        self._repository = financing_option_repository

    def execute(self, request: QuoteFinancingOptionRequest) -> QuoteFinancingOptionResponse:
        """
        Raises:
            NotFoundError: If the financing option doesn't exist
            InvalidInput: If the loan parameters are invalid or break the
                option's term or down payment limits
        """
        option = self._repository.get_by_id(request.option_id)
        if option is None:
            raise NotFoundError(resource="FinancingOption", identifier=request.option_id)

        terms = LoanQuoteRequest(
            principal=request.principal,
            down_payment=request.down_payment,
            term_years=request.term_years,
            annual_rate_percent=option.annual_rate_percent,
        ).validate()

        errors: list[dict[str, str]] = []
        if terms.term_years > option.max_term_years:
            errors.append(
                {
                    "field": "term_years",
                    "message": f"term_years must be <= {option.max_term_years} for this option",
                    "code": "TERM_EXCEEDS_OPTION",
                }
            )
        if terms.down_payment < option.min_down_payment_for(terms.principal):
            errors.append(
                {
                    "field": "down_payment",
                    "message": (
                        f"down_payment must be at least {option.min_down_payment_percent}% "
                        "of principal for this option"
                    ),
                    "code": "BELOW_MIN_DOWN_PAYMENT",
                }
            )
        if errors:
            raise InvalidInput(errors=errors)

        quote = compute_loan_quote(
            principal=terms.principal,
            down_payment=terms.down_payment,
            term_years=terms.term_years,
            annual_rate_percent=terms.annual_rate_percent,
        )

        return QuoteFinancingOptionResponse(option=option, quote=quote)
