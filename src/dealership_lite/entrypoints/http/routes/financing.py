from fastapi import APIRouter, Depends

from dealership_lite.entrypoints.http.dependencies import (
    get_compute_loan_quote_use_case,
    get_list_financing_options_use_case,
    get_quote_financing_option_use_case,
)
from dealership_lite.entrypoints.http.dtos.financing import (
    FinancingOptionQuoteRequestDTO,
    FinancingOptionQuoteResponseDTO,
    FinancingOptionsResponseDTO,
    LoanQuoteRequestDTO,
    LoanQuoteResponseDTO,
)
from dealership_lite.entrypoints.http.error_responses import ErrorResponse
from dealership_lite.entrypoints.http.mappers.financing_mapper import FinancingMapper
from dealership_lite.use_cases.compute_loan_quote import ComputeLoanQuote
from dealership_lite.use_cases.list_financing_options import ListFinancingOptions
from dealership_lite.use_cases.quote_financing_option import QuoteFinancingOption


router = APIRouter(tags=["Financing"])


@router.post(
    "/financing/quote",
    response_model=LoanQuoteResponseDTO,
    summary="Calculate a loan quote",
    description="""
    Calculate the monthly payment, total amount and total interest of a
    fixed-rate car loan.

    ## Inputs
    - principal, down_payment: decimal strings, up to 12 digits and 2 decimal places
    - term_years: whole years, 1 to 7
    - annual_rate_percent: percentage string ("8.5" = 8.5%)

    ## Calculation
    - loan_amount = principal - down_payment
    - monthly_rate = annual_rate_percent / 100 / 12
    - monthly_payment = standard amortization formula (loan_amount / months at 0%)
    - total_amount = monthly_payment × months
    - total_interest = total_amount - loan_amount

    Monetary values in the response are rounded to cents.
    """,
    responses={
        200: {
            "description": "Successful calculation",
            "content": {
                "application/json": {
                    "example": {
                        "principal": "850000.00",
                        "down_payment": "170000.00",
                        "down_payment_percent": "20.0",
                        "term_years": 5,
                        "number_of_payments": 60,
                        "annual_rate_percent": "8.5",
                        "monthly_rate": "0.0070833333",
                        "loan_amount": "680000.00",
                        "monthly_payment": "13951.24",
                        "total_amount": "837074.48",
                        "total_interest": "157074.48",
                    }
                }
            },
        },
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "down_payment",
                                "message": "down_payment must be <= principal",
                                "code": "EXCEEDS_PRINCIPAL",
                            }
                        ],
                    }
                }
            },
        },
    },
)
def calculate_loan_quote(
    payload: LoanQuoteRequestDTO,
    use_case: ComputeLoanQuote = Depends(get_compute_loan_quote_use_case),
) -> LoanQuoteResponseDTO:
    """Parse → map → execute → map → return."""
    request = FinancingMapper.to_domain_request(payload)

    quote = use_case.execute(request)

    return FinancingMapper.to_response(quote)


@router.get(
    "/financing/options",
    response_model=FinancingOptionsResponseDTO,
    summary="List financing options",
)
def list_financing_options(
    use_case: ListFinancingOptions = Depends(get_list_financing_options_use_case),
) -> FinancingOptionsResponseDTO:
    result = use_case.execute()

    return FinancingMapper.to_options_response(result.options)


@router.post(
    "/financing/options/{option_id}/quote",
    response_model=FinancingOptionQuoteResponseDTO,
    summary="Quote a loan under a financing option",
    responses={
        404: {"model": ErrorResponse, "description": "Financing option not found"},
        422: {"model": ErrorResponse, "description": "Invalid loan parameters"},
    },
    description="""
    Same calculation as `POST /financing/quote`, with the annual rate taken
    from the option. The term may not exceed the option's maximum and the
    down payment may not fall below its minimum percentage of the principal.
    """,
)
def quote_financing_option(
    option_id: str,
    payload: FinancingOptionQuoteRequestDTO,
    use_case: QuoteFinancingOption = Depends(get_quote_financing_option_use_case),
) -> FinancingOptionQuoteResponseDTO:
    request = FinancingMapper.to_option_quote_request(option_id, payload)

    result = use_case.execute(request)

    return FinancingMapper.to_option_quote_response(result)
