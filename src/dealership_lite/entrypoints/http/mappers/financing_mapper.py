from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from dealership_lite.domain.errors import ValidationError
from dealership_lite.domain.financing_option import FinancingOption
from dealership_lite.domain.loan import LoanQuote, LoanQuoteRequest
from dealership_lite.entrypoints.http.dtos.financing import (
    FinancingOptionQuoteRequestDTO,
    FinancingOptionQuoteResponseDTO,
    FinancingOptionResponseDTO,
    FinancingOptionsResponseDTO,
    LoanQuoteRequestDTO,
    LoanQuoteResponseDTO,
)
from dealership_lite.use_cases.quote_financing_option import (
    QuoteFinancingOptionRequest,
    QuoteFinancingOptionResponse,
)

CENTS = Decimal("0.01")
ONE_DECIMAL = Decimal("0.1")
RATE_PLACES = Decimal("0.0000000001")


def parse_decimal(field: str, value: str, errors: list[dict[str, str]]) -> Decimal:
    """
    Parse a decimal string, recording a field error instead of raising.

    Returns Decimal("0") as a placeholder on failure so the caller can keep
    collecting errors for the remaining fields.
    """
    try:
        return Decimal(value)
    except (InvalidOperation, ValueError):
        errors.append(
            {
                "field": field,
                "message": f"Must be a valid decimal: {value}",
                "code": "INVALID_DECIMAL",
            }
        )
        return Decimal("0")


def money(value: Decimal) -> str:
    return str(value.quantize(CENTS, rounding=ROUND_HALF_UP))


class FinancingMapper:
    """Maps between REST DTOs and domain models for financing quotes."""

    @staticmethod
    def to_domain_request(dto: LoanQuoteRequestDTO) -> LoanQuoteRequest:
        """
        Converts request DTO to a domain LoanQuoteRequest (str → Decimal).

        Raises:
            ValidationError: If string values cannot be converted to Decimals
        """
        errors: list[dict[str, str]] = []

        principal = parse_decimal("principal", dto.principal, errors)
        down_payment = parse_decimal("down_payment", dto.down_payment, errors)
        annual_rate_percent = parse_decimal("annual_rate_percent", dto.annual_rate_percent, errors)

        if errors:
            raise ValidationError(errors=errors)

        return LoanQuoteRequest(
            principal=principal,
            down_payment=down_payment,
            term_years=dto.term_years,
            annual_rate_percent=annual_rate_percent,
        )

    @staticmethod
    def to_option_quote_request(
        option_id: str, dto: FinancingOptionQuoteRequestDTO
    ) -> QuoteFinancingOptionRequest:
        errors: list[dict[str, str]] = []

        principal = parse_decimal("principal", dto.principal, errors)
        down_payment = parse_decimal("down_payment", dto.down_payment, errors)

        if errors:
            raise ValidationError(errors=errors)

        return QuoteFinancingOptionRequest(
            option_id=option_id,
            principal=principal,
            down_payment=down_payment,
            term_years=dto.term_years,
        )

    @staticmethod
    def to_response(quote: LoanQuote) -> LoanQuoteResponseDTO:
        """
        Converts a domain LoanQuote to the response DTO.

        This is the only place quote values are rounded: money to cents
        (ROUND_HALF_UP), the monthly rate to 10 places and the down payment
        share to one decimal.
        """
        return LoanQuoteResponseDTO(
            principal=money(quote.principal),
            down_payment=money(quote.down_payment),
            down_payment_percent=str(
                quote.down_payment_percent.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
            ),
            term_years=quote.term_years,
            number_of_payments=quote.number_of_payments,
            annual_rate_percent=str(quote.annual_rate_percent),
            monthly_rate=str(quote.monthly_rate.quantize(RATE_PLACES, rounding=ROUND_HALF_UP)),
            loan_amount=money(quote.loan_amount),
            monthly_payment=money(quote.monthly_payment),
            total_amount=money(quote.total_amount),
            total_interest=money(quote.total_interest),
        )

    @staticmethod
    def to_option_response(option: FinancingOption) -> FinancingOptionResponseDTO:
        return FinancingOptionResponseDTO(
            id=option.id,
            name=option.name,
            annual_rate_percent=str(option.annual_rate_percent),
            max_term_years=option.max_term_years,
            min_down_payment_percent=str(option.min_down_payment_percent),
            description=option.description,
            features=list(option.features),
            requirements=list(option.requirements),
        )

    @staticmethod
    def to_options_response(options: list[FinancingOption]) -> FinancingOptionsResponseDTO:
        return FinancingOptionsResponseDTO(
            options=[FinancingMapper.to_option_response(option) for option in options]
        )

    @staticmethod
    def to_option_quote_response(
        result: QuoteFinancingOptionResponse,
    ) -> FinancingOptionQuoteResponseDTO:
        return FinancingOptionQuoteResponseDTO(
            option=FinancingMapper.to_option_response(result.option),
            quote=FinancingMapper.to_response(result.quote),
        )
