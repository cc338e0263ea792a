from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from dealership_lite.domain.errors import NotFoundError
from dealership_lite.domain.loan import LoanQuote
from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository
from dealership_lite.use_cases.compute_loan_quote import compute_loan_quote
from dealership_lite.use_cases.get_vehicle_by_id import validate_vehicle_id

logger = logging.getLogger(__name__)

DEFAULT_DOWN_PAYMENT_RATIO = Decimal("0.20")
DEFAULT_TERM_YEARS = 5
DEFAULT_ANNUAL_RATE_PERCENT = Decimal("8.5")


@dataclass(frozen=True, slots=True)
class QuoteVehicleLoanRequest:
    """
    Quote request for a catalog vehicle.

    Fields left as None fall back to the form defaults: a down payment of
    20% of the price, a 5 year term and an 8.5% annual rate.
    """

    vehicle_id: str
    down_payment: Any = None
    term_years: Any = None
    annual_rate_percent: Any = None


@dataclass(frozen=True, slots=True)
class QuoteVehicleLoanResponse:
    vehicle: Vehicle
    quote: LoanQuote


class QuoteVehicleLoan:
    """
    Prefill the loan calculator from a selected vehicle and compute a quote.

    The vehicle only contributes its price; the calculation itself is
    ``compute_loan_quote``.
    """

    def __init__(
        self,
        vehicle_catalog_repository: VehicleCatalogRepository,
        default_down_payment_ratio: Decimal = DEFAULT_DOWN_PAYMENT_RATIO,
        default_term_years: int = DEFAULT_TERM_YEARS,
        default_annual_rate_percent: Decimal = DEFAULT_ANNUAL_RATE_PERCENT,
    ) -> None:
        self._repository = vehicle_catalog_repository
        self._default_down_payment_ratio = default_down_payment_ratio
        self._default_term_years = default_term_years
        self._default_annual_rate_percent = default_annual_rate_percent

    def execute(self, request: QuoteVehicleLoanRequest) -> QuoteVehicleLoanResponse:
        """
        Raises:
            ValidationError: If vehicle_id is not a valid UUID format
            NotFoundError: If no vehicle has the given ID
            InvalidInput: If the resulting loan parameters are invalid
        """
        validate_vehicle_id(request.vehicle_id)

        vehicle = self._repository.get_by_id(request.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        down_payment = request.down_payment
        if down_payment is None:
            down_payment = vehicle.price * self._default_down_payment_ratio

        quote = compute_loan_quote(
            principal=vehicle.price,
            down_payment=down_payment,
            term_years=(
                self._default_term_years if request.term_years is None else request.term_years
            ),
            annual_rate_percent=(
                self._default_annual_rate_percent
                if request.annual_rate_percent is None
                else request.annual_rate_percent
            ),
        )

        logger.debug(
            "Vehicle loan quoted",
            extra={
                "vehicle_id": vehicle.id,
                "price": str(vehicle.price),
                "monthly_payment": str(quote.monthly_payment),
            },
        )

        return QuoteVehicleLoanResponse(vehicle=vehicle, quote=quote)
