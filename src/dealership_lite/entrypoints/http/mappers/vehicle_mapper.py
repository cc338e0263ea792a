from __future__ import annotations

from dealership_lite.domain.errors import ValidationError
from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.entrypoints.http.dtos.financing import VehicleQuoteRequestDTO
from dealership_lite.entrypoints.http.dtos.vehicles import (
    VehicleQuoteResponseDTO,
    VehicleResponseDTO,
    VehiclesResponseDTO,
)
from dealership_lite.entrypoints.http.mappers.financing_mapper import (
    FinancingMapper,
    parse_decimal,
)
from dealership_lite.use_cases.quote_vehicle_loan import (
    QuoteVehicleLoanRequest,
    QuoteVehicleLoanResponse,
)


class VehicleMapper:
    """Maps between REST DTOs and domain models for the vehicle catalog."""

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        return VehicleResponseDTO(
            id=vehicle.id,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            price=str(vehicle.price),  # Decimal → str at boundary
            category=vehicle.category,
        )

    @staticmethod
    def to_vehicles_response(vehicles: list[Vehicle]) -> VehiclesResponseDTO:
        return VehiclesResponseDTO(
            vehicles=[VehicleMapper.to_vehicle_response(vehicle) for vehicle in vehicles],
            total=len(vehicles),
        )

    @staticmethod
    def to_quote_request(
        vehicle_id: str, dto: VehicleQuoteRequestDTO | None
    ) -> QuoteVehicleLoanRequest:
        """
        Builds a vehicle quote request; omitted overrides stay None so the
        use case applies its defaults.

        Raises:
            ValidationError: If an override cannot be converted to Decimal
        """
        if dto is None:
            return QuoteVehicleLoanRequest(vehicle_id=vehicle_id)

        errors: list[dict[str, str]] = []
        down_payment = (
            parse_decimal("down_payment", dto.down_payment, errors)
            if dto.down_payment is not None
            else None
        )
        annual_rate_percent = (
            parse_decimal("annual_rate_percent", dto.annual_rate_percent, errors)
            if dto.annual_rate_percent is not None
            else None
        )

        if errors:
            raise ValidationError(errors=errors)

        return QuoteVehicleLoanRequest(
            vehicle_id=vehicle_id,
            down_payment=down_payment,
            term_years=dto.term_years,
            annual_rate_percent=annual_rate_percent,
        )

    @staticmethod
    def to_quote_response(result: QuoteVehicleLoanResponse) -> VehicleQuoteResponseDTO:
        return VehicleQuoteResponseDTO(
            vehicle=VehicleMapper.to_vehicle_response(result.vehicle),
            quote=FinancingMapper.to_response(result.quote),
        )
