"""Tests for VehicleMapper."""

from __future__ import annotations

from decimal import Decimal

import pytest

from dealership_lite.domain.errors import ValidationError
from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.entrypoints.http.dtos.financing import VehicleQuoteRequestDTO
from dealership_lite.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from dealership_lite.use_cases.compute_loan_quote import compute_loan_quote
from dealership_lite.use_cases.quote_vehicle_loan import (
    QuoteVehicleLoanRequest,
    QuoteVehicleLoanResponse,
)

VEHICLE_ID = "00000000-0000-0000-0000-000000000004"


@pytest.fixture()
def tigor() -> Vehicle:
    return Vehicle(
        id=VEHICLE_ID,
        make="Tata",
        model="Tigor",
        year=2024,
        price=Decimal("600000"),
        category="SEDAN",
    )


def test_to_vehicle_response(tigor: Vehicle) -> None:
    dto = VehicleMapper.to_vehicle_response(tigor)

    assert dto.model_dump() == {
        "id": VEHICLE_ID,
        "make": "Tata",
        "model": "Tigor",
        "year": 2024,
        "price": "600000",
        "category": "SEDAN",
    }


def test_to_vehicles_response_counts_vehicles(tigor: Vehicle) -> None:
    dto = VehicleMapper.to_vehicles_response([tigor, tigor])

    assert dto.total == 2
    assert len(dto.vehicles) == 2


def test_to_quote_request_without_body() -> None:
    assert VehicleMapper.to_quote_request(VEHICLE_ID, None) == QuoteVehicleLoanRequest(
        vehicle_id=VEHICLE_ID
    )


def test_to_quote_request_keeps_omitted_fields_unset() -> None:
    request = VehicleMapper.to_quote_request(VEHICLE_ID, VehicleQuoteRequestDTO(term_years=3))

    assert request.term_years == 3
    assert request.down_payment is None
    assert request.annual_rate_percent is None


def test_to_quote_request_parses_overrides() -> None:
    request = VehicleMapper.to_quote_request(
        VEHICLE_ID,
        VehicleQuoteRequestDTO(down_payment="60000.50", annual_rate_percent="9.25"),
    )

    assert request.down_payment == Decimal("60000.50")
    assert request.annual_rate_percent == Decimal("9.25")


def test_to_quote_request_rejects_bad_decimal() -> None:
    dto = VehicleQuoteRequestDTO.model_construct(
        down_payment="lots", term_years=None, annual_rate_percent=None
    )

    with pytest.raises(ValidationError):
        VehicleMapper.to_quote_request(VEHICLE_ID, dto)


def test_to_quote_response(tigor: Vehicle) -> None:
    quote = compute_loan_quote(tigor.price, Decimal("120000"), 5, Decimal("8.5"))

    dto = VehicleMapper.to_quote_response(QuoteVehicleLoanResponse(vehicle=tigor, quote=quote))

    assert dto.vehicle.model == "Tigor"
    assert dto.quote.principal == "600000.00"
    assert dto.quote.loan_amount == "480000.00"
    assert dto.quote.down_payment_percent == "20.0"
