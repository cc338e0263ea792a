"""Contract tests for the in-memory repositories."""

from __future__ import annotations

from decimal import Decimal

import pytest

from dealership_lite.adapters.in_memory_financing_option_repository import (
    DEFAULT_FINANCING_OPTIONS,
    InMemoryFinancingOptionRepository,
)
from dealership_lite.adapters.in_memory_vehicle_catalog_repository import (
    DEFAULT_VEHICLES,
    InMemoryVehicleCatalogRepository,
)
from dealership_lite.domain.vehicle import Vehicle


# ==============================================================================
# Vehicle Catalog
# ==============================================================================


def test_default_showroom_stock() -> None:
    vehicles = InMemoryVehicleCatalogRepository().list_vehicles()

    assert [(v.display_name, v.price) for v in vehicles] == [
        ("Tata Nexon 2024", Decimal("850000")),
        ("Tata Punch 2024", Decimal("650000")),
        ("Tata Tiago 2024", Decimal("550000")),
        ("Tata Tigor 2024", Decimal("600000")),
    ]


def test_list_vehicles_returns_a_copy() -> None:
    repository = InMemoryVehicleCatalogRepository()

    repository.list_vehicles().clear()

    assert len(repository.list_vehicles()) == len(DEFAULT_VEHICLES)


def test_custom_vehicles_replace_defaults() -> None:
    vehicle = Vehicle(id="abc", make="Tata", model="Harrier", year=2023, price=Decimal("1500000"))

    repository = InMemoryVehicleCatalogRepository(vehicles=[vehicle])

    assert repository.list_vehicles() == [vehicle]


def test_empty_catalog_is_respected() -> None:
    assert InMemoryVehicleCatalogRepository(vehicles=[]).list_vehicles() == []


def test_get_vehicle_by_id() -> None:
    vehicle = InMemoryVehicleCatalogRepository().get_by_id("00000000-0000-0000-0000-000000000003")

    assert vehicle is not None
    assert vehicle.model == "Tiago"
    assert vehicle.category == "HATCHBACK"


@pytest.mark.parametrize("vehicle_id", ["00000000-0000-0000-0000-000000000099", "tiago", ""])
def test_get_vehicle_by_unknown_id(vehicle_id: str) -> None:
    assert InMemoryVehicleCatalogRepository().get_by_id(vehicle_id) is None


# ==============================================================================
# Financing Options
# ==============================================================================


def test_default_financing_options() -> None:
    options = InMemoryFinancingOptionRepository().list_options()

    assert [
        (o.id, o.annual_rate_percent, o.max_term_years, o.min_down_payment_percent)
        for o in options
    ] == [
        ("direct-personal", Decimal("8.5"), 7, Decimal("20")),
        ("new-car", Decimal("7.5"), 5, Decimal("15")),
        ("islamic", Decimal("6.5"), 6, Decimal("25")),
        ("employee", Decimal("6.0"), 6, Decimal("10")),
    ]


def test_every_option_describes_itself() -> None:
    for option in DEFAULT_FINANCING_OPTIONS:
        assert option.name
        assert option.description
        assert option.features
        assert option.requirements


def test_get_option_by_id() -> None:
    option = InMemoryFinancingOptionRepository().get_by_id("islamic")

    assert option is not None
    assert option.min_down_payment_for(Decimal("1000000")) == Decimal("250000")


def test_get_unknown_option() -> None:
    assert InMemoryFinancingOptionRepository().get_by_id("Islamic") is None
