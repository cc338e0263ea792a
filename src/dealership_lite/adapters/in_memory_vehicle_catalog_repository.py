from __future__ import annotations

from decimal import Decimal

from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository


# Showroom stock used when no database is configured
DEFAULT_VEHICLES: tuple[Vehicle, ...] = (
    Vehicle(
        id="00000000-0000-0000-0000-000000000001",
        make="Tata",
        model="Nexon",
        year=2024,
        price=Decimal("850000"),
        category="SUV",
    ),
    Vehicle(
        id="00000000-0000-0000-0000-000000000002",
        make="Tata",
        model="Punch",
        year=2024,
        price=Decimal("650000"),
        category="SUV",
    ),
    Vehicle(
        id="00000000-0000-0000-0000-000000000003",
        make="Tata",
        model="Tiago",
        year=2024,
        price=Decimal("550000"),
        category="HATCHBACK",
    ),
    Vehicle(
        id="00000000-0000-0000-0000-000000000004",
        make="Tata",
        model="Tigor",
        year=2024,
        price=Decimal("600000"),
        category="SEDAN",
    ),
)


class InMemoryVehicleCatalogRepository(VehicleCatalogRepository):
    """
    Canonical contract implementation for tests and local runs.

    - Stores vehicles in insertion order
    - Lookups are exact, case-sensitive ID matches
    """

    def __init__(self, vehicles: list[Vehicle] | None = None) -> None:
        self._vehicles = list(DEFAULT_VEHICLES) if vehicles is None else vehicles

    def list_vehicles(self) -> list[Vehicle]:
        return list(self._vehicles)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None
