from __future__ import annotations

from dataclasses import dataclass

from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class ListVehiclesResponse:
    vehicles: list[Vehicle]


class ListVehicles:
    """Vehicles a customer can pick from on the financing page."""

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self) -> ListVehiclesResponse:
        return ListVehiclesResponse(vehicles=self._repository.list_vehicles())
