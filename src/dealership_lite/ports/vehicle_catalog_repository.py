from __future__ import annotations

from abc import ABC, abstractmethod

from dealership_lite.domain.vehicle import Vehicle


class VehicleCatalogRepository(ABC):
    """
    Port for the vehicle catalog.

    The financing calculator only needs a vehicle's price; everything else
    here exists so the catalog can be browsed before picking one.
    """

    @abstractmethod
    def list_vehicles(self) -> list[Vehicle]:
        """Return every vehicle in catalog order."""
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """Return the vehicle with the given ID, or None if it does not exist."""
        ...
