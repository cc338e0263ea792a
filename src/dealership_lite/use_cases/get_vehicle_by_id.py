"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from dealership_lite.domain.errors import NotFoundError, ValidationError
from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    vehicle: Vehicle


def validate_vehicle_id(vehicle_id: str) -> None:
    """
    Raises:
        ValidationError: If vehicle_id is not a valid UUID
    """
    try:
        UUID(vehicle_id)
    except ValueError:
        raise ValidationError(
            errors=[
                {
                    "field": "vehicle_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ]
        )


class GetVehicleById:
    """
    Use case for retrieving a single vehicle by ID.

    Responsibilities:
    - Validate vehicle_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the vehicle doesn't exist
    """

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Raises:
            ValidationError: If vehicle_id is not a valid UUID format
            NotFoundError: If no vehicle has the given ID
        """
        validate_vehicle_id(request.vehicle_id)

        vehicle = self._repository.get_by_id(request.vehicle_id)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        return GetVehicleByIdResponse(vehicle=vehicle)
