"""PostgreSQL implementation of VehicleCatalogRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.infra.db.models.vehicle import VehicleRow
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository


class PostgresVehicleCatalogRepository(VehicleCatalogRepository):
    """
    PostgreSQL implementation of VehicleCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Lists vehicles ordered by make, model, then year (newest first)
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_vehicles(self) -> list[Vehicle]:
        query = select(VehicleRow).order_by(
            VehicleRow.make, VehicleRow.model, VehicleRow.year.desc()
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """
        Get vehicle by ID.

        Args:
            vehicle_id: Vehicle ID (expected to be a valid UUID string)

        Returns:
            Vehicle if found, None otherwise
        """
        try:
            query = select(VehicleRow).where(VehicleRow.id == UUID(vehicle_id))
        except ValueError:  # Invalid UUID format
            return None

        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        return Vehicle(
            id=str(row.id),
            make=row.make,
            model=row.model,
            year=row.year,
            price=row.price,  # Already Decimal from NUMERIC column
            category=row.category,
        )
