from dealership_lite.infra.db.models.base import Base
from dealership_lite.infra.db.models.vehicle import VehicleRow

__all__ = ["Base", "VehicleRow"]
