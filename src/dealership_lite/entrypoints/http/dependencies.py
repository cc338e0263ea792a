"""
Dependency injection for FastAPI routes.

Database sessions are per-request and only opened when the PostgreSQL
catalog is selected. Stateless pieces (settings, financing options) are
shared.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends

from dealership_lite.adapters.in_memory_financing_option_repository import (
    InMemoryFinancingOptionRepository,
)
from dealership_lite.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from dealership_lite.adapters.postgres_vehicle_catalog_repository import (
    PostgresVehicleCatalogRepository,
)
from dealership_lite.infra.config.settings import Settings, get_settings
from dealership_lite.infra.db.session import get_session
from dealership_lite.ports.financing_option_repository import FinancingOptionRepository
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository
from dealership_lite.use_cases.compute_loan_quote import ComputeLoanQuote
from dealership_lite.use_cases.get_vehicle_by_id import GetVehicleById
from dealership_lite.use_cases.list_financing_options import ListFinancingOptions
from dealership_lite.use_cases.list_vehicles import ListVehicles
from dealership_lite.use_cases.quote_financing_option import QuoteFinancingOption
from dealership_lite.use_cases.quote_vehicle_loan import QuoteVehicleLoan


def get_vehicle_catalog_repository(
    settings: Settings = Depends(get_settings),
) -> Generator[VehicleCatalogRepository, None, None]:
    """
    Provides the configured vehicle catalog for a single request.

    With ``vehicle_catalog_repository=postgres`` the repository is bound to
    a fresh session that commits/rolls back and closes when the request ends.
    """
    if settings.vehicle_catalog_repository == "postgres":
        with get_session() as session:
            yield PostgresVehicleCatalogRepository(session=session)
    else:
        yield InMemoryVehicleCatalogRepository()


def get_financing_option_repository() -> FinancingOptionRepository:
    return InMemoryFinancingOptionRepository()


def get_compute_loan_quote_use_case() -> ComputeLoanQuote:
    return ComputeLoanQuote()


def get_list_vehicles_use_case(
    repository: VehicleCatalogRepository = Depends(get_vehicle_catalog_repository),
) -> ListVehicles:
    return ListVehicles(vehicle_catalog_repository=repository)


def get_vehicle_by_id_use_case(
    repository: VehicleCatalogRepository = Depends(get_vehicle_catalog_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_catalog_repository=repository)


def get_quote_vehicle_loan_use_case(
    repository: VehicleCatalogRepository = Depends(get_vehicle_catalog_repository),
    settings: Settings = Depends(get_settings),
) -> QuoteVehicleLoan:
    """Vehicle quotes take their prefill defaults from settings."""
    return QuoteVehicleLoan(
        vehicle_catalog_repository=repository,
        default_down_payment_ratio=settings.default_down_payment_ratio,
        default_term_years=settings.default_term_years,
        default_annual_rate_percent=settings.default_annual_rate_percent,
    )


def get_list_financing_options_use_case(
    repository: FinancingOptionRepository = Depends(get_financing_option_repository),
) -> ListFinancingOptions:
    return ListFinancingOptions(financing_option_repository=repository)


def get_quote_financing_option_use_case(
    repository: FinancingOptionRepository = Depends(get_financing_option_repository),
) -> QuoteFinancingOption:
    return QuoteFinancingOption(financing_option_repository=repository)
