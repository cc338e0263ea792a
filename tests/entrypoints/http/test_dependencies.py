"""
Unit tests for FastAPI dependency providers.

The vehicle catalog is chosen from settings; the PostgreSQL branch gets a
fresh session per request. Mocks stand in for the database.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock, Mock, patch

from dealership_lite.adapters.in_memory_financing_option_repository import (
    InMemoryFinancingOptionRepository,
)
from dealership_lite.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from dealership_lite.adapters.postgres_vehicle_catalog_repository import (
    PostgresVehicleCatalogRepository,
)
from dealership_lite.entrypoints.http.dependencies import (
    get_compute_loan_quote_use_case,
    get_financing_option_repository,
    get_list_financing_options_use_case,
    get_list_vehicles_use_case,
    get_quote_financing_option_use_case,
    get_quote_vehicle_loan_use_case,
    get_vehicle_by_id_use_case,
    get_vehicle_catalog_repository,
)
from dealership_lite.infra.config.settings import Settings
from dealership_lite.use_cases.compute_loan_quote import ComputeLoanQuote
from dealership_lite.use_cases.get_vehicle_by_id import GetVehicleById
from dealership_lite.use_cases.list_financing_options import ListFinancingOptions
from dealership_lite.use_cases.list_vehicles import ListVehicles
from dealership_lite.use_cases.quote_financing_option import QuoteFinancingOption
from dealership_lite.use_cases.quote_vehicle_loan import QuoteVehicleLoan, QuoteVehicleLoanRequest


# ==============================================================================
# get_vehicle_catalog_repository()
# ==============================================================================


def test_in_memory_catalog_by_default() -> None:
    with patch("dealership_lite.entrypoints.http.dependencies.get_session") as mock_get_session:
        generator = get_vehicle_catalog_repository(settings=Settings(_env_file=None))
        repository = next(generator)

        assert isinstance(repository, InMemoryVehicleCatalogRepository)
        mock_get_session.assert_not_called()


def test_postgres_catalog_uses_request_session() -> None:
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None
    settings = Settings(_env_file=None, vehicle_catalog_repository="postgres")

    with patch("dealership_lite.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_vehicle_catalog_repository(settings=settings)
        repository = next(generator)

        assert isinstance(repository, PostgresVehicleCatalogRepository)
        assert repository._session is mock_session
        mock_context_manager.__exit__.assert_not_called()

        # FastAPI resumes the generator after the response is sent
        try:
            next(generator)
        except StopIteration:
            pass

        mock_context_manager.__exit__.assert_called_once()


# ==============================================================================
# Use Case Providers
# ==============================================================================


def test_use_case_providers_wire_repositories() -> None:
    vehicles = InMemoryVehicleCatalogRepository()
    options = InMemoryFinancingOptionRepository()

    assert isinstance(get_compute_loan_quote_use_case(), ComputeLoanQuote)
    assert isinstance(get_list_vehicles_use_case(repository=vehicles), ListVehicles)
    assert isinstance(get_vehicle_by_id_use_case(repository=vehicles), GetVehicleById)
    assert isinstance(get_list_financing_options_use_case(repository=options), ListFinancingOptions)
    assert isinstance(get_quote_financing_option_use_case(repository=options), QuoteFinancingOption)
    assert isinstance(get_financing_option_repository(), InMemoryFinancingOptionRepository)


def test_vehicle_quote_defaults_come_from_settings() -> None:
    settings = Settings(
        _env_file=None,
        default_down_payment_ratio=Decimal("0.5"),
        default_term_years=2,
        default_annual_rate_percent=Decimal("0"),
    )

    use_case = get_quote_vehicle_loan_use_case(
        repository=InMemoryVehicleCatalogRepository(), settings=settings
    )
    quote = use_case.execute(
        QuoteVehicleLoanRequest(vehicle_id="00000000-0000-0000-0000-000000000002")
    ).quote

    assert isinstance(use_case, QuoteVehicleLoan)
    assert quote.down_payment == Decimal("325000")
    assert quote.term_years == 2
    assert quote.total_interest == 0


def test_providers_return_fresh_instances() -> None:
    assert get_compute_loan_quote_use_case() is not get_compute_loan_quote_use_case()
    assert get_financing_option_repository() is not get_financing_option_repository()
