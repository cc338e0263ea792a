from __future__ import annotations

from decimal import Decimal

from dealership_lite.domain.financing_option import FinancingOption
from dealership_lite.ports.financing_option_repository import FinancingOptionRepository


DEFAULT_FINANCING_OPTIONS: tuple[FinancingOption, ...] = (
    FinancingOption(
        id="direct-personal",
        name="Direct personal financing",
        annual_rate_percent=Decimal("8.5"),
        max_term_years=7,
        min_down_payment_percent=Decimal("20"),
        description="Direct personal financing with flexible terms and competitive rates",
        features=(
            "Repayment period of up to 7 years",
            "Fixed monthly installments",
            "No guarantor required",
            "Fast approval",
        ),
        requirements=(
            "Steady monthly income",
            "Valid national ID card",
            "Recent utility bills",
            "Credit report",
        ),
    ),
    FinancingOption(
        id="new-car",
        name="New car financing",
        annual_rate_percent=Decimal("7.5"),
        max_term_years=5,
        min_down_payment_percent=Decimal("15"),
        description="Financing dedicated to new cars at the best rates",
        features=(
            "Reduced interest rates",
            "Repayment period of up to 5 years",
            "Comprehensive vehicle insurance",
            "One year of free maintenance",
        ),
        requirements=(
            "Monthly income of 5000 EGP or more",
            "Documented source of income",
            "Good credit history",
            "Valid employment contract",
        ),
    ),
    FinancingOption(
        id="islamic",
        name="Islamic financing",
        annual_rate_percent=Decimal("6.5"),
        max_term_years=6,
        min_down_payment_percent=Decimal("25"),
        description="Sharia-compliant financing",
        features=(
            "No usury-based interest",
            "Murabaha purchase and sale",
            "Fair and equitable terms",
            "Transparent transactions",
        ),
        requirements=(
            "Recent salary certificate",
            "Active bank account",
            "Proof of residence",
            "Halal source of income",
        ),
    ),
    FinancingOption(
        id="employee",
        name="Employee financing",
        annual_rate_percent=Decimal("6.0"),
        max_term_years=6,
        min_down_payment_percent=Decimal("10"),
        description="Financing for employees on special terms",
        features=(
            "Preferential interest rates",
            "Fast application processing",
            "Reduced monthly payments",
            "Free health insurance",
        ),
        requirements=(
            "Approval letter from employer",
            "Salary statement for the last 6 months",
            "Employee ID card",
            "Proof of address",
        ),
    ),
)


class InMemoryFinancingOptionRepository(FinancingOptionRepository):
    """Financing products are a short, static list; they live in code."""

    def __init__(self, options: list[FinancingOption] | None = None) -> None:
        self._options = list(DEFAULT_FINANCING_OPTIONS) if options is None else options

    def list_options(self) -> list[FinancingOption]:
        return list(self._options)

    def get_by_id(self, option_id: str) -> FinancingOption | None:
        return next((option for option in self._options if option.id == option_id), None)
