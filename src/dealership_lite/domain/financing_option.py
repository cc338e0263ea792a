from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class FinancingOption:
    """
    A financing product offered by the dealership.

    Rates and down payments are percentages (8.5 means 8.5%), matching the
    units the loan calculator takes.
    """

    id: str
    name: str
    annual_rate_percent: Decimal
    max_term_years: int
    min_down_payment_percent: Decimal
    description: str = ""
    features: tuple[str, ...] = field(default_factory=tuple)
    requirements: tuple[str, ...] = field(default_factory=tuple)

    def min_down_payment_for(self, principal: Decimal) -> Decimal:
        """Smallest down payment this option accepts for a given price."""
        return principal * self.min_down_payment_percent / Decimal("100")
