from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    make: str
    model: str
    year: int
    price: Decimal
    category: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.make} {self.model} {self.year}"
