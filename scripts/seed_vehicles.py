#!/usr/bin/env python3
"""
Seed the vehicles table with the showroom lineup.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Showroom vehicles keep their fixed IDs so quote links stay stable

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_vehicles.py
"""

from __future__ import annotations

import random
import sys
import uuid
from decimal import Decimal

from dealership_lite.adapters.in_memory_vehicle_catalog_repository import DEFAULT_VEHICLES
from dealership_lite.infra.db.models.vehicle import VehicleRow
from dealership_lite.infra.db.session import get_session


RANDOM_SEED = 42
NUM_EXTRA_VEHICLES = 12

# Base 2024 prices (EGP) for the rest of the lineup
LINEUP: dict[str, tuple[str, Decimal]] = {
    "Altroz": ("HATCHBACK", Decimal("620000")),
    "Harrier": ("SUV", Decimal("1350000")),
    "Safari": ("SUV", Decimal("1550000")),
    "Curvv": ("SUV", Decimal("980000")),
    "Xenon": ("PICKUP", Decimal("900000")),
}


def price_for(base_price: Decimal, year: int) -> Decimal:
    """Roughly 8% depreciation per model year, rounded to the nearest 5000."""
    years_old = max(0, 2024 - year)
    depreciated = base_price * (Decimal("1") - Decimal("0.08") * years_old)
    return (depreciated / 5000).quantize(Decimal("1")) * 5000


def generate_vehicle() -> VehicleRow:
    model = random.choice(sorted(LINEUP))
    category, base_price = LINEUP[model]
    year = random.choice([2021, 2022, 2023, 2024])

    return VehicleRow(
        make="Tata",
        model=model,
        year=year,
        price=price_for(base_price, year),
        category=category,
    )


def showroom_rows() -> list[VehicleRow]:
    return [
        VehicleRow(
            id=uuid.UUID(vehicle.id),
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            price=vehicle.price,
            category=vehicle.category,
        )
        for vehicle in DEFAULT_VEHICLES
    ]


def seed_vehicles(num_extra: int = NUM_EXTRA_VEHICLES, seed: int = RANDOM_SEED) -> None:
    random.seed(seed)

    with get_session() as session:
        deleted_count = session.query(VehicleRow).delete()
        print(f"Deleted {deleted_count} existing vehicles")

        rows = showroom_rows() + [generate_vehicle() for _ in range(num_extra)]
        session.add_all(rows)
        session.flush()

        print(f"Seeded {len(rows)} vehicles (seed={seed})")
        for row in rows[:5]:
            print(f"   {row.year} {row.make} {row.model} - EGP {row.price:,.0f}")


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
