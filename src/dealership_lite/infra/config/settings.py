"""Application settings."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration read from the environment (or a local .env file)."""

    log_level: str = "INFO"

    vehicle_catalog_repository: Literal["in_memory", "postgres"] = "in_memory"
    database_url: str = ""  # Required when vehicle_catalog_repository=postgres
    db_pool_size: int = 10
    db_max_overflow: int = 20

    # Financing form defaults applied when a vehicle is selected
    default_down_payment_ratio: Decimal = Field(default=Decimal("0.20"), ge=0, le=1)
    default_term_years: int = Field(default=5, ge=1, le=7)
    default_annual_rate_percent: Decimal = Field(default=Decimal("8.5"), ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process; tests call ``get_settings.cache_clear()``."""
    return Settings()
