from __future__ import annotations

from dealership_lite.infra.config.settings import get_settings


def database_url() -> str:
    url = get_settings().database_url

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url
