from fastapi import FastAPI

from dealership_lite.entrypoints.http.exception_handlers import register_exception_handlers
from dealership_lite.entrypoints.http.routes.financing import router as financing_router
from dealership_lite.entrypoints.http.routes.health import router as health_router
from dealership_lite.entrypoints.http.routes.vehicles import router as vehicles_router
from dealership_lite.infra.config.settings import get_settings
from dealership_lite.infra.logging.logging_config import configure_logging


def build_app() -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Dealership Lite API",
        description="""
        Car dealership financing API.

        ## Features
        - Calculate fixed-rate loan quotes
        - Browse financing options and quote under them
        - Prefill a quote from a catalog vehicle

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(financing_router, prefix="/v1")
    app.include_router(vehicles_router, prefix="/v1")

    return app


app = build_app()
