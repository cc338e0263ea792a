from fastapi import FastAPI
from fastapi.testclient import TestClient

from dealership_lite.entrypoints.http.routes.health import router


def test_health_returns_ok() -> None:
    app = FastAPI()
    app.include_router(router)

    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
