from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fieldops_finance.entrypoints.http.routes.health import router


@pytest.fixture
def client() -> TestClient:
    test_app = FastAPI()
    test_app.include_router(router)
    return TestClient(test_app, raise_server_exceptions=False)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_endpoint_needs_no_database(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """Liveness must not depend on DATABASE_URL being configured."""
    monkeypatch.delenv("DATABASE_URL", raising=False)

    assert client.get("/health").status_code == 200


def test_health_is_get_only(client: TestClient) -> None:
    assert client.post("/health").status_code == 405
