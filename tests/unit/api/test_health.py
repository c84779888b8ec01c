"""Tests for the health check endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.app.core.services import DbSessionService


def test_liveness(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_with_reachable_database(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ready",
        "checks": {"database": {"status": "healthy"}},
    }


def test_readiness_with_unreachable_database(
    client: TestClient,
    database_service: DbSessionService,
    monkeypatch: pytest.MonkeyPatch,
):
    monkeypatch.setattr(database_service, "health_check", lambda: False)

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"
    assert response.json()["checks"]["database"]["status"] == "unhealthy"
