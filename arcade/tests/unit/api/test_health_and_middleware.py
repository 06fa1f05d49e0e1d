"""
Tests for the health endpoint and the correlation middleware.
"""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


def test_health_without_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "not configured"


def test_health_with_database(app):
    database = AsyncMock()
    app.state.database = database

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"
    database.ping.assert_awaited_once()


def test_health_database_unreachable(app):
    database = AsyncMock()
    database.ping.side_effect = OperationalError("SELECT 1", {}, ConnectionRefusedError("refused"))
    app.state.database = database

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {
        "status": "unhealthy",
        "timestamp": response.json()["timestamp"],
        "database": "unavailable",
    }


def test_correlation_id_is_generated(client, storages):
    storages.rooms.list.return_value = []

    response = client.get("/v1/rooms")

    assert response.headers["X-Correlation-ID"]


def test_correlation_id_is_echoed(client, storages):
    """Test that a client-supplied correlation id is returned unchanged."""
    storages.rooms.list.return_value = []

    response = client.get("/v1/rooms", headers={"X-Correlation-ID": "trace-123"})

    assert response.headers["X-Correlation-ID"] == "trace-123"


def test_error_responses_carry_correlation_id(client):
    response = client.get("/v1/rooms/not-a-uuid", headers={"X-Correlation-ID": "trace-456"})

    assert response.status_code == 400
    assert response.headers["X-Correlation-ID"] == "trace-456"
