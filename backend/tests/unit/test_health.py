from __future__ import annotations

from unittest.mock import AsyncMock, patch

from orgchart.services.employee_service import employee_service


def test_health_returns_status_and_services(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert "version" in data
    assert "services" in data
    assert "cosmos_db" in data["services"]


def test_health_not_configured_is_healthy(client):
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["cosmos_db"] == "not_configured"


def test_health_degraded_when_cosmos_fails(client):
    with (
        patch.object(employee_service, "initialized", True),
        patch.object(employee_service, "check_connection", AsyncMock(return_value=False)),
    ):
        response = client.get("/api/v1/health")

    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["cosmos_db"] == "error"


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
