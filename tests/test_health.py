"""Tests for health check endpoint."""

from unittest.mock import MagicMock, patch

import pytest
from django.test import Client

from core.config import SchedulerSettings, Settings


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for the health check endpoint."""

    def test_health_check_returns_200(self, test_client: Client) -> None:
        """Health check endpoint should return 200 when healthy."""
        response = test_client.get("/health/")

        assert response.status_code == 200
        assert response["Content-Type"] == "application/json"

    def test_health_check_reports_checks(self, test_client: Client) -> None:
        """Health check response should contain database and scheduler checks."""
        config = Settings(scheduler=SchedulerSettings(autostart=False))
        with patch("core.health.get_settings", return_value=config):
            data = test_client.get("/health/").json()

        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"
        assert data["checks"]["scheduler"]["status"] == "disabled"

    def test_health_check_returns_503_when_database_unhealthy(self, test_client: Client) -> None:
        """Health check should return 503 when database is unhealthy."""
        with patch("core.health.connection") as mock_connection:
            mock_connection.cursor.side_effect = Exception("Database error")
            response = test_client.get("/health/")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "degraded"
        assert "Database error" in data["checks"]["database"]["error"]

    def test_health_check_returns_503_when_scheduler_stopped(self, test_client: Client) -> None:
        """An enabled scheduler that is not running degrades health."""
        config = Settings(scheduler=SchedulerSettings(autostart=True))
        registry = MagicMock(is_running=False)

        with (
            patch("core.health.get_settings", return_value=config),
            patch("core.health.get_cron_registry", return_value=registry),
        ):
            response = test_client.get("/health/")

        assert response.status_code == 503
        assert response.json()["checks"]["scheduler"]["status"] == "unhealthy"

    def test_response_carries_request_id(self, test_client: Client) -> None:
        """The request id header is echoed back."""
        response = test_client.get("/health/", headers={"X-Request-ID": "req-42"})

        assert response["X-Request-ID"] == "req-42"
