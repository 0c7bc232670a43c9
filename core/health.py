"""Health check endpoint for monitoring."""

from django.db import connection
from django.http import JsonResponse

from core.config import get_settings
from core.logging import get_logger
from services.scheduling.registry import get_cron_registry

logger = get_logger(__name__)

# Statuses that do not degrade the overall health
_OK = {"healthy", "disabled"}


def health_check(_request: object) -> JsonResponse:
    """
    Health check endpoint.

    Reports database connectivity and whether the reminder scheduler is
    running.

    Args:
        _request: Django HTTP request object (unused but required by Django).

    Returns:
        JsonResponse with health status.
    """
    checks: dict[str, dict[str, str]] = {
        "database": _check_database(),
        "scheduler": _check_scheduler(),
    }

    all_healthy = all(check.get("status") in _OK for check in checks.values())

    health_status = {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }

    return JsonResponse(
        health_status,
        status=200 if all_healthy else 503,
    )


def _check_database() -> dict[str, str]:
    """Check database connectivity."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        return {"status": "healthy"}
    except Exception as e:
        logger.error("Database health check failed", database=get_settings().database.safe_url, error=str(e))
        return {"status": "unhealthy", "error": str(e)}


def _check_scheduler() -> dict[str, str]:
    """Check that the background scheduler is running."""
    if not get_settings().scheduler.autostart:
        return {"status": "disabled"}
    if get_cron_registry().is_running:
        return {"status": "healthy"}
    return {"status": "unhealthy", "error": "scheduler is not running"}
