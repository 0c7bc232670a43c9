"""Tests for service errors and the DRF exception handler."""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import ValidationError

from core.exceptions import (
    ConflictError,
    ErrorCode,
    NotFoundError,
    service_exception_handler,
)


class TestServiceErrors:
    """Tests for the ServiceError hierarchy."""

    def test_codes_and_statuses(self) -> None:
        """Each error carries its code and HTTP status."""
        assert ConflictError("taken").code is ErrorCode.CONFLICT
        assert ConflictError("taken").http_status == status.HTTP_409_CONFLICT
        assert NotFoundError("gone").code is ErrorCode.NOT_FOUND
        assert NotFoundError("gone").http_status == status.HTTP_404_NOT_FOUND

    def test_str(self) -> None:
        """String form is ``code: message``."""
        assert str(NotFoundError("User missing")) == "not_found: User missing"


class TestServiceExceptionHandler:
    """Tests for service_exception_handler."""

    def test_renders_service_errors(self) -> None:
        """Service errors become JSON responses with their status."""
        response = service_exception_handler(ConflictError("Email already exists"), {"view": None})

        assert response is not None
        assert response.status_code == 409
        assert response.data == {"detail": "Email already exists", "code": "conflict"}

    def test_delegates_other_errors(self) -> None:
        """DRF errors keep DRF's default handling."""
        response = service_exception_handler(ValidationError({"email": ["bad"]}), {"view": None})

        assert response is not None
        assert response.status_code == 400

    def test_unhandled_errors_propagate(self) -> None:
        """Unknown exceptions are left for Django to handle."""
        assert service_exception_handler(RuntimeError("db down"), {"view": None}) is None
