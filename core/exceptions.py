"""
Service error types and their HTTP mapping.

Services raise these exceptions for the two failure classes callers are
expected to handle: a unique key already taken and a missing record.
Everything else propagates unclassified.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """Error codes for service errors."""

    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


class ServiceError(Exception):
    """
    Base exception for service errors.

    Attributes:
        code: Error code identifying the type of error.
        message: Human-readable error message.
    """

    code: ErrorCode
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"


class ConflictError(ServiceError):
    """A unique value (email, username) is already taken."""

    code = ErrorCode.CONFLICT
    http_status = status.HTTP_409_CONFLICT


class NotFoundError(ServiceError):
    """The requested record does not exist."""

    code = ErrorCode.NOT_FOUND
    http_status = status.HTTP_404_NOT_FOUND


def service_exception_handler(exc: Exception, context: Mapping[str, Any]) -> Response | None:
    """
    DRF exception handler that renders ServiceError subclasses.

    Args:
        exc: The raised exception.
        context: DRF handler context (view, request, ...).

    Returns:
        A Response for service errors, otherwise DRF's default handling.
    """
    if isinstance(exc, ServiceError):
        logger.info(
            "Service error",
            code=exc.code.value,
            error=exc.message,
            view=type(context.get("view")).__name__,
        )
        return Response(
            {"detail": exc.message, "code": exc.code.value},
            status=exc.http_status,
        )
    return exception_handler(exc, context)
