"""Request middleware binding structured logging context."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from core.logging import bind_context, clear_context

if TYPE_CHECKING:
    from collections.abc import Callable

    from django.http import HttpRequest, HttpResponse


class RequestContextMiddleware:
    """Attach a request id and path to every log line of a request."""

    header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(self.header) or uuid.uuid4().hex
        clear_context()
        bind_context(request_id=request_id, path=request.path, method=request.method)
        try:
            response = self.get_response(request)
        finally:
            clear_context()
        response[self.header] = request_id
        return response
