import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger()

API_PREFIX = "/api/"


class CorrelationIdMiddleware:
    """Bind a correlation ID to every log line of a request.

    The ID comes from the X-Request-ID header, or a new UUID4 when absent,
    and is echoed back in the X-Request-ID response header.

    ``request_started`` is only logged for API calls so health probes do
    not flood the log; ``request_finished`` is logged for every request
    together with its duration in milliseconds.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.path,
        )

        if request.path.startswith(API_PREFIX):
            logger.info("request_started")

        started = time.perf_counter()
        response = self.get_response(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        logger.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        response["X-Request-ID"] = cid
        return response
