"""DRF exception handler producing the API's ``{"message": ...}`` error body.

Domain errors are translated by the views themselves; this handler only
covers framework-level failures (malformed JSON, unsupported methods,
unsupported media types) so every error response shares one shape.
"""

from __future__ import annotations

from typing import Any

import structlog
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Reshape DRF's ``{"detail": ...}`` payload into ``{"message": ...}``.

    Returns ``None`` for exceptions DRF does not handle, letting Django
    produce its regular 500 response.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    message = str(detail) if detail is not None else str(response.data)
    logger.warning(
        "api.request_rejected",
        status_code=response.status_code,
        error_type=type(exc).__name__,
    )
    response.data = {"message": message}
    return response
