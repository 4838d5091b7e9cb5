"""
Request logging middleware.

Emits one access event per request once the response status is known. The
event's level follows the status class, and probe traffic (health checks and
Prometheus scrapes) is logged at debug level so it does not drown out
inference requests.
"""

import time
from typing import Callable, FrozenSet

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from forge.core.logging import get_logger

logger = get_logger(__name__)

PROBE_PATHS: FrozenSet[str] = frozenset({"/health", "/metrics/prometheus"})


def access_log_level(path: str, status_code: int) -> str:
    """Chooses the log method for a finished request."""
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    if path in PROBE_PATHS:
        return "debug"
    return "info"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes an access log event with method, path, status and latency."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request raised",
                http_method=request.method,
                http_path=path,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                error_type=type(e).__name__,
            )
            raise

        log = getattr(logger, access_log_level(path, response.status_code))
        log(
            "Request handled",
            http_method=request.method,
            http_path=path,
            http_status=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            client_ip=request.client.host if request.client else None,
        )
        return response
