"""
HTTP metrics middleware.

Counts requests by method, path and status code in the application's
`MetricsCollector`.
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records every HTTP request in `app.state.metrics`.

    The Prometheus scrape endpoint is not counted. Requests that arrive before
    the collector exists (or after it is gone) pass through unrecorded.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path == "/metrics/prometheus":
            return await call_next(request)

        metrics = getattr(request.app.state, "metrics", None)
        try:
            response = await call_next(request)
        except Exception:
            if metrics is not None:
                metrics.record_http_request(request.method, request.url.path, 500)
            raise

        if metrics is not None:
            metrics.record_http_request(request.method, request.url.path, response.status_code)
        return response
