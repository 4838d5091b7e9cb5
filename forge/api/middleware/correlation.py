"""
Request id middleware.

Every request gets an id, taken from the `X-Request-ID` header when the client
sends one and generated otherwise. The id is bound to the logging context for
the lifetime of the request and echoed back on the response.
"""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from forge.core.logging import (
    clear_request_id,
    generate_request_id,
    get_logger,
    set_request_id,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds a request id to each request and its log entries.

    Attributes:
        header_name: The request and response header carrying the id.
    """

    def __init__(self, app, header_name: str = REQUEST_ID_HEADER):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name)
        if not request_id:
            request_id = generate_request_id()
            logger.debug("Generated new request id", request_id=request_id, path=request.url.path)

        set_request_id(request_id)
        try:
            response = await call_next(request)
            response.headers[self.header_name] = request_id
            return response
        except Exception as e:
            logger.error(
                "Request processing failed",
                path=request.url.path,
                method=request.method,
                error=str(e),
                exc_info=True,
            )
            raise
        finally:
            clear_request_id()
