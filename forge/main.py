"""
Application entrypoint for the TransformerForge inference service.

This module is the application factory: it creates the FastAPI application,
installs middleware and exception handlers, and includes the API routers.
Every error that escapes a route is answered with an `ErrorResponse`
envelope, never with the framework's default error body.
"""

from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from forge.api.envelope import build_transport_error, serialize
from forge.api.middleware import (
    CorrelationIdMiddleware,
    MetricsMiddleware,
    RequestLoggingMiddleware,
)
from forge.api.routes import router
from forge.core.config import Settings, get_settings
from forge.core.events import lifespan
from forge.core.logging import get_logger, setup_structured_logging
from forge.models.factory import ModelFactory, ModelLoader
from forge.utils.exceptions import DecodeError, ServiceError

setup_structured_logging()
logger = get_logger(__name__)


def _error_response(message: str, code: int) -> Response:
    return Response(
        content=serialize(build_transport_error(message, code)),
        status_code=code,
        media_type="application/json",
    )


def create_app(
    settings: Optional[Settings] = None, model_loader: Optional[ModelLoader] = None
) -> FastAPI:
    """Creates and configures a FastAPI application instance.

    Middleware is added innermost first, so the request id middleware runs
    first and every later log entry carries the request id.

    Args:
        settings: Settings to run with. Defaults to the process-wide settings.
        model_loader: Turns a model name into a loaded model. Defaults to
            `ModelFactory`, which loads Transformers pipelines.

    Returns:
        The configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.server.app_name,
        description="HTTP inference server for Hugging Face Transformers models.",
        version=settings.server.app_version,
        debug=settings.server.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.model_loader = model_loader or ModelFactory.loader(settings)

    app.add_middleware(MetricsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    @app.exception_handler(DecodeError)
    async def decode_error_handler(request: Request, exc: DecodeError) -> Response:
        """Answers undecodable request bodies with 400 (not JSON) or 422 (wrong shape)."""
        logger.warning(
            "Request body rejected",
            path=request.url.path,
            status_code=exc.status_code,
            errors=exc.errors,
        )
        return _error_response(str(exc), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        logger.warning("Request validation failed", path=request.url.path, errors=exc.errors())
        return _error_response("Request validation failed", 422)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        """Answers unknown routes and disallowed methods with an `ErrorResponse`."""
        response = _error_response(str(exc.detail), exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> Response:
        logger.warning(
            "Service error occurred",
            error=str(exc),
            error_code=exc.code,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return _error_response(str(exc), exc.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> Response:
        logger.error("Unhandled exception", path=request.url.path, error=str(exc), exc_info=True)
        return _error_response("Internal server error", 500)

    app.include_router(router)

    @app.get("/", tags=["root"])
    async def root() -> dict:
        """Provides basic service information."""
        return {
            "service": settings.server.app_name,
            "version": settings.server.app_version,
            "status": "operational",
            "health_url": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "forge.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.debug,
        log_level=settings.monitoring.log_level.lower(),
        workers=1 if settings.server.debug else settings.server.workers,
    )
