"""
Application lifecycle event handlers for the TransformerForge inference service.

Startup builds the long-lived services and stores them on `app.state`;
shutdown releases them.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from forge.core.logging import get_logger
from forge.models.cache import PredictionCache
from forge.models.manager import ModelManager
from forge.monitoring.metrics import MetricsCollector
from forge.services.inference import InferenceService
from forge.utils.exceptions import ServiceError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manages the application's startup and shutdown.

    A failure to load the default model is logged and does not stop startup:
    the service comes up, and prediction requests report that no model is
    active until one is activated.

    Args:
        app: The FastAPI application. `app.state.settings` and
            `app.state.model_loader` are set by `create_app`.

    Yields:
        Control back to the application, which runs until it is terminated.
    """
    settings = app.state.settings

    logger.info(
        "Starting application",
        app_name=settings.server.app_name,
        version=settings.server.app_version,
        debug=settings.server.debug,
    )

    app.state.metrics = MetricsCollector() if settings.monitoring.enable_metrics else None

    cache = None
    if settings.cache.cache_enabled:
        cache = PredictionCache(
            max_entries=settings.cache.cache_max_entries,
            ttl_seconds=settings.cache.cache_ttl_seconds,
        )
    app.state.cache = cache

    model_manager = ModelManager(settings, loader=app.state.model_loader)
    app.state.model_manager = model_manager

    if settings.models.preload_default_model:
        try:
            model_manager.load_default_model()
        except ServiceError as e:
            logger.error(
                "Default model initialization failed",
                model_name=settings.models.default_model,
                error=str(e),
                exc_info=True,
            )

    app.state.inference_service = InferenceService(
        model_manager, settings, metrics=app.state.metrics, cache=cache
    )

    logger.info("Application startup complete", active_model=model_manager.get_active_model())

    yield

    logger.info("Application shutdown initiated")
    if cache is not None:
        cache.clear()
    app.state.inference_service = None
    app.state.model_manager = None
    logger.info("Application shutdown complete")
