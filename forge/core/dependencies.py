"""
Dependency injection for the TransformerForge inference service.

The lifespan handler stores the long-lived services on `app.state`; the
functions here hand them to route handlers. Routes depend on the interface
types, so tests can swap in any implementation.
"""

from typing import Optional, TypeVar

from fastapi import Request

from forge.interfaces import IInferenceEngine
from forge.models.manager import ModelManager
from forge.monitoring.metrics import MetricsCollector
from forge.utils.exceptions import ServiceUnavailableError

T = TypeVar("T")


def require_service(service: Optional[T], service_name: str) -> T:
    """Returns `service`, or raises when it was never started.

    Args:
        service: The service instance to check.
        service_name: Name used in the error message.

    Raises:
        ServiceUnavailableError: If the service is not available (503).
    """
    if service is None:
        raise ServiceUnavailableError(
            f"Service '{service_name}' is not available",
            code="SERVICE_NOT_STARTED",
            context={"service": service_name},
        )
    return service


def get_inference_engine(request: Request) -> IInferenceEngine:
    return require_service(getattr(request.app.state, "inference_service", None), "inference")


def get_model_manager(request: Request) -> ModelManager:
    return require_service(getattr(request.app.state, "model_manager", None), "model_manager")


def get_metrics_collector(request: Request) -> MetricsCollector:
    return require_service(getattr(request.app.state, "metrics", None), "metrics")
