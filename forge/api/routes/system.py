"""
Health, system information and metrics endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, Response

from forge.api.schemas.responses import HealthResponse, SystemInfoResponse
from forge.core.dependencies import get_metrics_collector
from forge.models.device import get_device_info
from forge.monitoring.metrics import MetricsCollector, MetricsSummary

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc).isoformat())


@router.get("/info", response_model=SystemInfoResponse, summary="Version, device and configuration")
async def system_info(request: Request) -> SystemInfoResponse:
    """Reports the version, the inference device and the settings that shape inference."""
    settings = request.app.state.settings
    return SystemInfoResponse(
        version=settings.server.app_version,
        device=get_device_info(settings.inference),
        config={
            "default_model": settings.models.default_model,
            "available_models": settings.models.available_models,
            "batch_size": settings.inference.batch_size,
            "max_length": settings.inference.max_length,
            "cache_enabled": settings.cache.cache_enabled,
            "metrics_enabled": settings.monitoring.enable_metrics,
        },
    )


@router.get("/metrics", response_model=MetricsSummary, summary="Inference metrics summary")
async def metrics_summary(
    metrics: MetricsCollector = Depends(get_metrics_collector),
) -> MetricsSummary:
    return metrics.get_summary()


@router.get("/metrics/prometheus", summary="Prometheus metrics")
async def prometheus_metrics(
    metrics: MetricsCollector = Depends(get_metrics_collector),
) -> Response:
    return Response(content=metrics.export_prometheus(), media_type=metrics.content_type())
