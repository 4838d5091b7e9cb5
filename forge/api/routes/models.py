"""
Model management endpoints.
"""

import asyncio

from fastapi import APIRouter, Depends, Response

from forge.api.envelope import serialize
from forge.api.schemas.responses import (
    ActiveModelResponse,
    ModelActivationResponse,
    ModelListResponse,
    ModelStatsResponse,
)
from forge.core.dependencies import get_model_manager
from forge.core.logging import get_logger
from forge.models.manager import ModelManager
from forge.utils.exceptions import ServiceError

logger = get_logger(__name__)

router = APIRouter(prefix="/models")


@router.get("", response_model=ModelListResponse, summary="List loaded models")
async def list_models(manager: ModelManager = Depends(get_model_manager)) -> ModelListResponse:
    return ModelListResponse(models=manager.list_models())


@router.get("/active", response_model=ActiveModelResponse, summary="Show the active model")
async def active_model(manager: ModelManager = Depends(get_model_manager)) -> Response:
    """Returns the model used when a request names none."""
    name = manager.get_active_model()
    if name is None:
        envelope = ActiveModelResponse(active_model=None, message="No active model")
    else:
        envelope = ActiveModelResponse(active_model=name)
    return Response(content=serialize(envelope), media_type="application/json")


@router.get("/stats", response_model=ModelStatsResponse, summary="Per-model statistics")
async def model_stats(manager: ModelManager = Depends(get_model_manager)) -> ModelStatsResponse:
    return ModelStatsResponse(model_stats=manager.registry.get_all_stats())


@router.post(
    "/{name:path}/activate",
    response_model=ModelActivationResponse,
    summary="Make a model the active model",
)
async def activate_model(
    name: str, manager: ModelManager = Depends(get_model_manager)
) -> Response:
    """Loads the model if needed and makes it the active model.

    Model names may contain `/` (hub organisation prefixes). Failures return
    400 with the reason and leave the previous active model in place.
    """
    try:
        await asyncio.to_thread(manager.switch_model, name)
    except ServiceError as e:
        logger.warning("Model activation failed", model_name=name, error=str(e))
        envelope = ModelActivationResponse(success=False, error=f"Failed to switch model: {e}")
        return Response(content=serialize(envelope), status_code=400, media_type="application/json")

    envelope = ModelActivationResponse(success=True, message=f"Switched to model: {name}")
    return Response(content=serialize(envelope), media_type="application/json")
