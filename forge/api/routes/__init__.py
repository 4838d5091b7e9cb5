"""
API route handlers.
"""

from fastapi import APIRouter

from forge.api.routes import models, predictions, system

router = APIRouter()

router.include_router(system.router, tags=["System"])
router.include_router(predictions.router, tags=["Predictions"])
router.include_router(models.router, tags=["Models"])

__all__ = ["router"]
