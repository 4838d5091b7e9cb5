"""
Pydantic schemas for API requests and responses.
"""

from forge.api.schemas.requests import BatchPredictRequest, EnvelopeModel, PredictRequest
from forge.api.schemas.responses import (
    ActiveModelResponse,
    BatchPredictResponse,
    Err,
    ErrorResponse,
    HealthResponse,
    InferenceResult,
    ModelActivationResponse,
    ModelListResponse,
    ModelStatsResponse,
    Ok,
    PredictResponse,
    SystemInfoResponse,
)

__all__ = [
    "EnvelopeModel",
    "PredictRequest",
    "BatchPredictRequest",
    "InferenceResult",
    "Ok",
    "Err",
    "PredictResponse",
    "BatchPredictResponse",
    "ErrorResponse",
    "HealthResponse",
    "ModelListResponse",
    "ActiveModelResponse",
    "ModelActivationResponse",
    "ModelStatsResponse",
    "SystemInfoResponse",
]
