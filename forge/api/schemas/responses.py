"""
Response envelopes for API endpoints.

`PredictResponse` and `BatchPredictResponse` hold a two-variant outcome,
`Ok(value)` or `Err(message)`, so a response with both a result and an error
(or neither) cannot be built. The outcome is flattened to the
`success`/`result`/`error` wire layout only when the envelope is serialized,
and the same rule is enforced when a wire payload is decoded back.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from forge.api.schemas.requests import EnvelopeModel
from forge.models.device import DeviceInfo
from forge.models.registry import ModelStats

T = TypeVar("T")


class InferenceResult(BaseModel):
    """The outcome of running one text through a model.

    Attributes:
        label: The predicted label.
        score: The confidence of the predicted label (0.0 to 1.0).
        scores: Confidence for every label the model knows.
        model_name: The model that produced the prediction.
        inference_time_ms: Time spent producing this result.
        cached: Whether the result was served from the prediction cache.

    Example:
        ```json
        {
            "label": "POSITIVE",
            "score": 0.9823,
            "scores": {"POSITIVE": 0.9823, "NEGATIVE": 0.0177},
            "model_name": "distilbert-base-uncased-finetuned-sst-2-english",
            "inference_time_ms": 14.2,
            "cached": false
        }
        ```
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    label: str = Field(..., description="Predicted label", examples=["POSITIVE", "NEGATIVE"])
    score: float = Field(..., description="Confidence of the predicted label", ge=0.0, le=1.0)
    scores: Dict[str, float] = Field(
        default_factory=dict, description="Confidence for every label"
    )
    model_name: str = Field(..., description="Model used for inference")
    inference_time_ms: float = Field(..., description="Inference time in milliseconds", ge=0.0)
    cached: bool = Field(default=False, description="Served from the prediction cache")


class Ok(BaseModel, Generic[T]):
    """Successful outcome carrying a value."""

    model_config = ConfigDict(frozen=True)

    value: T


class Err(BaseModel):
    """Failed outcome carrying an error message."""

    model_config = ConfigDict(frozen=True)

    message: str


def _outcome_from_wire(data: Dict[str, Any], payload_field: str) -> Dict[str, Any]:
    """Maps a flat `success`/payload/`error` dict onto an outcome variant."""
    success = data.get("success")
    payload = data.get(payload_field)
    error = data.get("error")

    if success is True and payload is not None and error is None:
        return {"value": payload}
    if success is False and error is not None and payload is None:
        return {"message": error}
    raise ValueError(
        f"'success' must be true with only '{payload_field}' set, "
        "or false with only 'error' set"
    )


class PredictResponse(EnvelopeModel):
    """Response envelope for a single prediction.

    Build it with `PredictResponse.ok(result)` or `PredictResponse.failed(message)`.

    Example:
        ```json
        {"success": true, "result": {"label": "POSITIVE", "score": 0.98, ...}}
        {"success": false, "error": "Failed to switch model: ..."}
        ```
    """

    omit_when_absent = ("result", "error")

    outcome: Union[Ok[InferenceResult], Err] = Field(..., exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, dict) and "outcome" not in data:
            return {"outcome": _outcome_from_wire(data, "result")}
        return data

    @classmethod
    def ok(cls, result: InferenceResult) -> "PredictResponse":
        return cls(outcome=Ok[InferenceResult](value=result))

    @classmethod
    def failed(cls, message: str) -> "PredictResponse":
        return cls(outcome=Err(message=message))

    @computed_field  # type: ignore[misc]
    @property
    def success(self) -> bool:
        return isinstance(self.outcome, Ok)

    @computed_field  # type: ignore[misc]
    @property
    def result(self) -> Optional[InferenceResult]:
        return self.outcome.value if isinstance(self.outcome, Ok) else None

    @computed_field  # type: ignore[misc]
    @property
    def error(self) -> Optional[str]:
        return self.outcome.message if isinstance(self.outcome, Err) else None


class BatchPredictResponse(EnvelopeModel):
    """Response envelope for a batch prediction.

    On success `results` is aligned by index with the request's `texts`.
    """

    omit_when_absent = ("results", "error")

    outcome: Union[Ok[Tuple[InferenceResult, ...]], Err] = Field(..., exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, dict) and "outcome" not in data:
            return {"outcome": _outcome_from_wire(data, "results")}
        return data

    @classmethod
    def ok(cls, results: Sequence[InferenceResult]) -> "BatchPredictResponse":
        return cls(outcome=Ok[Tuple[InferenceResult, ...]](value=tuple(results)))

    @classmethod
    def failed(cls, message: str) -> "BatchPredictResponse":
        return cls(outcome=Err(message=message))

    @computed_field  # type: ignore[misc]
    @property
    def success(self) -> bool:
        return isinstance(self.outcome, Ok)

    @computed_field  # type: ignore[misc]
    @property
    def results(self) -> Optional[Tuple[InferenceResult, ...]]:
        return self.outcome.value if isinstance(self.outcome, Ok) else None

    @computed_field  # type: ignore[misc]
    @property
    def error(self) -> Optional[str]:
        return self.outcome.message if isinstance(self.outcome, Err) else None


class ErrorResponse(EnvelopeModel):
    """Standalone envelope for failures that happen before a request envelope exists.

    Used for malformed bodies, unknown routes and unhandled server errors.
    `code` holds an HTTP-style status code.

    Example:
        ```json
        {"error": "Malformed JSON body", "code": 400}
        ```
    """

    error: str = Field(..., description="Human-readable error message")
    code: int = Field(..., description="HTTP-style status code", ge=0, le=65535)


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str = Field(..., description="Service status", examples=["healthy"])
    timestamp: str = Field(..., description="RFC 3339 timestamp of the check")


class ModelListResponse(BaseModel):
    """Names of the models currently loaded."""

    models: List[str] = Field(..., description="Loaded model names")


class ActiveModelResponse(EnvelopeModel):
    """The model used when a request names none."""

    omit_when_absent = ("message",)

    active_model: Optional[str] = Field(..., description="Active model name, if any")
    message: Optional[str] = Field(default=None, description="Explanation when no model is active")


class ModelActivationResponse(EnvelopeModel):
    """Outcome of switching the active model."""

    omit_when_absent = ("message", "error")

    success: bool
    message: Optional[str] = None
    error: Optional[str] = None


class ModelStatsResponse(BaseModel):
    """Load time and inference counts of every loaded model."""

    model_config = ConfigDict(protected_namespaces=())

    model_stats: List[ModelStats] = Field(..., description="Per-model statistics")


class SystemInfoResponse(BaseModel):
    """Version, device and the configuration values that shape inference."""

    version: str
    device: DeviceInfo
    config: Dict[str, Any]
