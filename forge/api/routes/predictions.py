"""
Prediction endpoints.

Request bodies are read as raw bytes and decoded by the envelope layer, so a
malformed body surfaces as a `DecodeError` (handled by the application's
exception handlers) rather than FastAPI's default validation response. Engine
failures never escape as exceptions: they are returned as failed envelopes
with the error's status code.
"""

import asyncio

from fastapi import APIRouter, Depends, Request, Response

from forge.api.envelope import (
    build_batch_error_response,
    build_batch_success_response,
    build_error_response,
    build_success_response,
    parse_batch_request,
    parse_predict_request,
    serialize,
)
from forge.api.schemas.requests import BatchPredictRequest, PredictRequest
from forge.api.schemas.responses import BatchPredictResponse, PredictResponse
from forge.core.dependencies import get_inference_engine
from forge.core.logging import get_contextual_logger
from forge.interfaces import IInferenceEngine
from forge.utils.exceptions import ServiceError

router = APIRouter()

JSON_MEDIA_TYPE = "application/json"


def _request_body_schema(model) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {JSON_MEDIA_TYPE: {"schema": model.model_json_schema()}},
        }
    }


@router.post(
    "/predict",
    response_model=PredictResponse,
    summary="Run inference on one text",
    openapi_extra=_request_body_schema(PredictRequest),
)
async def predict(
    request: Request,
    engine: IInferenceEngine = Depends(get_inference_engine),
) -> Response:
    """Runs one text through the requested model, or the active model.

    Returns 200 with `{"success": true, "result": ...}`, or the engine
    error's status with `{"success": false, "error": ...}`.
    """
    payload = parse_predict_request(await request.body())

    logger = get_contextual_logger(
        __name__, endpoint="predict", text_length=len(payload.text), model=payload.model
    )
    logger.info("Starting prediction", operation="predict_start")

    try:
        result = await asyncio.to_thread(engine.infer, payload.text, payload.model)
    except ServiceError as e:
        logger.warning(
            "Prediction failed",
            operation="predict_error",
            error=str(e),
            error_code=e.code,
            status_code=e.status_code,
        )
        return Response(
            content=serialize(build_error_response(str(e))),
            status_code=e.status_code,
            media_type=JSON_MEDIA_TYPE,
        )

    logger.info(
        "Prediction completed successfully",
        operation="predict_success",
        label=result.label,
        score=result.score,
        cached=result.cached,
    )
    return Response(
        content=serialize(build_success_response(result)),
        media_type=JSON_MEDIA_TYPE,
        headers={"X-Inference-Time-MS": f"{result.inference_time_ms:.2f}"},
    )


@router.post(
    "/predict/batch",
    response_model=BatchPredictResponse,
    summary="Run inference on an ordered batch of texts",
    openapi_extra=_request_body_schema(BatchPredictRequest),
)
async def predict_batch(
    request: Request,
    engine: IInferenceEngine = Depends(get_inference_engine),
) -> Response:
    """Runs a batch of texts through one model.

    On success `results[i]` belongs to `texts[i]`. Any failure fails the whole
    batch with a single error message.
    """
    payload = parse_batch_request(await request.body())

    logger = get_contextual_logger(
        __name__, endpoint="predict_batch", batch_size=len(payload.texts), model=payload.model
    )
    logger.info("Starting batch prediction", operation="batch_start")

    try:
        results = await asyncio.to_thread(engine.infer_batch, payload.texts, payload.model)
    except ServiceError as e:
        logger.warning(
            "Batch prediction failed",
            operation="batch_error",
            error=str(e),
            error_code=e.code,
            status_code=e.status_code,
        )
        return Response(
            content=serialize(build_batch_error_response(str(e))),
            status_code=e.status_code,
            media_type=JSON_MEDIA_TYPE,
        )

    logger.info("Batch prediction completed successfully", operation="batch_success")
    return Response(
        content=serialize(build_batch_success_response(results)),
        media_type=JSON_MEDIA_TYPE,
    )
