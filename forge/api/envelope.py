"""
Envelope operations for the prediction endpoints.

Turns raw request bytes into typed request envelopes, builds response
envelopes from inference outcomes and serializes any envelope to JSON bytes.
Every function here is pure and holds no state, so they are safe to call from
concurrent requests.
"""

from typing import Any, Dict, List, Sequence, Type, TypeVar, Union

import orjson
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from forge.api.schemas.requests import BatchPredictRequest, PredictRequest
from forge.api.schemas.responses import (
    BatchPredictResponse,
    ErrorResponse,
    InferenceResult,
    PredictResponse,
)
from forge.utils.exceptions import DecodeError

RequestT = TypeVar("RequestT", bound=BaseModel)

RawBody = Union[bytes, bytearray, str]


def _error_details(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]


def _format_message(details: List[Dict[str, Any]]) -> str:
    parts = []
    for detail in details:
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def _decode(model: Type[RequestT], raw: RawBody) -> RequestT:
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        details = _error_details(e)
        malformed = any(detail["type"] == "json_invalid" for detail in details)
        if malformed:
            message = f"Malformed JSON body: {_format_message(details)}"
            raise DecodeError(message, errors=details, status_code=400) from e
        message = f"Invalid {model.__name__}: {_format_message(details)}"
        raise DecodeError(message, errors=details, status_code=422) from e


def parse_predict_request(raw: RawBody) -> PredictRequest:
    """Decodes a single-prediction request body.

    Args:
        raw: The request body as bytes or text.

    Returns:
        The decoded request. An absent or null `model` becomes None.

    Raises:
        DecodeError: If the body is not JSON (400) or does not match the
            request schema (422).
    """
    return _decode(PredictRequest, raw)


def parse_batch_request(raw: RawBody) -> BatchPredictRequest:
    """Decodes a batch-prediction request body.

    An empty `texts` array is accepted here; the inference engine decides
    whether an empty batch is an error.

    Raises:
        DecodeError: If the body is not JSON (400) or does not match the
            request schema (422).
    """
    return _decode(BatchPredictRequest, raw)


def build_success_response(result: InferenceResult) -> PredictResponse:
    return PredictResponse.ok(result)


def build_error_response(message: str) -> PredictResponse:
    return PredictResponse.failed(message)


def build_batch_success_response(results: Sequence[InferenceResult]) -> BatchPredictResponse:
    """Wraps batch results, keeping them in input order."""
    return BatchPredictResponse.ok(results)


def build_batch_error_response(message: str) -> BatchPredictResponse:
    return BatchPredictResponse.failed(message)


def build_transport_error(message: str, code: int) -> ErrorResponse:
    """Builds the envelope for failures that happen outside the engine.

    Raises:
        pydantic.ValidationError: If `code` does not fit in 16 unsigned bits.
    """
    return ErrorResponse(error=message, code=code)


def serialize(envelope: BaseModel) -> bytes:
    """Encodes any request, response or error envelope as JSON bytes.

    Absent optional fields are omitted rather than written as null.
    """
    return orjson.dumps(envelope.model_dump(mode="json"))


__all__ = [
    "parse_predict_request",
    "parse_batch_request",
    "build_success_response",
    "build_error_response",
    "build_batch_success_response",
    "build_batch_error_response",
    "build_transport_error",
    "serialize",
]
