"""Utility package: exception hierarchy shared across the service."""

from forge.utils.exceptions import (
    DecodeError,
    EmptyBatchError,
    InvalidModelError,
    ModelInferenceError,
    ModelLoadError,
    ModelNotFoundError,
    ModelNotLoadedError,
    ServiceError,
    TextEmptyError,
    ValidationError,
)

__all__ = [
    "DecodeError",
    "EmptyBatchError",
    "InvalidModelError",
    "ModelInferenceError",
    "ModelLoadError",
    "ModelNotFoundError",
    "ModelNotLoadedError",
    "ServiceError",
    "TextEmptyError",
    "ValidationError",
]
