"""
Custom exception hierarchy for the TransformerForge inference service.

Every error raised inside the service derives from `ServiceError`, which
carries an HTTP-style status code, a machine-readable code and optional
context. The HTTP layer turns these into response envelopes, so no exception
defined here ever reaches a client as a raw traceback.
"""

from typing import Any, Dict, List, Optional


class ServiceError(Exception):
    """The base exception class for all custom exceptions in this service.

    Attributes:
        status_code: The default HTTP status code for this type of error.
        code: A string-based error code for programmatic identification.
        context: Optional additional information about the error.
    """

    status_code: int = 500

    def __init__(self, message: str, code: str = "E0000", context: Optional[Any] = None):
        """Initializes the ServiceError.

        Args:
            message: A human-readable message describing the error.
            code: A unique, machine-readable code for the error.
            context: An optional dictionary for providing extra context.
        """
        super().__init__(message)
        self.code = code
        self.context = context


class ValidationError(ServiceError):
    """Raised when input data fails validation checks (400 Bad Request)."""

    status_code = 400


class NotFoundError(ServiceError):
    """Raised when a requested resource is not found (404 Not Found)."""

    status_code = 404


class ServiceUnavailableError(ServiceError):
    """Raised when the service or one of its components is unavailable."""

    status_code = 503


# --- Envelope decoding ---


class DecodeError(ValidationError):
    """Raised when raw request bytes cannot be decoded into a request envelope.

    A body that is not valid JSON maps to 400; valid JSON that does not match
    the request schema maps to 422. The structured `errors` list mirrors the
    `loc`/`msg`/`type` triples reported by pydantic.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        status_code: int = 422,
    ):
        super().__init__(message, code="DECODE_ERROR", context={"errors": errors or []})
        self.errors = errors or []
        self.status_code = status_code


# --- ML-specific exceptions ---


class ModelError(ServiceError):
    """A base class for all exceptions related to ML models."""

    status_code = 500


class ModelNotLoadedError(ModelError):
    """Raised when an attempt is made to use a model that is not loaded."""

    status_code = 503

    def __init__(self, model_name: Optional[str] = None, context: Optional[Any] = None):
        """Initializes the ModelNotLoadedError.

        Args:
            model_name: The name of the model that was not loaded.
            context: Optional additional context about the error.
        """
        message = (
            f"Model '{model_name}' is not loaded or unavailable."
            if model_name
            else "No active model is loaded."
        )
        super().__init__(message, code="MODEL_NOT_LOADED", context=context)


class ModelNotFoundError(NotFoundError):
    """Raised when activating a model that was never registered."""

    def __init__(self, model_name: str, context: Optional[Any] = None):
        super().__init__(
            f"Model not registered: {model_name}", code="MODEL_NOT_FOUND", context=context
        )


class ModelLoadError(ModelError):
    """Raised when a model backend fails to load the requested model."""

    def __init__(self, message: str, model_name: Optional[str] = None, context: Optional[Any] = None):
        super().__init__(message, code="MODEL_LOADING_FAILED", context=context)
        self.model_name = model_name


class ModelInferenceError(ModelError):
    """Raised when a non-recoverable error occurs during model inference."""

    status_code = 500

    def __init__(
        self, message: str, model_name: Optional[str] = None, context: Optional[Any] = None
    ):
        """Initializes the ModelInferenceError.

        Args:
            message: A human-readable message describing the inference error.
            model_name: The name of the model where the error occurred.
            context: Optional additional context about the error.
        """
        super().__init__(message, code="MODEL_INFERENCE_FAILED", context=context)
        self.model_name = model_name


class InvalidModelError(ValidationError):
    """Raised when an invalid or unauthorized model name is requested."""

    def __init__(self, model_name: str, allowed_models: List[str], context: Optional[Any] = None):
        """Initializes the InvalidModelError.

        Args:
            model_name: The invalid model name that was requested.
            allowed_models: The list of valid model names.
            context: Optional additional context about the error.
        """
        message = (
            f"Model '{model_name}' is not allowed. Allowed models are: {', '.join(allowed_models)}"
        )
        super().__init__(message, code="INVALID_MODEL_NAME", context=context)


# --- Input validation exceptions ---


class TextEmptyError(ValidationError):
    """Raised when the input text is empty or becomes empty after preprocessing."""

    def __init__(self, index: Optional[int] = None, context: Optional[Any] = None):
        if index is None:
            message = "Input text is empty after preprocessing."
        else:
            message = f"Text at index {index} is empty after preprocessing."
        super().__init__(message, code="TEXT_EMPTY", context=context)


class EmptyBatchError(ValidationError):
    """Raised when a batch processing request contains no items."""

    def __init__(self, context: Optional[Any] = None):
        """Initializes the EmptyBatchError.

        Args:
            context: Optional additional context about the error.
        """
        super().__init__("Empty batch", code="EMPTY_BATCH", context=context)


# --- Configuration exceptions ---


class ConfigurationError(ValidationError):
    """Base class for all configuration-related errors."""

    status_code = 500


class ModelConfigError(ConfigurationError):
    """Raised when model configuration is invalid."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, code="MODEL_CONFIG_ERROR", context=context)


class SettingsValidationError(ConfigurationError):
    """Raised when application settings validation fails."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, code="SETTINGS_VALIDATION_ERROR", context=context)
