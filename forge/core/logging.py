"""
Structured logging configuration for the TransformerForge inference service.

This module sets up `structlog` on top of the standard library logger so that
every log entry is a structured event enriched with the service name, version
and the id of the request being handled. Entries are rendered as JSON by
default, or in a human-readable console format for local development.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

import structlog

from forge.core.config import get_settings

# Context variable holding the id of the request being handled.
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def setup_structured_logging() -> None:
    """Configures structured logging for the application.

    The processor chain adds the logger name, level, an ISO timestamp,
    exception details and request context to each event before rendering it
    with the renderer selected by `monitoring.log_format`.
    """
    settings = get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.monitoring.log_level.upper(), logging.INFO),
    )

    if settings.monitoring.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    shared_processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _add_request_context,
        renderer,
    ]

    structlog.configure(
        processors=shared_processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_request_context(
    logger: logging.Logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Adds service and request context to log entries.

    Args:
        logger: The standard library logger instance.
        method_name: The name of the logging method (e.g., 'info', 'error').
        event_dict: The log entry being enriched.

    Returns:
        The enriched log entry dictionary.
    """
    settings = get_settings()
    event_dict.setdefault("service", settings.server.app_name)
    event_dict.setdefault("version", settings.server.app_version)
    event_dict.setdefault("component", getattr(logger, "name", "unknown"))

    request_id = request_id_var.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)

    if method_name in ("error", "exception", "critical"):
        event_dict.setdefault("error_type", "application_error")

    return event_dict


def log_model_operation(
    logger,
    operation: str,
    model_name: str,
    duration_ms: Optional[float] = None,
    success: bool = True,
    error: Optional[str] = None,
) -> None:
    """Logs a standardized message for a model operation such as load or predict.

    Args:
        logger: The `structlog` logger instance to use.
        operation: The type of model operation (e.g., 'load', 'predict').
        model_name: The name of the model involved in the operation.
        duration_ms: The duration of the operation in milliseconds (optional).
        success: Whether the operation was successful.
        error: An error message if the operation failed (optional).
    """
    log_data: Dict[str, Any] = {
        "operation": operation,
        "model_name": model_name,
        "operation_type": "model",
        "success": success,
    }

    if duration_ms is not None:
        log_data["duration_ms"] = duration_ms

    if error:
        log_data["error"] = error
        logger.error("Model operation failed", **log_data)
    else:
        logger.info("Model operation completed", **log_data)


def set_request_id(request_id: str) -> None:
    """Sets the request id for the current asynchronous context."""
    request_id_var.set(request_id)


def get_request_id() -> Optional[str]:
    """Retrieves the request id from the current asynchronous context.

    Returns:
        The current request id, or `None` if it has not been set.
    """
    return request_id_var.get()


def generate_request_id() -> str:
    """Generates a new, unique request id using UUID version 4."""
    return str(uuid.uuid4())


def clear_request_id() -> None:
    """Clears the request id from the current context."""
    request_id_var.set(None)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Retrieves a `structlog` logger instance.

    Args:
        name: The name of the logger, typically the module's `__name__`.

    Returns:
        A configured `structlog` logger instance.
    """
    return structlog.get_logger(name)


def get_contextual_logger(name: str, **extra_context) -> structlog.stdlib.BoundLogger:
    """Retrieves a logger with additional, permanently bound context.

    Args:
        name: The name of the logger, typically the module's `__name__`.
        **extra_context: Keyword arguments to be bound to the logger's context.

    Returns:
        A `structlog` logger with the specified context bound to it.
    """
    logger = structlog.get_logger(name)

    request_id = get_request_id()
    if request_id:
        extra_context["request_id"] = request_id

    return logger.bind(**extra_context) if extra_context else logger
