"""
API middleware components.
"""

from forge.api.middleware.correlation import CorrelationIdMiddleware
from forge.api.middleware.logging import RequestLoggingMiddleware
from forge.api.middleware.metrics import MetricsMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
    "MetricsMiddleware",
]
