"""
Monitoring: inference and HTTP metrics.
"""

from forge.monitoring.metrics import MetricsCollector, MetricsSummary

__all__ = ["MetricsCollector", "MetricsSummary"]
