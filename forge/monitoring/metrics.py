"""
Inference metrics.

`MetricsCollector` keeps Prometheus instruments on its own
`CollectorRegistry`, so each application instance exports only its own
series, together with a small running summary served as JSON.
"""

import threading
from datetime import datetime, timezone

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
from prometheus_client import CONTENT_TYPE_LATEST
from pydantic import BaseModel

LATENCY_BUCKETS_MS = (1, 5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000)
BATCH_SIZE_BUCKETS = (1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024)


class MetricsSummary(BaseModel):
    """Running inference statistics."""

    total_inferences: int
    total_batch_inferences: int
    avg_latency_ms: float
    max_latency_ms: float
    min_latency_ms: float
    timestamp: datetime


class MetricsCollector:
    """Records inference and HTTP metrics.

    Attributes:
        registry: The Prometheus registry holding this collector's instruments.
    """

    def __init__(self) -> None:
        self.registry = CollectorRegistry()

        self.total_requests = Counter(
            "transformer_forge_total_requests",
            "Total number of inference requests",
            registry=self.registry,
        )
        self.inference_latency = Histogram(
            "transformer_forge_inference_latency_ms",
            "Inference latency in milliseconds",
            buckets=LATENCY_BUCKETS_MS,
            registry=self.registry,
        )
        self.batch_size = Histogram(
            "transformer_forge_batch_size",
            "Batch processing size",
            buckets=BATCH_SIZE_BUCKETS,
            registry=self.registry,
        )
        self.http_requests = Counter(
            "transformer_forge_http_requests",
            "HTTP requests by method, path and status code",
            ["method", "path", "status_code"],
            registry=self.registry,
        )

        self._lock = threading.Lock()
        self._total_inferences = 0
        self._total_batch_inferences = 0
        self._avg_latency_ms = 0.0
        self._max_latency_ms = 0.0
        self._min_latency_ms: float = float("inf")

    def record_inference(self, latency_ms: float) -> None:
        """Records one served inference request and its latency."""
        self.total_requests.inc()
        self.inference_latency.observe(latency_ms)

        with self._lock:
            self._total_inferences += 1
            self._max_latency_ms = max(self._max_latency_ms, latency_ms)
            self._min_latency_ms = min(self._min_latency_ms, latency_ms)
            total = self._total_inferences
            self._avg_latency_ms = (self._avg_latency_ms * (total - 1) + latency_ms) / total

    def record_batch_inference(self, batch_size: int, latency_ms: float) -> None:
        """Records a served batch request; it also counts as one inference request."""
        self.batch_size.observe(batch_size)
        self.record_inference(latency_ms)

        with self._lock:
            self._total_batch_inferences += 1

    def record_http_request(self, method: str, path: str, status_code: int) -> None:
        self.http_requests.labels(method=method, path=path, status_code=str(status_code)).inc()

    def get_summary(self) -> MetricsSummary:
        with self._lock:
            return MetricsSummary(
                total_inferences=self._total_inferences,
                total_batch_inferences=self._total_batch_inferences,
                avg_latency_ms=self._avg_latency_ms,
                max_latency_ms=self._max_latency_ms,
                min_latency_ms=0.0 if self._total_inferences == 0 else self._min_latency_ms,
                timestamp=datetime.now(timezone.utc),
            )

    def export_prometheus(self) -> bytes:
        """Returns this collector's metrics in the Prometheus text format."""
        return generate_latest(self.registry)

    @staticmethod
    def content_type() -> str:
        return CONTENT_TYPE_LATEST
