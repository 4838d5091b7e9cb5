"""Tests for the metrics collector."""

import pytest

from forge.monitoring.metrics import MetricsCollector


@pytest.mark.unit
class TestMetricsCollector:
    """Test suite for MetricsCollector."""

    def test_empty_summary(self):
        summary = MetricsCollector().get_summary()

        assert summary.total_inferences == 0
        assert summary.total_batch_inferences == 0
        assert summary.avg_latency_ms == 0.0
        assert summary.max_latency_ms == 0.0
        assert summary.min_latency_ms == 0.0

    def test_latency_statistics(self):
        collector = MetricsCollector()
        for latency in (10.0, 30.0, 20.0):
            collector.record_inference(latency)

        summary = collector.get_summary()
        assert summary.total_inferences == 3
        assert summary.avg_latency_ms == pytest.approx(20.0)
        assert summary.max_latency_ms == 30.0
        assert summary.min_latency_ms == 10.0

    def test_batch_counts_as_inference(self):
        collector = MetricsCollector()
        collector.record_batch_inference(8, 40.0)

        summary = collector.get_summary()
        assert summary.total_batch_inferences == 1
        assert summary.total_inferences == 1

    def test_prometheus_export(self):
        collector = MetricsCollector()
        collector.record_inference(12.0)
        collector.record_http_request("POST", "/predict", 200)

        exported = collector.export_prometheus().decode()

        assert "transformer_forge_total_requests_total 1.0" in exported
        assert "transformer_forge_inference_latency_ms_count 1.0" in exported
        assert 'method="POST"' in exported
        assert 'path="/predict"' in exported

    def test_collectors_are_independent(self):
        first = MetricsCollector()
        second = MetricsCollector()
        first.record_inference(1.0)

        assert second.get_summary().total_inferences == 0
