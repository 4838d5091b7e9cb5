"""End-to-end tests of the HTTP API against fake models."""

import pytest
from fastapi.testclient import TestClient

from forge.main import create_app
from tests.fixtures.common_mocks import BROKEN_MODEL, HUB_MODEL, OTHER_MODEL, TEST_MODEL


@pytest.mark.integration
class TestPredictEndpoint:
    """Test suite for POST /predict."""

    def test_malformed_model_output_is_failed_envelope(self, client, fake_loader):
        fake_loader.models[TEST_MODEL]._classify = lambda text: {"label": "POSITIVE", "score": 1.0000001}

        response = client.post("/predict", json={"text": "hello"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert "malformed output" in body["error"]
        assert "result" not in body

    def test_model_output_missing_label_is_failed_envelope(self, client, fake_loader):
        fake_loader.models[TEST_MODEL]._classify = lambda text: {"score": 0.5}

        response = client.post("/predict/batch", json={"texts": ["a", "b"]})

        assert response.status_code == 500
        assert response.json()["success"] is False

    def test_predict_success(self, client):
        response = client.post("/predict", json={"text": "I love this product!"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert "error" not in body
        assert body["result"]["label"] == "POSITIVE"
        assert body["result"]["model_name"] == TEST_MODEL
        assert "X-Inference-Time-MS" in response.headers

    def test_predict_with_named_model(self, client):
        response = client.post("/predict", json={"text": "awful", "model": OTHER_MODEL})

        assert response.status_code == 200
        assert response.json()["result"]["model_name"] == OTHER_MODEL
        assert client.get("/models/active").json() == {"active_model": TEST_MODEL}

    def test_predict_disallowed_model(self, client):
        response = client.post("/predict", json={"text": "hello", "model": "nope"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "not allowed" in body["error"]
        assert "result" not in body

    def test_predict_empty_text(self, client):
        response = client.post("/predict", json={"text": "   "})

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_malformed_json(self, client):
        response = client.post(
            "/predict", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == 400
        assert "success" not in body

    def test_missing_text(self, client):
        response = client.post("/predict", json={"model": TEST_MODEL})

        assert response.status_code == 422
        assert response.json()["code"] == 422

    def test_second_request_is_cached(self, client):
        client.post("/predict", json={"text": "great"})
        response = client.post("/predict", json={"text": "great"})

        assert response.json()["result"]["cached"] is True


@pytest.mark.integration
class TestBatchEndpoint:
    """Test suite for POST /predict/batch."""

    def test_batch_success_in_order(self, client):
        texts = ["good", "bad", "amazing"]
        response = client.post("/predict/batch", json={"texts": texts})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [r["label"] for r in body["results"]] == ["POSITIVE", "NEGATIVE", "POSITIVE"]

    def test_empty_batch(self, client):
        response = client.post("/predict/batch", json={"texts": []})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Empty batch"}

    def test_non_string_items(self, client):
        response = client.post("/predict/batch", json={"texts": ["a", 2]})

        assert response.status_code == 422


@pytest.mark.integration
class TestModelEndpoints:
    """Test suite for the model management endpoints."""

    def test_list_models(self, client):
        assert client.get("/models").json() == {"models": [TEST_MODEL]}

    def test_activate_model(self, client):
        response = client.post(f"/models/{OTHER_MODEL}/activate")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": f"Switched to model: {OTHER_MODEL}"}
        assert client.get("/models/active").json() == {"active_model": OTHER_MODEL}

    def test_activate_model_with_slash(self, client):
        response = client.post(f"/models/{HUB_MODEL}/activate")

        assert response.status_code == 200
        assert client.get("/models/active").json()["active_model"] == HUB_MODEL

    def test_activate_broken_model(self, client):
        response = client.post(f"/models/{BROKEN_MODEL}/activate")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("Failed to switch model:")
        assert client.get("/models/active").json()["active_model"] == TEST_MODEL

    def test_model_stats(self, client):
        client.post("/predict/batch", json={"texts": ["a", "b"]})

        stats = client.get("/models/stats").json()["model_stats"]
        assert stats[0]["name"] == TEST_MODEL
        assert stats[0]["inference_count"] == 2


@pytest.mark.integration
class TestSystemEndpoints:
    """Test suite for health, info, metrics and error envelopes."""

    def test_health(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert "timestamp" in body

    def test_info(self, client):
        body = client.get("/info").json()

        assert body["version"] == "0.1.0"
        assert body["device"]["device_type"] == "cpu"
        assert body["config"]["default_model"] == TEST_MODEL

    def test_metrics_summary(self, client):
        client.post("/predict", json={"text": "hello"})

        body = client.get("/metrics").json()
        assert body["total_inferences"] == 1

    def test_prometheus_metrics(self, client):
        client.get("/health")
        response = client.get("/metrics/prometheus")

        assert response.status_code == 200
        assert "transformer_forge_http_requests_total" in response.text

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client):
        assert client.get("/health").headers.get("X-Request-ID")

    def test_unknown_route(self, client):
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json()["code"] == 404

    def test_method_not_allowed(self, client):
        response = client.get("/predict")

        assert response.status_code == 405
        assert response.json()["code"] == 405


@pytest.mark.integration
class TestStartup:
    """Application startup behaviour."""

    def test_default_model_failure_does_not_stop_startup(self, test_settings, fake_loader):
        fake_loader.broken.add(TEST_MODEL)
        app = create_app(settings=test_settings, model_loader=fake_loader)

        with TestClient(app) as client:
            assert client.get("/models/active").json() == {
                "active_model": None,
                "message": "No active model",
            }
            response = client.post("/predict", json={"text": "hello"})

        assert response.status_code == 503
        assert response.json()["error"] == "No active model is loaded."

    def test_unhandled_errors_become_error_envelopes(self, test_settings, fake_loader):
        app = create_app(settings=test_settings, model_loader=fake_loader)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("kaboom")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "code": 500}
