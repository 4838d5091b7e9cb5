"""Tests for the model registry."""

import pytest

from forge.models.registry import ModelRegistry
from forge.utils.exceptions import ModelNotFoundError
from tests.fixtures.common_mocks import FakeModel


@pytest.mark.unit
class TestModelRegistry:
    """Test suite for ModelRegistry."""

    def test_starts_empty(self):
        registry = ModelRegistry()

        assert registry.list_all() == []
        assert registry.get_active() is None
        assert registry.get_model("x") is None

    def test_register_and_get(self):
        registry = ModelRegistry()
        model = FakeModel("a")
        registry.register_model("a", model)

        assert registry.is_registered("a")
        assert registry.get_model("a") is model
        assert registry.list_all() == ["a"]

    def test_set_active_requires_registration(self):
        registry = ModelRegistry()

        with pytest.raises(ModelNotFoundError):
            registry.set_active("missing")
        assert registry.get_active() is None

    def test_set_active(self):
        registry = ModelRegistry()
        registry.register_model("a", FakeModel("a"))
        registry.register_model("b", FakeModel("b"))
        registry.set_active("b")

        assert registry.get_active() == "b"

    def test_inference_counts(self):
        registry = ModelRegistry()
        registry.register_model("a", FakeModel("a"))
        registry.increment_inference_count("a")
        registry.increment_inference_count("a", 4)
        registry.increment_inference_count("unknown")

        stats = registry.get_stats("a")
        assert stats.name == "a"
        assert stats.inference_count == 5
        assert registry.get_stats("unknown") is None

    def test_all_stats(self):
        registry = ModelRegistry()
        registry.register_model("a", FakeModel("a"))
        registry.register_model("b", FakeModel("b"))

        assert sorted(stats.name for stats in registry.get_all_stats()) == ["a", "b"]
