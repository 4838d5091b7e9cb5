"""Tests for application settings."""

import pytest

from forge.core.config import InferenceConfig, ModelsConfig, ServerConfig, Settings
from forge.utils.exceptions import ModelConfigError, SettingsValidationError


@pytest.mark.unit
class TestSettings:
    """Test suite for settings defaults, environment overrides and validation."""

    def test_defaults(self):
        settings = Settings()

        assert settings.server.port == 8080
        assert settings.models.default_model in settings.models.available_models
        assert settings.inference.batch_size == 32
        assert settings.cache.cache_enabled is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FORGE_PORT", "9000")
        monkeypatch.setenv("FORGE_BATCH_SIZE", "8")
        monkeypatch.setenv("FORGE_LOG_FORMAT", "console")

        settings = Settings()

        assert settings.server.port == 9000
        assert settings.inference.batch_size == 8
        assert settings.monitoring.log_format == "console"

    def test_default_model_must_be_available(self):
        with pytest.raises(SettingsValidationError):
            Settings(models=ModelsConfig(default_model="a", available_models=["b"]))

    def test_debug_forbids_multiple_workers(self):
        with pytest.raises(SettingsValidationError):
            Settings(server=ServerConfig(debug=True, workers=2))

    def test_invalid_model_name_format(self):
        with pytest.raises(ModelConfigError):
            ModelsConfig(available_models=["bad name!"])

    def test_relative_cache_dir_rejected(self):
        with pytest.raises(ModelConfigError):
            ModelsConfig(model_cache_dir="relative/path")

    def test_device_is_normalized(self):
        assert InferenceConfig(device="CUDA").device == "cuda"

    def test_unknown_device_rejected(self):
        with pytest.raises(ValueError):
            InferenceConfig(device="tpu")
