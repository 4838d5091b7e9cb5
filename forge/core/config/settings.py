"""
Root Settings class composing all domain-specific configurations.

Each domain (server, models, inference, preprocessing, monitoring, cache) is
its own `BaseSettings` class reading `FORGE_*` environment variables; this
module composes them into one object and validates the combinations.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from forge.core.config.cache import CacheConfig
from forge.core.config.inference import InferenceConfig
from forge.core.config.models import ModelsConfig
from forge.core.config.monitoring import MonitoringConfig
from forge.core.config.preprocessing import PreprocessingConfig
from forge.core.config.server import ServerConfig
from forge.utils.exceptions import SettingsValidationError


class Settings(BaseSettings):
    """Main settings class composing all domain-specific configurations.

    All settings are accessed through their domain, e.g.
    `settings.server.port` or `settings.models.default_model`.

    Attributes:
        server: Server and application configuration.
        models: Model selection and loading configuration.
        inference: Inference runtime configuration.
        preprocessing: Text normalization configuration.
        monitoring: Metrics and logging configuration.
        cache: Prediction cache configuration.
    """

    server: ServerConfig = Field(default_factory=ServerConfig)
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    inference: InferenceConfig = Field(default_factory=InferenceConfig)
    preprocessing: PreprocessingConfig = Field(default_factory=PreprocessingConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)

    def _validate_default_in_available(self) -> None:
        """Ensures the default model is one of the available models.

        Raises:
            SettingsValidationError: If default_model is not in available_models.
        """
        if self.models.default_model not in self.models.available_models:
            raise SettingsValidationError(
                f"Default model '{self.models.default_model}' must be in available_models: "
                f"{self.models.available_models}"
            )

    def _validate_worker_count_consistency(self) -> None:
        """Validates that multiple workers are not used in debug mode.

        Raises:
            SettingsValidationError: If debug is True and workers is greater than 1.
        """
        if self.server.debug and self.server.workers > 1:
            raise SettingsValidationError("Cannot use multiple workers in debug mode")

    @model_validator(mode="after")
    def validate_configuration_consistency(self):
        """Performs cross-field validation to ensure configuration consistency."""
        self._validate_default_in_available()
        self._validate_worker_count_consistency()
        return self

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    """Provides the process-wide application settings.

    Used directly and through FastAPI's dependency injection.

    Returns:
        The singleton instance of the application settings.
    """
    return settings
