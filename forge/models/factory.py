"""
Factory for creating model instances.

The factory is the single place that turns a model name into a loaded
`ModelStrategy`. It enforces the configured allow-list before any backend code
runs.
"""

from typing import Callable, Optional

from forge.core.config import Settings, get_settings
from forge.core.logging import get_logger
from forge.models.base import ModelStrategy
from forge.utils.exceptions import InvalidModelError, ModelLoadError

logger = get_logger(__name__)

ModelLoader = Callable[[str], ModelStrategy]


class ModelFactory:
    """Creates model instances for the names allowed by configuration."""

    @staticmethod
    def create_model(name: str, settings: Optional[Settings] = None) -> ModelStrategy:
        """Load the named model.

        Args:
            name: The model identifier.
            settings: Settings to load with. Defaults to the application settings.

        Returns:
            A model instance that implements the ModelStrategy protocol.

        Raises:
            InvalidModelError: If the model is not in `available_models`.
            ModelLoadError: If the backend fails to load the model.
        """
        settings = settings or get_settings()
        if name not in settings.models.available_models:
            raise InvalidModelError(name, settings.models.available_models)

        logger.info("Creating new model instance", model_name=name)

        try:
            from forge.models.pipeline_model import PipelineModel

            return PipelineModel(name, settings)
        except ModelLoadError:
            raise
        except Exception as e:
            logger.error("Failed to create model", model_name=name, error=str(e))
            raise ModelLoadError(
                f"Failed to initialize model '{name}': {e}", model_name=name
            ) from e

    @staticmethod
    def loader(settings: Settings) -> ModelLoader:
        """Returns a loader bound to the given settings, as used by `ModelManager`."""
        return lambda name: ModelFactory.create_model(name, settings)
