"""
Model manager.

Combines the registry with a model loader: it loads the default model at
startup, loads further models on demand, and switches the active model.
"""

import threading
from typing import List, Optional, Tuple

from forge.core.config import Settings
from forge.core.logging import get_logger
from forge.models.base import ModelStrategy
from forge.models.factory import ModelFactory, ModelLoader
from forge.models.registry import ModelRegistry
from forge.utils.exceptions import ModelNotLoadedError

logger = get_logger(__name__)


class ModelManager:
    """Owns the lifecycle of the models the service serves.

    Attributes:
        registry: The registry of loaded models.
        settings: The application's configuration settings.
    """

    def __init__(
        self,
        settings: Settings,
        loader: Optional[ModelLoader] = None,
        registry: Optional[ModelRegistry] = None,
    ):
        self.settings = settings
        self.registry = registry or ModelRegistry()
        self._loader = loader or ModelFactory.loader(settings)
        self._load_lock = threading.Lock()

    def _ensure_loaded(self, name: str) -> ModelStrategy:
        model = self.registry.get_model(name)
        if model is not None:
            return model

        with self._load_lock:
            model = self.registry.get_model(name)
            if model is None:
                logger.info("Loading model", model_name=name)
                model = self._loader(name)
                self.registry.register_model(name, model)
        return model

    def load_default_model(self) -> None:
        """Loads the configured default model and makes it active."""
        default_model = self.settings.models.default_model
        logger.info("Loading default model", model_name=default_model)
        self.switch_model(default_model)

    def switch_model(self, name: str) -> None:
        """Makes `name` the active model, loading it first if necessary.

        Raises:
            InvalidModelError: If the model is not allowed.
            ModelLoadError: If the model fails to load.
        """
        logger.info("Switching to model", model_name=name)
        self._ensure_loaded(name)
        self.registry.set_active(name)
        logger.info("Model switched successfully", model_name=name)

    def resolve(self, name: Optional[str] = None) -> Tuple[str, ModelStrategy]:
        """Selects the model for one request without changing the active model.

        Args:
            name: The requested model, or None for the active model.

        Returns:
            The model name and the loaded model.

        Raises:
            ModelNotLoadedError: If no model is named and none is active.
        """
        if name is None:
            name = self.registry.get_active()
            if name is None:
                raise ModelNotLoadedError()
            model = self.registry.get_model(name)
            if model is None or not model.is_ready():
                raise ModelNotLoadedError(name)
            return name, model

        model = self._ensure_loaded(name)
        if not model.is_ready():
            raise ModelNotLoadedError(name)
        return name, model

    def get_active_model(self) -> Optional[str]:
        return self.registry.get_active()

    def list_models(self) -> List[str]:
        return self.registry.list_all()
