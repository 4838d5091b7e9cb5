"""
Registry of loaded models.

The registry tracks which models are loaded, which one is active, when each
was loaded and how many inferences each has served. It is shared by all
request handlers, so every operation takes the registry lock.
"""

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel

from forge.core.logging import get_logger
from forge.models.base import ModelStrategy
from forge.utils.exceptions import ModelNotFoundError

logger = get_logger(__name__)


class ModelStats(BaseModel):
    """Statistics reported for a loaded model."""

    name: str
    load_time: datetime
    inference_count: int


@dataclass
class ModelEntry:
    name: str
    model: ModelStrategy
    load_time: datetime
    inference_count: int = 0

    def stats(self) -> ModelStats:
        return ModelStats(
            name=self.name, load_time=self.load_time, inference_count=self.inference_count
        )


class ModelRegistry:
    """Thread-safe store of loaded models and the active model name."""

    def __init__(self) -> None:
        self._models: Dict[str, ModelEntry] = {}
        self._active_model: Optional[str] = None
        self._lock = threading.RLock()

    def register_model(self, name: str, model: ModelStrategy) -> None:
        """Adds a loaded model, replacing any previous entry with the same name."""
        with self._lock:
            self._models[name] = ModelEntry(
                name=name, model=model, load_time=datetime.now(timezone.utc)
            )
        logger.info("Model registered", model_name=name)

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._models

    def get_model(self, name: str) -> Optional[ModelStrategy]:
        with self._lock:
            entry = self._models.get(name)
            return entry.model if entry else None

    def set_active(self, name: str) -> None:
        """Marks a registered model as the active one.

        Raises:
            ModelNotFoundError: If the model has not been registered.
        """
        with self._lock:
            if name not in self._models:
                raise ModelNotFoundError(name)
            self._active_model = name

    def get_active(self) -> Optional[str]:
        with self._lock:
            return self._active_model

    def list_all(self) -> List[str]:
        with self._lock:
            return list(self._models)

    def increment_inference_count(self, name: str, count: int = 1) -> None:
        with self._lock:
            entry = self._models.get(name)
            if entry is not None:
                entry.inference_count += count

    def get_stats(self, name: str) -> Optional[ModelStats]:
        with self._lock:
            entry = self._models.get(name)
            return entry.stats() if entry else None

    def get_all_stats(self) -> List[ModelStats]:
        with self._lock:
            return [entry.stats() for entry in self._models.values()]
