"""
Hugging Face Transformers backend.

`PipelineModel` wraps a `transformers` text-classification pipeline and
implements the `ModelStrategy` protocol. The heavy imports happen when a model
is loaded, not when this module is imported.
"""

import time
from typing import Any, Dict, List

from forge.core.config import Settings
from forge.core.logging import get_logger, log_model_operation
from forge.models.device import auto_detect_device
from forge.utils.exceptions import ModelInferenceError, ModelLoadError

logger = get_logger(__name__)


def _to_prediction(label_scores: Any) -> Dict[str, Any]:
    """Converts one pipeline output into the `ModelStrategy` result shape."""
    if isinstance(label_scores, dict):
        label_scores = [label_scores]
    scores = {item["label"]: float(item["score"]) for item in label_scores}
    label = max(scores, key=scores.get)
    return {"label": label, "score": scores[label], "scores": scores}


class PipelineModel:
    """A text-classification model served through `transformers.pipeline`.

    Attributes:
        name: The model identifier on the hub or in the local cache.
        settings: Application settings used for loading and inference.
    """

    def __init__(self, name: str, settings: Settings):
        self.name = name
        self.settings = settings
        self._pipeline = None
        self._device = auto_detect_device(settings.inference)
        self._load_model()

    def _load_model(self) -> None:
        """Load the model pipeline.

        Raises:
            ModelLoadError: If the backend cannot load the model.
        """
        start_time = time.time()
        try:
            import torch
            from transformers import pipeline

            if self._device == "cpu":
                torch.set_num_threads(self.settings.inference.num_threads)

            model_kwargs: Dict[str, Any] = {
                "local_files_only": not self.settings.models.auto_download
            }
            if self.settings.models.model_cache_dir:
                model_kwargs["cache_dir"] = self.settings.models.model_cache_dir

            self._pipeline = pipeline(
                self.settings.models.model_task,
                model=self.name,
                device=self._device,
                model_kwargs=model_kwargs,
            )
        except Exception as e:
            log_model_operation(logger, "load", self.name, success=False, error=str(e))
            raise ModelLoadError(f"Failed to load model '{self.name}': {e}", model_name=self.name) from e

        log_model_operation(
            logger, "load", self.name, duration_ms=(time.time() - start_time) * 1000
        )

    def is_ready(self) -> bool:
        return self._pipeline is not None

    def predict(self, text: str) -> Dict[str, Any]:
        return self.predict_batch([text])[0]

    def predict_batch(self, texts: List[str]) -> List[Dict[str, Any]]:
        """Runs the pipeline on a batch of texts and returns results in input order.

        Raises:
            ModelInferenceError: If the pipeline fails.
        """
        try:
            outputs = self._pipeline(
                texts,
                top_k=None,
                truncation=True,
                max_length=self.settings.inference.max_length,
                batch_size=self.settings.inference.batch_size,
            )
        except Exception as e:
            raise ModelInferenceError(f"Model inference failed: {e}", model_name=self.name) from e

        return [_to_prediction(output) for output in outputs]
