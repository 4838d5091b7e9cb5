"""
Inference service for the TransformerForge inference service.

This module holds the business logic between the HTTP layer and the model
backends: it normalizes input text, selects the model for the request,
consults the prediction cache, runs the model and records usage statistics.
"""

import time
from typing import Any, Dict, List, Optional, Tuple

from forge.api.schemas.responses import InferenceResult
from forge.core.config import Settings
from forge.core.logging import get_logger
from forge.interfaces.inference_interface import IInferenceEngine
from forge.models.cache import PredictionCache
from forge.models.manager import ModelManager
from forge.monitoring.metrics import MetricsCollector
from forge.preprocessing import preprocess_text
from forge.utils.exceptions import EmptyBatchError, ModelInferenceError, ServiceError, TextEmptyError

logger = get_logger(__name__)


class InferenceService(IInferenceEngine):
    """Runs texts through the managed models.

    Batch requests are all-or-nothing: either every text yields a result, in
    input order, or the whole call raises.

    Attributes:
        model_manager: Resolves the model serving each request.
        settings: The application's configuration settings.
        metrics: Optional collector for latency and volume metrics.
        cache: Optional cache of results keyed by model name and normalized text.
    """

    def __init__(
        self,
        model_manager: ModelManager,
        settings: Settings,
        metrics: Optional[MetricsCollector] = None,
        cache: Optional[PredictionCache] = None,
    ):
        self.model_manager = model_manager
        self.settings = settings
        self.metrics = metrics
        self.cache = cache

    def _prepare(self, text: str, index: Optional[int] = None) -> str:
        processed = preprocess_text(text, self.settings.preprocessing)
        if not processed:
            raise TextEmptyError(index)
        return processed

    def _cached(self, model_name: str, text: str, start_time: float) -> Optional[InferenceResult]:
        """Returns the cached result for `text`, timed as the lookup that served it."""
        if self.cache is None:
            return None
        hit = self.cache.get((model_name, text))
        if hit is None:
            return None
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        return hit.model_copy(update={"cached": True, "inference_time_ms": elapsed_ms})

    def _store(self, result: InferenceResult, text: str) -> None:
        if self.cache is not None:
            self.cache.insert((result.model_name, text), result)

    @staticmethod
    def _to_result(
        prediction: Dict[str, Any], model_name: str, inference_time_ms: float
    ) -> InferenceResult:
        """Builds a result from one backend prediction.

        Raises:
            ModelInferenceError: If the prediction is missing fields or holds
                values outside their ranges.
        """
        try:
            return InferenceResult(
                label=prediction["label"],
                score=prediction["score"],
                scores=prediction.get("scores", {}),
                model_name=model_name,
                inference_time_ms=inference_time_ms,
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed model output", model_name=model_name, error=str(e))
            raise ModelInferenceError(
                f"Model returned malformed output: {e}", model_name=model_name
            ) from e

    def infer(self, text: str, model: Optional[str] = None) -> InferenceResult:
        """Runs inference on a single text.

        Args:
            text: The raw input text.
            model: The model to use, or None for the active model.

        Returns:
            The inference result, marked `cached` when served from the cache.

        Raises:
            TextEmptyError: If the text is empty after preprocessing.
            InvalidModelError: If `model` is not an allowed model.
            ModelNotLoadedError: If no model can serve the request.
            ModelInferenceError: If the backend fails.
        """
        start_time = time.perf_counter()
        processed = self._prepare(text)
        model_name, strategy = self.model_manager.resolve(model)

        result = self._cached(model_name, processed, start_time)
        if result is None:
            try:
                prediction = strategy.predict(processed)
            except ServiceError:
                raise
            except Exception as e:
                logger.error("Inference failed", model_name=model_name, error=str(e), exc_info=True)
                raise ModelInferenceError(f"Model inference failed: {e}", model_name=model_name) from e

            elapsed_ms = (time.perf_counter() - start_time) * 1000
            result = self._to_result(prediction, model_name, elapsed_ms)
            self._store(result, processed)

        self.model_manager.registry.increment_inference_count(model_name)
        latency_ms = (time.perf_counter() - start_time) * 1000
        if self.metrics is not None:
            self.metrics.record_inference(latency_ms)

        logger.debug(
            "Inference completed",
            model_name=model_name,
            label=result.label,
            cached=result.cached,
            latency_ms=round(latency_ms, 2),
        )
        return result

    def infer_batch(self, texts: List[str], model: Optional[str] = None) -> List[InferenceResult]:
        """Runs inference on an ordered batch of texts.

        Cache hits are served directly; the remaining texts run through the
        model in chunks of `inference.batch_size`.

        Raises:
            EmptyBatchError: If `texts` is empty.
            TextEmptyError: If any text is empty after preprocessing.
            InvalidModelError: If `model` is not an allowed model.
            ModelNotLoadedError: If no model can serve the request.
            ModelInferenceError: If the backend fails or returns the wrong
                number of results.
        """
        if not texts:
            raise EmptyBatchError()

        start_time = time.perf_counter()
        processed = [self._prepare(text, index) for index, text in enumerate(texts)]
        model_name, strategy = self.model_manager.resolve(model)

        results: List[Optional[InferenceResult]] = [
            self._cached(model_name, text, start_time) for text in processed
        ]
        misses: List[Tuple[int, str]] = [
            (index, text) for index, text in enumerate(processed) if results[index] is None
        ]

        chunk_size = max(1, self.settings.inference.batch_size)
        for offset in range(0, len(misses), chunk_size):
            chunk = misses[offset : offset + chunk_size]
            chunk_start = time.perf_counter()
            try:
                predictions = list(strategy.predict_batch([text for _, text in chunk]))
            except ServiceError:
                raise
            except Exception as e:
                logger.error(
                    "Batch inference failed",
                    model_name=model_name,
                    batch_size=len(chunk),
                    error=str(e),
                    exc_info=True,
                )
                raise ModelInferenceError(f"Model inference failed: {e}", model_name=model_name) from e

            if len(predictions) != len(chunk):
                raise ModelInferenceError(
                    f"Model returned {len(predictions)} results for {len(chunk)} texts",
                    model_name=model_name,
                )

            per_text_ms = (time.perf_counter() - chunk_start) * 1000 / len(chunk)
            for (index, text), prediction in zip(chunk, predictions):
                result = self._to_result(prediction, model_name, per_text_ms)
                self._store(result, text)
                results[index] = result

        self.model_manager.registry.increment_inference_count(model_name, len(texts))
        latency_ms = (time.perf_counter() - start_time) * 1000
        if self.metrics is not None:
            self.metrics.record_batch_inference(len(texts), latency_ms)

        logger.info(
            "Batch inference completed",
            model_name=model_name,
            batch_size=len(texts),
            cache_hits=len(texts) - len(misses),
            latency_ms=round(latency_ms, 2),
        )
        return [result for result in results if result is not None]
