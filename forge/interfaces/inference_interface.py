"""
Interface for the inference engine.

Defines the contract the HTTP layer relies on: one text or an ordered batch of
texts in, inference results out, with an optional model name.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from forge.api.schemas.responses import InferenceResult


class IInferenceEngine(ABC):
    """
    Interface for inference engines.

    Implementations raise `ServiceError` subclasses on failure; callers turn
    those into failed response envelopes.
    """

    @abstractmethod
    def infer(self, text: str, model: Optional[str] = None) -> InferenceResult:
        """
        Run inference on a single text.

        Args:
            text: Input text
            model: Model to use, or None for the active model

        Returns:
            The inference result
        """
        pass

    @abstractmethod
    def infer_batch(self, texts: List[str], model: Optional[str] = None) -> List[InferenceResult]:
        """
        Run inference on an ordered batch of texts.

        Args:
            texts: Input texts
            model: Model to use, or None for the active model

        Returns:
            One result per input text, in input order
        """
        pass
