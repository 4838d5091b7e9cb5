"""
Base protocol for model strategies.

Every model backend exposes the same small interface so the inference
service, the registry and the tests can treat models interchangeably.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ModelStrategy(Protocol):
    """Protocol defining the interface for model implementations.

    All implementations must provide methods for:
    - Checking model readiness
    - Making predictions (single and batch)
    """

    name: str

    def is_ready(self) -> bool:
        """Check if the model is loaded and ready for inference.

        Returns:
            True if the model is loaded and ready, False otherwise.
        """
        ...

    def predict(self, text: str) -> dict[str, Any]:
        """Run the model on a single text.

        Args:
            text: The preprocessed input text.

        Returns:
            A dictionary with:
                - label: The predicted label
                - score: The confidence score for the predicted label
                - scores: A mapping of every label to its score
        """
        ...

    def predict_batch(self, texts: list[str]) -> list[dict[str, Any]]:
        """Run the model on a batch of texts.

        Args:
            texts: The preprocessed input texts.

        Returns:
            One dictionary per input, in input order, shaped like `predict`'s.
        """
        ...
