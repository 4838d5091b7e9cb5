"""Business logic services."""

from forge.services.inference import InferenceService

__all__ = ["InferenceService"]
