"""
Model management: backends, loading, registry and prediction cache.
"""

from forge.models.base import ModelStrategy
from forge.models.cache import PredictionCache
from forge.models.factory import ModelFactory
from forge.models.manager import ModelManager
from forge.models.registry import ModelRegistry, ModelStats

__all__ = [
    "ModelStrategy",
    "ModelFactory",
    "ModelManager",
    "ModelRegistry",
    "ModelStats",
    "PredictionCache",
]
