"""
Configuration management package for TransformerForge.

Domain-specific configuration classes composed into a root `Settings` class.
"""

from forge.core.config.cache import CacheConfig
from forge.core.config.inference import InferenceConfig
from forge.core.config.models import ModelsConfig
from forge.core.config.monitoring import MonitoringConfig
from forge.core.config.preprocessing import PreprocessingConfig
from forge.core.config.server import ServerConfig
from forge.core.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "ServerConfig",
    "ModelsConfig",
    "InferenceConfig",
    "PreprocessingConfig",
    "MonitoringConfig",
    "CacheConfig",
]
