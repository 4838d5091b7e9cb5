"""Model selection and loading configuration settings."""

import os
import re
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from forge.utils.exceptions import ModelConfigError


class ModelsConfig(BaseSettings):
    """Configuration of the models the service may serve.

    Attributes:
        default_model: The model activated at startup.
        available_models: Model identifiers that may be loaded on request.
        model_task: The pipeline task used when loading a model.
        model_cache_dir: Directory where model files are cached.
        auto_download: Whether missing models may be fetched from the hub.
        preload_default_model: Load the default model during startup.
    """

    default_model: str = Field(
        default="distilbert-base-uncased-finetuned-sst-2-english",
        description="Model activated at startup",
        min_length=1,
        max_length=200,
    )
    available_models: List[str] = Field(
        default_factory=lambda: [
            "distilbert-base-uncased-finetuned-sst-2-english",
            "cardiffnlp/twitter-roberta-base-sentiment-latest",
            "j-hartmann/emotion-english-distilroberta-base",
        ],
        description="Models that may be loaded",
        min_length=1,
    )
    model_task: str = Field(
        default="text-classification",
        description="Pipeline task for loaded models",
    )
    model_cache_dir: Optional[str] = Field(
        default=None,
        description="Directory to cache downloaded models",
    )
    auto_download: bool = Field(
        default=True,
        description="Allow downloading models that are not cached locally",
    )
    preload_default_model: bool = Field(
        default=True,
        description="Load the default model during application startup",
    )

    @field_validator("available_models")
    @classmethod
    def validate_model_names(cls, v: List[str]) -> List[str]:
        """Validates the format of each model name in the allowed list.

        Raises:
            ModelConfigError: If a model name has an invalid format.
        """
        for model_name in v:
            if not re.match(r"^[a-zA-Z0-9/._-]+$", model_name):
                raise ModelConfigError(f"Invalid model name format: {model_name}")
        return v

    @field_validator("model_cache_dir")
    @classmethod
    def validate_cache_dir(cls, v: Optional[str]) -> Optional[str]:
        """Validates that the cache directory is an absolute path.

        Raises:
            ModelConfigError: If the path is not absolute.
        """
        if v is not None and not os.path.isabs(v):
            raise ModelConfigError("Cache directory must be an absolute path")
        return v

    class Config:
        """Pydantic configuration."""

        env_prefix = "FORGE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        protected_namespaces = ()
