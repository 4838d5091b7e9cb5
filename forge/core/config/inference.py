"""Inference runtime configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class InferenceConfig(BaseSettings):
    """Inference runtime configuration.

    Attributes:
        batch_size: Number of texts sent to the model in one call.
        max_length: Maximum number of tokens per input.
        device: Requested device: auto, cpu, cuda or mps.
        num_threads: CPU threads available to the model backend.
        enable_gpu: Allow GPU devices when available.
    """

    batch_size: int = Field(default=32, description="Model batch size", ge=1, le=1024)
    max_length: int = Field(default=512, description="Maximum tokens per input", ge=8, le=8192)
    device: str = Field(default="auto", description="Inference device")
    num_threads: int = Field(default=4, description="CPU threads for inference", ge=1, le=256)
    enable_gpu: bool = Field(default=False, description="Use a GPU when one is available")

    @field_validator("device")
    @classmethod
    def validate_device(cls, v: str) -> str:
        v = v.lower()
        if v not in ("auto", "cpu", "cuda", "mps"):
            raise ValueError("device must be one of: auto, cpu, cuda, mps")
        return v

    class Config:
        """Pydantic configuration."""

        env_prefix = "FORGE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
