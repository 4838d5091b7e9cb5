"""
Inference device detection.

`torch` is only imported when a GPU may be used, so CPU-only deployments
never pay for it.
"""

from typing import Optional

from pydantic import BaseModel

from forge.core.config import InferenceConfig
from forge.core.logging import get_logger

logger = get_logger(__name__)


class DeviceInfo(BaseModel):
    """The device used for inference and, for GPUs, its total memory in bytes."""

    device_type: str
    available_memory: Optional[int] = None


def auto_detect_device(config: InferenceConfig) -> str:
    """Picks the device models run on.

    An explicit `cpu`, `cuda` or `mps` device is honoured as configured.
    With `auto`, CPU is used unless GPUs are enabled, in which case CUDA is
    preferred over Apple MPS.

    Args:
        config: The inference configuration.

    Returns:
        Device string ('cuda', 'mps', or 'cpu').
    """
    if config.device != "auto":
        return config.device

    if not config.enable_gpu:
        logger.info("GPU disabled, using CPU")
        return "cpu"

    import torch

    if torch.cuda.is_available():
        logger.info("CUDA device detected and enabled", device_name=torch.cuda.get_device_name(0))
        return "cuda"
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        logger.info("Metal device detected and enabled")
        return "mps"

    logger.warning("No GPU available, falling back to CPU")
    return "cpu"


def get_device_info(config: InferenceConfig) -> DeviceInfo:
    """Describes the inference device for the system info endpoint."""
    device_type = auto_detect_device(config)
    available_memory = None

    if device_type == "cuda":
        import torch

        available_memory = torch.cuda.get_device_properties(0).total_memory

    return DeviceInfo(device_type=device_type, available_memory=available_memory)
