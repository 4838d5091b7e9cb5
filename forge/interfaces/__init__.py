"""
Interfaces decoupling the HTTP layer from concrete services.
"""

from forge.interfaces.inference_interface import IInferenceEngine

__all__ = ["IInferenceEngine"]
