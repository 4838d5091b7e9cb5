"""
TransformerForge: an HTTP inference server for Transformers models.
"""

__version__ = "0.1.0"
