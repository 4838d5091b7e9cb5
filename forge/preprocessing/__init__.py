"""
Text preprocessing applied before inference.
"""

from forge.core.config import PreprocessingConfig
from forge.preprocessing import normalizer


def preprocess_text(text: str, config: PreprocessingConfig) -> str:
    """Normalizes input text according to the preprocessing configuration.

    Steps, in order: unicode normalization, lowercasing, special character
    removal, truncation to `max_input_length` characters, whitespace
    collapsing and trimming.

    Args:
        text: The raw input text.
        config: The preprocessing configuration.

    Returns:
        The normalized text. May be empty.
    """
    if config.normalize_unicode:
        text = normalizer.normalize_unicode(text)

    if config.lowercase:
        text = text.lower()

    if config.remove_special_chars:
        text = normalizer.remove_special_characters(text)

    if len(text) > config.max_input_length:
        text = text[: config.max_input_length]

    text = normalizer.normalize_whitespace(text)
    return normalizer.remove_extra_spaces(text)


__all__ = ["preprocess_text"]
