"""Text preprocessing configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings


class PreprocessingConfig(BaseSettings):
    """Text normalization applied before inference.

    Attributes:
        lowercase: Lowercase the input text.
        remove_special_chars: Strip characters other than ASCII letters, digits and whitespace.
        normalize_unicode: Apply NFC unicode normalization.
        max_input_length: Maximum number of characters kept from the input.
    """

    lowercase: bool = Field(default=False, description="Lowercase input text")
    remove_special_chars: bool = Field(default=False, description="Remove special characters")
    normalize_unicode: bool = Field(default=True, description="Apply NFC normalization")
    max_input_length: int = Field(
        default=10000,
        description="Maximum input length in characters",
        ge=1,
        le=1000000,
    )

    class Config:
        """Pydantic configuration."""

        env_prefix = "FORGE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
