"""Text normalization helpers."""

import re
import unicodedata

SPECIAL_CHARS_RE = re.compile(r"[^a-zA-Z0-9\s]")
WHITESPACE_RE = re.compile(r"\s+")


def remove_special_characters(text: str) -> str:
    """Removes every character that is not an ASCII letter, digit or whitespace."""
    return SPECIAL_CHARS_RE.sub("", text)


def normalize_whitespace(text: str) -> str:
    """Collapses every run of whitespace into a single space."""
    return WHITESPACE_RE.sub(" ", text)


def remove_extra_spaces(text: str) -> str:
    return text.strip()


def normalize_unicode(text: str) -> str:
    """Applies NFC normalization so composed and decomposed forms compare equal."""
    return unicodedata.normalize("NFC", text)
