"""Tests for text preprocessing."""

import unicodedata

import pytest

from forge.core.config import PreprocessingConfig
from forge.preprocessing import normalizer, preprocess_text


@pytest.mark.unit
class TestNormalizer:
    """Test suite for the individual normalization helpers."""

    def test_remove_special_characters(self):
        assert normalizer.remove_special_characters("Hi, there! #1") == "Hi there 1"

    def test_normalize_whitespace(self):
        assert normalizer.normalize_whitespace("a \t\n b") == "a b"

    def test_normalize_unicode_composes(self):
        decomposed = unicodedata.normalize("NFD", "café")

        assert normalizer.normalize_unicode(decomposed) == "café"


@pytest.mark.unit
class TestPreprocessText:
    """Test suite for the configured preprocessing pipeline."""

    def test_defaults_only_tidy_whitespace(self):
        config = PreprocessingConfig()

        assert preprocess_text("  Hello,   World!  ", config) == "Hello, World!"

    def test_lowercase_and_special_chars(self):
        config = PreprocessingConfig(lowercase=True, remove_special_chars=True)

        assert preprocess_text("Great PRODUCT!!!", config) == "great product"

    def test_truncates_to_max_input_length(self):
        config = PreprocessingConfig(max_input_length=5)

        assert preprocess_text("abcdefghij", config) == "abcde"

    def test_whitespace_only_becomes_empty(self):
        assert preprocess_text(" \n\t ", PreprocessingConfig()) == ""

    def test_special_only_becomes_empty(self):
        config = PreprocessingConfig(remove_special_chars=True)

        assert preprocess_text("!!! ???", config) == ""
