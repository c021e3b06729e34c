"""Tests for text normalization and word tokenization."""

import pytest

from speaksharp.speech_assessment.text import (
    normalize_whitespace,
    preview_transcript,
    tokenize_words,
)


@pytest.mark.unit
class TestTokenizeWords:
    """Test cases for the word tokenizer."""

    def test_strips_punctuation_and_lowercases(self) -> None:
        """Test punctuation becomes separators and case is folded."""
        assert tokenize_words("The quick, brown fox!") == ["the", "quick", "brown", "fox"]

    def test_whitespace_only_gives_empty_sequence(self) -> None:
        """Test whitespace-only input yields no tokens."""
        assert tokenize_words("   ") == []

    def test_punctuation_only_gives_empty_sequence(self) -> None:
        """Test punctuation-only input yields no tokens."""
        assert tokenize_words(' ... ?! "" -- ') == []

    def test_keeps_apostrophes_inside_words(self) -> None:
        """Test contractions stay a single token."""
        assert tokenize_words("don't stop") == ["don't", "stop"]

    def test_keeps_digits(self) -> None:
        """Test digits are word characters."""
        assert tokenize_words("Call 911, now") == ["call", "911", "now"]

    def test_hyphen_splits_words(self) -> None:
        """Test hyphenated words split into separate tokens."""
        assert tokenize_words("well-known") == ["well", "known"]

    def test_non_ascii_letters_are_separators(self) -> None:
        """Test letters outside a-z are masked like punctuation."""
        assert tokenize_words("café au lait") == ["caf", "au", "lait"]

    def test_preserves_word_order(self) -> None:
        """Test token order follows the input."""
        assert tokenize_words("dog lazy the") == ["dog", "lazy", "the"]

    def test_empty_string(self) -> None:
        """Test empty input yields no tokens."""
        assert tokenize_words("") == []


@pytest.mark.unit
class TestNormalizeWhitespace:
    """Test cases for whitespace normalization."""

    def test_collapses_newlines_and_spaces(self) -> None:
        """Test multi-line text collapses to single spaces."""
        text = '\n"The quick brown fox.  \nThis sentence"\n'
        assert normalize_whitespace(text) == '"The quick brown fox. This sentence"'

    def test_tabs_collapse(self) -> None:
        """Test tabs count as whitespace."""
        assert normalize_whitespace("a\t\tb") == "a b"

    def test_keeps_punctuation(self) -> None:
        """Test only whitespace is touched."""
        assert normalize_whitespace("  Hi, there!  ") == "Hi, there!"

    def test_whitespace_only_becomes_empty(self) -> None:
        """Test whitespace-only input becomes empty."""
        assert normalize_whitespace(" \n\t ") == ""


@pytest.mark.unit
class TestPreviewTranscript:
    """Test cases for live transcript previews."""

    def test_short_text_unchanged(self) -> None:
        """Test text within the limit is returned as-is."""
        assert preview_transcript("hello world") == "hello world"

    def test_long_text_truncated_with_ellipsis(self) -> None:
        """Test text over the limit is cut and marked."""
        text = "a" * 150
        preview = preview_transcript(text)

        assert preview == "a" * 140 + "..."

    def test_custom_limit(self) -> None:
        """Test the limit can be overridden."""
        assert preview_transcript("abcdef", limit=3) == "abc..."
