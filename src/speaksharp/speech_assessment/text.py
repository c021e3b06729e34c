"""Text normalization and word tokenization for transcript comparison."""

import re

from .config import LIVE_TRANSCRIPT_PREVIEW_CHARS

_WHITESPACE_RUN = re.compile(r"\s+")
# Anything other than lowercase ASCII letters, digits, whitespace or apostrophes
_NON_WORD_CHAR = re.compile(r"[^a-z0-9\s']")


def normalize_whitespace(text: str) -> str:
    """
    Collapse whitespace runs (newlines included) to single spaces and trim.

    Example: '  "The quick\\n brown fox.  ' -> '"The quick brown fox.'
    """
    return _WHITESPACE_RUN.sub(" ", text).strip()


def tokenize_words(text: str) -> list[str]:
    """
    Split text into lowercase word tokens for word-level comparison.

    Characters outside ``[a-z0-9']`` become separators, so punctuation never
    ends up in a token while contractions like "don't" stay whole.

    Example: "The quick, brown fox!" -> ["the", "quick", "brown", "fox"]

    Args:
        text: Arbitrary input text

    Returns:
        Tokens in their original order; empty if the text has no word characters
    """
    masked = _NON_WORD_CHAR.sub(" ", text.lower())
    return [token for token in _WHITESPACE_RUN.split(masked) if token]


def preview_transcript(text: str, limit: int = LIVE_TRANSCRIPT_PREVIEW_CHARS) -> str:
    """Shorten a live transcript for display, marking truncation with '...'."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
