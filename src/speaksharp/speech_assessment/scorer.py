"""Accuracy scoring of a transcript against the reference script."""

import time
from collections.abc import Sequence

from .classifier import build_issues
from .config import REFERENCE_SCRIPT
from .edit_distance import edit_distance, edit_operations
from .logging_utils import get_logger
from .models import ScoreResult
from .text import normalize_whitespace, tokenize_words

logger = get_logger(__name__)


def word_error_rate(
    reference_tokens: Sequence[str],
    hypothesis_tokens: Sequence[str],
    word_edits: int | None = None,
) -> float:
    """
    Word error rate: word edits divided by reference length.

    Not clamped, so heavy over-insertion can exceed 1. An empty reference
    counts as maximal error. Pass ``word_edits`` when the distance is
    already known.
    """
    if not reference_tokens:
        return 1.0
    if word_edits is None:
        word_edits = edit_distance(reference_tokens, hypothesis_tokens)
    return word_edits / len(reference_tokens)


def character_error_rate(
    reference: str, hypothesis: str, char_edits: int | None = None
) -> float:
    """
    Character error rate, capped at 1.

    Compares code points of both strings as given (callers lowercase and
    collapse whitespace first). An empty reference counts as maximal error.
    """
    if not reference:
        return 1.0
    if char_edits is None:
        char_edits = edit_distance(reference, hypothesis)
    return min(1.0, char_edits / len(reference))


class AccuracyScorer:
    """Scores recognized transcripts against a fixed reference script."""

    def __init__(self, reference_script: str = REFERENCE_SCRIPT) -> None:
        """
        Initialize the scorer and normalize the reference once.

        Args:
            reference_script: Text the speaker was asked to read aloud
        """
        self._reference_text = normalize_whitespace(reference_script)
        self._reference_chars = self._reference_text.lower()
        self._reference_tokens = tokenize_words(self._reference_text)

    @property
    def reference_text(self) -> str:
        """Whitespace-normalized reference script."""
        return self._reference_text

    @property
    def reference_tokens(self) -> list[str]:
        """Word tokens of the reference script."""
        return list(self._reference_tokens)

    def score(self, transcript: str, duration_sec: int = 0) -> ScoreResult:
        """
        Score a transcript against the reference script.

        Args:
            transcript: Recognized text, possibly empty
            duration_sec: Recording length in whole seconds

        Returns:
            ScoreResult with WER, CER, issues and edit diagnostics
        """
        start_time = time.time()

        hypothesis_text = normalize_whitespace(transcript)
        hypothesis_tokens = tokenize_words(hypothesis_text)

        word_errors = edit_operations(self._reference_tokens, hypothesis_tokens)
        word_edits = word_errors.total
        reference_word_count = len(self._reference_tokens)
        wer = word_error_rate(self._reference_tokens, hypothesis_tokens, word_edits=word_edits)

        hypothesis_chars = hypothesis_text.lower()
        char_edits = edit_distance(self._reference_chars, hypothesis_chars)
        cer = character_error_rate(
            self._reference_chars, hypothesis_chars, char_edits=char_edits
        )

        issues = build_issues(wer, len(hypothesis_tokens))

        logger.debug(
            f"Scored transcript: words={len(hypothesis_tokens)}/{reference_word_count}, "
            f"word_edits={word_edits} ({word_errors}), char_edits={char_edits}, "
            f"wer={wer:.3f}, cer={cer:.3f}, took {time.time() - start_time:.4f}s"
        )

        return ScoreResult(
            duration_sec=duration_sec,
            wer=wer,
            cer=cer,
            issues=issues,
            word_edits=word_edits,
            char_edits=char_edits,
            reference_word_count=reference_word_count,
            hypothesis_word_count=len(hypothesis_tokens),
            transcript=hypothesis_text,
            word_errors=word_errors,
        )
