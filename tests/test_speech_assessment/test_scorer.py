"""Tests for accuracy scoring against the reference script."""

from unittest.mock import patch

import pytest

from speaksharp.speech_assessment.config import (
    COVERAGE_DIFFERED_DESCRIPTION,
    COVERAGE_ISSUE_TYPE,
    COVERAGE_NO_SPEECH_DESCRIPTION,
)
from speaksharp.speech_assessment.models import EditCounts, IssueSeverity
from speaksharp.speech_assessment.scorer import (
    AccuracyScorer,
    character_error_rate,
    word_error_rate,
)

SCRIPT_WITHOUT_QUOTES = (
    "The quick brown fox jumps over the lazy dog. "
    "This sentence contains many common English sounds. "
    "Technology has revolutionized the way we communicate. "
    "I thoroughly enjoy reading books about philosophy and psychology."
)


@pytest.mark.unit
class TestErrorRates:
    """Test cases for the WER and CER formulas."""

    def test_wer_zero_for_identical_tokens(self) -> None:
        """Test identical token sequences have no word errors."""
        tokens = ["the", "quick", "brown", "fox"]
        assert word_error_rate(tokens, tokens) == 0.0

    def test_wer_empty_reference_is_maximal(self) -> None:
        """Test an empty reference scores 1 regardless of hypothesis."""
        assert word_error_rate([], []) == 1.0
        assert word_error_rate([], ["anything", "at", "all"]) == 1.0

    def test_wer_is_not_clamped(self) -> None:
        """Test heavy over-insertion can push WER above 1."""
        assert word_error_rate(["a"], ["b", "c", "d"]) == 3.0

    def test_wer_fraction(self) -> None:
        """Test one wrong word in four is 25%."""
        assert word_error_rate(["a", "b", "c", "d"], ["a", "b", "c", "x"]) == 0.25

    def test_cer_single_edit(self) -> None:
        """Test cat vs bat is one edit in three characters."""
        assert character_error_rate("cat", "bat") == pytest.approx(1 / 3)

    def test_cer_clamped_to_one(self) -> None:
        """Test a long, fully mismatched hypothesis yields exactly 1."""
        assert character_error_rate("ab", "xyzxyzxyz") == 1.0

    def test_cer_empty_reference_is_maximal(self) -> None:
        """Test an empty reference scores 1."""
        assert character_error_rate("", "") == 1.0
        assert character_error_rate("", "abc") == 1.0

    def test_precomputed_edits_are_used(self) -> None:
        """Test known edit counts are divided without recomputing the distance."""
        assert word_error_rate(["a", "b"], ["a", "b"], word_edits=1) == 0.5
        assert character_error_rate("abcd", "abcd", char_edits=2) == 0.5
        assert character_error_rate("abcd", "", char_edits=9) == 1.0


@pytest.mark.unit
class TestAccuracyScorerScenarios:
    """End-to-end scoring scenarios."""

    def test_perfect_reading(self) -> None:
        """Test an exact reading scores zero word errors."""
        result = AccuracyScorer("the quick brown fox").score("the quick brown fox")

        assert result.wer == 0.0
        assert result.wer_pct == 0
        assert result.cer == 0.0
        assert result.word_errors == EditCounts()

    def test_no_speech(self) -> None:
        """Test an empty transcript is maximal error with the no-speech issue."""
        result = AccuracyScorer("the quick brown fox").score("")

        assert result.word_edits == 4
        assert result.wer == 1.0
        assert result.wer_pct == 100
        assert result.cer == 1.0
        assert result.hypothesis_word_count == 0
        coverage = result.issues[-1]
        assert coverage.severity == IssueSeverity.HIGH
        assert coverage.description == COVERAGE_NO_SPEECH_DESCRIPTION

    def test_single_character_error(self) -> None:
        """Test cat vs bat gives a 33% phoneme proxy."""
        result = AccuracyScorer("cat").score("bat")

        assert result.char_edits == 1
        assert result.cer == pytest.approx(0.33, abs=0.01)
        assert result.cer_pct == 33
        assert result.wer == 1.0

    def test_case_and_punctuation_ignored_for_words(self) -> None:
        """Test word scoring ignores case and punctuation."""
        result = AccuracyScorer("The quick, brown fox!").score("the QUICK brown fox")

        assert result.wer == 0.0
        assert result.char_edits == 2

    def test_formatting_differences_do_not_count(self) -> None:
        """Test newlines and repeated spaces are collapsed on both sides."""
        scorer = AccuracyScorer("the quick\n   brown fox\n")
        result = scorer.score("  the quick brown\tfox ")

        assert result.wer == 0.0
        assert result.cer == 0.0
        assert result.transcript == "the quick brown fox"

    def test_partial_reading(self) -> None:
        """Test reading half the words gives 50% WER and a high severity."""
        result = AccuracyScorer("one two three four").score("one two")

        assert result.wer == 0.5
        assert result.word_errors == EditCounts(deletions=2)
        assert result.issues[-1].severity == IssueSeverity.HIGH
        assert result.issues[-1].description == COVERAGE_DIFFERED_DESCRIPTION

    def test_over_insertion_reported_as_full_error(self) -> None:
        """Test WER above 1 displays and stores as 100%."""
        result = AccuracyScorer("hi").score("hello there my good friend")

        assert result.wer == 5.0
        assert result.wer_pct == 100
        assert result.to_record()["wer"] == 1.0

    def test_empty_reference(self) -> None:
        """Test a reference without words scores maximal error."""
        result = AccuracyScorer("?!").score("hello")

        assert result.wer == 1.0
        assert result.reference_word_count == 0

    def test_duration_passed_through(self) -> None:
        """Test the recording duration lands on the result."""
        result = AccuracyScorer("a b").score("a b", duration_sec=7)

        assert result.duration_sec == 7
        assert result.to_record()["durationSec"] == 7

    def test_issue_list_order(self) -> None:
        """Test canned issues come first, coverage last."""
        result = AccuracyScorer("a b c").score("a b c")

        assert [issue.type for issue in result.issues] == [
            "/θ/→/t/",
            "/ɪ/→/iː/",
            COVERAGE_ISSUE_TYPE,
        ]
        assert result.issues[-1].severity == IssueSeverity.LOW


@pytest.mark.unit
class TestDefaultReferenceScript:
    """Test cases for scoring against the built-in assessment script."""

    def test_reference_normalized_once(self) -> None:
        """Test the multi-line script is collapsed to one line."""
        scorer = AccuracyScorer()

        assert "\n" not in scorer.reference_text
        assert scorer.reference_text.startswith('"The quick brown fox')
        assert len(scorer.reference_tokens) == 32

    def test_exact_reading_of_script(self) -> None:
        """Test reading the script scores no word errors; only the quotes differ."""
        result = AccuracyScorer().score(SCRIPT_WITHOUT_QUOTES, duration_sec=10)

        assert result.wer == 0.0
        assert result.char_edits == 2
        assert result.cer_pct == 1

    def test_silence_against_script(self) -> None:
        """Test no speech against the script is 100% on both metrics."""
        result = AccuracyScorer().score("")

        assert result.wer_pct == 100
        assert result.cer_pct == 100
        assert result.word_errors == EditCounts(deletions=32)

    def test_first_sentence_only(self) -> None:
        """Test reading only the first sentence leaves 23 words missed."""
        result = AccuracyScorer().score("The quick brown fox jumps over the lazy dog.")

        assert result.word_edits == 23
        assert result.wer == pytest.approx(23 / 32)
        assert result.wer_pct == 72

    def test_half_point_wer_rounds_up_in_record(self) -> None:
        """Test 4 missed words of 32 are stored as 0.13, matching the 13% display."""
        result = AccuracyScorer().score(
            SCRIPT_WITHOUT_QUOTES.replace(" about philosophy and psychology", "")
        )

        assert result.word_errors == EditCounts(deletions=4)
        assert result.wer == 0.125
        assert result.wer_pct == 13
        assert result.to_record()["wer"] == 0.13


@pytest.mark.unit
class TestScorerRateFunctions:
    """Test cases for the scorer delegating to the rate functions."""

    def test_score_uses_rate_functions(self) -> None:
        """Test score() computes both rates through the shared functions."""
        scorer = AccuracyScorer("the cat sat")

        with patch(
            "speaksharp.speech_assessment.scorer.word_error_rate", wraps=word_error_rate
        ) as wer_spy:
            with patch(
                "speaksharp.speech_assessment.scorer.character_error_rate",
                wraps=character_error_rate,
            ) as cer_spy:
                result = scorer.score("the bat sat")

        wer_spy.assert_called_once()
        cer_spy.assert_called_once()
        assert wer_spy.call_args.kwargs["word_edits"] == 1
        assert cer_spy.call_args.kwargs["char_edits"] == 1
        assert result.wer == pytest.approx(1 / 3)
        assert result.cer == pytest.approx(1 / 11)

    def test_rates_match_standalone_functions(self) -> None:
        """Test the scorer and the standalone functions agree."""
        scorer = AccuracyScorer("the quick brown fox")
        result = scorer.score("the quick brown box jumps")

        assert result.wer == word_error_rate(
            scorer.reference_tokens, ["the", "quick", "brown", "box", "jumps"]
        )
        assert result.cer == character_error_rate(
            "the quick brown fox", "the quick brown box jumps"
        )
