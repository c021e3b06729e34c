"""Issue classification for scored demo sessions."""

from .config import (
    COVERAGE_DIFFERED_DESCRIPTION,
    COVERAGE_ISSUE_TYPE,
    COVERAGE_NO_SPEECH_DESCRIPTION,
    HIGH_SEVERITY_WER_THRESHOLD,
    MEDIUM_SEVERITY_WER_THRESHOLD,
    PRONUNCIATION_ISSUE_EXAMPLES,
)
from .models import Issue, IssueSeverity

PRONUNCIATION_ISSUES: tuple[Issue, ...] = tuple(
    Issue.from_dict(entry) for entry in PRONUNCIATION_ISSUE_EXAMPLES
)


def severity_for_wer(wer: float) -> IssueSeverity:
    """Map an unclamped word error rate onto a severity."""
    if wer > HIGH_SEVERITY_WER_THRESHOLD:
        return IssueSeverity.HIGH
    if wer > MEDIUM_SEVERITY_WER_THRESHOLD:
        return IssueSeverity.MEDIUM
    return IssueSeverity.LOW


def classify_coverage(wer: float, hypothesis_word_count: int) -> Issue:
    """
    Build the transcript coverage issue.

    Args:
        wer: Word error rate before clamping
        hypothesis_word_count: Number of tokens in the recognized transcript

    Returns:
        Issue describing how well the transcript covered the reference
    """
    description = (
        COVERAGE_DIFFERED_DESCRIPTION
        if hypothesis_word_count > 0
        else COVERAGE_NO_SPEECH_DESCRIPTION
    )
    return Issue(
        type=COVERAGE_ISSUE_TYPE,
        description=description,
        severity=severity_for_wer(wer),
    )


def build_issues(wer: float, hypothesis_word_count: int) -> list[Issue]:
    """Return the canned pronunciation issues followed by the coverage issue."""
    return [*PRONUNCIATION_ISSUES, classify_coverage(wer, hypothesis_word_count)]
