"""Speech assessment module: transcript accuracy scoring and timed demo sessions."""

from .interfaces import SessionStore, TranscriptSource
from .models import EditCounts, Issue, IssueSeverity, ScoreResult, SessionOutcome
from .scorer import AccuracyScorer, character_error_rate, word_error_rate
from .session import DemoSession, SessionState
from .storage import InMemorySessionStore
from .text import normalize_whitespace, tokenize_words
from .transcript_sources import ScriptedTranscriptSource

__all__ = [
    "AccuracyScorer",
    "DemoSession",
    "EditCounts",
    "InMemorySessionStore",
    "Issue",
    "IssueSeverity",
    "ScoreResult",
    "ScriptedTranscriptSource",
    "SessionOutcome",
    "SessionState",
    "SessionStore",
    "TranscriptSource",
    "character_error_rate",
    "normalize_whitespace",
    "tokenize_words",
    "word_error_rate",
]
