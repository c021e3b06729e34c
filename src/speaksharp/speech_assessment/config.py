"""Configuration constants for speech assessment functionality."""

# Assessment Script
# Shown to the user as-is; whitespace is collapsed before comparison.
REFERENCE_SCRIPT = """
"The quick brown fox jumps over the lazy dog.
This sentence contains many common English sounds.
Technology has revolutionized the way we communicate.
I thoroughly enjoy reading books about philosophy and psychology."
"""

# Recording Window
MAX_RECORDING_SECONDS = 10  # seconds - countdown limit, triggers automatic stop
COUNTDOWN_TICK_SECONDS = 1.0  # seconds - wall-clock length of one countdown step
TRANSCRIPT_SETTLE_TIMEOUT = 1.0  # seconds - max wait for trailing transcript events
LIVE_TRANSCRIPT_PREVIEW_CHARS = 140  # characters of live transcript shown while recording

# Coverage Severity Thresholds (strictly greater than)
HIGH_SEVERITY_WER_THRESHOLD = 0.4
MEDIUM_SEVERITY_WER_THRESHOLD = 0.2

# Stored Metrics
METRIC_DECIMALS = 2  # decimal places for stored wer/per values

# Coverage Issue
COVERAGE_ISSUE_TYPE = "Transcript Coverage"
COVERAGE_DIFFERED_DESCRIPTION = "Some words differed from the reference script"
COVERAGE_NO_SPEECH_DESCRIPTION = "No speech detected or unsupported transcription"

# Representative pronunciation-confusion patterns, listed ahead of the
# coverage issue in every result (order matters)
PRONUNCIATION_ISSUE_EXAMPLES = [
    {
        "type": "/θ/→/t/",
        "description": "Replacing 'th' sound with 't' sound",
        "severity": "high",
    },
    {
        "type": "/ɪ/→/iː/",
        "description": "Pronouncing short 'i' as long 'ee' sound",
        "severity": "medium",
    },
]

# User-facing Notices
PERSISTENCE_FAILURE_NOTICE = "Failed to save demo session"
