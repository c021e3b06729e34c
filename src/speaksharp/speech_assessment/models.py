"""Data models for speech assessment functionality."""

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from .config import METRIC_DECIMALS


class IssueSeverity(str, Enum):
    """Issue severity enumeration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Issue:
    """A user-facing pronunciation or coverage problem."""

    type: str
    description: str
    severity: IssueSeverity

    def to_dict(self) -> dict[str, str]:
        """Return the stored representation of this issue."""
        return {
            "type": self.type,
            "description": self.description,
            "severity": self.severity.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Issue":
        """Build an issue from its stored representation."""
        return cls(
            type=data["type"],
            description=data["description"],
            severity=IssueSeverity(data["severity"]),
        )


@dataclass(frozen=True)
class EditCounts:
    """Breakdown of an edit distance into its operations."""

    substitutions: int = 0
    deletions: int = 0
    insertions: int = 0

    @property
    def total(self) -> int:
        """Total number of edits (the edit distance)."""
        return self.substitutions + self.deletions + self.insertions


def clamp_unit(value: float) -> float:
    """Clamp a rate to the closed interval [0, 1]."""
    return max(0.0, min(1.0, value))


def to_percentage(rate: float) -> int:
    """Convert a rate to a whole percentage, clamping to [0, 100] and rounding half up."""
    return int(math.floor(clamp_unit(rate) * 100 + 0.5))


def round_metric(rate: float, decimals: int = METRIC_DECIMALS) -> float:
    """Clamp a rate to [0, 1] and round it half up to a fixed number of decimals."""
    step = Decimal(1).scaleb(-decimals)
    return float(Decimal(clamp_unit(rate)).quantize(step, rounding=ROUND_HALF_UP))


@dataclass
class ScoreResult:
    """Represents the outcome of scoring one transcript against the reference."""

    duration_sec: int
    wer: float
    cer: float
    issues: list[Issue]

    # Diagnostics
    word_edits: int = 0
    char_edits: int = 0
    reference_word_count: int = 0
    hypothesis_word_count: int = 0
    transcript: str = ""
    word_errors: EditCounts = field(default_factory=EditCounts)

    @property
    def wer_pct(self) -> int:
        """Word error rate as a display percentage."""
        return to_percentage(self.wer)

    @property
    def cer_pct(self) -> int:
        """Character error rate (phoneme proxy) as a display percentage."""
        return to_percentage(self.cer)

    def to_record(self) -> dict[str, Any]:
        """
        Build the demo session record handed to a session store.

        Returns:
            Dictionary with durationSec, wer, per and issues keys
        """
        return {
            "durationSec": self.duration_sec,
            "wer": round_metric(self.wer),
            "per": round_metric(self.cer),
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass
class SessionOutcome:
    """Result of a completed demo session."""

    result: ScoreResult
    record_id: str | None = None
    persisted: bool = False
    error: str | None = None
