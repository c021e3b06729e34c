"""Data models for waitlist functionality."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class WaitlistEntry:
    """Represents one waitlist sign-up."""

    id: UUID
    name: str
    email: str
    native_language: str
    created_at: datetime
