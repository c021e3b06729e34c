"""Waitlist module for landing-page sign-ups."""

from .exceptions import DuplicateEmailError, ValidationError, WaitlistError
from .models import WaitlistEntry
from .registry import WaitlistRegistry

__all__ = [
    "WaitlistEntry",
    "WaitlistRegistry",
    "WaitlistError",
    "ValidationError",
    "DuplicateEmailError",
]
