"""Custom exceptions for waitlist functionality."""


class WaitlistError(Exception):
    """Base exception for waitlist errors."""

    pass


class ValidationError(WaitlistError):
    """Exception raised when sign-up details are missing or invalid."""

    pass


class DuplicateEmailError(WaitlistError):
    """Exception raised when an email is already on the waitlist."""

    pass
