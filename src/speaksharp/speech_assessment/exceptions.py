"""Custom exceptions for speech assessment functionality."""


class SpeechAssessmentError(Exception):
    """Base exception for speech assessment errors."""

    pass


class RecordingError(SpeechAssessmentError):
    """Exception raised when a recording session cannot be started."""

    pass


class MicrophoneAccessError(RecordingError):
    """Exception raised when microphone access is denied or unavailable."""

    pass


class SessionStateError(SpeechAssessmentError):
    """Exception raised for invalid demo session lifecycle transitions."""

    pass


class StorageError(SpeechAssessmentError):
    """Exception raised when a demo session record cannot be stored."""

    pass
