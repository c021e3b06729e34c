"""Abstract interfaces for the collaborators of a demo session."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

PartialTranscriptCallback = Callable[[str], None]


class TranscriptSource(ABC):
    """
    Abstract source of live transcript text.

    Implementations wrap a platform speech recognizer (native speech APIs, a
    cloud ASR client) or feed canned text for tests.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a unique name for this source."""
        pass

    @abstractmethod
    async def start(self, on_partial: PartialTranscriptCallback) -> None:
        """
        Begin delivering partial transcript text.

        Args:
            on_partial: Called with each newly recognized piece of text, in order

        Raises:
            RecordingError: If the microphone or recognizer cannot be acquired
        """
        pass

    @abstractmethod
    async def stop(self) -> None:
        """
        Cancel recognition and release its resources.

        Returning is the completion signal: once stop() has returned the
        source must not call on_partial again. Calling stop() on a source
        that was never started, or twice, is a no-op.
        """
        pass


class SessionStore(ABC):
    """Abstract storage for completed demo session records."""

    @abstractmethod
    async def save_demo_session(self, record: dict[str, Any]) -> str:
        """
        Store a demo session record.

        Args:
            record: Mapping with durationSec, wer, per and issues keys

        Returns:
            Identifier of the stored record

        Raises:
            StorageError: If the record could not be stored
        """
        pass

    @abstractmethod
    async def list_demo_sessions(self) -> list[dict[str, Any]]:
        """
        Return all stored demo session records.

        Returns:
            Records in the order they were stored
        """
        pass
