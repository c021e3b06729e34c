"""Transcript source implementations."""

import asyncio
from collections.abc import Iterable

from .interfaces import PartialTranscriptCallback, TranscriptSource
from .logging_utils import get_logger

logger = get_logger(__name__)


class ScriptedTranscriptSource(TranscriptSource):
    """
    Feeds a fixed list of partial transcripts, as a recognizer would.

    Used as a test double and by the CLI. Partials are delivered from a
    background task, ``interval`` seconds apart (the first one after one
    interval), until the list runs out or the source is stopped.
    """

    def __init__(
        self, partials: Iterable[str], interval: float = 0.0, name: str = "scripted"
    ) -> None:
        """
        Initialize the source.

        Args:
            partials: Pieces of recognized text, in delivery order
            interval: Seconds to wait before each piece
            name: Source name used in logs
        """
        self._partials = list(partials)
        self._interval = interval
        self._name = name
        self._task: asyncio.Task | None = None
        self._delivered = 0

    @property
    def name(self) -> str:
        """Return the source name."""
        return self._name

    @property
    def delivered_count(self) -> int:
        """Number of partials delivered so far."""
        return self._delivered

    @property
    def is_running(self) -> bool:
        """Whether partials are still being delivered."""
        return self._task is not None and not self._task.done()

    async def start(self, on_partial: PartialTranscriptCallback) -> None:
        """Start delivering partials to the callback."""
        if self.is_running:
            logger.warning(f"Transcript source '{self._name}' is already running")
            return

        self._delivered = 0
        self._task = asyncio.create_task(self._deliver(on_partial))
        logger.debug(
            f"Transcript source '{self._name}' started with {len(self._partials)} partials"
        )

    async def stop(self) -> None:
        """Cancel delivery and wait until the delivery task has finished."""
        if self._task is None:
            return

        if not self._task.done():
            self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        finally:
            self._task = None

        logger.debug(
            f"Transcript source '{self._name}' stopped after {self._delivered} partials"
        )

    async def _deliver(self, on_partial: PartialTranscriptCallback) -> None:
        for text in self._partials:
            await asyncio.sleep(self._interval)
            on_partial(text)
            self._delivered += 1
