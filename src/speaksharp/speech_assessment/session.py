"""Demo session orchestration: recording window, scoring and persistence."""

import asyncio
from collections.abc import Callable
from enum import Enum

from .config import (
    COUNTDOWN_TICK_SECONDS,
    MAX_RECORDING_SECONDS,
    PERSISTENCE_FAILURE_NOTICE,
    TRANSCRIPT_SETTLE_TIMEOUT,
)
from .exceptions import RecordingError, SessionStateError
from .interfaces import SessionStore, TranscriptSource
from .logging_utils import get_logger
from .models import ScoreResult, SessionOutcome
from .scorer import AccuracyScorer

logger = get_logger(__name__)


class SessionState(str, Enum):
    """Demo session lifecycle states."""

    IDLE = "idle"
    RECORDING = "recording"
    STOPPING = "stopping"
    COMPLETED = "completed"


class DemoSession:
    """
    Owns one timed recording: transcript source, countdown and result.

    The transcript buffer is append-only while recording. Stopping (manually
    or when the countdown reaches its limit) waits for the transcript source
    to signal completion, freezes the transcript, scores it exactly once and
    hands the record to the session store. A failed store does not lose the
    score; it is reported on the returned SessionOutcome instead.
    """

    def __init__(
        self,
        transcript_source: TranscriptSource,
        store: SessionStore | None = None,
        scorer: AccuracyScorer | None = None,
        max_duration: int = MAX_RECORDING_SECONDS,
        tick_seconds: float = COUNTDOWN_TICK_SECONDS,
        settle_timeout: float = TRANSCRIPT_SETTLE_TIMEOUT,
    ) -> None:
        """
        Initialize the session.

        Args:
            transcript_source: Source of live transcript text
            store: Optional store for the completed session record
            scorer: Scorer to use (defaults to one for the standard script)
            max_duration: Recording limit in seconds (1 to MAX_RECORDING_SECONDS)
            tick_seconds: Wall-clock length of one countdown second
            settle_timeout: Max seconds to wait for the source after stop

        Raises:
            ValueError: If max_duration is out of range
        """
        if not 1 <= max_duration <= MAX_RECORDING_SECONDS:
            raise ValueError(
                f"max_duration must be between 1 and {MAX_RECORDING_SECONDS}, "
                f"got {max_duration}"
            )

        self._source = transcript_source
        self._store = store
        self._scorer = scorer or AccuracyScorer()
        self._max_duration = max_duration
        self._tick_seconds = tick_seconds
        self._settle_timeout = settle_timeout

        self._state = SessionState.IDLE
        self._transcript = ""
        self._accepting_partials = False
        self._duration_sec = 0
        self._outcome: SessionOutcome | None = None
        self._outcome_future: asyncio.Future[SessionOutcome] | None = None

        self._countdown_task: asyncio.Task | None = None
        self._stop_lock = asyncio.Lock()

        self._transcript_callback: Callable[[str], None] | None = None
        self._tick_callback: Callable[[int], None] | None = None

    @property
    def state(self) -> SessionState:
        """Current lifecycle state."""
        return self._state

    @property
    def transcript(self) -> str:
        """Transcript accumulated so far (frozen once stopped)."""
        return self._transcript

    @property
    def duration_sec(self) -> int:
        """Whole seconds recorded so far."""
        return self._duration_sec

    @property
    def remaining_seconds(self) -> int:
        """Seconds left before the automatic stop."""
        return self._max_duration - self._duration_sec

    @property
    def outcome(self) -> SessionOutcome | None:
        """Outcome of the completed session, if any."""
        return self._outcome

    def set_transcript_callback(self, callback: Callable[[str], None]) -> None:
        """
        Set callback for live transcript updates.

        Args:
            callback: Function called with the full transcript after each partial
        """
        self._transcript_callback = callback

    def set_tick_callback(self, callback: Callable[[int], None]) -> None:
        """
        Set callback for countdown ticks.

        Args:
            callback: Function called with the seconds remaining after each tick
        """
        self._tick_callback = callback

    async def start(self) -> None:
        """
        Start recording.

        Raises:
            SessionStateError: If the session is not idle
            RecordingError: If the transcript source could not be started
        """
        if self._state != SessionState.IDLE:
            raise SessionStateError(
                f"Cannot start a session that is {self._state.value}"
            )

        self._transcript = ""
        self._duration_sec = 0
        self._outcome = None
        self._accepting_partials = True

        try:
            await self._source.start(self._on_partial)
        except RecordingError as e:
            self._accepting_partials = False
            logger.error(f"Could not start recording: {e}")
            raise
        except Exception as e:
            self._accepting_partials = False
            logger.error(f"Could not start transcript source '{self._source.name}': {e}")
            raise RecordingError(f"Could not start recording: {e}") from e

        self._outcome_future = asyncio.get_running_loop().create_future()
        self._state = SessionState.RECORDING
        self._countdown_task = asyncio.create_task(self._run_countdown())

        logger.debug(
            f"Demo session started ({self._max_duration}s limit, "
            f"source='{self._source.name}')"
        )

    async def stop(self) -> SessionOutcome:
        """
        Stop recording, score the transcript and persist the record.

        Safe to call more than once; later calls return the first outcome.

        Returns:
            SessionOutcome with the score result and persistence status

        Raises:
            SessionStateError: If the session was never started
            Exception: Whatever scoring raised; the session is back to idle
        """
        async with self._stop_lock:
            if self._outcome is not None:
                return self._outcome
            if self._state != SessionState.RECORDING:
                raise SessionStateError(
                    f"Cannot stop a session that is {self._state.value}"
                )

            self._state = SessionState.STOPPING
            await self._cancel_countdown()
            await self._stop_source()
            self._accepting_partials = False

            logger.debug(
                f"Recording stopped after {self._duration_sec}s, "
                f"transcript length {len(self._transcript)}"
            )

            try:
                result = self._scorer.score(self._transcript, self._duration_sec)
                outcome = await self._persist(result)
            except Exception as e:
                logger.error(f"Failed to analyze demo session: {e}")
                self._state = SessionState.IDLE
                if self._outcome_future is not None and not self._outcome_future.done():
                    self._outcome_future.set_exception(e)
                raise

            self._outcome = outcome
            self._state = SessionState.COMPLETED
            if self._outcome_future is not None and not self._outcome_future.done():
                self._outcome_future.set_result(outcome)

            logger.info(
                f"Demo session analyzed: WER {result.wer_pct}%, "
                f"PER proxy {result.cer_pct}%, persisted={outcome.persisted}"
            )
            return outcome

    async def wait_for_outcome(self) -> SessionOutcome:
        """
        Wait until the session has been stopped and scored.

        Returns:
            SessionOutcome of this recording

        Raises:
            SessionStateError: If the session was never started, or was
                closed before it was scored
        """
        if self._outcome is not None:
            return self._outcome
        if self._outcome_future is None:
            raise SessionStateError("Session has not been started")
        return await asyncio.shield(self._outcome_future)

    async def close(self) -> None:
        """
        Tear down the session without scoring.

        Cancels the countdown and stops the transcript source. A recording in
        progress is abandoned and the session returns to idle.
        """
        async with self._stop_lock:
            await self._cancel_countdown()
            if self._state == SessionState.RECORDING:
                await self._stop_source()
                self._accepting_partials = False
                self._state = SessionState.IDLE
                if self._outcome_future is not None and not self._outcome_future.done():
                    self._outcome_future.set_exception(
                        SessionStateError("Session was closed before it was scored")
                    )
                logger.debug("Demo session abandoned while recording")

    def reset(self) -> None:
        """
        Discard the transcript and outcome so a new recording can start.

        Raises:
            SessionStateError: If a recording is in progress
        """
        if self._state in (SessionState.RECORDING, SessionState.STOPPING):
            raise SessionStateError("Cannot reset while recording")

        self._transcript = ""
        self._duration_sec = 0
        self._outcome = None
        self._outcome_future = None
        self._state = SessionState.IDLE

    async def __aenter__(self) -> "DemoSession":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _on_partial(self, text: str) -> None:
        """Append a partial transcript from the source."""
        if not self._accepting_partials:
            logger.warning("Ignoring partial transcript received after stop")
            return

        self._transcript = f"{self._transcript} {text}".strip()
        logger.trace(f"Transcript now {len(self._transcript)} chars")  # type: ignore[attr-defined]

        if self._transcript_callback:
            try:
                self._transcript_callback(self._transcript)
            except Exception as e:
                logger.error(f"Error in transcript callback: {e}")

    async def _run_countdown(self) -> None:
        """Count recording seconds and stop automatically at the limit."""
        while self._duration_sec < self._max_duration:
            await asyncio.sleep(self._tick_seconds)
            self._duration_sec += 1

            if self._tick_callback:
                try:
                    self._tick_callback(self.remaining_seconds)
                except Exception as e:
                    logger.error(f"Error in tick callback: {e}")

        logger.debug(f"Recording limit of {self._max_duration}s reached")
        try:
            await self.stop()
        except Exception as e:
            # Already delivered to wait_for_outcome callers
            logger.debug(f"Automatic stop failed: {e}")

    async def _cancel_countdown(self) -> None:
        task = self._countdown_task
        if task is None or task is asyncio.current_task():
            return

        self._countdown_task = None
        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _stop_source(self) -> None:
        """Stop the transcript source and wait for its completion signal."""
        try:
            await asyncio.wait_for(self._source.stop(), timeout=self._settle_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                f"Transcript source '{self._source.name}' did not finish within "
                f"{self._settle_timeout}s; using transcript received so far"
            )
        except Exception as e:
            logger.error(f"Error stopping transcript source '{self._source.name}': {e}")

    async def _persist(self, result: ScoreResult) -> SessionOutcome:
        """Store the session record, keeping the result if storage fails."""
        if self._store is None:
            return SessionOutcome(result=result)

        try:
            record_id = await self._store.save_demo_session(result.to_record())
        except Exception as e:
            logger.error(f"Failed to save demo session: {e}")
            return SessionOutcome(
                result=result, persisted=False, error=PERSISTENCE_FAILURE_NOTICE
            )

        return SessionOutcome(result=result, record_id=record_id, persisted=True)
