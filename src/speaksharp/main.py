"""Command-line interface for the speech assessment demo."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .speech_assessment.config import (
    COUNTDOWN_TICK_SECONDS,
    MAX_RECORDING_SECONDS,
    REFERENCE_SCRIPT,
)
from .speech_assessment.exceptions import RecordingError
from .speech_assessment.logging_utils import configure_logging
from .speech_assessment.models import SessionOutcome
from .speech_assessment.session import DemoSession
from .speech_assessment.storage import InMemorySessionStore
from .speech_assessment.text import preview_transcript
from .speech_assessment.transcript_sources import ScriptedTranscriptSource


class SpeechDemoCLI:
    """Command-line interface for one timed speech assessment."""

    def __init__(
        self,
        session: DemoSession,
        show_reference: bool = False,
        json_output: bool = False,
    ) -> None:
        """
        Initialize the CLI.

        Args:
            session: Demo session to run
            show_reference: Whether to print the reference script first
            json_output: Whether to print the result as JSON instead of text
        """
        self._session = session
        self._show_reference = show_reference
        self._json_output = json_output
        self._outcome: SessionOutcome | None = None

    async def run(self) -> int:
        """
        Record, wait for the automatic stop and print the analysis.

        Returns:
            Process exit code
        """
        if self._show_reference and not self._json_output:
            print("📖 Read this text aloud:")
            print(REFERENCE_SCRIPT.strip())
            print()

        if not self._json_output:
            self._session.set_tick_callback(self._on_tick)
            self._session.set_transcript_callback(self._on_transcript)

        try:
            if not self._json_output:
                print("🎤 Recording... read the script aloud.")
            await self._session.start()
        except RecordingError as e:
            print(f"❌ Could not access microphone: {e}")
            return 1

        try:
            self._outcome = await self._session.wait_for_outcome()
        except (KeyboardInterrupt, asyncio.CancelledError):
            print("\n👋 Goodbye!")
            return 0
        finally:
            await self._session.close()

        self._print_outcome(self._outcome)
        return 0

    def _on_tick(self, remaining: int) -> None:
        print(f"⏱️  {remaining}s remaining")

    def _on_transcript(self, transcript: str) -> None:
        print(f"   Live transcript: {preview_transcript(transcript)}")

    def _print_outcome(self, outcome: SessionOutcome) -> None:
        """
        Print the analysis of a completed session.

        Args:
            outcome: Completed session outcome
        """
        result = outcome.result

        if self._json_output:
            payload = {
                **result.to_record(),
                "werPct": result.wer_pct,
                "cerPct": result.cer_pct,
                "transcript": result.transcript,
                "persisted": outcome.persisted,
            }
            print(json.dumps(payload, ensure_ascii=False, indent=2))
            return

        print()
        print(f"📊 Your Speech Analysis ({result.duration_sec}-second recording)")
        print(f"   Word Error Rate (WER):      {result.wer_pct}%")
        print(f"   Phoneme Error Rate (proxy): {result.cer_pct}%")
        errors = result.word_errors
        print(
            f"   Word errors: {errors.substitutions} substituted, "
            f"{errors.deletions} missed, {errors.insertions} extra"
        )
        print("⚠️  Pronunciation Issues:")
        for issue in result.issues:
            print(f"   [{issue.severity.value}] {issue.type}: {issue.description}")
        print(f"📝 Recognized Transcript: {result.transcript or 'No transcript available'}")

        if outcome.error:
            print(f"❌ {outcome.error}")
        else:
            print("✅ Analysis complete!")


async def main(
    partials: list[str],
    duration: int = MAX_RECORDING_SECONDS,
    tick_seconds: float = COUNTDOWN_TICK_SECONDS,
    event_interval: float | None = None,
    show_reference: bool = False,
    json_output: bool = False,
) -> int:
    """Main entry point for the CLI application."""
    source = ScriptedTranscriptSource(
        partials,
        interval=tick_seconds if event_interval is None else event_interval,
    )
    session = DemoSession(
        source,
        store=InMemorySessionStore(),
        max_duration=duration,
        tick_seconds=tick_seconds,
    )
    cli = SpeechDemoCLI(session, show_reference=show_reference, json_output=json_output)
    return await cli.run()


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Speech Assessment Demo - Score a read-aloud transcript against the reference script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  speaksharp --transcript "the quick brown fox"          # Score a transcript
  speaksharp --transcript-file partials.txt              # One partial result per line
  speaksharp --transcript "hello" --tick-interval 0.05   # Fast countdown
  speaksharp --duration 5 --show-reference               # 5-second recording
  speaksharp --transcript "hello" --json                 # Print the stored record as JSON
  speaksharp -v --transcript "hello"                     # Verbose logging

Without --transcript or --transcript-file no speech is recognized, which
scores as 100% word error rate.
        """,
    )

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--transcript",
        type=str,
        default=None,
        metavar="TEXT",
        help="Recognized text to score, delivered as a single partial result",
    )
    source_group.add_argument(
        "--transcript-file",
        type=str,
        default=None,
        metavar="PATH",
        help="File with one partial recognition result per line",
    )

    parser.add_argument(
        "--duration",
        type=int,
        default=MAX_RECORDING_SECONDS,
        metavar="SECONDS",
        help=f"Recording length in seconds (1-{MAX_RECORDING_SECONDS}, default: {MAX_RECORDING_SECONDS})",
    )

    parser.add_argument(
        "--tick-interval",
        type=float,
        default=COUNTDOWN_TICK_SECONDS,
        metavar="SECONDS",
        help="Wall-clock length of one countdown second (default: 1.0)",
    )

    parser.add_argument(
        "--event-interval",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Delay before each partial result (default: same as --tick-interval)",
    )

    parser.add_argument(
        "--show-reference",
        action="store_true",
        help="Print the reference script before recording",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the session record as JSON",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging and debug information",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace logging (most verbose, includes edit-distance details)",
    )

    return parser


def load_partials(args: argparse.Namespace) -> list[str]:
    """
    Collect the partial transcripts requested on the command line.

    Args:
        args: Parsed arguments from argparse

    Returns:
        Partial transcripts in delivery order

    Raises:
        OSError: If the transcript file cannot be read
    """
    if args.transcript_file:
        text = Path(args.transcript_file).read_text(encoding="utf-8")
        return [line.strip() for line in text.splitlines() if line.strip()]
    if args.transcript:
        return [args.transcript]
    return []


def handle_arguments(args: argparse.Namespace) -> tuple[bool, bool]:
    """
    Handle parsed command-line arguments.

    Args:
        args: Parsed arguments from argparse

    Returns:
        Tuple of (success, should_continue):
        - success: True if all arguments are valid, False otherwise
        - should_continue: True if execution should continue, False if it should stop
    """
    configure_logging(verbose=args.verbose, trace=args.trace)

    if not 1 <= args.duration <= MAX_RECORDING_SECONDS:
        print(f"❌ --duration must be between 1 and {MAX_RECORDING_SECONDS} seconds.")
        return False, False

    if args.tick_interval <= 0:
        print("❌ --tick-interval must be positive.")
        return False, False

    if args.event_interval is not None and args.event_interval < 0:
        print("❌ --event-interval must not be negative.")
        return False, False

    if args.transcript_file and not Path(args.transcript_file).is_file():
        print(f"❌ Transcript file not found: {args.transcript_file}")
        return False, False

    return True, True


def cli_entry_with_args() -> None:
    """CLI entry point with argument parsing."""
    parser = create_argument_parser()

    try:
        args = parser.parse_args()

        success, should_continue = handle_arguments(args)

        if not success:
            sys.exit(1)

        if not should_continue:
            sys.exit(0)

        exit_code = asyncio.run(
            main(
                load_partials(args),
                duration=args.duration,
                tick_seconds=args.tick_interval,
                event_interval=args.event_interval,
                show_reference=args.show_reference,
                json_output=args.json,
            )
        )
        sys.exit(exit_code)

    except KeyboardInterrupt:
        pass  # Graceful shutdown
    except SystemExit:
        # Re-raise SystemExit (from argparse help, etc.)
        raise
    except Exception as e:
        logging.error(f"Speech assessment demo failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli_entry_with_args()
