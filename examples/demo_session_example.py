"""Example demonstrating a demo session and the waitlist registry."""

import asyncio
import logging

from speaksharp.speech_assessment import (
    DemoSession,
    InMemorySessionStore,
    ScriptedTranscriptSource,
)
from speaksharp.waitlist import DuplicateEmailError, WaitlistRegistry

logging.basicConfig(level=logging.INFO)


async def main() -> None:
    """Demonstrate a scripted recording and waitlist sign-ups."""
    # Partial results arrive as a recognizer would emit them
    source = ScriptedTranscriptSource(
        [
            "the quick brown fox jumps over the lazy dog",
            "this sentence contains many common english sounds",
        ],
        interval=0.2,
    )
    store = InMemorySessionStore()

    # Example 1: Record with a fast countdown and let it stop itself
    print("=== Recording ===")
    async with DemoSession(source, store=store, max_duration=3, tick_seconds=0.2) as session:
        session.set_tick_callback(lambda remaining: print(f"{remaining}s remaining"))
        await session.start()
        outcome = await session.wait_for_outcome()

    result = outcome.result
    print(f"WER: {result.wer_pct}%  PER proxy: {result.cer_pct}%")
    for issue in result.issues:
        print(f"  [{issue.severity.value}] {issue.type}: {issue.description}")
    print()

    # Example 2: Stored records
    print("=== Stored sessions ===")
    for record in await store.list_demo_sessions():
        print(record)
    print()

    # Example 3: Waitlist sign-ups
    print("=== Waitlist ===")
    registry = WaitlistRegistry()
    await registry.add_to_waitlist("Ana Lopez", "ana@example.com", "Spanish")
    try:
        await registry.add_to_waitlist("Ana L.", "ANA@example.com", "Spanish")
    except DuplicateEmailError as e:
        print(f"Rejected: {e}")
    print(f"Entries: {[entry.email for entry in await registry.get_all_waitlist()]}")


if __name__ == "__main__":
    asyncio.run(main())
