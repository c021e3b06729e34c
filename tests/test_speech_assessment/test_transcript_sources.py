"""Tests for transcript sources."""

import asyncio

import pytest

from speaksharp.speech_assessment.interfaces import TranscriptSource
from speaksharp.speech_assessment.transcript_sources import ScriptedTranscriptSource


@pytest.mark.unit
class TestScriptedTranscriptSource:
    """Test cases for the scripted transcript source."""

    def test_is_transcript_source(self) -> None:
        """Test the scripted source implements the interface."""
        source = ScriptedTranscriptSource(["hello"], name="canned")

        assert isinstance(source, TranscriptSource)
        assert source.name == "canned"
        assert source.is_running is False

    @pytest.mark.asyncio
    async def test_delivers_partials_in_order(self) -> None:
        """Test every partial reaches the callback in order."""
        received: list[str] = []
        source = ScriptedTranscriptSource(["the quick", "brown", "fox"])

        await source.start(received.append)
        await asyncio.sleep(0.05)

        assert received == ["the quick", "brown", "fox"]
        assert source.delivered_count == 3
        assert source.is_running is False

        await source.stop()

    @pytest.mark.asyncio
    async def test_stop_halts_delivery(self) -> None:
        """Test no partial is delivered after stop returns."""
        received: list[str] = []
        source = ScriptedTranscriptSource(["one", "two", "three"], interval=0.1)

        await source.start(received.append)
        await asyncio.sleep(0.15)
        await source.stop()
        delivered = list(received)
        await asyncio.sleep(0.15)

        assert delivered == ["one"]
        assert received == delivered
        assert source.is_running is False

    @pytest.mark.asyncio
    async def test_stop_without_start_is_noop(self) -> None:
        """Test stopping an unstarted source does nothing."""
        source = ScriptedTranscriptSource(["one"])

        await source.stop()
        await source.stop()

        assert source.delivered_count == 0

    @pytest.mark.asyncio
    async def test_start_twice_keeps_single_delivery(self) -> None:
        """Test a second start while running is ignored."""
        received: list[str] = []
        source = ScriptedTranscriptSource(["one", "two"], interval=0.02)

        await source.start(received.append)
        await source.start(received.append)
        await asyncio.sleep(0.1)
        await source.stop()

        assert received == ["one", "two"]

    @pytest.mark.asyncio
    async def test_restart_after_stop(self) -> None:
        """Test a stopped source can be started again from the beginning."""
        received: list[str] = []
        source = ScriptedTranscriptSource(["again"])

        await source.start(received.append)
        await asyncio.sleep(0.02)
        await source.stop()
        await source.start(received.append)
        await asyncio.sleep(0.02)
        await source.stop()

        assert received == ["again", "again"]
