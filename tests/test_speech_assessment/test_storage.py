"""Tests for the in-memory session store."""

import pytest

from speaksharp.speech_assessment.exceptions import StorageError
from speaksharp.speech_assessment.storage import InMemorySessionStore


@pytest.fixture
def record() -> dict:
    """Create a demo session record."""
    return {
        "durationSec": 10,
        "wer": 0.25,
        "per": 0.1,
        "issues": [{"type": "t", "description": "d", "severity": "low"}],
    }


@pytest.mark.unit
@pytest.mark.asyncio
class TestInMemorySessionStore:
    """Test cases for InMemorySessionStore."""

    async def test_save_and_list(self, record: dict) -> None:
        """Test saved records come back with their id."""
        store = InMemorySessionStore()

        record_id = await store.save_demo_session(record)
        sessions = await store.list_demo_sessions()

        assert len(store) == 1
        assert sessions == [{"id": record_id, **record}]

    async def test_list_preserves_order(self, record: dict) -> None:
        """Test records are listed in the order they were saved."""
        store = InMemorySessionStore()

        first = await store.save_demo_session(record)
        second = await store.save_demo_session({**record, "durationSec": 4})
        sessions = await store.list_demo_sessions()

        assert [s["id"] for s in sessions] == [first, second]
        assert first != second

    async def test_stored_record_is_a_copy(self, record: dict) -> None:
        """Test later changes to the caller's dict do not leak into the store."""
        store = InMemorySessionStore()

        await store.save_demo_session(record)
        record["issues"].append({"type": "x", "description": "y", "severity": "high"})
        sessions = await store.list_demo_sessions()

        assert len(sessions[0]["issues"]) == 1

    async def test_missing_fields_rejected(self) -> None:
        """Test incomplete records raise StorageError."""
        store = InMemorySessionStore()

        with pytest.raises(StorageError, match="per"):
            await store.save_demo_session({"durationSec": 1, "wer": 0.0, "issues": []})

        assert len(store) == 0

    async def test_empty_store(self) -> None:
        """Test a new store lists nothing."""
        assert await InMemorySessionStore().list_demo_sessions() == []
