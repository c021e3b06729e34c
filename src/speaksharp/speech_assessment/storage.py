"""In-memory session store for demo session records."""

import copy
import uuid
from typing import Any

from .exceptions import StorageError
from .interfaces import SessionStore
from .logging_utils import get_logger

logger = get_logger(__name__)

REQUIRED_RECORD_KEYS = ("durationSec", "wer", "per", "issues")


class InMemorySessionStore(SessionStore):
    """Keeps demo session records in process memory."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._records: dict[str, dict[str, Any]] = {}

    async def save_demo_session(self, record: dict[str, Any]) -> str:
        """
        Store a copy of a demo session record.

        Args:
            record: Mapping with durationSec, wer, per and issues keys

        Returns:
            Generated record identifier

        Raises:
            StorageError: If the record is missing required keys
        """
        missing = [key for key in REQUIRED_RECORD_KEYS if key not in record]
        if missing:
            raise StorageError(f"Demo session record missing fields: {missing}")

        record_id = str(uuid.uuid4())
        self._records[record_id] = copy.deepcopy(record)
        logger.debug(f"Stored demo session {record_id}")
        return record_id

    async def list_demo_sessions(self) -> list[dict[str, Any]]:
        """Return copies of all records, each with its id under "id"."""
        return [
            {"id": record_id, **copy.deepcopy(record)}
            for record_id, record in self._records.items()
        ]

    def __len__(self) -> int:
        return len(self._records)
