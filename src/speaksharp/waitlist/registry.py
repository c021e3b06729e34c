"""Waitlist registry for sign-ups collected by the landing page."""

import asyncio
import logging
import uuid
from datetime import datetime

from .config import DUPLICATE_EMAIL_MESSAGE, MISSING_FIELDS_MESSAGE, NATIVE_LANGUAGES
from .exceptions import DuplicateEmailError, ValidationError
from .models import WaitlistEntry

logger = logging.getLogger(__name__)


def _email_key(email: str) -> str:
    return email.strip().lower()


def _validate_email(email: str) -> None:
    local, sep, domain = email.partition("@")
    if not sep or not local or not domain or "@" in domain or " " in email:
        raise ValidationError(f"Invalid email address: {email}")


class WaitlistRegistry:
    """
    Keeps waitlist sign-ups, one per email address.

    Emails are matched case-insensitively and stored as entered (trimmed).
    Entries are returned in sign-up order.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._entries: dict[uuid.UUID, WaitlistEntry] = {}
        self._ids_by_email: dict[str, uuid.UUID] = {}
        self._lock = asyncio.Lock()

    async def add_to_waitlist(
        self, name: str, email: str, native_language: str
    ) -> uuid.UUID:
        """
        Add a sign-up to the waitlist.

        Args:
            name: Full name
            email: Email address
            native_language: One of NATIVE_LANGUAGES

        Returns:
            UUID of the new entry

        Raises:
            ValidationError: If a field is empty or invalid
            DuplicateEmailError: If the email is already registered
        """
        name = name.strip()
        email = email.strip()
        native_language = native_language.strip()

        if not name or not email or not native_language:
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        _validate_email(email)
        if native_language not in NATIVE_LANGUAGES:
            raise ValidationError(f"Unsupported native language: {native_language}")

        async with self._lock:
            key = _email_key(email)
            if key in self._ids_by_email:
                logger.info(f"Rejected duplicate waitlist sign-up for {email}")
                raise DuplicateEmailError(DUPLICATE_EMAIL_MESSAGE)

            entry = WaitlistEntry(
                id=uuid.uuid4(),
                name=name,
                email=email,
                native_language=native_language,
                created_at=datetime.now(),
            )
            self._entries[entry.id] = entry
            self._ids_by_email[key] = entry.id

        logger.info(f"Added {email} to waitlist ({native_language})")
        return entry.id

    async def get_all_waitlist(self) -> list[WaitlistEntry]:
        """Return all entries in sign-up order."""
        return list(self._entries.values())

    async def search_waitlist_by_email(self, email: str) -> list[WaitlistEntry]:
        """
        Find entries for an email address.

        Args:
            email: Email to look up (case-insensitive)

        Returns:
            Matching entries; empty if none
        """
        entry_id = self._ids_by_email.get(_email_key(email))
        if entry_id is None:
            return []
        return [self._entries[entry_id]]

    def __len__(self) -> int:
        return len(self._entries)
