"""Base protocol for event sources."""

from datetime import datetime
from typing import Protocol

from caledger.models.event import EventRecord


class EventSource(Protocol):
    """Protocol for calendar event sources.

    An event source is created once per run and passed explicitly to the
    code that needs it.
    """

    async def request_access(self) -> bool:
        """Ask for permission to read calendars; True if granted."""
        ...

    def calendars(self) -> list[str]:
        """Names of all available calendars."""
        ...

    def find_calendar(self, name: str) -> str | None:
        """Canonical name of the calendar matching ``name`` case-insensitively."""
        ...

    def fetch_events(
        self, calendars: list[str], start: datetime, end: datetime
    ) -> list[EventRecord]:
        """All events in ``calendars`` intersecting [start, end)."""
        ...
