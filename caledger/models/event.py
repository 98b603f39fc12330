"""Event model with Pydantic v2 validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from caledger.constants import UNTITLED


class EventRecord(BaseModel):
    """A calendar event as supplied by an event source.

    Start and end are naive datetimes in local wall-clock time.
    """

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    start: datetime
    end: datetime
    notes: str | None = None
    calendar: str | None = None

    @model_validator(mode="after")
    def validate_times(self):
        """Validate that the event does not end before it starts."""
        if self.end < self.start:
            raise ValueError("end must be >= start")
        return self

    @property
    def display_title(self) -> str:
        """Title, or the "Untitled" placeholder when absent."""
        return self.title if self.title is not None else UNTITLED

    def intersects(self, start: datetime, end: datetime) -> bool:
        """True if the event overlaps the half-open window [start, end)."""
        if self.start == self.end:
            return start <= self.start < end
        return self.start < end and self.end > start
