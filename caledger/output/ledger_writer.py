"""Render events in ledger time-clock format.

Each event becomes a line group::

    i 2026-01-06 10:00:00 meetings:standup    Bring laptop Bring charger
    ; :Work:
    o 2026-01-06 10:30:00

The tag line is present only when tagging is enabled. With day breaks
enabled, a ``### YYYY-MM-DD Weekday ###`` header precedes the first group of
each day, and every header after the first is preceded by a blank line.
Downstream ledger tools parse this output, so spacing and field order are
fixed.
"""

from dataclasses import dataclass

from caledger.calendar_query import filter_by_title, sort_chronologically
from caledger.constants import (
    DATE_FORMAT,
    NOTES_SEPARATOR,
    TIMESTAMP_FORMAT,
    UNKNOWN_CALENDAR,
)
from caledger.models.event import EventRecord
from caledger.models.settings import EffectiveSettings


@dataclass(frozen=True)
class OutputLineGroup:
    """Rendered lines for a single event."""

    in_line: str
    out_line: str
    tag_line: str | None = None

    def lines(self) -> list[str]:
        if self.tag_line is None:
            return [self.in_line, self.out_line]
        return [self.in_line, self.tag_line, self.out_line]


def map_title(event: EventRecord, settings: EffectiveSettings) -> str:
    """Title after applying exact-match title mappings (if enabled)."""
    title = event.display_title
    if not settings.map:
        return title
    return settings.title_mappings.get(title, title)


def flatten_notes(notes: str) -> str:
    """Collapse line breaks in notes to single spaces."""
    return " ".join(notes.splitlines())


def format_event(event: EventRecord, settings: EffectiveSettings) -> OutputLineGroup:
    """Render one event as an OutputLineGroup."""
    in_line = f"i {event.start.strftime(TIMESTAMP_FORMAT)} {map_title(event, settings)}"
    if settings.notes and event.notes:
        in_line += NOTES_SEPARATOR + flatten_notes(event.notes)

    tag_line = None
    if settings.tag:
        tag_line = f"; :{event.calendar or UNKNOWN_CALENDAR}:"

    return OutputLineGroup(
        in_line=in_line,
        out_line=f"o {event.end.strftime(TIMESTAMP_FORMAT)}",
        tag_line=tag_line,
    )


def format_day_header(event: EventRecord) -> str:
    return f"### {event.start.strftime(DATE_FORMAT)} {event.start.strftime('%A')} ###"


def render_listing(events: list[EventRecord], settings: EffectiveSettings) -> list[str]:
    """Filter, sort and render events into output lines.

    Args:
        events: Candidate events from the event source.
        settings: Effective settings for this run.

    Returns:
        Output lines, without trailing newlines.
    """
    lines: list[str] = []
    last_date = None

    for event in sort_chronologically(filter_by_title(events, settings.title_filter)):
        if settings.day_break:
            event_date = event.start.date()
            if event_date != last_date:
                if last_date is not None:
                    lines.append("")
                lines.append(format_day_header(event))
                last_date = event_date

        lines.extend(format_event(event, settings).lines())

    return lines
