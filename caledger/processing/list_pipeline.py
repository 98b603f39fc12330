"""List pipeline: from effective settings to rendered output lines."""

import logging

from caledger.exceptions import CalendarAccessDeniedError, CalendarNotFoundError
from caledger.models.settings import EffectiveSettings
from caledger.output.ledger_writer import render_listing
from caledger.sources.base import EventSource

logger = logging.getLogger(__name__)


def resolve_calendars(source: EventSource, names: tuple[str, ...]) -> list[str]:
    """Resolve requested calendar names against the source.

    An empty ``names`` selects every available calendar.

    Raises:
        CalendarNotFoundError: If a name matches no calendar.
    """
    if not names:
        return source.calendars()

    resolved = []
    for name in names:
        match = source.find_calendar(name)
        if match is None:
            raise CalendarNotFoundError(name, source.calendars())
        resolved.append(match)
    return resolved


async def run_list(source: EventSource, settings: EffectiveSettings) -> list[str]:
    """Fetch, filter, sort and render events.

    Args:
        source: Event source for this run.
        settings: Effective settings for this run.

    Returns:
        Output lines.

    Raises:
        CalendarAccessDeniedError: If the source denies access.
        CalendarNotFoundError: If a requested calendar does not exist.
    """
    if not await source.request_access():
        raise CalendarAccessDeniedError(
            "Calendar access denied. Make sure the calendar directory exists and is readable."
        )

    calendars = resolve_calendars(source, settings.calendar_names)
    logger.info(f"Reading calendars: {', '.join(calendars) or 'none'}")

    events = source.fetch_events(calendars, settings.start, settings.end)
    return render_listing(events, settings)
