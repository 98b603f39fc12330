"""Event source backed by a directory of ICS calendar files."""

import logging
import os
from datetime import date, datetime, time, timedelta
from pathlib import Path

from icalendar import Calendar

from caledger.exceptions import EventSourceError
from caledger.models.event import EventRecord

logger = logging.getLogger(__name__)


def to_local_datetime(value: date | datetime) -> datetime:
    """Convert an ICS date or datetime to a naive local datetime.

    All-day dates become local midnight; timezone-aware datetimes are
    converted to the host's local time.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime.combine(value, time())


class ICSEventSource:
    """Read calendars from ``*.ics`` files in a directory.

    Each file is one calendar, named by its ``X-WR-CALNAME`` property or,
    failing that, the file stem. Recurrence rules are not expanded.
    """

    def __init__(self, calendar_dir: Path):
        """Initialize source.

        Args:
            calendar_dir: Directory containing ``.ics`` files
        """
        self.calendar_dir = calendar_dir
        self._files: dict[str, Path] | None = None
        self._parsed: dict[Path, Calendar] = {}

    async def request_access(self) -> bool:
        """Grant access when the calendar directory exists and is readable."""
        granted = self.calendar_dir.is_dir() and os.access(
            self.calendar_dir, os.R_OK | os.X_OK
        )
        logger.debug(f"Access to {self.calendar_dir}: {'granted' if granted else 'denied'}")
        return granted

    def calendars(self) -> list[str]:
        return list(self._calendar_files())

    def find_calendar(self, name: str) -> str | None:
        folded = name.casefold()
        for calendar_name in self._calendar_files():
            if calendar_name.casefold() == folded:
                return calendar_name
        return None

    def fetch_events(
        self, calendars: list[str], start: datetime, end: datetime
    ) -> list[EventRecord]:
        files = self._calendar_files()
        events = []
        for name in calendars:
            path = files.get(name)
            if path is None:
                logger.warning(f"Calendar '{name}' is not available")
                continue
            for event in self._read_events(name, self._parse(path)):
                if event.intersects(start, end):
                    events.append(event)

        logger.info(
            f"Fetched {len(events)} events from {len(calendars)} calendars "
            f"between {start:%Y-%m-%d %H:%M} and {end:%Y-%m-%d %H:%M}"
        )
        return events

    def _calendar_files(self) -> dict[str, Path]:
        """Map calendar name -> ICS file, in filename order.

        The directory is scanned once per source; later calls reuse the map.
        """
        if self._files is not None:
            return self._files

        files: dict[str, Path] = {}
        if not self.calendar_dir.is_dir():
            return files

        for path in sorted(self.calendar_dir.glob("*.ics")):
            name = self._calendar_name(path)
            if name in files:
                logger.warning(
                    f"Duplicate calendar name '{name}' in {path.name}, "
                    f"keeping {files[name].name}"
                )
                continue
            files[name] = path
        self._files = files
        return files

    def _calendar_name(self, path: Path) -> str:
        cal_name = self._parse(path).get("X-WR-CALNAME")
        if cal_name and str(cal_name).strip():
            return str(cal_name).strip()
        return path.stem

    def _parse(self, path: Path) -> Calendar:
        if path not in self._parsed:
            self._parsed[path] = self._parse_file(path)
        return self._parsed[path]

    def _parse_file(self, path: Path) -> Calendar:
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
            if not content.strip():
                logger.warning(f"ICS file is empty: {path}")
                return Calendar()
            return Calendar.from_ical(content)
        except Exception as e:
            raise EventSourceError(f"Failed to read ICS file {path}: {e}") from e

    def _read_events(self, calendar_name: str, cal: Calendar) -> list[EventRecord]:
        events = []
        for component in cal.walk("VEVENT"):
            event = self._ics_event_to_record(calendar_name, component)
            if event is not None:
                events.append(event)
        return events

    def _ics_event_to_record(self, calendar_name: str, vevent) -> EventRecord | None:
        """Convert an ICS VEVENT component to an EventRecord."""
        dtstart = vevent.get("dtstart")
        if not dtstart:
            logger.debug(f"Skipping VEVENT without DTSTART in '{calendar_name}'")
            return None

        if vevent.get("rrule"):
            logger.debug(f"Not expanding recurrence for '{vevent.get('summary')}'")

        start_value = dtstart.dt
        start = to_local_datetime(start_value)
        all_day = not isinstance(start_value, datetime)

        dtend = vevent.get("dtend")
        duration = vevent.get("duration")
        if dtend:
            end = to_local_datetime(dtend.dt)
        elif duration:
            end = start + duration.dt
        elif all_day:
            end = start + timedelta(days=1)
        else:
            end = start

        title = str(vevent.get("summary", "")) or None
        notes = str(vevent.get("description", "")) or None

        try:
            return EventRecord(
                title=title,
                start=start,
                end=end,
                notes=notes,
                calendar=calendar_name,
            )
        except ValueError as e:
            raise EventSourceError(
                f"Invalid event '{title}' in calendar '{calendar_name}': {e}"
            ) from e
