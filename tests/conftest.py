from datetime import datetime
from pathlib import Path

import pytest

from caledger.models.event import EventRecord
from caledger.models.settings import EffectiveSettings

ICS_HEADER = "BEGIN:VCALENDAR\r\nVERSION:2.0\r\nPRODID:-//caledger tests//EN\r\n"
ICS_FOOTER = "END:VCALENDAR\r\n"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point HOME, logs and calendars at temporary directories."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("CALEDGER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("CALEDGER_CALENDAR_DIR", str(tmp_path / "calendars"))
    for var in (
        "CALEDGER_SETTINGS_FILENAME",
        "CALEDGER_HOME_SETTINGS",
        "CALEDGER_MERGE_POLICY",
        "CALEDGER_LOG_FILENAME",
    ):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def calendar_dir(tmp_path) -> Path:
    """Directory of ICS calendars (matches CALEDGER_CALENDAR_DIR)."""
    path = tmp_path / "calendars"
    path.mkdir()
    return path


def write_ics(
    directory: Path, filename: str, vevents: list[str], calname: str | None = None
) -> Path:
    """Write an ICS file with the given VEVENT bodies."""
    body = ICS_HEADER
    if calname:
        body += f"X-WR-CALNAME:{calname}\r\n"
    for vevent in vevents:
        body += "BEGIN:VEVENT\r\n" + vevent.strip().replace("\n", "\r\n") + "\r\nEND:VEVENT\r\n"
    body += ICS_FOOTER
    path = directory / filename
    path.write_text(body, encoding="utf-8")
    return path


def make_event(
    title: str | None = "Event",
    start: datetime = datetime(2026, 1, 6, 10, 0),
    end: datetime | None = None,
    notes: str | None = None,
    calendar: str | None = "Work",
) -> EventRecord:
    """Helper to create an EventRecord with defaults."""
    return EventRecord(
        title=title,
        start=start,
        end=end or start,
        notes=notes,
        calendar=calendar,
    )


def make_settings(**overrides) -> EffectiveSettings:
    """Helper to create EffectiveSettings with all options off."""
    values = dict(
        calendar_names=(),
        start=datetime(2025, 1, 1),
        end=datetime(2027, 1, 1),
        title_filter=None,
        notes=False,
        tag=False,
        map=True,
        day_break=False,
        title_mappings={},
    )
    values.update(overrides)
    return EffectiveSettings(**values)
