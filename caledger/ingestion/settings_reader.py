"""Reader for caledger settings files.

The format is line oriented::

    ; comment
    calendar = Work, Personal
    start = -1M
    end = +0D
    filter = wb
    notes
    notag
    nomap

    ; anything else with "=" is a title mapping
    wb12345 = expenses:travel:client

Nothing is validated here; an invalid ``start`` token is only detected when
it is resolved.
"""

import logging
from pathlib import Path

from caledger.models.settings import SettingsRecord, TriState

logger = logging.getLogger(__name__)

# Bare words recognised as boolean flags: word -> (field, value)
BOOLEAN_FLAGS: dict[str, tuple[str, TriState]] = {
    "notes": ("notes", TriState.TRUE),
    "nonotes": ("notes", TriState.FALSE),
    "tag": ("tag", TriState.TRUE),
    "notag": ("tag", TriState.FALSE),
    "map": ("map", TriState.TRUE),
    "nomap": ("map", TriState.FALSE),
    "break": ("day_break", TriState.TRUE),
    "nobreak": ("day_break", TriState.FALSE),
}

# Keys with "=" that populate structured fields rather than mappings
STRUCTURED_KEYS = {
    "start": "start_expr",
    "end": "end_expr",
    "filter": "title_filter",
}


def split_entry(line: str) -> tuple[str, str] | None:
    """Split a ``key = value`` line at the first "=", trimming both sides."""
    if "=" not in line:
        return None
    key, value = line.split("=", 1)
    return key.strip(), value.strip()


def is_comment_or_blank(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith(";")


def load(text: str) -> SettingsRecord:
    """Parse settings file text into a SettingsRecord.

    Args:
        text: Full contents of a settings file.

    Returns:
        Parsed settings. Unknown bare words are ignored; a mapping key seen
        more than once keeps its last value and is listed in duplicate_keys.
    """
    fields: dict = {}
    mappings: dict[str, str] = {}
    duplicates: set[str] = set()

    for line in text.splitlines():
        if is_comment_or_blank(line):
            continue

        entry = split_entry(line)
        if entry is None:
            flag = BOOLEAN_FLAGS.get(line.strip())
            if flag is not None:
                field, value = flag
                fields[field] = value
            continue

        key, value = entry
        if not key or not value:
            continue

        if key == "calendar":
            names = (part.strip() for part in value.split(","))
            fields["calendar_names"] = tuple(name for name in names if name)
        elif key in STRUCTURED_KEYS:
            fields[STRUCTURED_KEYS[key]] = value
        else:
            if key in mappings:
                duplicates.add(key)
            mappings[key] = value

    return SettingsRecord(
        **fields,
        title_mappings=mappings,
        duplicate_keys=frozenset(duplicates),
    )


def load_file(path: Path) -> SettingsRecord:
    """Load a settings file; a missing or unreadable file loads as empty."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"Settings file does not exist: {path}")
        return SettingsRecord()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read settings file {path}: {e}")
        return SettingsRecord()

    logger.debug(f"Loaded settings file: {path}")
    return load(text)
