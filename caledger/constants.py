"""Shared constants for caledger."""

# Per-directory settings file, also used for the home fallback (~/.caledger)
SETTINGS_FILENAME = ".caledger"

# Placeholders used when an event lacks a title or calendar
UNTITLED = "Untitled"
UNKNOWN_CALENDAR = "Unknown"

# Output timestamp formats
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

# Separator between the title and flattened notes on the "i" line
NOTES_SEPARATOR = "    "
