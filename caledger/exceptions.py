"""Exception hierarchy for caledger operations."""


class CaledgerError(Exception):
    """Base exception for caledger operations."""

    pass


class CalendarAccessDeniedError(CaledgerError):
    """The event source refused access to its calendars."""

    pass


class CalendarNotFoundError(CaledgerError):
    """A requested calendar name did not match any available calendar."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = list(available or [])
        super().__init__(f"Calendar '{name}' not found.")


class EventSourceError(CaledgerError):
    """Calendar data could not be read from the event source."""

    pass


class SettingsFileNotFoundError(CaledgerError):
    """Settings file to edit does not exist."""

    pass


class MappingNotFoundError(CaledgerError):
    """Title mapping to remove does not exist."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Mapping '{key}' not found")
