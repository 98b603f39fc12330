"""Event sources for caledger."""

from caledger.sources.base import EventSource
from caledger.sources.ics_source import ICSEventSource

__all__ = [
    "EventSource",
    "ICSEventSource",
]
