"""Filter and order events before rendering."""

from caledger.models.event import EventRecord


def filter_by_title(events: list[EventRecord], query: str | None) -> list[EventRecord]:
    """Keep events whose raw title contains ``query`` (case-insensitive).

    Events without a title never match a query. A None or empty query keeps
    every event.
    """
    if not query:
        return list(events)
    query_folded = query.casefold()
    return [e for e in events if e.title is not None and query_folded in e.title.casefold()]


def sort_chronologically(events: list[EventRecord]) -> list[EventRecord]:
    """Sort events by start time; ties keep their source order."""
    return sorted(events, key=lambda e: e.start)
