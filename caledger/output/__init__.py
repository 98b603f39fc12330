"""Output layer for rendered events."""

from caledger.output.ledger_writer import (
    OutputLineGroup,
    format_event,
    render_listing,
)

__all__ = [
    "OutputLineGroup",
    "format_event",
    "render_listing",
]
