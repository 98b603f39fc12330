"""caledger: list calendar events in ledger time-clock format."""

__version__ = "0.1.0"
