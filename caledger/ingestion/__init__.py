"""Ingestion layer for settings files."""

from caledger.ingestion.settings_reader import load, load_file

__all__ = [
    "load",
    "load_file",
]
