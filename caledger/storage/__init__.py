"""Storage layer for settings files."""

from caledger.storage.settings_file import (
    add_mapping,
    remove_mapping,
    settings_file_for_edit,
)

__all__ = [
    "add_mapping",
    "remove_mapping",
    "settings_file_for_edit",
]
