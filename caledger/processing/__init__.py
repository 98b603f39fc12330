"""Processing layer: settings merging, effective settings and listing."""

from caledger.processing.effective import resolve_effective
from caledger.processing.list_pipeline import resolve_calendars, run_list
from caledger.processing.merge_strategies import fold_records, merge_records
from caledger.processing.settings_chain import discover_settings_files, resolve_chain

__all__ = [
    "discover_settings_files",
    "fold_records",
    "merge_records",
    "resolve_calendars",
    "resolve_chain",
    "resolve_effective",
    "run_list",
]
