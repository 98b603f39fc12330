"""Discover settings files along a directory chain and merge them."""

import logging
from pathlib import Path

from caledger.constants import SETTINGS_FILENAME
from caledger.ingestion.settings_reader import load_file
from caledger.models.settings import MergePolicy, SettingsRecord
from caledger.processing.merge_strategies import fold_records

logger = logging.getLogger(__name__)


def discover_settings_files(
    start_dir: Path,
    filename: str = SETTINGS_FILENAME,
    home_path: Path | None = None,
) -> list[Path]:
    """Find settings files from ``start_dir`` up to the filesystem root.

    Args:
        start_dir: Directory to start the upward walk from.
        filename: Settings file name looked for in each directory.
        home_path: Fallback settings file used only when the walk finds none.

    Returns:
        Paths ordered near-to-far. Empty if nothing was found.
    """
    start = start_dir.resolve()
    found = []
    for directory in [start] + list(start.parents):
        candidate = directory / filename
        if candidate.is_file():
            found.append(candidate)

    if not found and home_path is not None and home_path.is_file():
        found.append(home_path)

    return found


def resolve_chain(
    start_dir: Path,
    policy: MergePolicy = MergePolicy.CLOSEST,
    filename: str = SETTINGS_FILENAME,
    home_path: Path | None = None,
) -> SettingsRecord:
    """Load and merge the settings chain for ``start_dir``.

    With MergePolicy.CLOSEST only the nearest file is read. Otherwise every
    file is read and folded near-to-far under the policy.
    """
    paths = discover_settings_files(start_dir, filename, home_path)
    logger.debug(
        f"Settings chain for {start_dir} ({policy.value}): "
        f"{[str(p) for p in paths] or 'none'}"
    )

    if not paths:
        return SettingsRecord()

    if policy is MergePolicy.CLOSEST:
        return load_file(paths[0])

    return fold_records([load_file(path) for path in paths], policy)
