"""Edit title mappings in a settings file.

Edits are line based so comments and unrelated lines are preserved. Every
write goes to a temporary file in the same directory that then replaces the
original, so a failed write never leaves a partial settings file behind.
"""

import logging
import os
import tempfile
from pathlib import Path

from caledger.constants import SETTINGS_FILENAME
from caledger.exceptions import MappingNotFoundError, SettingsFileNotFoundError
from caledger.ingestion.settings_reader import is_comment_or_blank, split_entry
from caledger.processing.settings_chain import discover_settings_files

logger = logging.getLogger(__name__)


def settings_file_for_edit(
    start_dir: Path,
    filename: str = SETTINGS_FILENAME,
    home_path: Path | None = None,
) -> Path:
    """Nearest settings file in the chain, or the home settings file."""
    found = discover_settings_files(start_dir, filename, home_path)
    if found:
        return found[0]
    if home_path is None:
        home_path = Path.home() / SETTINGS_FILENAME
    return home_path


def _matches_key(line: str, key: str) -> bool:
    if is_comment_or_blank(line):
        return False
    entry = split_entry(line)
    return entry is not None and entry[0] == key


def _write_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    ) as tmp_file:
        tmp_file.write(text)
        tmp_path = Path(tmp_file.name)

    try:
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


def add_mapping(path: Path, key: str, value: str) -> bool:
    """Add or update a title mapping.

    Args:
        path: Settings file to edit (created if missing)
        key: Event title to match
        value: Replacement value

    Returns:
        True if an existing mapping was updated, False if one was added
    """
    lines = path.read_text(encoding="utf-8").splitlines() if path.exists() else []
    entry = f"{key} = {value}"

    updated = False
    for i, line in enumerate(lines):
        if _matches_key(line, key):
            lines[i] = entry
            updated = True
            break

    if not updated:
        while lines and not lines[-1].strip():
            lines.pop()
        lines.append(entry)

    _write_atomic(path, "\n".join(lines) + "\n")
    logger.info(f"{'Updated' if updated else 'Added'} mapping in {path}: {entry}")
    return updated


def remove_mapping(path: Path, key: str) -> None:
    """Remove every line mapping ``key``.

    Raises:
        SettingsFileNotFoundError: If the settings file does not exist
        MappingNotFoundError: If no line maps ``key``
    """
    if not path.exists():
        raise SettingsFileNotFoundError(f"Settings file not found: {path}")

    lines = path.read_text(encoding="utf-8").splitlines()
    kept = [line for line in lines if not _matches_key(line, key)]
    if len(kept) == len(lines):
        raise MappingNotFoundError(key)

    _write_atomic(path, "\n".join(kept) + "\n" if kept else "")
    logger.info(f"Removed mapping '{key}' from {path}")
