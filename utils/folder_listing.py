"""
Directory listing for folder columns.

Resolves a column's configured ``dir`` below the htdocs root and lists its
immediate subdirectories in natural, case-insensitive order.
"""

import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"(\d+)")


def natural_key(name: str) -> list:
    """Sort key: 'site2' < 'site10', case-insensitive."""
    return [int(part) if part.isdigit() else part.lower() for part in _DIGITS.split(name)]


def resolve_column_dir(htdocs_path: str, relative: str) -> tuple[str, str | None]:
    """
    Anchors a configured subdirectory under the htdocs root.

    Args:
        htdocs_path: Root directory all columns live under.
        relative: Column ``dir`` as entered in the settings.

    Returns:
        Tuple of (absolute directory, error message or None). Traversal
        attempts yield an empty directory and an error.
    """
    subdir = str(relative or "").replace("\\", "/").strip().strip("/")
    if ".." in subdir:
        return "", 'Security: directory traversal detected in "dir".'

    root = Path(htdocs_path)
    return str(root / subdir if subdir else root), None


def list_subdirs(directory: str) -> list[str]:
    """Returns immediate subdirectory names, naturally sorted; [] if not a dir."""
    if not directory or not os.path.isdir(directory):
        return []

    try:
        with os.scandir(directory) as entries:
            names = [entry.name for entry in entries if entry.is_dir()]
    except OSError as exc:
        logger.warning("Could not list %s: %s", directory, exc)
        return []
    return sorted(names, key=natural_key)
