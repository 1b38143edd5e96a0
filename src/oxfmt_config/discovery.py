"""Configuration file discovery.

Resolves the oxfmt config file for a directory, either from an explicit
path or by walking up from the directory towards the filesystem root.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path


# Probed in this order at every directory level.
CONFIG_FILES = (".oxfmtrc.json", ".oxfmtrc.jsonc")

JSONC_SUFFIX = ".jsonc"


def resolve_config_path(
    start_dir: str | Path,
    config_path: str | Path | None = None,
) -> Path | None:
    """Resolve the oxfmt config file path for start_dir.

    With an explicit config_path, an absolute path is returned unchanged and
    a relative one is joined onto start_dir. Neither is checked for
    existence; a missing file surfaces when it is read.

    Without config_path, each directory from start_dir up to the filesystem
    root is probed for the names in CONFIG_FILES. The first regular file
    found is returned, so the innermost directory wins and ``.oxfmtrc.json``
    wins over ``.oxfmtrc.jsonc`` within a directory.

    Args:
        start_dir: Directory to resolve from.
        config_path: Optional explicit config file path.

    Returns:
        Path to the config file, or None if no ancestor contains one.

    Example:
        >>> resolve_config_path("/repo", "/etc/oxfmt/.oxfmtrc.json")
        PosixPath('/etc/oxfmt/.oxfmtrc.json')
    """
    config_path = explicit_config_path(config_path)
    if config_path is not None:
        return Path(start_dir) / config_path

    current = Path(os.path.abspath(start_dir))

    while True:
        for filename in CONFIG_FILES:
            candidate = current / filename
            if _is_regular_file(candidate):
                return candidate

        parent = current.parent
        if parent == current:
            return None
        current = parent


def explicit_config_path(config_path: str | Path | None) -> str | Path | None:
    """Return config_path, or None when it names no file.

    ``""`` and ``Path("")`` (which is ``Path(".")``) both mean "no hint".
    """
    if config_path is None or str(config_path) in ("", "."):
        return None
    return config_path


def uses_comments(path: Path) -> bool:
    """Return True if path should be parsed as JSON-with-comments."""
    return path.suffix == JSONC_SUFFIX


def _is_regular_file(path: Path) -> bool:
    # Missing, unreadable and dangling entries are all skipped.
    try:
        st = path.stat()
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode)
