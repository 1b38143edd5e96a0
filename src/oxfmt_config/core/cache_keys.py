"""Cache key helpers for ConfigLoader.

Keys are plain strings so they can be logged and listed. They are never
persisted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from oxfmt_config.discovery import explicit_config_path


if TYPE_CHECKING:
    from pathlib import Path

MISSING_PREFIX = "missing:"


def resolve_cache_key(cwd: str | Path, config_path: str | Path | None = None) -> str:
    """Build the resolve cache key for a (cwd, config_path) request.

    Args:
        cwd: Directory the resolution starts from.
        config_path: Optional explicit config path hint.

    Returns:
        Key in format ``{cwd}::{config_path}``. The hint segment is empty
        when config_path names no file.
    """
    hint = explicit_config_path(config_path)
    return f"{cwd}::{hint if hint is not None else ''}"


def config_cache_key(resolved_path: Path | None, resolve_key: str) -> str:
    """Build the config cache key for a resolution outcome.

    A found file is keyed by its path so that different resolve contexts
    sharing one file share the parsed document. An absent file is keyed by
    the resolve context, since "not found" only holds for that context.

    Args:
        resolved_path: The resolved config file, or None when absent.
        resolve_key: Key from resolve_cache_key() for the same request.

    Returns:
        The path string, or ``missing:{resolve_key}``.
    """
    if resolved_path is None:
        return f"{MISSING_PREFIX}{resolve_key}"
    return str(resolved_path)
