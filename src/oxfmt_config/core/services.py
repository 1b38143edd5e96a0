"""Core domain services for oxfmt_config."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import TYPE_CHECKING

from oxfmt_config.core.cache_keys import config_cache_key, resolve_cache_key
from oxfmt_config.core.exceptions import ConfigLoadError
from oxfmt_config.core.memo import memoize
from oxfmt_config.discovery import resolve_config_path, uses_comments
from oxfmt_config.logging import create_logger


if TYPE_CHECKING:
    from oxfmt_config.core.models import ConfigDocument, LoadOptions
    from oxfmt_config.core.ports import MemoCachePort, ParserPort


logger = create_logger("loader")


class ConfigLoader:
    """Resolves and loads oxfmt configuration with two-tier memoization.

    The resolve cache maps (cwd, config_path) to the resolved file path, so a
    repeated request does not touch the filesystem. The config cache maps a
    resolved path to its parsed document, so requests from different
    directories that resolve to one file share a single read and parse.
    Cached entries are never refreshed when files change; pass
    ``use_cache=False`` to re-resolve and re-read.

    Each loader owns its caches. Construct a new loader for fresh caches.

    Example:
        >>> loader = ConfigLoader()
        >>> options = loader.load(cwd="packages/app")
        >>> width = options.get("printWidth", 100)
    """

    def __init__(
        self,
        parser: ParserPort | None = None,
        resolve_cache: MemoCachePort[Path | None] | None = None,
        config_cache: MemoCachePort[ConfigDocument] | None = None,
    ) -> None:
        from oxfmt_config.adapters.cache import InMemoryCache
        from oxfmt_config.adapters.parser import JsonConfigParser

        self._parser = parser if parser is not None else JsonConfigParser()
        self._resolve_cache: MemoCachePort[Path | None] = (
            resolve_cache if resolve_cache is not None else InMemoryCache()
        )
        self._config_cache: MemoCachePort[ConfigDocument] = (
            config_cache if config_cache is not None else InMemoryCache()
        )

    @property
    def resolve_cache(self) -> MemoCachePort[Path | None]:
        """The resolve cache (ResolveKey -> resolved path or None)."""
        return self._resolve_cache

    @property
    def config_cache(self) -> MemoCachePort[ConfigDocument]:
        """The config cache (ConfigCacheKey -> parsed document)."""
        return self._config_cache

    def resolve(
        self,
        cwd: str | Path | None = None,
        config_path: str | Path | None = None,
        *,
        use_cache: bool = True,
    ) -> Path | None:
        """Resolve the config file path without loading it.

        Args:
            cwd: Directory to resolve from. Defaults to the working directory.
            config_path: Optional explicit config path, absolute or relative
                to cwd.
            use_cache: When False, bypass the resolve cache.

        Returns:
            The config file path, or None when no file was found.
        """
        start = Path(cwd) if cwd is not None else Path.cwd()
        return self._resolve(start, config_path, use_cache=use_cache)

    def load(
        self,
        cwd: str | Path | None = None,
        config_path: str | Path | None = None,
        *,
        use_cache: bool = True,
    ) -> ConfigDocument:
        """Load the oxfmt configuration that applies to cwd.

        Args:
            cwd: Directory to resolve from. Defaults to the working directory.
            config_path: Optional explicit config path, absolute or relative
                to cwd. When None, cwd and its ancestors are searched.
            use_cache: When False, neither cache is read or written and the
                file is always re-read.

        Returns:
            The parsed options, or an empty dict when no config file exists.
            The dict is a copy; mutating it does not affect the cache.

        Raises:
            ConfigLoadError: If the resolved file cannot be read or parsed.
        """
        start = Path(cwd) if cwd is not None else Path.cwd()
        resolve_key = resolve_cache_key(start, config_path)
        resolved = self._resolve(start, config_path, use_cache=use_cache)

        if resolved is None:
            if not use_cache:
                return {}
            return copy.deepcopy(
                memoize(self._config_cache, config_cache_key(None, resolve_key), dict)
            )

        if not use_cache:
            return self._read_config(resolved)

        document = memoize(
            self._config_cache,
            config_cache_key(resolved, resolve_key),
            lambda: self._read_config(resolved),
        )
        return copy.deepcopy(document)

    def load_options(self, options: LoadOptions) -> ConfigDocument:
        """Load configuration for a LoadOptions request.

        Args:
            options: The load request.

        Returns:
            The parsed options, or an empty dict when no config file exists.

        Raises:
            ConfigLoadError: If the resolved file cannot be read or parsed.
        """
        return self.load(
            options.cwd, options.config_path, use_cache=options.use_cache
        )

    def _resolve(
        self,
        start: Path,
        config_path: str | Path | None,
        *,
        use_cache: bool,
    ) -> Path | None:
        if not use_cache:
            resolved = resolve_config_path(start, config_path)
        else:
            resolved = memoize(
                self._resolve_cache,
                resolve_cache_key(start, config_path),
                lambda: resolve_config_path(start, config_path),
            )
        logger.debug(
            "Resolved config path",
            cwd=str(start),
            config_path=str(config_path) if config_path else None,
            resolved=str(resolved) if resolved else None,
        )
        return resolved

    def _read_config(self, path: Path) -> ConfigDocument:
        """Read and parse a config file, wrapping any failure."""
        logger.debug("Reading config file", path=str(path))
        try:
            text = path.read_text(encoding="utf-8")
            return self._parser.parse(text, allow_comments=uses_comments(path))
        except (OSError, ValueError) as e:
            logger.error("Config load failed", path=str(path), error=str(e))
            raise ConfigLoadError(path, e) from e


# Process-wide loader behind load_config() and resolve_config().
_default_loader = ConfigLoader()


def get_default_loader() -> ConfigLoader:
    """Return the process-wide loader used by load_config()."""
    return _default_loader


def load_config(
    cwd: str | Path | None = None,
    config_path: str | Path | None = None,
    *,
    use_cache: bool = True,
) -> ConfigDocument:
    """Load oxfmt configuration using the process-wide caches.

    See ConfigLoader.load() for arguments and errors.

    Example:
        >>> from oxfmt_config import load_config
        >>> load_config(cwd="/tmp/empty")
        {}
    """
    return _default_loader.load(cwd, config_path, use_cache=use_cache)


def resolve_config(
    cwd: str | Path | None = None,
    config_path: str | Path | None = None,
    *,
    use_cache: bool = True,
) -> Path | None:
    """Resolve the oxfmt config file path using the process-wide caches."""
    return _default_loader.resolve(cwd, config_path, use_cache=use_cache)
