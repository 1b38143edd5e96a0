"""oxfmt_config - Resolve and load oxfmt formatter configuration.

Finds ``.oxfmtrc.json`` or ``.oxfmtrc.jsonc`` for a directory (or uses an
explicit path), parses it and returns the options as a dict. Resolutions
and parsed documents are memoized per process; concurrent requests for the
same key share a single computation.

Example:
    >>> from oxfmt_config import load_config
    >>> options = load_config(cwd="packages/web")
    >>> options.get("tabWidth", 2)
    2
"""

from oxfmt_config.adapters.cache import InMemoryCache
from oxfmt_config.adapters.parser import JsonConfigParser
from oxfmt_config.core.exceptions import ConfigLoadError, OxfmtConfigError
from oxfmt_config.core.memo import memoize
from oxfmt_config.core.models import (
    ConfigDocument,
    LoadOptions,
    OxfmtConfig,
    OxfmtOverride,
    SortImportsConfig,
)
from oxfmt_config.core.ports import MemoCachePort, ParserPort
from oxfmt_config.core.services import (
    ConfigLoader,
    get_default_loader,
    load_config,
    resolve_config,
)
from oxfmt_config.discovery import CONFIG_FILES, resolve_config_path
from oxfmt_config.logging import disable_library_logging, enable_library_logging


disable_library_logging()

__version__ = "0.1.0"

__all__ = [
    "CONFIG_FILES",
    "ConfigDocument",
    "ConfigLoadError",
    "ConfigLoader",
    "InMemoryCache",
    "JsonConfigParser",
    "LoadOptions",
    "MemoCachePort",
    "OxfmtConfig",
    "OxfmtConfigError",
    "OxfmtOverride",
    "ParserPort",
    "SortImportsConfig",
    "__version__",
    "disable_library_logging",
    "enable_library_logging",
    "get_default_loader",
    "load_config",
    "memoize",
    "resolve_config",
    "resolve_config_path",
]
