"""Core domain module for oxfmt_config.

This module contains the loader service, memoization primitive, domain
models and port definitions. Concrete caches and parsers live
in oxfmt_config.adapters.
"""

from oxfmt_config.core.models import (
    ConfigDocument,
    LoadOptions,
    OxfmtConfig,
    OxfmtOverride,
    SortImportsConfig,
)
from oxfmt_config.core.ports import MemoCachePort, ParserPort


__all__ = [
    "ConfigDocument",
    "LoadOptions",
    "MemoCachePort",
    "OxfmtConfig",
    "OxfmtOverride",
    "ParserPort",
    "SortImportsConfig",
]
