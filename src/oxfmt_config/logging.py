"""Logging utilities for oxfmt_config using Loguru.

Library usage: logging is disabled at import time so that embedding
applications see nothing unless they opt in with enable_library_logging().
CLI usage: the --verbose flag enables it on stderr.
"""

from __future__ import annotations

import contextlib
import sys
from typing import TYPE_CHECKING

from loguru import logger


if TYPE_CHECKING:
    import loguru

PACKAGE_NAME = "oxfmt_config"

# Handler added by enable_library_logging(); other handlers are left alone.
_handler_id: int | None = None


def disable_library_logging() -> None:
    """Silence oxfmt_config records and drop the stderr handler, if any."""
    logger.disable(PACKAGE_NAME)
    _remove_handler()


def enable_library_logging(level: str = "INFO") -> int:
    """Route oxfmt_config log records to stderr.

    Calling this again replaces the handler added by the previous call.
    Handlers installed by the host application are not touched.

    Args:
        level: Minimum loguru level name (e.g. "DEBUG").

    Returns:
        The loguru handler id.
    """
    global _handler_id

    logger.enable(PACKAGE_NAME)
    _remove_handler()

    _handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )
    return _handler_id


def create_logger(scope: str) -> loguru.Logger:
    return logger.bind(scope=scope)


def _remove_handler() -> None:
    global _handler_id

    if _handler_id is not None:
        # Already gone if the host removed every handler itself.
        with contextlib.suppress(ValueError):
            logger.remove(_handler_id)
        _handler_id = None


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
