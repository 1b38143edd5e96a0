"""Single-flight memoization over a MemoCachePort.

The pending future is stored before the computation starts, so concurrent
requests for the same key wait on one computation instead of repeating
filesystem or parse work. A failed computation is evicted before its error
reaches any caller, so failures are never cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from oxfmt_config.logging import create_logger


if TYPE_CHECKING:
    from collections.abc import Callable

    from oxfmt_config.core.ports import MemoCachePort

T = TypeVar("T")

logger = create_logger("memo")


def memoize(cache: MemoCachePort[T], key: str, factory: Callable[[], T]) -> T:
    """Return the outcome cached under key, computing it with factory on miss.

    Args:
        cache: Table of in-flight or resolved outcomes.
        key: Cache key identifying the request.
        factory: Zero-argument callable producing the value.

    Returns:
        The value computed by factory, by this call or an earlier one.

    Raises:
        Exception: Whatever factory raised, for the caller that ran it and for
            every caller that was waiting on the same pending entry.
    """
    future, created = cache.reserve(key)
    if not created:
        logger.debug("Cache hit", key=key, pending=not future.done())
        return future.result()

    logger.debug("Cache miss", key=key)
    try:
        value = factory()
    except BaseException as exc:
        cache.discard(key, future)
        future.set_exception(exc)
        raise
    future.set_result(value)
    return value
