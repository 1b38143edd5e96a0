"""In-memory cache adapter implementing MemoCachePort."""

from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import Generic, TypeVar


T = TypeVar("T")


class InMemoryCache(Generic[T]):
    """Thread-safe table of futures keyed by string.

    Each entry holds the outcome of one computation, pending or resolved.
    Entries live as long as the cache; the only removal path is
    discard(), used to drop a failed computation.

    Example:
        >>> cache: InMemoryCache[int] = InMemoryCache()
        >>> future, created = cache.reserve("answer")
        >>> created
        True
        >>> future.set_result(42)
        >>> cache.get("answer").result()
        42
    """

    def __init__(self) -> None:
        self._entries: dict[str, Future[T]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Future[T] | None:
        """Return the future stored under key, or None if absent."""
        with self._lock:
            return self._entries.get(key)

    def reserve(self, key: str) -> tuple[Future[T], bool]:
        """Fetch the future for key, inserting a pending one on miss.

        Lookup and insertion happen under one lock acquisition, so two
        threads reserving the same key always receive the same future.

        Args:
            key: Cache key.

        Returns:
            Tuple of (future, created). created is True only for the caller
            that inserted the future; that caller must resolve it.
        """
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing, False
            future: Future[T] = Future()
            self._entries[key] = future
            return future, True

    def discard(self, key: str, future: Future[T]) -> bool:
        """Remove key only if it still maps to future.

        Args:
            key: Cache key.
            future: The future the caller expects under key.

        Returns:
            True if the entry was removed.
        """
        with self._lock:
            if self._entries.get(key) is not future:
                return False
            del self._entries[key]
            return True

    def list_all_keys(self) -> list[str]:
        """List all cache keys.

        Returns:
            Keys currently in the cache, in insertion order.
        """
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
