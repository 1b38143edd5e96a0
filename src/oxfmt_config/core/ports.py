"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable


if TYPE_CHECKING:
    from concurrent.futures import Future

T = TypeVar("T")


@runtime_checkable
class ParserPort(Protocol):
    """Turns configuration file text into a key-value document."""

    def parse(self, text: str, *, allow_comments: bool) -> dict[str, Any]:
        """Parse configuration text.

        Args:
            text: Full file contents.
            allow_comments: Accept JSON-with-comments (comments and trailing
                commas). When False, parse strict JSON.

        Returns:
            The parsed document.

        Raises:
            ValueError: If the text is malformed or its root is not an object.
        """
        ...


@runtime_checkable
class MemoCachePort(Protocol[T]):
    """In-process table of in-flight or resolved outcomes, keyed by string.

    Entries are futures so that a second request for a key can wait on the
    computation started by the first.
    """

    def get(self, key: str) -> Future[T] | None:
        """Return the future stored under key, or None."""
        ...

    def reserve(self, key: str) -> tuple[Future[T], bool]:
        """Atomically fetch the future for key, inserting a pending one on miss.

        Returns:
            Tuple of (future, created). created is True when the caller
            inserted the future and is responsible for resolving it.
        """
        ...

    def discard(self, key: str, future: Future[T]) -> bool:
        """Remove key if it still maps to future.

        Returns:
            True if the entry was removed.
        """
        ...

    def list_all_keys(self) -> list[str]:
        """List all keys currently held, in insertion order."""
        ...
