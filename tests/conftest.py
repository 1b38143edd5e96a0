"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from oxfmt_config import ConfigLoader, JsonConfigParser


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "cache: Memoization and cache adapters")
    config.addinivalue_line("markers", "parser: JSON/JSONC parser adapter")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class CountingParser:
    """ParserPort wrapper that counts parse calls.

    An optional delay widens the window in which concurrent requests can
    overlap.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self.calls = 0
        self.delay = delay
        self._lock = threading.Lock()
        self._inner = JsonConfigParser()

    def parse(self, text: str, *, allow_comments: bool) -> dict[str, Any]:
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        return self._inner.parse(text, allow_comments=allow_comments)


@pytest.fixture
def loader() -> ConfigLoader:
    """A ConfigLoader with fresh caches."""
    return ConfigLoader()


@pytest.fixture
def counting_parser() -> CountingParser:
    """A parser that records how many times it was called."""
    return CountingParser()


@pytest.fixture
def write_config() -> Callable[[Path, str], Path]:
    """Write config text to a file, creating parent directories.

    Returns:
        A function (path, text) -> path.
    """

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
