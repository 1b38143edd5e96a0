"""Cache adapters for memoizing resolution and load outcomes."""

from oxfmt_config.adapters.cache.memory_cache import InMemoryCache


__all__ = ["InMemoryCache"]
