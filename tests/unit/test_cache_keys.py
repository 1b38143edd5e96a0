"""Unit tests for cache key helpers."""

from pathlib import Path

import pytest

from oxfmt_config.core.cache_keys import config_cache_key, resolve_cache_key


@pytest.mark.cache
@pytest.mark.tier(0)
class TestResolveCacheKey:
    """Tests for resolve_cache_key."""

    def test_without_config_path(self) -> None:
        """Key has an empty hint segment when no path is given."""
        assert resolve_cache_key("/repo") == "/repo::"

    def test_with_config_path(self) -> None:
        """Key includes the explicit hint."""
        assert resolve_cache_key("/repo", ".oxfmtrc.jsonc") == "/repo::.oxfmtrc.jsonc"

    def test_accepts_paths(self) -> None:
        """Path arguments are rendered as strings."""
        key = resolve_cache_key(Path("/repo"), Path("cfg/.oxfmtrc.json"))

        assert key == "/repo::cfg/.oxfmtrc.json"

    @pytest.mark.parametrize("hint", [None, "", Path("")])
    def test_empty_hints_share_a_key(self, hint: str | Path | None) -> None:
        """Every spelling of "no hint" produces the same key."""
        assert resolve_cache_key("/repo", hint) == "/repo::"

    def test_distinguishes_hints(self) -> None:
        """Different hints for the same cwd produce different keys."""
        assert resolve_cache_key("/repo", "a.json") != resolve_cache_key(
            "/repo", "b.json"
        )


@pytest.mark.cache
@pytest.mark.tier(0)
class TestConfigCacheKey:
    """Tests for config_cache_key."""

    def test_found_path_is_keyed_by_path(self) -> None:
        """A resolved file is keyed by its path alone."""
        path = Path("/repo/.oxfmtrc.json")

        assert config_cache_key(path, "/repo/app::") == str(path)

    def test_same_path_from_different_contexts_shares_key(self) -> None:
        """Two contexts resolving to one file share the config entry."""
        path = Path("/repo/.oxfmtrc.json")

        assert config_cache_key(path, "/repo/a::") == config_cache_key(
            path, "/repo/b::"
        )

    def test_missing_is_keyed_by_context(self) -> None:
        """An absent file is keyed by the resolve context with a prefix."""
        assert config_cache_key(None, "/repo::") == "missing:/repo::"

    def test_missing_keys_differ_per_context(self) -> None:
        """Absence in one context says nothing about another."""
        assert config_cache_key(None, "/a::") != config_cache_key(None, "/b::")
