"""Unit tests for domain exception hierarchy."""

import json
from pathlib import Path

import pytest


@pytest.mark.core
class TestOxfmtConfigError:
    """Tests for base exception class."""

    def test_is_exception_subclass(self) -> None:
        """OxfmtConfigError should be an Exception subclass."""
        from oxfmt_config.core.exceptions import OxfmtConfigError

        assert issubclass(OxfmtConfigError, Exception)

    def test_recovery_hint_returns_none_by_default(self) -> None:
        """Base exception should return None for recovery_hint."""
        from oxfmt_config.core.exceptions import OxfmtConfigError

        err = OxfmtConfigError("something went wrong")
        assert err.recovery_hint is None


@pytest.mark.core
class TestConfigLoadError:
    """Tests for ConfigLoadError."""

    def test_is_oxfmt_config_error_subclass(self) -> None:
        """ConfigLoadError should inherit from OxfmtConfigError."""
        from oxfmt_config.core.exceptions import ConfigLoadError, OxfmtConfigError

        assert issubclass(ConfigLoadError, OxfmtConfigError)

    def test_stores_path_and_cause(self) -> None:
        """Exception should keep the path and underlying error."""
        from oxfmt_config.core.exceptions import ConfigLoadError

        cause = ValueError("bad")
        err = ConfigLoadError(Path("/repo/.oxfmtrc.json"), cause)

        assert err.path == Path("/repo/.oxfmtrc.json")
        assert err.cause is cause

    def test_message_includes_path_and_cause(self) -> None:
        """Message names the file and repeats the cause."""
        from oxfmt_config.core.exceptions import ConfigLoadError

        err = ConfigLoadError(Path("/repo/.oxfmtrc.json"), ValueError("bad token"))

        assert str(err) == (
            "Failed to parse oxfmt configuration file at /repo/.oxfmtrc.json: bad token"
        )

    def test_recovery_hint_for_missing_file(self) -> None:
        """A missing file suggests creating it."""
        from oxfmt_config.core.exceptions import ConfigLoadError

        err = ConfigLoadError(Path("/repo/custom.json"), FileNotFoundError("gone"))

        assert "custom.json" in err.recovery_hint
        assert err.recovery_hint.startswith("Create")

    def test_recovery_hint_for_permission_error(self) -> None:
        """Other OS errors suggest checking readability."""
        from oxfmt_config.core.exceptions import ConfigLoadError

        err = ConfigLoadError(Path("/repo/.oxfmtrc.json"), PermissionError("denied"))

        assert err.recovery_hint == "Check that /repo/.oxfmtrc.json is readable"

    def test_recovery_hint_with_line_and_column(self) -> None:
        """JSON decode errors point at the failing position."""
        from oxfmt_config.core.exceptions import ConfigLoadError

        cause = json.JSONDecodeError("Expecting value", '{\n  "a": ,\n}', 9)
        err = ConfigLoadError(Path("/repo/.oxfmtrc.json"), cause)

        assert err.line == 2
        assert err.column == 8
        assert err.recovery_hint == "Check .oxfmtrc.json at line 2, column 8"

    def test_recovery_hint_without_position(self) -> None:
        """Parse errors without a position suggest a syntax check."""
        from oxfmt_config.core.exceptions import ConfigLoadError

        err = ConfigLoadError(Path("/repo/.oxfmtrc.jsonc"), ValueError("bad"))

        assert err.line is None
        assert err.recovery_hint == "Check .oxfmtrc.jsonc for JSON syntax errors"
