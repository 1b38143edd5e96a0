"""Domain exceptions for oxfmt_config.

All library errors inherit from OxfmtConfigError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

A missing configuration file is not an error: resolution returns None and
loading returns an empty document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class OxfmtConfigError(Exception):
    """Base class for all oxfmt_config exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigLoadError(OxfmtConfigError):
    """Raised when a resolved configuration file cannot be read or parsed.

    Attributes:
        path: The resolved configuration file path.
        cause: The underlying read or parse exception.
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f"Failed to parse oxfmt configuration file at {path}: {cause}"
        )

    @property
    def line(self) -> int | None:
        """Line number of a parse failure, when the parser reports one."""
        return getattr(self.cause, "lineno", None)

    @property
    def column(self) -> int | None:
        """Column number of a parse failure, when the parser reports one."""
        return getattr(self.cause, "colno", None)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking permissions or syntax depending on the cause."""
        if isinstance(self.cause, FileNotFoundError):
            return f"Create {self.path.name} or pass an existing config path"
        if isinstance(self.cause, OSError):
            return f"Check that {self.path} is readable"
        if self.line is not None:
            location = f"line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"
            return f"Check {self.path.name} at {location}"
        return f"Check {self.path.name} for JSON syntax errors"
