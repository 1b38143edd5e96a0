"""Core domain models for oxfmt_config.

These models are pure Python types with no I/O dependencies. The option
TypedDicts describe the shape of an oxfmt configuration document; the loader
passes documents through without validating them against this shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, TypedDict


class SortImportsConfig(TypedDict, total=False):
    """Import-sorting sub-configuration (``experimentalSortImports``)."""

    partitionByNewline: bool
    partitionByComment: bool
    sortSideEffects: bool
    order: Literal["asc", "desc"]
    ignoreCase: bool
    newlinesBetween: bool
    internalPattern: list[str]
    groups: list[str | list[str]]


class OxfmtOverride(TypedDict, total=False):
    """Options applied to files matching ``files`` but not ``excludeFiles``."""

    files: list[str]
    excludeFiles: list[str]
    options: OxfmtConfig


class OxfmtConfig(TypedDict, total=False):
    """Formatting options read from ``.oxfmtrc.json`` / ``.oxfmtrc.jsonc``.

    Unknown keys are preserved as-is; the formatter owns the option schema.
    """

    useTabs: bool
    tabWidth: int
    printWidth: int
    endOfLine: Literal["lf", "crlf", "cr", "auto"]
    singleQuote: bool
    jsxSingleQuote: bool
    quoteProps: Literal["as-needed", "consistent", "preserve"]
    trailingComma: Literal["all", "es5", "none"]
    semi: bool
    arrowParens: Literal["always", "avoid"]
    bracketSpacing: bool
    bracketSameLine: bool
    objectWrap: Literal["preserve", "collapse"]
    singleAttributePerLine: bool
    ignorePatterns: list[str]
    experimentalSortPackageJson: bool
    experimentalSortImports: SortImportsConfig
    overrides: list[OxfmtOverride]


ConfigDocument = dict[str, Any]


@dataclass(frozen=True, slots=True)
class LoadOptions:
    """A single configuration load request.

    Attributes:
        cwd: Directory to resolve from. None means the process working
            directory at load time.
        config_path: Explicit config file path, absolute or relative to cwd.
            When None, the loader searches cwd and its ancestors.
        use_cache: When False, neither cache is read or written.

    Example:
        >>> LoadOptions(cwd="/repo/packages/app").use_cache
        True
    """

    cwd: str | Path | None = None
    config_path: str | Path | None = None
    use_cache: bool = True

    def resolved_cwd(self) -> Path:
        """Return cwd as a Path, defaulting to the current working directory."""
        return Path(self.cwd) if self.cwd is not None else Path.cwd()
