"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from oxfmt_config.core.formatting import format_option_value, value_to_color


if TYPE_CHECKING:
    from oxfmt_config.core.models import ConfigDocument


def _format_value_with_color(value: object) -> Text:
    """Format an option value with color coding by type."""
    color = value_to_color(value)
    rendered = format_option_value(value)
    return Text(rendered, style=color) if color else Text(rendered)


def _build_options_table(document: ConfigDocument) -> Table:
    """Build a two-column Option/Value table, sorted by option name.

    Nested values (overrides, experimentalSortImports) are rendered as
    compact JSON in a single cell.
    """
    table = Table()
    table.add_column("Option")
    table.add_column("Value")

    for name in sorted(document):
        table.add_row(name, _format_value_with_color(document[name]))

    return table
