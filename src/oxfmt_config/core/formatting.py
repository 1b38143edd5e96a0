"""Formatting utilities for domain logic."""

from __future__ import annotations

import json


def value_to_color(value: object) -> str:
    """Map an option value to a color name by type.

    Args:
        value: A value from a configuration document.

    Returns:
        Color name string:
        - True -> "green", False -> "red"
        - int/float -> "cyan"
        - str -> "yellow"
        - anything else -> empty string
    """
    if isinstance(value, bool):
        return "green" if value else "red"
    if isinstance(value, int | float):
        return "cyan"
    if isinstance(value, str):
        return "yellow"
    return ""


def format_option_value(value: object) -> str:
    """Render an option value the way it appears in the config file."""
    return json.dumps(value, ensure_ascii=False)
