"""JSON / JSON-with-comments parser adapter implementing ParserPort."""

from __future__ import annotations

import json
from typing import Any, NoReturn

import json5


class JsonConfigParser:
    """Parses oxfmt configuration text.

    Strict mode uses the standard json module. Comment mode uses json5,
    which accepts line and block comments and trailing commas (and the
    rest of JSON5 syntax, such as single-quoted strings and unquoted keys).
    NaN and Infinity are rejected in both modes.
    """

    def parse(self, text: str, *, allow_comments: bool) -> dict[str, Any]:
        """Parse configuration text into a document.

        Args:
            text: Full file contents.
            allow_comments: Accept comments and trailing commas.

        Returns:
            The parsed document.

        Raises:
            ValueError: If the text is malformed, nests too deeply or its root
                is not an object. json.JSONDecodeError (a ValueError) carries
                lineno/colno.
        """
        try:
            if allow_comments:
                data = json5.loads(text, parse_constant=_reject_constant)
            else:
                data = json.loads(text, parse_constant=_reject_constant)
        except RecursionError as e:
            raise ValueError("Configuration nesting is too deep") from e

        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration root must be an object, got {type(data).__name__}"
            )
        return data


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not a valid JSON value")
