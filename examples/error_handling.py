"""Error handling patterns with recovery hints.

This example demonstrates how to handle a broken configuration file and
use the recovery_hint property to provide actionable guidance.
"""

from pathlib import Path

from oxfmt_config import ConfigLoader, ConfigLoadError, OxfmtConfigError


loader = ConfigLoader()

try:
    options = loader.load(cwd=Path.cwd(), config_path="broken.json")
except ConfigLoadError as e:
    print(f"Error: {e}")
    print(f"Path: {e.path}")
    if e.line is not None:
        print(f"Location: line {e.line}, column {e.column}")
    print(f"Hint: {e.recovery_hint}")

    # The underlying parse or I/O error is preserved
    print(f"Cause: {type(e.cause).__name__}")
    options = {}

# A failed load is not cached: fixing the file and loading again works
# without constructing a new loader.

# Catch-all for any oxfmt_config error
try:
    loader.load(cwd=Path.cwd())
except OxfmtConfigError as e:
    print(f"Configuration error: {e}")
    if e.recovery_hint:
        print(f"Hint: {e.recovery_hint}")
