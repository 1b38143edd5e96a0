"""Basic configuration loading example.

This example shows the simplest usage pattern: load the oxfmt options
that apply to a directory. The nearest .oxfmtrc.json or .oxfmtrc.jsonc
in the directory or its ancestors wins, and repeated loads are served
from the in-process caches.
"""

from pathlib import Path

from oxfmt_config import load_config, resolve_config


# Which file applies to this directory? None when nothing is found.
config_file = resolve_config(cwd=Path.cwd())
print(f"Config file: {config_file}")

# Load the options. An empty dict means "use oxfmt defaults".
options = load_config(cwd=Path.cwd())
print(f"printWidth: {options.get('printWidth', 100)}")

# An explicit path skips the directory walk entirely.
# options = load_config(cwd="packages/app", config_path="../../fmt.jsonc")

# Subsequent loads hit the cache; edits on disk are not picked up.
# Pass use_cache=False to always re-read the file.
fresh = load_config(cwd=Path.cwd(), use_cache=False)
