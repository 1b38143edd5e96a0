"""CLI for oxfmt_config."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from oxfmt_config.cli.commands import path as _path_module  # noqa: F401
from oxfmt_config.cli.commands import show as _show_module  # noqa: F401
from oxfmt_config.cli.main import app, main


__all__ = ["app", "main"]
