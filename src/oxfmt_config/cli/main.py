"""CLI commands for oxfmt_config."""

from __future__ import annotations

from pathlib import Path

import typer

from oxfmt_config.logging import enable_library_logging


app = typer.Typer(
    name="oxfmt-config",
    help="Inspect oxfmt configuration resolution and loading.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log resolution and cache activity to stderr.",
    ),
) -> None:
    """Inspect oxfmt configuration resolution and loading."""
    if verbose:
        enable_library_logging("DEBUG")


def resolve_directory(directory: str | None) -> Path:
    """Return the directory argument as a Path, defaulting to the cwd."""
    return Path(directory) if directory else Path.cwd()


def main() -> None:
    """Entry point for the CLI."""
    app()
