"""Path command for CLI."""

from __future__ import annotations

import typer

from oxfmt_config.cli.main import app, resolve_directory
from oxfmt_config.core.services import get_default_loader


@app.command()
def path(
    directory: str | None = typer.Argument(
        None,
        help="Directory to resolve from. Defaults to current directory.",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Explicit config file, absolute or relative to DIRECTORY.",
    ),
) -> None:
    """Print the config file that applies to DIRECTORY."""
    resolved = get_default_loader().resolve(resolve_directory(directory), config)

    if resolved is None:
        typer.echo("No oxfmt configuration file found.", err=True)
        raise typer.Exit(1)

    typer.echo(str(resolved))
