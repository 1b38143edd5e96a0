"""Show command for CLI."""

from __future__ import annotations

import json

import typer
from rich.console import Console

from oxfmt_config.cli.formatting import _build_options_table
from oxfmt_config.cli.main import app, resolve_directory
from oxfmt_config.core.exceptions import ConfigLoadError
from oxfmt_config.core.services import get_default_loader


@app.command()
def show(
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
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the options as JSON instead of a table.",
    ),
    no_cache: bool = typer.Option(
        False,
        "--no-cache",
        help="Bypass the in-process caches.",
    ),
) -> None:
    """Show the options loaded for DIRECTORY."""
    try:
        document = get_default_loader().load(
            resolve_directory(directory), config, use_cache=not no_cache
        )
    except ConfigLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Hint: {e.recovery_hint}", err=True)
        raise typer.Exit(1) from None

    if as_json:
        typer.echo(json.dumps(document, indent=2, ensure_ascii=False))
        return

    if not document:
        typer.echo("No options configured.")
        return

    console = Console(force_terminal=True)
    console.print(_build_options_table(document))
