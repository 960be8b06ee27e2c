"""CLI commands for configseek."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from configseek.cli.formatting import (
    _configure_logging,
    _exit_with_error,
    _print_result,
)
from configseek.core.exceptions import ConfigseekError


app = typer.Typer(
    name="configseek",
    help="Find and load an application's config file.",
    no_args_is_help=True,
)


@app.command()
def search(
    module_name: str = typer.Argument(..., help="Name of the application, e.g. 'myapp'."),
    directory: str | None = typer.Argument(
        None,
        help="Directory to start searching from. Defaults to current directory.",
    ),
    stop_dir: str | None = typer.Option(
        None,
        "--stop-dir",
        "-s",
        help="Highest directory to search. Defaults to the home directory.",
    ),
    no_meta_config: bool = typer.Option(
        False,
        "--no-meta-config",
        help="Ignore .config/config.* and [tool.configseek] in the current directory.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every probed file to stderr.",
    ),
) -> None:
    """Search upward for a config file and print it."""
    from configseek.config import create_explorer

    _configure_logging(verbose)
    start = Path(directory) if directory else Path.cwd()

    try:
        explorer = create_explorer(
            module_name,
            use_meta_config=not no_meta_config,
            stop_dir=stop_dir,
        )
        result = explorer.search(start)
    except ConfigseekError as e:
        _exit_with_error(e)

    if result is None:
        typer.echo(f"No configuration found for '{module_name}'.")
        raise typer.Exit(1)

    _print_result(result, Console(soft_wrap=True))


@app.command()
def load(
    module_name: str = typer.Argument(..., help="Name of the application, e.g. 'myapp'."),
    file: str = typer.Argument(..., help="Config file to load."),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log loader activity to stderr.",
    ),
) -> None:
    """Load a single config file and print it."""
    from configseek.config import create_explorer

    _configure_logging(verbose)

    try:
        result = create_explorer(module_name, use_meta_config=False).load(file)
    except ConfigseekError as e:
        _exit_with_error(e)

    if result is None:
        typer.echo(f"{file} holds no configuration for '{module_name}'.")
        raise typer.Exit(1)

    _print_result(result, Console(soft_wrap=True))


@app.command()
def places(
    module_name: str = typer.Argument(..., help="Name of the application, e.g. 'myapp'."),
) -> None:
    """List the default search places in priority order."""
    from configseek.config import default_search_places

    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Search place")

    for i, place in enumerate(default_search_places(module_name), 1):
        table.add_row(str(i), place)

    console = Console()
    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()
