"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


if TYPE_CHECKING:
    from configseek.core.exceptions import ConfigseekError
    from configseek.core.models import ConfigResult


def _json_default(value: Any) -> Any:
    """Serialize values json.dumps does not know (TOML dates, paths, sets)."""
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return repr(value)


def _format_config_json(config: Any) -> str:
    """Render a parsed config as indented JSON."""
    return json.dumps(config, indent=2, default=_json_default)


def _print_result(result: ConfigResult, console: Console) -> None:
    """Print a result's file path and config."""
    console.print(Text(str(result.filepath), style="bold green"))
    if result.is_empty:
        console.print(Text("(empty)", style="yellow"))
        return
    console.print_json(_format_config_json(result.config))


def _exit_with_error(error: ConfigseekError) -> NoReturn:
    """Echo a library error and its recovery hint, then exit with code 1."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    raise typer.Exit(1) from None


def _configure_logging(verbose: bool) -> None:
    """Route configseek's debug records to stderr through Rich."""
    if not verbose:
        return
    package_logger = logging.getLogger("configseek")
    package_logger.setLevel(logging.DEBUG)
    if any(isinstance(h, RichHandler) for h in package_logger.handlers):
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
