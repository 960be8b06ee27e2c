"""CLI for configseek."""

from configseek.cli.main import app, main


__all__ = ["app", "main"]
