"""Loaders for structured data formats (JSON, YAML, TOML).

Each loader has the Loader signature (filepath, contents) -> value and
lets the parser's own exception propagate; the explorer attaches the file
path by wrapping it in ConfigParseError.
"""

from __future__ import annotations

import json
import tomllib
from typing import TYPE_CHECKING, Any

import yaml


if TYPE_CHECKING:
    from pathlib import Path


def load_json(filepath: Path, contents: str) -> Any:  # noqa: ARG001
    """Parse JSON text."""
    return json.loads(contents)


def load_yaml(filepath: Path, contents: str) -> Any:  # noqa: ARG001
    """Parse YAML text with the safe loader.

    An empty document (only comments, or "~") parses to None.
    """
    return yaml.safe_load(contents)


def load_toml(filepath: Path, contents: str) -> dict[str, Any]:  # noqa: ARG001
    """Parse TOML text."""
    return tomllib.loads(contents)
