"""Property-path and extension helpers for the explorer.

This module contains small pure functions that the explorer delegates to:
projecting a nested value out of a parsed document, and deriving the
loader-table key for a file name.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import PurePath
from typing import Any

from configseek.core.ports import NO_EXTENSION_KEY


def split_property_path(path: str | Sequence[str]) -> tuple[str, ...]:
    """Split a dotted property path into its segments.

    Example:
        >>> split_property_path("tool.myapp")
        ('tool', 'myapp')
        >>> split_property_path(["a.b", "c"])
        ('a.b', 'c')
    """
    if isinstance(path, str):
        return tuple(path.split("."))
    return tuple(path)


def get_property_by_path(source: Any, path: str | Sequence[str]) -> Any:
    """Extract a nested value from a parsed document.

    A string path that is itself a key of source wins over its dotted
    reading, so {"a.b": 1} projects through "a.b" to 1.

    Args:
        source: Parsed document (usually a mapping).
        path: Dotted string or sequence of segments.

    Returns:
        The nested value, or None when a segment is missing or the walk
        reaches a value that is not a mapping.
    """
    if isinstance(path, str) and isinstance(source, Mapping) and path in source:
        return source[path]

    current = source
    for segment in split_property_path(path):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
    return current


def extension_of(filepath: str | PurePath) -> str:
    """Return the extension of a file name, including the leading dot.

    Dotfiles without a further suffix (".myapprc") have no extension.
    """
    return PurePath(filepath).suffix


def loader_key(filepath: str | PurePath) -> str:
    """Return the loader-table key for a file: its extension or "noExt"."""
    return extension_of(filepath) or NO_EXTENSION_KEY
