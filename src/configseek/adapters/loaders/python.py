"""Loader for Python config files.

A Python config file is executed as an isolated module; its module-level
``config`` attribute is the parsed value.

Example config file (.myapprc.py):

    config = {"verbose": True, "plugins": ["a", "b"]}
"""

from __future__ import annotations

import importlib.util
import sys
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from pathlib import Path


CONFIG_ATTRIBUTE = "config"


def load_python(filepath: Path, contents: str) -> Any:  # noqa: ARG001
    """Execute a Python config file and return its ``config`` attribute.

    Args:
        filepath: Path to the Python file.
        contents: Raw text (unused; the module is executed from filepath).

    Returns:
        The module's ``config`` attribute, or None if it defines none.

    Raises:
        ImportError: If no module spec can be built for the path.
        Exception: Anything the module body raises.
    """
    # Generate a unique module name to avoid conflicts
    module_name = f"_configseek_config_{filepath.stem.replace('.', '_')}_{id(filepath)}"

    spec = importlib.util.spec_from_file_location(module_name, filepath)
    if spec is None or spec.loader is None:
        msg = f"Could not load Python config from {filepath}"
        raise ImportError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module

    try:
        spec.loader.exec_module(module)
    finally:
        # Clean up to avoid polluting sys.modules
        sys.modules.pop(module_name, None)

    return getattr(module, CONFIG_ATTRIBUTE, None)
