"""Core domain module for configseek.

This module contains the domain models, port definitions and the
Explorer service that searches for and loads config files.
"""

from configseek.core.models import ConfigResult, ExplorerOptions, PackageManifest
from configseek.core.ports import CachePort, Loader, LoaderTable, Transform


__all__ = [
    "CachePort",
    "ConfigResult",
    "ExplorerOptions",
    "Loader",
    "LoaderTable",
    "PackageManifest",
    "Transform",
]
