"""configseek - Find and load an application's config file.

This library walks up from a directory looking for a config file named
after an application (.myapprc, .myapprc.yaml, [tool.myapp] in
pyproject.toml, ...), parses the first one it finds, and memoizes the
outcome per directory.

Example:
    >>> from configseek import create_explorer
    >>> explorer = create_explorer("myapp")
    >>> result = explorer.search()  # Walks up from the cwd
    >>> if result is not None and not result.is_empty:
    ...     settings = result.config
"""

from configseek.adapters.cache import MemoCache
from configseek.adapters.loaders import (
    DEFAULT_LOADERS,
    DEFAULT_MANIFESTS,
    load_json,
    load_python,
    load_toml,
    load_yaml,
)
from configseek.config import create_explorer, default_search_places, normalize_options
from configseek.core.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigseekError,
    ConfigurationError,
    ManifestParseError,
    NoLoaderError,
)
from configseek.core.models import ConfigResult, ExplorerOptions, PackageManifest
from configseek.core.ports import CachePort, Loader, Transform
from configseek.core.property_path import get_property_by_path
from configseek.core.services import Explorer
from configseek.discovery import find_meta_config


__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LOADERS",
    "DEFAULT_MANIFESTS",
    "CachePort",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigResult",
    "ConfigseekError",
    "ConfigurationError",
    "Explorer",
    "ExplorerOptions",
    "Loader",
    "ManifestParseError",
    "MemoCache",
    "NoLoaderError",
    "PackageManifest",
    "Transform",
    "__version__",
    "create_explorer",
    "default_search_places",
    "find_meta_config",
    "get_property_by_path",
    "load_json",
    "load_python",
    "load_toml",
    "load_yaml",
    "normalize_options",
]
