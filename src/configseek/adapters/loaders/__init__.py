"""Loader adapters for parsing config files.

This package provides the default loader table and the package manifests
the explorer understands:

- JSON: load_json (".json", package.json)
- YAML: load_yaml (".yaml", ".yml", files without extensions)
- TOML: load_toml (".toml", pyproject.toml)
- Python: load_python (".py")
"""

from types import MappingProxyType

from configseek.adapters.loaders.data import load_json, load_toml, load_yaml
from configseek.adapters.loaders.python import load_python
from configseek.core.models import PackageManifest
from configseek.core.ports import NO_EXTENSION_KEY


DEFAULT_LOADERS = MappingProxyType(
    {
        ".json": load_json,
        ".yaml": load_yaml,
        ".yml": load_yaml,
        ".toml": load_toml,
        ".py": load_python,
        NO_EXTENSION_KEY: load_yaml,
    }
)

# package.json embeds config at package_prop, pyproject.toml under [tool.<package_prop>]
DEFAULT_MANIFESTS = MappingProxyType(
    {
        "package.json": PackageManifest(loader=load_json),
        "pyproject.toml": PackageManifest(loader=load_toml, prefix=("tool",)),
    }
)


__all__ = [
    "DEFAULT_LOADERS",
    "DEFAULT_MANIFESTS",
    "load_json",
    "load_python",
    "load_toml",
    "load_yaml",
]
