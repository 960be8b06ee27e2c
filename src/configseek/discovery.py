"""Meta-config discovery utilities.

A meta-config file lives in the working directory and tells configseek
how to search for an application's config. It can also hold the
application's config itself, in which case that config preempts the
directory walk:

    # .config/config.yaml
    configseek:
      search_places: [".config/{name}.yaml"]
    myapp:
      verbose: true

The same settings may live in pyproject.toml under [tool.configseek].
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from configseek.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    import os

    from configseek.core.models import ConfigResult


logger = logging.getLogger(__name__)

META_PACKAGE_PROP = "configseek"

META_SEARCH_PLACES = [
    "pyproject.toml",
    ".config/config.json",
    ".config/config.yaml",
    ".config/config.yml",
    ".config/config.toml",
]

# Meta-config key -> normalize_options keyword; camelCase accepted for JSON/YAML users
META_OPTION_KEYS = {
    "search_places": "search_places",
    "searchPlaces": "search_places",
    "ignore_empty_search_places": "ignore_empty_search_places",
    "ignoreEmptySearchPlaces": "ignore_empty_search_places",
    "apply_package_property_path_to_configuration": (
        "apply_package_property_path_to_configuration"
    ),
    "applyPackagePropertyPathToConfiguration": (
        "apply_package_property_path_to_configuration"
    ),
}


def find_meta_config(cwd: str | os.PathLike[str] | None = None) -> ConfigResult | None:
    """Find the meta-config file in a directory.

    Only cwd itself is searched; the walk never ascends. A file that exists
    but has no configseek section still counts, so that it can hold the
    application's config.

    Args:
        cwd: Directory to look in. Defaults to the current directory.

    Returns:
        Result whose config is the configseek section (or None), or None
        if no meta-config file exists.
    """
    from configseek.config import normalize_options
    from configseek.core.services import Explorer

    directory = Path(cwd) if cwd is not None else Path.cwd()
    options = normalize_options(
        META_PACKAGE_PROP,
        search_places=META_SEARCH_PLACES,
        package_prop=META_PACKAGE_PROP,
        stop_dir=directory,
        cache=False,
        ignore_empty_search_places=False,
        apply_package_property_path_to_configuration=True,
    )
    result = Explorer(options).search(directory)
    if result is not None:
        logger.debug("Found meta-config %s", result.filepath)
    return result


def meta_config_overrides(module_name: str, meta: ConfigResult) -> dict[str, Any]:
    """Translate a meta-config into normalize_options keyword arguments.

    Args:
        module_name: Module the explorer is created for; replaces "{name}"
            in search places.
        meta: Result returned by find_meta_config.

    Returns:
        Keyword arguments, always including meta_config_file_path.

    Raises:
        ConfigurationError: If the section is not a mapping, sets loaders,
            or contains unknown keys.
    """
    overrides: dict[str, Any] = {"meta_config_file_path": meta.filepath}
    if meta.config is None:
        return overrides

    section = meta.config
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            f"Meta-config section in {meta.filepath} must be a mapping, "
            f"got {type(section).__name__}"
        )

    for key, value in section.items():
        if key == "loaders":
            raise ConfigurationError(
                f"Cannot specify loaders in meta-config file {meta.filepath}"
            )
        option = META_OPTION_KEYS.get(key)
        if option is None:
            raise ConfigurationError(
                f"Unknown meta-config option '{key}' in {meta.filepath}"
            )
        if option == "search_places":
            if isinstance(value, str) or not isinstance(value, Sequence):
                raise ConfigurationError(
                    f"'{key}' in {meta.filepath} must be a list of file names"
                )
            value = [place.replace("{name}", module_name) for place in value]
        overrides[option] = value

    return overrides
