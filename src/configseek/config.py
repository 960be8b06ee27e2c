"""Configuration utilities for configseek.

This module provides the default search places, option normalization and
the create_explorer factory.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from configseek.adapters.loaders import DEFAULT_LOADERS, DEFAULT_MANIFESTS
from configseek.core.exceptions import ConfigurationError, describe_extension
from configseek.core.models import ExplorerOptions, identity
from configseek.core.ports import DEFAULT_LOADER_KEY
from configseek.core.property_path import extension_of, loader_key


if TYPE_CHECKING:
    import os

    from configseek.core.ports import Loader, Transform
    from configseek.core.services import Explorer


logger = logging.getLogger(__name__)

# Extensions tried for rc files, in priority order ("" is the bare rc file)
RC_EXTENSIONS = ["", ".json", ".yaml", ".yml", ".toml", ".py"]
CONFIG_FILE_EXTENSIONS = [".py", ".json", ".yaml", ".yml", ".toml"]


def default_search_places(module_name: str) -> list[str]:
    """Return the default search places for a module, highest priority first.

    Example:
        >>> default_search_places("myapp")[:3]
        ['pyproject.toml', 'package.json', '.myapprc']
    """
    return [
        "pyproject.toml",
        "package.json",
        *(f".{module_name}rc{ext}" for ext in RC_EXTENSIONS),
        *(f".config/{module_name}rc{ext}" for ext in RC_EXTENSIONS),
        *(f"{module_name}.config{ext}" for ext in CONFIG_FILE_EXTENSIONS),
    ]


def validate_loaders(
    search_places: Sequence[str],
    loaders: Mapping[str, Any],
    manifests: Mapping[str, Any],
) -> None:
    """Check that every search place can be parsed.

    Manifests are parsed by their own loader and are not checked.

    Raises:
        ConfigurationError: If a search place has no loader, or its loader
            is not callable.
    """
    for place in search_places:
        if Path(place).name in manifests:
            continue
        loader = loaders.get(loader_key(place), loaders.get(DEFAULT_LOADER_KEY))
        description = describe_extension(extension_of(place))
        if loader is None:
            raise ConfigurationError(f"Missing loader for {description}.")
        if not callable(loader):
            raise ConfigurationError(
                f"Loader for {description} is not callable: {loader!r}"
            )


def normalize_options(
    module_name: str,
    *,
    search_places: Sequence[str] | None = None,
    loaders: Mapping[str, Loader] | None = None,
    package_prop: str | Sequence[str] | None = None,
    stop_dir: str | os.PathLike[str] | None = None,
    cache: bool = True,
    transform: Transform | None = None,
    ignore_empty_search_places: bool = True,
    apply_package_property_path_to_configuration: bool = False,
    meta_config_file_path: str | os.PathLike[str] | None = None,
) -> ExplorerOptions:
    """Fill defaults for an explorer session and validate them.

    Args:
        module_name: Name of the application, e.g. "myapp".
        search_places: Candidate filenames. Defaults to
            default_search_places(module_name).
        loaders: Loaders merged over DEFAULT_LOADERS.
        package_prop: Property path for manifests. Defaults to module_name.
        stop_dir: Highest directory searched. Defaults to the home directory.
        cache: Memoize search and load results.
        transform: Hook applied to every result. Defaults to identity.
        ignore_empty_search_places: Skip files that exist but are empty.
        apply_package_property_path_to_configuration: Project every file
            through package_prop.
        meta_config_file_path: File that preempts the directory walk.

    Returns:
        Validated ExplorerOptions.

    Raises:
        ConfigurationError: If module_name is empty or a search place has
            no usable loader.
    """
    if not module_name:
        raise ConfigurationError("module_name cannot be empty")

    places = tuple(
        search_places if search_places is not None else default_search_places(module_name)
    )
    merged_loaders: dict[str, Loader] = {**DEFAULT_LOADERS, **(loaders or {})}
    validate_loaders(places, merged_loaders, DEFAULT_MANIFESTS)

    if package_prop is None:
        prop: str | tuple[str, ...] = module_name
    elif isinstance(package_prop, str):
        prop = package_prop
    else:
        prop = tuple(package_prop)

    return ExplorerOptions(
        module_name=module_name,
        search_places=places,
        loaders=merged_loaders,
        package_prop=prop,
        stop_dir=Path(stop_dir) if stop_dir is not None else Path.home(),
        cache=cache,
        transform=transform or identity,
        ignore_empty_search_places=ignore_empty_search_places,
        apply_package_property_path_to_configuration=(
            apply_package_property_path_to_configuration
        ),
        meta_config_file_path=(
            Path(meta_config_file_path) if meta_config_file_path is not None else None
        ),
        manifests=DEFAULT_MANIFESTS,
    )


def create_explorer(
    module_name: str,
    *,
    use_meta_config: bool = True,
    cwd: str | os.PathLike[str] | None = None,
    **options: Any,
) -> Explorer:
    """Create an Explorer for a module with defaults and meta-config applied.

    Options set in a meta-config file (.config/config.{json,yaml,yml,toml}
    or [tool.configseek] in pyproject.toml, looked up in cwd only) fill in
    options not passed explicitly.

    Args:
        module_name: Name of the application, e.g. "myapp".
        use_meta_config: Look for a meta-config file in cwd.
        cwd: Directory to look for the meta-config in. Defaults to the cwd.
        **options: Keyword arguments accepted by normalize_options. None
            values count as unset and do not mask the meta-config.

    Returns:
        A ready-to-use Explorer.

    Example:
        >>> from configseek.config import create_explorer
        >>> explorer = create_explorer("myapp", stop_dir="/srv")
        >>> result = explorer.search("/srv/app/src")
    """
    from configseek.core.services import Explorer
    from configseek.discovery import find_meta_config, meta_config_overrides

    if use_meta_config:
        meta = find_meta_config(cwd)
        if meta is not None:
            overrides = meta_config_overrides(module_name, meta)
            logger.debug("Applying meta-config %s: %s", meta.filepath, sorted(overrides))
            explicit = {key: value for key, value in options.items() if value is not None}
            options = {**overrides, **explicit}

    return Explorer(normalize_options(module_name, **options))

