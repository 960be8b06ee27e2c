"""Core domain models for configseek.

These models are pure Python dataclasses with no I/O dependencies.
They represent the result of a search or load and the settings of one
explorer session.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self


if TYPE_CHECKING:
    from configseek.core.ports import Loader, Transform


def identity(result: ConfigResult | None) -> ConfigResult | None:
    """Default transform hook: return the result unchanged."""
    return result


@dataclass(frozen=True, slots=True)
class ConfigResult:
    """A config file that was found and parsed.

    Attributes:
        filepath: Absolute path of the file the config came from.
        config: The parsed (and possibly projected) value, or None when the
            file exists but holds nothing.

    Example:
        >>> result = ConfigResult(filepath=Path("/a/.myapprc"), config={"x": 1})
        >>> result.is_empty
        False
    """

    filepath: Path
    config: Any = None

    def __post_init__(self) -> None:
        """Validate that the filepath is absolute."""
        if not self.filepath.is_absolute():
            raise ValueError(f"ConfigResult filepath must be absolute: {self.filepath}")

    @property
    def is_empty(self) -> bool:
        """True when the file exists but its config is absent."""
        return self.config is None

    @classmethod
    def from_parsed(cls, filepath: Path, value: Any) -> Self:
        """Build a result, folding None and empty mappings into the empty state."""
        if isinstance(value, Mapping) and not value:
            value = None
        return cls(filepath=filepath, config=value)


@dataclass(frozen=True, slots=True)
class PackageManifest:
    """A conventionally named project file that may embed app config.

    Attributes:
        loader: Parser for the manifest format.
        prefix: Segments prepended to package_prop when projecting
            (("tool",) for pyproject.toml).
    """

    loader: Loader
    prefix: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ExplorerOptions:
    """Settings for one explorer session.

    Built by configseek.config.normalize_options, which fills defaults and
    validates the loader table against the search places.

    Attributes:
        module_name: Name of the application whose config is searched for.
        search_places: Directory-relative filenames, in priority order.
        loaders: Extension key (".json", "noExt", "default") to loader.
        package_prop: Property path projected out of package manifests.
        stop_dir: Highest directory the upward walk may visit (inclusive).
        cache: Whether search and load results are memoized.
        transform: Hook applied once to every returned result.
        ignore_empty_search_places: Skip files that exist but are empty.
        apply_package_property_path_to_configuration: Project every loaded
            file through package_prop, not only manifests.
        meta_config_file_path: File that, if it holds a config, preempts
            the directory walk.
        manifests: Manifest file name to how it is parsed and projected.
    """

    module_name: str
    search_places: tuple[str, ...]
    loaders: Mapping[str, Loader]
    package_prop: str | tuple[str, ...]
    stop_dir: Path
    cache: bool = True
    transform: Transform = identity
    ignore_empty_search_places: bool = True
    apply_package_property_path_to_configuration: bool = False
    meta_config_file_path: Path | None = None
    manifests: Mapping[str, PackageManifest] = field(default_factory=dict)

    def with_overrides(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
