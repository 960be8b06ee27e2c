"""Core domain services for configseek."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from configseek.adapters.cache import MemoCache
from configseek.core.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigseekError,
    ManifestParseError,
    NoLoaderError,
)
from configseek.core.models import ConfigResult, ExplorerOptions
from configseek.core.ports import DEFAULT_LOADER_KEY
from configseek.core.property_path import (
    extension_of,
    get_property_by_path,
    loader_key,
    split_property_path,
)


if TYPE_CHECKING:
    from configseek.core.ports import CachePort, Loader


logger = logging.getLogger(__name__)

# Marks a manifest that does not embed this module's config
_NO_RESULT: Any = object()


def absolute_path(path: str | os.PathLike[str]) -> Path:
    """Absolutize and normalize a path without resolving symlinks."""
    return Path(os.path.abspath(path))


class Explorer:
    """Searches for and loads one application's config files.

    An Explorer is a session: it owns one set of options and two memo
    caches, one answering "what does a search starting here find" and one
    answering "what does this exact file hold". It is safe to share
    between threads.

    Example:
        >>> from configseek import create_explorer
        >>> explorer = create_explorer("myapp")
        >>> result = explorer.search()
        >>> if result is not None:
        ...     print(result.filepath, result.config)
    """

    def __init__(
        self,
        options: ExplorerOptions,
        search_cache: CachePort | None = None,
        load_cache: CachePort | None = None,
    ) -> None:
        self._options = options
        if options.cache:
            self._search_cache = search_cache or MemoCache("search")
            self._load_cache = load_cache or MemoCache("load")
        else:
            self._search_cache = None
            self._load_cache = None

    @property
    def options(self) -> ExplorerOptions:
        """The session's normalized options."""
        return self._options

    def clear_search_cache(self) -> None:
        """Forget every memoized search outcome."""
        if self._search_cache is not None:
            self._search_cache.clear()

    def clear_load_cache(self) -> None:
        """Forget every memoized load outcome."""
        if self._load_cache is not None:
            self._load_cache.clear()

    def clear_caches(self) -> None:
        """Forget every memoized search and load outcome."""
        self.clear_search_cache()
        self.clear_load_cache()

    def load(
        self,
        filepath: str | os.PathLike[str],
        *,
        force_projection: bool = False,
    ) -> ConfigResult | None:
        """Load one config file directly.

        Args:
            filepath: Path to the file, absolute or relative to the cwd.
            force_projection: Project the parsed value through package_prop
                even if the session would not (used for the meta-config).

        Returns:
            The transformed result, or None if a manifest holds no config
            for this module (or the transform returned None).

        Raises:
            ConfigNotFoundError: If the file does not exist or is a directory.
            NoLoaderError: If no loader matches the file's extension.
            ConfigParseError: If the loader fails.
        """
        path = absolute_path(filepath)

        def load() -> ConfigResult | None:
            return self._options.transform(
                self._read_configuration(path, force_projection=force_projection)
            )

        if self._load_cache is not None:
            return self._load_cache.get_or_compute((path, force_projection), load)
        return load()

    def search(
        self, from_dir: str | os.PathLike[str] | None = None
    ) -> ConfigResult | None:
        """Search for a config file, walking up from from_dir.

        In each directory the search places are tried in priority order and
        the first usable one wins. The walk stops after the stop directory
        or the filesystem root has been searched.

        Args:
            from_dir: Directory to start from. Defaults to the cwd.

        Returns:
            The transformed result, or None if nothing was found.

        Raises:
            NoLoaderError: If a candidate has no matching loader.
            ConfigParseError: If a candidate exists but fails to parse.
        """
        meta_path = self._options.meta_config_file_path
        if meta_path is not None:
            meta = self.load(meta_path, force_projection=True)
            if meta is not None and not meta.is_empty:
                logger.debug("Using meta-config %s, skipping search", meta.filepath)
                return meta

        stop_dir = absolute_path(self._options.stop_dir)
        start = absolute_path(from_dir if from_dir is not None else Path.cwd())
        return self._search_from(start, stop_dir)

    def _search_from(self, directory: Path, stop_dir: Path) -> ConfigResult | None:
        """Search directory, then its ancestors, memoizing each directory."""

        def search() -> ConfigResult | None:
            match = self._search_directory(directory)
            if match is not None:
                # First match wins even if the transform discards it
                return self._options.transform(match)
            parent = directory.parent
            if directory == stop_dir or parent == directory:
                logger.debug("Search ended at %s without a match", directory)
                return None
            return self._search_from(parent, stop_dir)

        if self._search_cache is not None:
            return self._search_cache.get_or_compute(directory, search)
        return search()

    def _search_directory(self, directory: Path) -> ConfigResult | None:
        """Return the first usable search place in one directory, untransformed."""
        if not directory.is_dir():
            return None

        for place in self._options.search_places:
            filepath = directory / place
            logger.debug("Probing %s", filepath)
            try:
                result = self._read_configuration(filepath)
            except ConfigNotFoundError:
                continue
            if result is None:
                continue
            if result.is_empty and self._options.ignore_empty_search_places:
                logger.debug("Skipping empty config file %s", filepath)
                continue
            logger.debug("Found config file %s", filepath)
            return result
        return None

    def _read_configuration(
        self, filepath: Path, *, force_projection: bool = False
    ) -> ConfigResult | None:
        """Read, parse and normalize one file.

        Raises:
            ConfigNotFoundError: If the path does not exist or is a directory.
            ConfigParseError: If the file is not valid UTF-8 or fails to parse.
        """
        try:
            contents = filepath.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise ConfigNotFoundError(filepath, cause=e) from e
        except UnicodeDecodeError as e:
            raise ConfigParseError(
                f"Failed to decode {filepath} as UTF-8: {e}",
                filepath=filepath,
                cause=e,
            ) from e

        manifest = self._options.manifests.get(filepath.name)
        config = self._load_configuration(filepath, contents)
        if config is _NO_RESULT:
            return None
        if config is None:
            return ConfigResult(filepath=filepath)

        # Manifests were already projected while loading
        if manifest is None and (
            self._options.apply_package_property_path_to_configuration
            or force_projection
        ):
            config = get_property_by_path(config, self._options.package_prop)
        return ConfigResult.from_parsed(filepath, config)

    def _load_configuration(self, filepath: Path, contents: str) -> Any:
        """Parse contents with the manifest parser or the matching loader."""
        if not contents.strip():
            return None

        manifest = self._options.manifests.get(filepath.name)
        if manifest is not None:
            try:
                document = manifest.loader(filepath, contents)
            except Exception as e:
                raise ManifestParseError(
                    f"Malformed package manifest {filepath}: {e}",
                    filepath=filepath,
                    cause=e,
                ) from e
            prop = self._options.package_prop
            if manifest.prefix:
                prop = (*manifest.prefix, *split_property_path(prop))
            config = get_property_by_path(document, prop)
            return _NO_RESULT if config is None else config

        loader = self._get_loader(filepath)
        try:
            return loader(filepath, contents)
        except ConfigseekError:
            raise
        except Exception as e:
            raise ConfigParseError(
                f"Failed to parse {filepath}: {e}",
                filepath=filepath,
                cause=e,
            ) from e

    def _get_loader(self, filepath: Path) -> Loader:
        """Look up a loader: extension key, then "noExt", then "default"."""
        loaders = self._options.loaders
        for key in (loader_key(filepath), DEFAULT_LOADER_KEY):
            loader = loaders.get(key)
            if loader is not None:
                return loader
        raise NoLoaderError(extension_of(filepath), filepath=filepath)
