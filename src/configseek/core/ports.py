"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The explorer
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable


if TYPE_CHECKING:
    from pathlib import Path

    from configseek.core.models import ConfigResult

T = TypeVar("T")

Transform = Callable[["ConfigResult | None"], "ConfigResult | None"]

# Keys are extensions with the leading dot, or one of the two sentinels below
NO_EXTENSION_KEY = "noExt"
DEFAULT_LOADER_KEY = "default"


@runtime_checkable
class Loader(Protocol):
    """Parses the raw text of a config file."""

    def __call__(self, filepath: Path, contents: str) -> Any:
        """Parse contents read from filepath.

        Args:
            filepath: Absolute path the contents were read from.
            contents: The file's text, never empty or whitespace-only.

        Returns:
            The parsed value. None means the file holds no config.
        """
        ...


LoaderTable = Mapping[str, Loader]


@runtime_checkable
class CachePort(Protocol):
    """In-memory memo cache holding one outcome per key."""

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        """Return the memoized outcome for key, computing it at most once.

        Callers that arrive while the first computation is in flight wait
        for it and share its outcome. A raised exception is memoized too.
        """
        ...

    def clear(self) -> None:
        """Drop every memoized outcome."""
        ...

    def __contains__(self, key: object) -> bool:
        """Whether an outcome (pending or settled) exists for key."""
        ...

    def __len__(self) -> int:
        """Number of memoized keys."""
        ...
