"""In-memory memo cache adapter implementing CachePort."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, TypeVar


if TYPE_CHECKING:
    from collections.abc import Callable, Hashable


logger = logging.getLogger(__name__)

T = TypeVar("T")


class MemoCache:
    """Thread-safe memo cache storing one Future per key.

    The first caller for a key computes the outcome outside the lock and
    resolves the Future; callers arriving meanwhile block on the same
    Future instead of computing again. Entries are never evicted, only
    dropped wholesale by clear().

    Attributes:
        name: Label used in debug logging ("search", "load").
    """

    def __init__(self, name: str = "memo") -> None:
        """Initialize an empty cache.

        Args:
            name: Label used in debug logging.
        """
        self.name = name
        self._entries: dict[Hashable, Future[Any]] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        """Return the memoized outcome for key, computing it at most once.

        Args:
            key: Cache key (an absolute path, or a tuple containing one).
            compute: Zero-argument callable producing the outcome.

        Returns:
            The outcome of the first compute() for this key.

        Raises:
            Exception: Whatever the first compute() raised, re-raised for
                every caller of this key.
            BaseException: KeyboardInterrupt, SystemExit and the like propagate
                to the callers waiting at the time; the next caller computes
                again.
        """
        with self._lock:
            future = self._entries.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._entries[key] = future

        if owner:
            try:
                future.set_result(compute())
            except Exception as e:
                future.set_exception(e)
            except BaseException as e:
                # Interrupts reach current waiters but are not memoized
                with self._lock:
                    if self._entries.get(key) is future:
                        del self._entries[key]
                future.set_exception(e)
                raise
        else:
            logger.debug("%s cache hit for %s", self.name, key)

        return future.result()

    def clear(self) -> None:
        """Drop every memoized outcome."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        """Whether an outcome (pending or settled) exists for key."""
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        """Number of memoized keys."""
        with self._lock:
            return len(self._entries)
