# lexmorph/shared/cache.py
"""
lexmorph/shared/cache.py
------------------------

Versioned, build-then-publish memoisation.

Derived structures (marker sets, the morph index) are pure functions of a
versioned source (the morph-type table, the form repository). This module
keeps one built value per source and rebuilds it when the source version
moves on.

Implementation notes
====================
- The source version is read *before* building, so a build that races with
  a mutation is published under the older version and replaced on next use.
- The (version, value) pair is published with a single attribute
  assignment: readers see either the previous snapshot or the new one.
- A lock-free fast path serves already-built values; building happens under
  an RLock with a double check, so concurrent callers build at most once.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, Tuple, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")


class VersionedCache(Generic[T]):
    """
    Holds the value produced by `builder` for the current `version()`.

    Args:
        builder: zero-argument callable producing the value.
        version: zero-argument callable returning the source version.
        name: label used in log events.
        enabled: when False, every `get()` rebuilds and nothing is stored.
    """

    def __init__(
        self,
        builder: Callable[[], T],
        version: Callable[[], int],
        *,
        name: str = "cache",
        enabled: bool = True,
    ) -> None:
        self._builder = builder
        self._version = version
        self._name = name
        self._enabled = enabled
        self._snapshot: Optional[Tuple[int, T]] = None
        self._lock = threading.RLock()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def built_version(self) -> Optional[int]:
        """Version of the currently published value, or None if nothing is built."""
        snapshot = self._snapshot
        return None if snapshot is None else snapshot[0]

    def get(self) -> T:
        """Return the value for the current source version, building it if needed."""
        if not self._enabled:
            return self._builder()

        current = self._version()

        # Fast path (no lock)
        snapshot = self._snapshot
        if snapshot is not None and snapshot[0] == current:
            return snapshot[1]

        # Slow path: build under lock, double-checking.
        with self._lock:
            current = self._version()
            snapshot = self._snapshot
            if snapshot is not None and snapshot[0] == current:
                return snapshot[1]

            value = self._builder()
            self._snapshot = (current, value)
            logger.debug("cache_rebuilt", cache=self._name, version=current)
            return value

    def invalidate(self) -> None:
        """Drop the published value; the next `get()` rebuilds."""
        with self._lock:
            self._snapshot = None


__all__ = ["VersionedCache"]
