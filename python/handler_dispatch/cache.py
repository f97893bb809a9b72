"""Resolution cache.

Maps a raw handler descriptor to the ResolvedHandler produced for
it, so a repeated descriptor skips classification and existence checks.

Key rules:
- strings are keyed by value
- lists and tuples are keyed by the value of their elements; a list is
  never equal to a string (``"f"`` and ``["f"]`` are different keys)
- callables and classes are keyed by the object itself, so functions and
  classes compare by identity and bound methods of one receiver share a key
- other unhashable values are keyed by id

Entries live until the cache is cleared or the process exits. There is
no eviction and no size bound. Values keyed by id are held by the cache
so their id cannot be reused while the entry exists.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable
from typing import Any

from .logging import log_trace
from .resolved_handler import ResolvedHandler


def cache_key(descriptor: Any) -> Hashable:
    """Build the cache key for a descriptor.

    Args:
        descriptor: Raw handler descriptor.

    Returns:
        A hashable key following the value/identity rules above.

    Example:
        >>> cache_key("Billing@charge")
        ('str', 'Billing@charge')
        >>> cache_key(["Billing", "charge"])
        ('seq', (('str', 'Billing'), ('str', 'charge')))
    """
    if isinstance(descriptor, str):
        return ("str", descriptor)
    if isinstance(descriptor, (list, tuple)):
        return ("seq", tuple(cache_key(part) for part in descriptor))
    if not isinstance(descriptor, Hashable):
        return ("id", id(descriptor))
    if callable(descriptor):
        return ("callable", descriptor)
    return ("value", type(descriptor).__name__, descriptor)


class ResolutionCache:
    """Descriptor → ResolvedHandler mapping with first-writer-wins semantics.

    Thread-safe: every read and write holds a re-entrant lock. When two
    threads resolve the same descriptor concurrently, the first ``set``
    wins and both observe the stored value.

    Example:
        >>> cache = ResolutionCache()
        >>> cache.set("str_to_lower", ResolvedHandler.for_function("str_to_lower"))
        ResolvedHandler(parts=('str_to_lower',))
        >>> cache.get("str_to_lower").parts
        ('str_to_lower',)
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, ResolvedHandler] = {}
        self._pinned: dict[int, Any] = {}
        self._hits = 0
        self._misses = 0
        self._lock = threading.RLock()

    def get(self, descriptor: Any) -> ResolvedHandler | None:
        """Return the cached ResolvedHandler for a descriptor.

        Args:
            descriptor: Raw handler descriptor.

        Returns:
            The cached value, or None if absent.
        """
        key = cache_key(descriptor)
        with self._lock:
            resolved = self._entries.get(key)
            if resolved is None:
                self._misses += 1
            else:
                self._hits += 1

        outcome = "miss" if resolved is None else "hit"
        log_trace(f"ResolutionCache: {outcome}", {"key": key})
        return resolved

    def set(self, descriptor: Any, resolved: ResolvedHandler) -> ResolvedHandler:
        """Store a ResolvedHandler unless one is already cached.

        Args:
            descriptor: Raw handler descriptor.
            resolved: Its canonical form.

        Returns:
            The value now stored for the descriptor (the earlier one if
            another writer got there first).
        """
        key = cache_key(descriptor)
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing
            self._entries[key] = resolved
            self._pin(descriptor)
        return resolved

    def __contains__(self, descriptor: Any) -> bool:
        with self._lock:
            return cache_key(descriptor) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        with self._lock:
            self._entries.clear()
            self._pinned.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, int]:
        """Return entry count and hit/miss counters.

        Returns:
            Dict with ``entries``, ``hits`` and ``misses``.
        """
        with self._lock:
            return {
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }

    def _pin(self, descriptor: Any) -> None:
        if isinstance(descriptor, (list, tuple)):
            for part in descriptor:
                self._pin(part)
        elif not isinstance(descriptor, Hashable):
            self._pinned[id(descriptor)] = descriptor


__all__ = ["ResolutionCache", "cache_key"]
