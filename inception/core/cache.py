"""Explicit reference-data cache.

Services receive a ReferenceCache instead of relying on decorator caching, so
callers control invalidation. Keys are dotted strings built with cache_key():
"<kind>.ALL" for the unfiltered list and "<kind>.<localeId>" (plus any extra
discriminators, e.g. a country code) for derived lists.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from cachetools import TTLCache

from inception.config.settings import Settings

logger = logging.getLogger(__name__)

ALL = "ALL"


def cache_key(kind: str, *parts: str) -> str:
    """Build a dotted cache key, e.g. cache_key("regions", "ZA", "en-US")."""
    return ".".join((kind, *parts))


class ReferenceCache:
    """TTL cache of reference lists shared across requests."""

    def __init__(self, *, ttl_seconds: float, max_entries: int, enabled: bool = True,
                 timer: Callable[[], float] = time.monotonic) -> None:
        self._enabled = enabled and ttl_seconds > 0 and max_entries > 0
        self._entries: TTLCache[str, Any] = TTLCache(
            maxsize=max(max_entries, 1), ttl=max(ttl_seconds, 1), timer=timer,
        )
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReferenceCache":
        return cls(
            ttl_seconds=settings.REFERENCE_CACHE_TTL_SECONDS,
            max_entries=settings.REFERENCE_CACHE_MAX_ENTRIES,
        )

    @classmethod
    def disabled(cls) -> "ReferenceCache":
        """A cache that never stores anything."""
        return cls(ttl_seconds=0, max_entries=0, enabled=False)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: Any) -> None:
        if not self._enabled:
            return
        with self._lock:
            self._entries[key] = value

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def invalidate_prefix(self, prefix: str) -> int:
        """Drop every key equal to prefix or starting with "<prefix>."."""
        with self._lock:
            doomed = [k for k in self._entries if k == prefix or k.startswith(prefix + ".")]
            for key in doomed:
                self._entries.pop(key, None)
        if doomed:
            logger.debug("Invalidated %d cached entries under %s", len(doomed), prefix)
        return len(doomed)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
