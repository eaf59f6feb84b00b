# profanity/engine/cache.py

"""Process-wide cache of compiled source filters."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from profanity.core.domain import SourceFilter, normalize_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """Cached value with an optional absolute expiry (monotonic seconds)."""

    value: Any
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class MemoryCache:
    """Thread-safe in-memory key/value cache with per-entry expiry.

    The lock only guards the backing dict. Factories run outside it, so two
    threads missing the same key may both build a value; the last store wins
    and readers never see a partial entry.

    Expired entries are swept on every store. With ``max_entries`` set, the
    least recently stored entries are evicted once the cache is full.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        max_entries: Optional[int] = None,
    ) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self.max_entries = max_entries

    def get(self, key: str) -> Optional[Any]:
        """Returns the cached value, or None if absent or expired."""
        now = self._clock()

        with self._lock:
            entry = self._entries.get(key)

            if entry is None:
                return None

            if entry.is_expired(now):
                del self._entries[key]
                logger.debug("Cache entry expired", extra={"cache_key": key})
                return None

            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        """Stores ``value``; a ``ttl_seconds`` of None or 0 never expires."""
        now = self._clock()
        expires_at = now + ttl_seconds if ttl_seconds else None

        with self._lock:
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for k in expired:
                del self._entries[k]

            # Re-inserting moves the key to the end of the eviction order
            self._entries.pop(key, None)
            self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

            evicted = 0
            if self.max_entries:
                while len(self._entries) > self.max_entries:
                    del self._entries[next(iter(self._entries))]
                    evicted += 1

        if expired or evicted:
            logger.debug(
                "Cache entries removed",
                extra={"expired": len(expired), "evicted": evicted},
            )

    def get_or_create(
        self,
        key: str,
        factory: Callable[[], Any],
        ttl_seconds: Optional[float] = None,
    ) -> Any:
        """Returns the cached value for ``key``, building it on a miss."""
        value = self.get(key)

        if value is not None:
            return value

        value = factory()
        self.set(key, value, ttl_seconds)
        logger.debug(
            "Cache entry created",
            extra={"cache_key": key, "ttl_seconds": ttl_seconds},
        )
        return value

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Removes all entries."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()

        logger.info("Cache cleared", extra={"entries_cleared": count})

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class PatternCache:
    """Memoizes compiled SourceFilter objects by source name.

    A cached filter is reused only while its word list still equals the
    requested one; a different list under the same name is rebuilt and
    replaces the entry.
    """

    def __init__(
        self,
        store: Optional[MemoryCache] = None,
        ttl_seconds: Optional[float] = None,
        max_entries: Optional[int] = None,
    ) -> None:
        self._store = (
            store if store is not None else MemoryCache(max_entries=max_entries)
        )
        self.ttl_seconds = ttl_seconds
        self.builds = 0

    def _build(self, source_name: str, words: Tuple[str, ...]) -> SourceFilter:
        source_filter = SourceFilter(source_name, words)
        self.builds += 1

        logger.debug(
            "Compiled source filter",
            extra={"source": source_name, "word_count": len(source_filter.words)},
        )
        return source_filter

    def get_or_build(self, source_name: str, words: Iterable[str]) -> SourceFilter:
        """Returns the compiled filter for ``source_name``.

        Raises:
            ConfigurationError: If the filter has to be built and ``words``
                is empty.
        """
        requested = normalize_words(words)

        source_filter = self._store.get_or_create(
            source_name,
            lambda: self._build(source_name, requested),
            self.ttl_seconds,
        )

        if source_filter.words != requested:
            logger.info(
                "Word list changed for cached source, rebuilding",
                extra={"source": source_name},
            )
            source_filter = self._build(source_name, requested)
            self._store.set(source_name, source_filter, self.ttl_seconds)

        return source_filter

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
