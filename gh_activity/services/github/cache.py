"""
TTL caching for GitHub event feeds.

The default cache keeps a single entry: one CLI invocation looks up one user,
so holding the last fetched feed is enough to shield the API from repeated
lookups within that run. Asking for a different user replaces the entry.

Validity is computed lazily on every check; nothing expires in the background.
`KeyedEventCache` is the multi-user variant for long-lived processes.
"""

import logging
import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from cachetools import TTLCache  # type: ignore[import-untyped]

from gh_activity.services.github.types import Event, EventFetcher

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0  # 5 min


@dataclass(frozen=True)
class CacheEntry:
    """Snapshot of one fetched feed."""

    subject_key: str = ""
    events: tuple[Event, ...] = field(default_factory=tuple)
    fetched_at: float | None = None  # timer() reading; None while empty


class EventCache:
    """Single-entry event cache with a time-to-live."""

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl
        self._timer = timer
        self._entry = CacheEntry()

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def entry(self) -> CacheEntry:
        return self._entry

    def set_ttl(self, ttl: float) -> None:
        """Change the TTL. Applies to every later check, including the stored entry."""
        if ttl < 0:
            raise ValueError("ttl cannot be negative")
        self._ttl = ttl

    def is_valid(self, subject: str) -> bool:
        """True iff the entry belongs to `subject` and is younger than the TTL."""
        entry = self._entry
        if entry.fetched_at is None or entry.subject_key != subject:
            return False
        return self._timer() - entry.fetched_at < self._ttl

    def get(self, subject: str) -> list[Event] | None:
        """Return cached events for `subject`, or None if absent or stale."""
        if not self.is_valid(subject):
            return None
        return list(self._entry.events)

    def update(self, subject: str, events: Sequence[Event]) -> None:
        """Replace the entry wholesale with a fresh feed for `subject`."""
        self._entry = CacheEntry(
            subject_key=subject,
            events=tuple(events),
            fetched_at=self._timer(),
        )

    def clear(self) -> None:
        """Reset to the empty state."""
        self._entry = CacheEntry()


class KeyedEventCache:
    """
    Multi-user event cache for long-lived processes.

    Backed by a TTLCache so every user gets an independent expiry and the
    least recently used feed is evicted once `maxsize` is reached. Access is
    serialized with a lock. The TTL is fixed at construction.
    """

    def __init__(
        self,
        maxsize: int = 128,
        ttl: float = DEFAULT_TTL_SECONDS,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: TTLCache[str, tuple[Event, ...]] = TTLCache(
            maxsize=maxsize, ttl=ttl, timer=timer
        )
        self._lock = threading.Lock()

    @property
    def ttl(self) -> float:
        return float(self._cache.ttl)

    def is_valid(self, subject: str) -> bool:
        with self._lock:
            return subject in self._cache

    def get(self, subject: str) -> list[Event] | None:
        with self._lock:
            events = self._cache.get(subject)
        return list(events) if events is not None else None

    def update(self, subject: str, events: Sequence[Event]) -> None:
        with self._lock:
            self._cache[subject] = tuple(events)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)


class CachedEventFetcher:
    """
    Wrap an EventFetcher with a cache.

    A fresh cache entry is returned without touching the network; otherwise
    the wrapped fetcher is called and its result replaces the entry. Failed
    fetches propagate and leave the cache as it was.
    """

    def __init__(self, fetcher: EventFetcher, cache: EventCache | KeyedEventCache) -> None:
        self.fetcher = fetcher
        self.cache = cache

    async def fetch_events(self, username: str) -> list[Event]:
        cached = self.cache.get(username)
        if cached is not None:
            logger.debug(f"Cache HIT: events for {username}")
            return cached

        logger.debug(f"Cache MISS: events for {username}")
        events = await self.fetcher.fetch_events(username)
        self.cache.update(username, events)
        return list(events)
