import logging
import threading
import time
from dataclasses import dataclass

from .client import FetchError
from .core import DEFAULT_TTL, FALLBACK_TTL, CLEANUP_INTERVAL

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    key: str
    value: str
    created_at: float
    ttl: float

    def is_valid(self, now: float) -> bool:
        return now - self.created_at <= self.ttl


class LocalizationCache:
    """In-memory cache of localized display names with per-entry TTL.

    Keys are compared by their string form, so ``25`` and ``"25"`` share an
    entry. Expired entries are dropped when read; ``cleanup()`` sweeps the
    rest. There is no size bound.
    """

    def __init__(self, default_ttl: float = DEFAULT_TTL, fallback_ttl: float = FALLBACK_TTL, clock=time.monotonic):
        self.default_ttl = default_ttl
        self.fallback_ttl = fallback_ttl
        self._clock = clock
        self._entries = {}  # str key -> CacheEntry

    def get(self, key):
        """Return the cached value for key, or None when absent or expired."""
        k = str(key)
        entry = self._entries.get(k)
        if entry is None:
            return None
        if not entry.is_valid(self._clock()):
            self._entries.pop(k, None)
            return None
        return entry.value

    def set(self, key, value: str, ttl: float = None):
        k = str(key)
        self._entries[k] = CacheEntry(
            key=k,
            value=value,
            created_at=self._clock(),
            ttl=self.default_ttl if ttl is None else ttl,
        )

    def lookup(self, key):
        return self.get(key)

    def load_and_store(self, key, fetch_fn, extract_fn, fallback: str) -> str:
        """Fetch the source record, extract the localized string and store it.

        A record without a usable string stores ``fallback`` for the default
        TTL. A ``FetchError`` stores ``fallback`` for the short TTL so a failing
        key is retried at most once per window.
        """
        try:
            record = fetch_fn()
        except FetchError as e:
            logger.warning("Failed to get localized name for %s, using %r: %s", key, fallback, e)
            self.set(key, fallback, ttl=self.fallback_ttl)
            return fallback
        result = extract_fn(record) or fallback
        self.set(key, result)
        return result

    def resolve(self, key, fetch_fn, extract_fn, fallback: str) -> str:
        cached = self.lookup(key)
        if cached is not None:
            return cached
        return self.load_and_store(key, fetch_fn, extract_fn, fallback)

    def cleanup(self) -> int:
        """Remove every expired entry. Returns the number removed."""
        now = self._clock()
        # Snapshot: the cleanup timer runs beside request threads
        expired = [k for k, entry in list(self._entries.items()) if not entry.is_valid(now)]
        for k in expired:
            self._entries.pop(k, None)
        if expired:
            logger.debug("Removed %d expired name cache entries", len(expired))
        return len(expired)

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return self.get(key) is not None


def start_cache_cleanup(cache: LocalizationCache, interval: float = CLEANUP_INTERVAL):
    """Run ``cache.cleanup()`` every ``interval`` seconds on a daemon thread.

    Returns a callable that stops the timer.
    """
    stopped = threading.Event()

    def _loop():
        while not stopped.wait(interval):
            try:
                cache.cleanup()
            except Exception:
                logger.exception("Name cache cleanup failed")

    t = threading.Thread(target=_loop, name='name-cache-cleanup', daemon=True)
    t.start()
    return stopped.set
