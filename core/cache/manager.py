"""Result cache manager.

Keeps recent translation and transliteration results in memory with a TTL and a capacity bound.
Eviction is by insertion order: at capacity the oldest-inserted entry is dropped. Hit counts are
kept for statistics only.
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING, ClassVar

from models.cache_models import CacheEntry, CacheStatistics
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from models.translation_models import TranslationResult

__all__: list[str] = ["ResultCache"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ResultCache:
    """Thread-safe TTL cache of TranslationResult objects.

    Reads and writes come from the event loop and from worker threads, so a single lock guards the
    map. Every critical section is O(1) apart from the purge of expired entries.

    Attributes:
        DEFAULT_TTL_SEC (ClassVar[float]): Default entry lifetime in seconds.
        DEFAULT_MAX_ENTRIES (ClassVar[int]): Default capacity.
        DEFAULT_KEY_TEXT_LENGTH (ClassVar[int]): Default bound on the text prefix in keys.
    """

    DEFAULT_TTL_SEC: ClassVar[float] = 300.0
    DEFAULT_MAX_ENTRIES: ClassVar[int] = 2000
    DEFAULT_KEY_TEXT_LENGTH: ClassVar[int] = 100

    def __init__(
        self,
        ttl_sec: float = DEFAULT_TTL_SEC,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        key_text_length: int = DEFAULT_KEY_TEXT_LENGTH,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_sec (float): Entry lifetime in seconds.
            max_entries (int): Maximum number of entries.
            key_text_length (int): Maximum number of text characters in a key.
            clock (Callable[[], float]): Monotonic clock in seconds, injectable for tests.

        Raises:
            ValueError: If a limit is not positive.
        """
        if ttl_sec <= 0 or max_entries <= 0 or key_text_length <= 0:
            msg: str = "ttl_sec, max_entries and key_text_length must be positive"
            raise ValueError(msg)
        self.ttl_sec: float = ttl_sec
        self.max_entries: int = max_entries
        self.key_text_length: int = key_text_length
        self._clock: Callable[[], float] = clock
        # dict preserves insertion order, the first key is always the oldest entry
        self._entries: dict[str, CacheEntry] = {}
        self._lock: threading.Lock = threading.Lock()
        self._is_initialized: bool = False
        logger.debug("ResultCache instance created")

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size

    async def component_load(self) -> None:
        """Initialize the cache component."""
        self._is_initialized = True
        logger.info("ResultCache initialized (ttl=%ss, capacity=%d)", self.ttl_sec, self.max_entries)

    async def component_teardown(self) -> None:
        """Drop all entries."""
        self.clear()
        self._is_initialized = False
        logger.info("ResultCache shutdown completed")

    def make_key(self, text: str, source_language: str, target_language: str) -> str:
        """Build the cache key of a request from canonical languages."""
        return StringUtils.generate_cache_key(text, source_language, target_language, self.key_text_length)

    def get(self, key: str, original_text: str | None = None) -> TranslationResult | None:
        """Look up a result.

        Keys hold a case-folded, bounded prefix of the text, so different texts can share a key.
        Passing original_text rejects entries computed for any other text.

        Args:
            key (str): Cache key.
            original_text (str | None): Exact text the result must have been computed for.

        Returns:
            TranslationResult | None: The cached result, or None when absent, expired or computed
            for another text.
        """
        with self._lock:
            entry: CacheEntry | None = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry, self._clock()):
                return None
            if original_text is not None and entry.result.original_text != original_text:
                logger.debug("Cache key shared by another text, ignoring entry: %s", key[:32])
                return None
            entry.hit_count += 1
            logger.debug("Cache hit for key: %s (hits=%d)", key[:32], entry.hit_count)
            return entry.result

    def set(self, key: str, result: TranslationResult) -> None:
        """Insert a result, evicting the oldest entry at capacity.

        Re-setting an existing key moves it to the newest position.

        Args:
            key (str): Cache key.
            result (TranslationResult): Result to store.
        """
        with self._lock:
            now: float = self._clock()
            self._entries.pop(key, None)
            if len(self._entries) >= self.max_entries:
                self._purge_expired(now)
            if len(self._entries) >= self.max_entries:
                oldest: str = next(iter(self._entries))
                del self._entries[oldest]
                logger.debug("Cache full, evicted key: %s", oldest[:32])
            self._entries[key] = CacheEntry(result=result, inserted_at=now)

    def clear(self) -> None:
        with self._lock:
            count: int = len(self._entries)
            self._entries.clear()
        logger.info("Result cache cleared (%d entries)", count)

    def statistics(self) -> CacheStatistics:
        """Collect statistics over live entries.

        Returns:
            CacheStatistics: Entry and hit totals, limits and the age of the oldest live entry.
        """
        with self._lock:
            now: float = self._clock()
            live: list[CacheEntry] = [entry for entry in self._entries.values() if not self._is_expired(entry, now)]
        return CacheStatistics(
            total_entries=len(live),
            total_hits=sum(entry.hit_count for entry in live),
            capacity=self.max_entries,
            ttl_sec=self.ttl_sec,
            oldest_age_sec=now - live[0].inserted_at if live else None,
        )

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.inserted_at >= self.ttl_sec

    def _purge_expired(self, now: float) -> None:
        # Insertion order equals age order, so expired entries form a prefix
        expired: list[str] = []
        for key, entry in self._entries.items():
            if not self._is_expired(entry, now):
                break
            expired.append(key)
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Purged %d expired cache entries", len(expired))
