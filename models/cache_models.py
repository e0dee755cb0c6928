"""Models for result cache data.

Defines data classes for result cache entries and cache statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.translation_models import TranslationResult

__all__: list[str] = ["CacheEntry", "CacheStatistics"]


@dataclass
class CacheEntry:
    """Result cache entry data.

    Attributes:
        result (TranslationResult): Cached result.
        inserted_at (float): Insertion time on the cache clock, in seconds.
        hit_count (int): Number of cache hits. Informational only.
    """

    result: TranslationResult
    inserted_at: float
    hit_count: int = 0


@dataclass(frozen=True)
class CacheStatistics:
    """Cache usage statistics.

    Attributes:
        total_entries (int): Number of live cache entries.
        total_hits (int): Total cache hits across live entries.
        capacity (int): Maximum number of entries.
        ttl_sec (float): Entry lifetime in seconds.
        oldest_age_sec (float | None): Age of the oldest live entry, None when the cache is empty.
    """

    total_entries: int = 0
    total_hits: int = 0
    capacity: int = 0
    ttl_sec: float = 0.0
    oldest_age_sec: float | None = None
