"""
Cache interface - contract shared by eviction policies.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional
from pydantic import BaseModel


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ICache(ABC):
    """
    Cache contract following the Strategy Pattern.

    Eviction policies (LRU today, LFU or others later) implement this
    interface so callers can swap them without changes.
    """

    @abstractmethod
    def get(self, key: Hashable, default: Optional[Any] = None) -> Optional[Any]:
        """
        Retrieve value from cache.

        Args:
            key: Cache key
            default: Returned when the key is absent

        Returns:
            Cached value or ``default`` if not found
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Store value in cache.

        Args:
            key: Cache key
            value: Value to cache
        """
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, evictions, and size
        """
        pass
