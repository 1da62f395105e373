"""
LRU (Least Recently Used) Cache implementation.

Recency is tracked with a doubly-linked list whose links are keys rather
than object references. Every ``prev``/``next`` hop is resolved through the
single owning table, so entries never point at each other and the table
stays the only owner of every value.

    head (most recent) <-> ... <-> tail (least recent)

All public operations are O(1) except the read-only walks
(``get_lru_order``, ``items``). Not thread-safe: callers sharing a cache
across threads must serialize access themselves, since ``_detach`` and
``_attach_at_head`` touch two neighbours and must not interleave.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional, Tuple, Union

from ..interfaces.cache import ICache, CacheStats
from ..models.entry import CacheEntry, NO_KEY
from ..persistence.text_store import load_entries, save_entries

logger = logging.getLogger(__name__)


class LRUCache(ICache):
    """
    Fixed-capacity LRU cache over a key-indexed linked list.

    Features:
    - O(1) get/put with promotion to most-recently-used
    - Eviction of the tail when a new key arrives at capacity
    - Hit/miss/eviction statistics
    - Tab-separated text persistence (save_to_file / load_from_file)

    A capacity of 0 rejects every insert: ``put`` is a no-op.
    """

    def __init__(self, capacity: int):
        """
        Initialize LRU cache.

        Args:
            capacity: Maximum number of entries, fixed for the cache lifetime

        Raises:
            ValueError: If capacity is negative or not an integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")

        self._capacity = capacity
        self._table: Dict[Hashable, CacheEntry] = {}
        self._head: Any = NO_KEY  # Most recently used
        self._tail: Any = NO_KEY  # Least recently used

        # Statistics tracking
        self._stats = CacheStats()

    @classmethod
    def persistent(
        cls,
        capacity: int,
        file_path: Union[str, Path],
        key_type: Callable[[str], Any] = str,
        value_type: Callable[[str], Any] = str,
    ) -> "LRUCache":
        """
        Create a cache pre-loaded from ``file_path`` if it exists.

        A load failure is logged and the cache is returned with whatever
        was loaded before the failure.

        Args:
            capacity: Maximum number of entries
            file_path: Cache file written by ``save_to_file``
            key_type: Parser for keys read from the file
            value_type: Parser for values read from the file

        Returns:
            New LRUCache
        """
        cache = cls(capacity)
        try:
            cache.load_from_file(file_path, key_type=key_type, value_type=value_type)
        except OSError as e:
            logger.warning(f"Could not pre-load cache from {file_path}: {e}")
        return cache

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable, default: Optional[Any] = None) -> Optional[Any]:
        """
        Retrieve value and mark the key as most recently used.

        A miss leaves the recency order and the table untouched.

        Args:
            key: Cache key
            default: Returned when the key is absent

        Returns:
            Cached value or ``default`` if not found
        """
        entry = self._table.get(key)
        if entry is None:
            self._stats.misses += 1
            return default

        self._move_to_head(key)
        self._stats.hits += 1
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        """
        Store value and mark the key as most recently used.

        Overwriting an existing key keeps its entry and only promotes it.
        Inserting a new key into a full cache evicts the least recently
        used entry first.

        Args:
            key: Cache key
            value: Value to cache
        """
        if self._capacity == 0:
            logger.debug(f"Rejected put of {key!r}: cache capacity is 0")
            return

        entry = self._table.get(key)
        if entry is not None:
            self._detach(key)
            entry.value = value
        else:
            if len(self._table) >= self._capacity:
                self._evict_tail()
            self._table[key] = CacheEntry(value=value)

        self._attach_at_head(key)
        self._stats.size = len(self._table)

    def save_to_file(self, path: Union[str, Path]) -> int:
        """
        Write all entries to ``path`` as tab-separated lines.

        Lines follow table order, not recency order, so a later load does
        not reproduce the current recency order.

        Returns:
            Number of entries written

        Raises:
            CachePersistenceError: If the file cannot be created or written
        """
        return save_entries(self.items(), path)

    def load_from_file(
        self,
        path: Union[str, Path],
        key_type: Callable[[str], Any] = str,
        value_type: Callable[[str], Any] = str,
    ) -> int:
        """
        Replay entries from ``path`` through ``put``.

        Later lines end up more recent than earlier ones, and a file with
        more lines than the capacity evicts the earliest ones. A missing
        file is a no-op. Unparsable lines are skipped.

        Args:
            path: Cache file written by ``save_to_file``
            key_type: Parser for keys (e.g. ``int``)
            value_type: Parser for values

        Returns:
            Number of entries replayed

        Raises:
            CachePersistenceError: If the file exists but cannot be read
        """
        count = 0
        for key, value in load_entries(path, key_type=key_type, value_type=value_type):
            self.put(key, value)
            count += 1
        return count

    def contains(self, key: Hashable) -> bool:
        """Check membership without updating recency."""
        return key in self._table

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._table)

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        """Yield (key, value) pairs in table order (not recency order)."""
        for key, entry in self._table.items():
            yield key, entry.value

    def get_lru_order(self) -> List[Hashable]:
        """
        Get keys in LRU order (least recently used first).

        Useful for debugging and monitoring.
        """
        order = []
        key = self._tail
        while key is not NO_KEY:
            order.append(key)
            key = self._table[key].prev
        return order

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, evictions, size, and hit_rate
        """
        self._stats.size = len(self._table)
        return self._stats

    def get_size(self) -> int:
        """Get current cache size."""
        return len(self._table)

    def get_max_size(self) -> int:
        """Get maximum cache size."""
        return self._capacity

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._table)})"

    def _detach(self, key: Hashable) -> None:
        """Unlink ``key`` from the chain, joining its neighbours. Stays in the table."""
        entry = self._table[key]
        prev_key = entry.prev
        next_key = entry.next

        if prev_key is not NO_KEY:
            self._table[prev_key].next = next_key
        else:
            self._head = next_key

        if next_key is not NO_KEY:
            self._table[next_key].prev = prev_key
        else:
            self._tail = prev_key

        entry.prev = NO_KEY
        entry.next = NO_KEY

    def _attach_at_head(self, key: Hashable) -> None:
        """Link ``key`` in front of the current head."""
        entry = self._table[key]
        entry.prev = NO_KEY
        entry.next = self._head

        if self._head is not NO_KEY:
            self._table[self._head].prev = key

        self._head = key

        if self._tail is NO_KEY:
            self._tail = key

    def _move_to_head(self, key: Hashable) -> None:
        """Mark ``key`` as most recently used."""
        if self._head is not NO_KEY and self._head == key:
            return
        self._detach(key)
        self._attach_at_head(key)

    def _evict_tail(self) -> None:
        """Evict the least recently used entry."""
        tail_key = self._tail
        if tail_key is NO_KEY:
            return

        self._detach(tail_key)
        del self._table[tail_key]
        self._stats.evictions += 1
        logger.debug(f"Evicted LRU key: {tail_key!r}")
