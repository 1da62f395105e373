"""
cachelru - fixed-capacity LRU cache with optional text-file persistence.
"""

from .caching import LRUCache
from .exceptions import CacheError, CachePersistenceError
from .interfaces import ICache, CacheStats

__version__ = "0.1.0"

__all__ = [
    "LRUCache",
    "ICache",
    "CacheStats",
    "CacheError",
    "CachePersistenceError",
]
