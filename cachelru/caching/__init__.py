"""
Eviction policy implementations following the Strategy Pattern.

All cache implementations implement the ICache interface, making them
interchangeable and testable.
"""

from .lru_cache import LRUCache

__all__ = [
    "LRUCache",
]
