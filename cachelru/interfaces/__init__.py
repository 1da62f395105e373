"""
Interfaces for cache implementations.

Any eviction policy implements ICache, making policies interchangeable.
"""

from .cache import ICache, CacheStats

__all__ = [
    "ICache",
    "CacheStats",
]
