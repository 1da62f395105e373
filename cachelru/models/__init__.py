from .entry import CacheEntry, NO_KEY

__all__ = [
    "CacheEntry",
    "NO_KEY",
]
