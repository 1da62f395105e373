"""Exception hierarchy for cachelru."""

from typing import Optional


class CacheError(Exception):
    """Base class for all cache errors"""


class CachePersistenceError(CacheError, OSError):
    """
    Raised when the cache file cannot be created, opened, read or written.

    Also an OSError. The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message
