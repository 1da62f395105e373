"""Entry stored in the cache table."""

from enum import Enum
from typing import Any
from pydantic import BaseModel


class _Link(Enum):
    NONE = "NO_KEY"

    def __repr__(self) -> str:
        return "NO_KEY"


# Marks a missing neighbour. None cannot be used for this because None is a
# valid cache key.
NO_KEY = _Link.NONE


class CacheEntry(BaseModel):
    """
    Value plus its neighbours in recency order.

    ``prev`` and ``next`` hold keys, not entries: neighbours are resolved
    through the owning table, so entries never reference each other.
    """
    value: Any
    prev: Any = NO_KEY
    next: Any = NO_KEY
