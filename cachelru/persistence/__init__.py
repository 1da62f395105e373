"""Persistence adapters for cache contents."""

from .text_store import save_entries, load_entries, DELIMITER

__all__ = [
    "save_entries",
    "load_entries",
    "DELIMITER",
]
