"""
Line-oriented text storage for cache contents.

File format: one entry per line, ``<key>\\t<value>\\n``. There is no header
and no escaping, so keys or values containing a tab or a newline produce
lines that are skipped (or misread) on load.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Tuple, Union

from ..exceptions import CachePersistenceError

logger = logging.getLogger(__name__)

DELIMITER = "\t"

PathLike = Union[str, Path]


def save_entries(items: Iterable[Tuple[Any, Any]], path: PathLike) -> int:
    """
    Write key/value pairs to ``path``, replacing any existing file.

    Pairs are written in the order given. Keys and values are rendered
    with ``str()``.

    Args:
        items: Iterable of (key, value) pairs
        path: Destination file

    Returns:
        Number of lines written

    Raises:
        CachePersistenceError: If the file cannot be created or written
    """
    count = 0
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for key, value in items:
                f.write(f"{key}{DELIMITER}{value}\n")
                count += 1
    except OSError as e:
        raise CachePersistenceError(f"Failed to save cache to {path}: {e}", path=str(path)) from e

    logger.info(f"Saved {count} entries to {path}")
    return count


def load_entries(
    path: PathLike,
    key_type: Callable[[str], Any] = str,
    value_type: Callable[[str], Any] = str,
) -> Iterator[Tuple[Any, Any]]:
    """
    Read key/value pairs from ``path``.

    A missing file yields nothing. Lines without a tab, or whose key or
    value cannot be parsed by ``key_type``/``value_type``, are skipped.

    Args:
        path: Source file
        key_type: Parser applied to the key field (e.g. ``int``)
        value_type: Parser applied to the value field

    Yields:
        Parsed (key, value) pairs in file order

    Raises:
        CachePersistenceError: If the file exists but cannot be read
    """
    if not Path(path).exists():
        logger.debug(f"No cache file at {path}, nothing to load")
        return

    loaded = 0
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for line in f:
                pair = _parse_line(line, key_type, value_type)
                if pair is None:
                    skipped += 1
                    continue
                loaded += 1
                yield pair
    except (OSError, UnicodeDecodeError) as e:
        raise CachePersistenceError(f"Failed to load cache from {path}: {e}", path=str(path)) from e

    if skipped:
        logger.debug(f"Skipped {skipped} unparsable lines in {path}")
    logger.info(f"Loaded {loaded} entries from {path}")


def _parse_line(line: str, key_type: Callable[[str], Any], value_type: Callable[[str], Any]):
    """Split a line on its first tab and parse both fields, or return None."""
    line = line.rstrip("\r\n")
    key_str, sep, value_str = line.partition(DELIMITER)
    if not sep:
        return None

    try:
        return key_type(key_str), value_type(value_str)
    except (ValueError, TypeError):
        return None
