"""
Command-line driver for a persistent string cache.

Usage:
    cachelru put KEY VALUE [KEY VALUE ...]
    cachelru get KEY
    cachelru show
    cachelru demo

Defaults for --file and --capacity come from the CACHELRU_* environment
variables (see cachelru.config).
"""

import argparse
import logging
import sys
from typing import List, Optional

from .caching.lru_cache import LRUCache
from .config import settings
from .exceptions import CachePersistenceError

logger = logging.getLogger(__name__)

EXIT_MISS = 1
EXIT_IO_ERROR = 2

DEMO_ENTRIES = [
    ("A", "value_a"),
    ("B", "value_b"),
    ("C", "value_c"),
    ("D", "value_d"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cachelru",
        description="Fixed-capacity LRU cache persisted to a tab-separated text file"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=settings.cache_file,
        help=f"Path to the cache file (default: {settings.cache_file})",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=settings.capacity,
        help=f"Maximum number of entries (default: {settings.capacity})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    put_parser = subparsers.add_parser("put", help="Insert key/value pairs and save")
    put_parser.add_argument("pairs", nargs="+", metavar="KEY VALUE", help="Alternating keys and values")

    get_parser = subparsers.add_parser("get", help="Print the value stored for a key")
    get_parser.add_argument("key", help="Key to look up")

    subparsers.add_parser("show", help="List entries from least to most recently used")
    subparsers.add_parser("demo", help="Insert A..D into the cache and save")

    return parser


def _cmd_put(cache: LRUCache, args: argparse.Namespace) -> int:
    for key, value in zip(args.pairs[::2], args.pairs[1::2]):
        cache.put(key, value)
    cache.save_to_file(args.file)
    return 0


def _cmd_get(cache: LRUCache, args: argparse.Namespace) -> int:
    value = cache.get(args.key)
    if value is None:
        print(f"{args.key}: not found")
        return EXIT_MISS
    print(value)
    return 0


def _cmd_show(cache: LRUCache, args: argparse.Namespace) -> int:
    values = dict(cache.items())
    for key in cache.get_lru_order():
        print(f"{key}\t{values[key]}")

    stats = cache.get_stats()
    print(f"size={stats.size}/{cache.capacity} evictions={stats.evictions}")
    return 0


def _cmd_demo(cache: LRUCache, args: argparse.Namespace) -> int:
    for key, value in DEMO_ENTRIES:
        cache.put(key, value)
    cache.save_to_file(args.file)
    print(f"Cache saved to {args.file}")
    return 0


COMMANDS = {
    "put": _cmd_put,
    "get": _cmd_get,
    "show": _cmd_show,
    "demo": _cmd_demo,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if args.capacity < 0:
        parser.error("--capacity must be >= 0")
    if args.command == "put" and len(args.pairs) % 2:
        parser.error("put expects an even number of arguments: KEY VALUE [KEY VALUE ...]")

    try:
        cache = LRUCache(args.capacity)
        cache.load_from_file(args.file)
        return COMMANDS[args.command](cache, args)
    except CachePersistenceError as e:
        logger.error(f"Cache file error: {e}")
        return EXIT_IO_ERROR


if __name__ == "__main__":
    sys.exit(main())
