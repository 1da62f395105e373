#!/usr/bin/env python3
"""
Benchmark LRUCache insert and lookup times.

Fills a cache of capacity N with N integer keys, then reads every key back.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --size 100000
"""

import argparse
import logging
import time

from cachelru import LRUCache
from cachelru.config import settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_benchmark(size: int) -> dict:
    """Time ``size`` puts and ``size`` gets; returns durations in seconds"""
    cache = LRUCache(size)

    start = time.perf_counter()
    for i in range(size):
        cache.put(i, i)
    put_seconds = time.perf_counter() - start

    start = time.perf_counter()
    for i in range(size):
        cache.get(i)
    get_seconds = time.perf_counter() - start

    return {
        "size": size,
        "put_seconds": put_seconds,
        "get_seconds": get_seconds,
        "stats": cache.get_stats(),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark LRUCache put/get throughput"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=settings.benchmark_size,
        help=f"Number of entries to insert and read (default: {settings.benchmark_size})",
    )
    args = parser.parse_args()

    result = run_benchmark(args.size)
    logger.info(f"Time to insert {result['size']} entries: {result['put_seconds'] * 1000:.3f} ms")
    logger.info(f"Time to read {result['size']} entries: {result['get_seconds'] * 1000:.3f} ms")
    logger.info(f"Hit rate: {result['stats'].hit_rate:.2%}")


if __name__ == "__main__":
    main()
