"""
Tests for saving and loading cache contents as tab-separated text.
"""

import logging

import pytest

from cachelru import CachePersistenceError, LRUCache
from cachelru.persistence import load_entries, save_entries


@pytest.fixture
def cache_file(tmp_path):
    """Path to a cache file that does not exist yet."""
    return tmp_path / "test_cache.txt"


class TestSaveEntries:
    """Writing pairs to disk."""

    def test_writes_one_line_per_pair(self, cache_file):
        count = save_entries([("A", "value_a"), ("B", 2)], cache_file)

        assert count == 2
        assert cache_file.read_text(encoding="utf-8") == "A\tvalue_a\nB\t2\n"

    def test_overwrites_existing_file(self, cache_file):
        cache_file.write_text("old\tline\n", encoding="utf-8")
        save_entries([("new", "line")], cache_file)
        assert cache_file.read_text(encoding="utf-8") == "new\tline\n"

    def test_unwritable_destination_raises(self, tmp_path):
        target = tmp_path / "missing_dir" / "cache.txt"

        with pytest.raises(CachePersistenceError) as exc_info:
            save_entries([("a", "b")], target)

        assert exc_info.value.path == str(target)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_persistence_error_is_oserror(self, tmp_path):
        with pytest.raises(OSError):
            save_entries([("a", "b")], tmp_path)


class TestLoadEntries:
    """Reading pairs back, skipping what cannot be parsed."""

    def test_missing_file_yields_nothing(self, cache_file):
        assert list(load_entries(cache_file)) == []

    def test_reads_pairs_in_file_order(self, cache_file):
        cache_file.write_text("A\tvalue_a\nB\tvalue_b\n", encoding="utf-8")
        assert list(load_entries(cache_file)) == [("A", "value_a"), ("B", "value_b")]

    def test_splits_on_first_tab_only(self, cache_file):
        cache_file.write_text("key\tvalue\twith tab\n", encoding="utf-8")
        assert list(load_entries(cache_file)) == [("key", "value\twith tab")]

    def test_windows_line_endings(self, cache_file):
        cache_file.write_bytes(b"A\t1\r\nB\t2\r\n")
        assert list(load_entries(cache_file, value_type=int)) == [("A", 1), ("B", 2)]

    def test_empty_fields_are_valid_strings(self, cache_file):
        cache_file.write_text("\tempty key\nempty value\t\n", encoding="utf-8")
        assert list(load_entries(cache_file)) == [("", "empty key"), ("empty value", "")]

    def test_lines_without_tab_skipped(self, cache_file):
        cache_file.write_text("no delimiter here\n\nA\t1\n", encoding="utf-8")
        assert list(load_entries(cache_file)) == [("A", "1")]

    def test_unparsable_fields_skipped(self, cache_file, caplog):
        cache_file.write_text("1\t10\nx\t20\n3\ty\n4\t40\n", encoding="utf-8")

        with caplog.at_level(logging.DEBUG, logger="cachelru.persistence.text_store"):
            pairs = list(load_entries(cache_file, key_type=int, value_type=int))

        assert pairs == [(1, 10), (4, 40)]
        assert "Skipped 2 unparsable lines" in caplog.text

    def test_directory_path_raises(self, tmp_path):
        with pytest.raises(CachePersistenceError):
            list(load_entries(tmp_path))

    def test_invalid_utf8_raises(self, cache_file):
        cache_file.write_bytes(b"A\t\xff\xfe\n")
        with pytest.raises(CachePersistenceError):
            list(load_entries(cache_file))


class TestCachePersistence:
    """save_to_file / load_from_file / persistent on LRUCache."""

    def test_round_trip_restores_values(self, cache_file):
        cache = LRUCache(3)
        cache.put("A", "value_a")
        cache.put("B", "value_b")
        cache.save_to_file(cache_file)

        restored = LRUCache.persistent(3, cache_file)

        assert restored.get("A") == "value_a"
        assert restored.get("B") == "value_b"
        assert len(restored) == 2

    def test_round_trip_typed_keys_and_values(self, cache_file):
        cache = LRUCache(10)
        for i in range(5):
            cache.put(i, i * 1.5)
        assert cache.save_to_file(cache_file) == 5

        restored = LRUCache(10)
        assert restored.load_from_file(cache_file, key_type=int, value_type=float) == 5
        assert {k: restored.get(k) for k in range(5)} == {i: i * 1.5 for i in range(5)}

    def test_round_trip_key_set_not_order(self, cache_file):
        cache = LRUCache(3)
        for key in ("A", "B", "C"):
            cache.put(key, key.lower())
        cache.get("A")
        cache.save_to_file(cache_file)

        restored = LRUCache.persistent(3, cache_file)

        assert set(restored.get_lru_order()) == {"A", "B", "C"}

    def test_load_missing_file_is_noop(self, cache_file):
        cache = LRUCache(3)
        assert cache.load_from_file(cache_file) == 0
        assert len(cache) == 0

    def test_persistent_without_file_is_empty(self, cache_file):
        cache = LRUCache.persistent(2, cache_file)
        assert len(cache) == 0
        assert not cache_file.exists()

    def test_load_replays_through_put(self, cache_file):
        cache_file.write_text("A\t1\nB\t2\nC\t3\nD\t4\n", encoding="utf-8")

        cache = LRUCache(2)
        cache.load_from_file(cache_file)

        assert cache.get_lru_order() == ["C", "D"]
        assert cache.get_stats().evictions == 2

    def test_load_duplicate_keys_keeps_last(self, cache_file):
        cache_file.write_text("A\t1\nB\t2\nA\t3\n", encoding="utf-8")

        cache = LRUCache(5)
        cache.load_from_file(cache_file)

        assert cache.get_lru_order() == ["B", "A"]
        assert cache.get("A") == "3"

    def test_load_merges_into_existing_entries(self, cache_file):
        cache_file.write_text("B\t2\n", encoding="utf-8")

        cache = LRUCache(2)
        cache.put("A", "1")
        cache.put("Z", "26")
        cache.load_from_file(cache_file)

        assert cache.get_lru_order() == ["Z", "B"]

    def test_persistent_logs_and_survives_load_failure(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="cachelru.caching.lru_cache"):
            cache = LRUCache.persistent(3, tmp_path)

        assert len(cache) == 0
        assert "Could not pre-load cache" in caplog.text

    def test_save_to_unwritable_path_raises(self, tmp_path):
        cache = LRUCache(1)
        cache.put("a", "b")
        with pytest.raises(CachePersistenceError):
            cache.save_to_file(tmp_path / "nope" / "cache.txt")
