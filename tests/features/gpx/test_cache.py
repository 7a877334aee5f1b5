"""
Tests for RouteCache and content hashing.
"""

import hashlib

import pytest

from route_pipeline.features.gpx import RouteCache, compute_content_hash, process_gpx_upload


@pytest.fixture
def small_result(gpx_builder):
    return process_gpx_upload(gpx_builder([(1.0, 1.0, None), (1.1, 1.0, None)]))


class TestContentHash:
    """Tests for compute_content_hash."""

    def test_sha256_hex(self):
        assert compute_content_hash("abc") == hashlib.sha256(b"abc").hexdigest()

    def test_stable(self):
        assert compute_content_hash("<gpx/>") == compute_content_hash("<gpx/>")

    def test_unicode(self):
        assert len(compute_content_hash("Zürich – Genève")) == 64


class TestRouteCache:
    """Tests for RouteCache."""

    def test_get_missing(self):
        assert RouteCache().get("nope") is None

    def test_put_get(self, small_result):
        cache = RouteCache()
        key = RouteCache.make_key("<gpx/>", "a.gpx")
        cache.put(key, small_result)
        assert key in cache
        assert cache.get(key) == small_result

    def test_key_depends_on_filename(self):
        assert RouteCache.make_key("x", "a.gpx") != RouteCache.make_key("x", "b.gpx")
        assert RouteCache.make_key("x") == RouteCache.make_key("x", None)

    def test_key_depends_on_options(self):
        base = RouteCache.make_key("x", "a.gpx", options=(300, 50, "Unnamed Route"))
        assert base != RouteCache.make_key("x", "a.gpx", options=(100, 10, "Unnamed Route"))
        assert base != RouteCache.make_key("x", "a.gpx", options=(300, 50, "Mine"))
        assert base == RouteCache.make_key("x", "a.gpx", options=(300, 50, "Unnamed Route"))

    def test_returned_entry_is_a_copy(self, small_result):
        cache = RouteCache()
        cache.put("a", small_result)
        small_result.display_points.clear()
        first = cache.get("a")
        first.thumbnail_points.clear()
        second = cache.get("a")
        assert len(second.display_points) == 2
        assert len(second.thumbnail_points) == 2

    def test_lru_eviction(self, small_result):
        cache = RouteCache(max_entries=2)
        cache.put("a", small_result)
        cache.put("b", small_result)
        cache.get("a")
        cache.put("c", small_result)
        assert "a" in cache
        assert "b" not in cache
        assert len(cache) == 2

    def test_clear(self, small_result):
        cache = RouteCache()
        cache.put("a", small_result)
        cache.clear()
        assert len(cache) == 0

    def test_default_size_from_settings(self):
        assert RouteCache().max_entries == 128

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            RouteCache(max_entries=0)
