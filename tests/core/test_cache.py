"""Tests for the reference-data cache."""

import pytest

from inception.config.settings import Settings
from inception.core.cache import ALL, ReferenceCache, cache_key


class TestCacheKey:

    def test_joins_parts_with_dots(self) -> None:
        assert cache_key("regions", "ZA", "en-US") == "regions.ZA.en-US"

    def test_all_list_key(self) -> None:
        assert cache_key("countries", ALL) == "countries.ALL"


class TestReferenceCache:

    @pytest.fixture
    def cache(self) -> ReferenceCache:
        return ReferenceCache(ttl_seconds=60, max_entries=16)

    def test_put_and_get(self, cache: ReferenceCache) -> None:
        cache.put("countries.ALL", ["ZA"])
        assert cache.get("countries.ALL") == ["ZA"]
        assert len(cache) == 1

    def test_missing_key_returns_none(self, cache: ReferenceCache) -> None:
        assert cache.get("languages.ALL") is None

    def test_invalidate_single_key(self, cache: ReferenceCache) -> None:
        cache.put("countries.ALL", [])
        cache.invalidate("countries.ALL")
        assert cache.get("countries.ALL") is None

    def test_invalidate_prefix_only_matches_whole_segments(self, cache: ReferenceCache) -> None:
        cache.put("countries.ALL", [1])
        cache.put("countries.en-US", [2])
        cache.put("countriesExtra.ALL", [3])
        cache.put("party.genders.ALL", [4])

        dropped = cache.invalidate_prefix("countries")

        assert dropped == 2
        assert cache.get("countries.ALL") is None
        assert cache.get("countries.en-US") is None
        assert cache.get("countriesExtra.ALL") == [3]
        assert cache.get("party.genders.ALL") == [4]

    def test_namespace_prefix(self, cache: ReferenceCache) -> None:
        cache.put("party.genders.ALL", [1])
        cache.put("party.titles.en-US", [2])
        cache.put("genders.ALL", [3])
        assert cache.invalidate_prefix("party") == 2
        assert cache.get("genders.ALL") == [3]

    def test_clear(self, cache: ReferenceCache) -> None:
        cache.put("a.ALL", 1)
        cache.put("b.ALL", 2)
        cache.clear()
        assert len(cache) == 0

    def test_max_entries_bound(self) -> None:
        cache = ReferenceCache(ttl_seconds=60, max_entries=2)
        for i in range(5):
            cache.put(f"kind{i}.ALL", i)
        assert len(cache) <= 2

    def test_entries_expire_after_ttl(self) -> None:
        now = [1000.0]
        cache = ReferenceCache(ttl_seconds=30, max_entries=8, timer=lambda: now[0])
        cache.put("countries.ALL", ["ZA"])

        now[0] += 29
        assert cache.get("countries.ALL") == ["ZA"]

        now[0] += 2
        assert cache.get("countries.ALL") is None

    def test_disabled_cache_stores_nothing(self) -> None:
        cache = ReferenceCache.disabled()
        cache.put("countries.ALL", ["ZA"])
        assert cache.enabled is False
        assert cache.get("countries.ALL") is None

    def test_zero_ttl_disables(self) -> None:
        assert ReferenceCache(ttl_seconds=0, max_entries=10).enabled is False

    def test_from_settings(self) -> None:
        settings = Settings(
            _env_file=None, REFERENCE_CACHE_TTL_SECONDS=30, REFERENCE_CACHE_MAX_ENTRIES=8,
        )
        cache = ReferenceCache.from_settings(settings)
        assert cache.enabled is True
