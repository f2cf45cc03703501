"""Tests for ReferenceService: locale filtering, caching and validation."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from inception.core.cache import ReferenceCache
from inception.core.errors import InvalidArgumentError
from inception.db.tables import CountryRow, LanguageRow, RegionRow
from inception.reference.service import ReferenceService
from inception.repositories.reference import ReferenceRepository


async def _seed(session: AsyncSession) -> None:
    countries = ReferenceRepository(session, CountryRow)
    for code, locale_id, index, name in (
        ("ZA", "en-US", 2, "South Africa"),
        ("GB", "en-US", 1, "United Kingdom"),
        ("ZA", "af-ZA", 1, "Suid-Afrika"),
    ):
        await countries.save(CountryRow(
            code=code, locale_id=locale_id, sort_index=index, name=name,
            description="", short_name=name, sovereign_state=code, nationality=name,
        ))

    regions = ReferenceRepository(session, RegionRow)
    for code, country, name in (
        ("GP", "ZA", "Gauteng"),
        ("WC", "ZA", "Western Cape"),
        ("ENG", "GB", "England"),
    ):
        await regions.save(RegionRow(code=code, locale_id="en-US", country=country, name=name))


@pytest.fixture
async def service(db_session: AsyncSession, reference_cache: ReferenceCache) -> ReferenceService:
    await _seed(db_session)
    return ReferenceService(db_session, reference_cache)


class TestLists:

    @pytest.mark.anyio
    async def test_all_locales(self, service: ReferenceService) -> None:
        countries = await service.get_countries()
        assert [(c.locale_id, c.code) for c in countries] == [
            ("af-ZA", "ZA"), ("en-US", "GB"), ("en-US", "ZA"),
        ]

    @pytest.mark.anyio
    async def test_locale_filter_is_case_insensitive(self, service: ReferenceService) -> None:
        countries = await service.get_countries("EN-US")
        assert [c.code for c in countries] == ["GB", "ZA"]

    @pytest.mark.anyio
    async def test_unknown_locale_is_empty(self, service: ReferenceService) -> None:
        assert await service.get_languages("fr-FR") == []

    @pytest.mark.anyio
    async def test_blank_locale_rejected(self, service: ReferenceService) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            await service.get_countries("  ")
        assert exc_info.value.parameter == "localeId"

    @pytest.mark.anyio
    async def test_regions_by_country(self, service: ReferenceService) -> None:
        regions = await service.get_regions("en-US", "za")
        assert [r.code for r in regions] == ["GP", "WC"]

        regions = await service.get_regions(country="GB")
        assert [r.code for r in regions] == ["ENG"]

    @pytest.mark.anyio
    async def test_time_zones(self, service: ReferenceService) -> None:
        zones = await service.get_time_zones("en-US")
        codes = [z.code for z in zones]
        assert "Africa/Johannesburg" in codes
        assert codes == sorted(codes)
        assert all(z.locale_id == "en-US" for z in zones)


class TestCaching:

    @pytest.mark.anyio
    async def test_lists_are_cached_until_invalidated(
        self, service: ReferenceService, db_session: AsyncSession,
        reference_cache: ReferenceCache,
    ) -> None:
        assert len(await service.get_languages("en-US")) == 0
        assert reference_cache.get("languages.ALL") == []
        assert reference_cache.get("languages.en-US") == []

        await ReferenceRepository(db_session, LanguageRow).save(
            LanguageRow(code="EN", locale_id="en-US", name="English", short_name="English"),
        )
        assert len(await service.get_languages("en-US")) == 0

        service.invalidate("languages")
        assert [lang.code for lang in await service.get_languages("en-US")] == ["EN"]

    @pytest.mark.anyio
    async def test_invalidate_all(self, service: ReferenceService,
                                  reference_cache: ReferenceCache) -> None:
        await service.get_countries("en-US")
        await service.get_regions("en-US", "ZA")
        service.invalidate()
        assert len(reference_cache) == 0

    @pytest.mark.anyio
    async def test_invalidate_unknown_kind(self, service: ReferenceService) -> None:
        with pytest.raises(InvalidArgumentError):
            service.invalidate("planets")


class TestValidation:

    @pytest.mark.anyio
    async def test_is_valid_country(self, service: ReferenceService) -> None:
        assert await service.is_valid_country("ZA")
        assert not await service.is_valid_country("za")
        assert not await service.is_valid_country("XX")
        assert not await service.is_valid_country(None)

    @pytest.mark.anyio
    async def test_is_valid_region(self, service: ReferenceService) -> None:
        assert await service.is_valid_region("WC")
        assert not await service.is_valid_region("")

    @pytest.mark.anyio
    async def test_is_valid_time_zone(self, service: ReferenceService) -> None:
        assert await service.is_valid_time_zone("Europe/London")
        assert not await service.is_valid_time_zone("Mars/Olympus_Mons")
        assert not await service.is_valid_time_zone(None)

    @pytest.mark.anyio
    @pytest.mark.parametrize("code", ["America", "Etc", "../etc/passwd", "/Europe/London"])
    async def test_zone_directories_and_paths_are_not_time_zones(
        self, service: ReferenceService, code: str,
    ) -> None:
        assert not await service.is_valid_time_zone(code)
