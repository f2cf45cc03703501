"""Tests for the generic reference data repository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.tables import CountryRow, FieldOfStudyRow, GenderRow, RegionRow
from inception.models.reference import ReferenceKey
from inception.repositories.reference import (
    PARTY_REFERENCE_ROWS,
    REFERENCE_ROWS,
    ReferenceRepository,
)


def _country(code: str, locale_id: str, sort_index: int, name: str) -> CountryRow:
    return CountryRow(code=code, locale_id=locale_id, sort_index=sort_index, name=name,
                      description="", short_name=name, sovereign_state=code,
                      nationality=name)


@pytest.fixture
async def countries(db_session: AsyncSession) -> ReferenceRepository:
    repo = ReferenceRepository(db_session, CountryRow)
    for row in (
        _country("ZA", "en-US", 2, "South Africa"),
        _country("GB", "en-US", 1, "United Kingdom"),
        _country("ZA", "af-ZA", 1, "Suid-Afrika"),
    ):
        await repo.save(row)
    return repo


class TestReferenceRepository:

    @pytest.mark.anyio
    async def test_find_all_ordered_by_locale_then_sort_index(
        self, countries: ReferenceRepository,
    ) -> None:
        rows = await countries.find_all()
        assert [(r.locale_id, r.code) for r in rows] == [
            ("af-ZA", "ZA"), ("en-US", "GB"), ("en-US", "ZA"),
        ]

    @pytest.mark.anyio
    async def test_find_all_by_locale_is_case_insensitive(
        self, countries: ReferenceRepository,
    ) -> None:
        rows = await countries.find_all_by_locale("EN-us")
        assert [r.code for r in rows] == ["GB", "ZA"]

    @pytest.mark.anyio
    async def test_find_by_key(self, countries: ReferenceRepository) -> None:
        row = await countries.find_by_key(ReferenceKey("ZA", "af-ZA"))
        assert row is not None
        assert row.name == "Suid-Afrika"

    @pytest.mark.anyio
    async def test_save_replaces_existing_row(self, countries: ReferenceRepository) -> None:
        await countries.save(_country("ZA", "en-US", 2, "Republic of South Africa"))
        row = await countries.find_by_key(ReferenceKey("ZA", "en-US"))
        assert row.name == "Republic of South Africa"
        assert len(await countries.find_all()) == 3

    @pytest.mark.anyio
    async def test_parented_key_requires_parent(self, db_session: AsyncSession) -> None:
        repo = ReferenceRepository(db_session, RegionRow)
        await repo.save(RegionRow(code="GP", locale_id="en-US", country="ZA", name="Gauteng"))

        assert await repo.find_by_key(ReferenceKey("GP", "en-US")) is None
        row = await repo.find_by_key(ReferenceKey("GP", "en-US", "ZA"))
        assert row is not None
        assert row.name == "Gauteng"

    @pytest.mark.anyio
    async def test_tenant_column_round_trips(self, db_session: AsyncSession) -> None:
        repo = ReferenceRepository(db_session, GenderRow)
        await repo.save(GenderRow(code="female", locale_id="en-US", name="Female"))
        rows = await repo.find_all()
        assert rows[0].tenant_id is None


class TestRowRegistries:

    def test_general_kinds(self) -> None:
        assert set(REFERENCE_ROWS) == {
            "countries", "languages", "regions", "measurementSystems",
            "measurementUnitTypes", "measurementUnits",
        }

    def test_party_kinds(self) -> None:
        assert len(PARTY_REFERENCE_ROWS) == 28
        assert PARTY_REFERENCE_ROWS["genders"] is GenderRow
        assert PARTY_REFERENCE_ROWS["fieldsOfStudy"] is FieldOfStudyRow
        assert all(
            row.__tablename__.startswith("party_reference_")
            for row in PARTY_REFERENCE_ROWS.values()
        )
