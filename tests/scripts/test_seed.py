"""Seed script tests: baseline rows load and re-running does not duplicate."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from inception.core.cache import ReferenceCache
from inception.party.reference_service import PartyReferenceService
from inception.reference.service import ReferenceService
from inception.repositories.operations_reference import ExternalReferenceTypeRepository
from scripts.seed import (
    OPERATIONS_EXTERNAL_REFERENCE_TYPES,
    PARTY_REFERENCE_DATA,
    REFERENCE_DATA,
    seed_all,
    seed_external_reference_types,
)


class TestSeed:

    @pytest.mark.anyio
    async def test_seed_all_counts(self, db_session: AsyncSession) -> None:
        counts = await seed_all(db_session)
        assert counts["countries"] == len(REFERENCE_DATA["countries"])
        assert counts["party.genders"] == len(PARTY_REFERENCE_DATA["genders"])
        assert counts["operations.externalReferenceTypes"] == len(
            OPERATIONS_EXTERNAL_REFERENCE_TYPES
        )

    @pytest.mark.anyio
    async def test_seeded_data_is_served(self, db_session: AsyncSession) -> None:
        await seed_all(db_session)
        cache = ReferenceCache(ttl_seconds=60, max_entries=64)

        reference = ReferenceService(db_session, cache)
        regions = await reference.get_regions("en-US", "ZA")
        assert [r.code for r in regions] == ["EC", "GP", "KZN", "WC"]

        party = PartyReferenceService(db_session, cache)
        assert await party.is_valid_marriage_type(None, "married", "in_community")
        assert await party.is_valid_external_reference(None, "person", "za_id_number",
                                                       "8001015009087")
        assert await party.is_valid_time_to_contact(None, "morning")
        assert [t.code for t in await party.get_physical_address_types("en-US")] == [
            "street", "complex", "farm", "international",
        ]

    @pytest.mark.anyio
    async def test_seed_is_idempotent(self, db_session: AsyncSession) -> None:
        """Second run merges reference rows and skips existing reference types."""
        await seed_all(db_session)
        second = await seed_all(db_session)
        assert second["operations.externalReferenceTypes"] == 0
        assert await seed_external_reference_types(db_session) == 0

        cache = ReferenceCache(ttl_seconds=60, max_entries=64)
        countries = await ReferenceService(db_session, cache).get_countries("en-US")
        assert len(countries) == len(REFERENCE_DATA["countries"])

        repo = ExternalReferenceTypeRepository(db_session)
        assert len(await repo.list_all()) == len(OPERATIONS_EXTERNAL_REFERENCE_TYPES)
