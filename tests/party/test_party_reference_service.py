"""Tests for PartyReferenceService tenant visibility and validation rules."""

from uuid import UUID

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from inception.core.cache import ReferenceCache
from inception.core.errors import InvalidArgumentError
from inception.db.tables import (
    ContactMechanismRoleRow,
    EmploymentTypeRow,
    FieldOfStudyRow,
    GenderRow,
    MarriageTypeRow,
    PartyExternalReferenceTypeRow,
)
from inception.party.reference_service import PartyReferenceService
from inception.repositories.reference import PARTY_REFERENCE_ROWS, ReferenceRepository

TENANT_A = UUID("00000000-0000-0000-0000-00000000000a")
TENANT_B = UUID("00000000-0000-0000-0000-00000000000b")


async def _seed(session: AsyncSession) -> None:
    genders = ReferenceRepository(session, GenderRow)
    await genders.save(GenderRow(code="female", locale_id="en-US", sort_index=1, name="Female"))
    await genders.save(GenderRow(code="male", locale_id="en-US", sort_index=2, name="Male"))
    await genders.save(GenderRow(code="custom", locale_id="en-US", sort_index=3,
                                 name="Custom", tenant_id=TENANT_A))

    marriage_types = ReferenceRepository(session, MarriageTypeRow)
    for code in ("civil", "customary"):
        await marriage_types.save(MarriageTypeRow(
            code=code, locale_id="en-US", marital_status="married", name=code.title(),
        ))

    employment_types = ReferenceRepository(session, EmploymentTypeRow)
    await employment_types.save(EmploymentTypeRow(
        code="full_time", locale_id="en-US", employment_status="employed", name="Full-time",
    ))

    ref_types = ReferenceRepository(session, PartyExternalReferenceTypeRow)
    await ref_types.save(PartyExternalReferenceTypeRow(
        code="za_id_number", locale_id="en-US", name="South African ID Number",
        party_types=["person"], pattern=r"\d{13}",
    ))
    await ref_types.save(PartyExternalReferenceTypeRow(
        code="company_registration", locale_id="en-US", name="Company Registration",
        party_types=["organization"], pattern=None,
    ))


@pytest.fixture
async def service(db_session: AsyncSession,
                  reference_cache: ReferenceCache) -> PartyReferenceService:
    await _seed(db_session)
    return PartyReferenceService(db_session, reference_cache)


class TestTenantVisibility:

    @pytest.mark.anyio
    async def test_tenant_rows_only_visible_to_owner(self, service: PartyReferenceService) -> None:
        own = await service.get_genders("en-US", TENANT_A)
        other = await service.get_genders("en-US", TENANT_B)
        assert [g.code for g in own] == ["female", "male", "custom"]
        assert [g.code for g in other] == ["female", "male"]

    @pytest.mark.anyio
    async def test_no_tenant_returns_everything(self, service: PartyReferenceService) -> None:
        assert len(await service.get_genders()) == 3

    @pytest.mark.anyio
    async def test_is_valid_respects_tenant(self, service: PartyReferenceService) -> None:
        assert await service.is_valid_gender(TENANT_A, "custom")
        assert not await service.is_valid_gender(TENANT_B, "custom")
        assert await service.is_valid_gender(TENANT_B, "female")

    @pytest.mark.anyio
    async def test_cache_keys_are_namespaced(self, service: PartyReferenceService,
                                             reference_cache: ReferenceCache) -> None:
        await service.get_genders("en-US")
        assert reference_cache.get("party.genders.ALL") is not None
        assert reference_cache.get("party.genders.en-US") is not None

        service.invalidate()
        assert len(reference_cache) == 0


class TestMarriageTypes:

    @pytest.mark.anyio
    async def test_known_status_requires_listed_type(self, service: PartyReferenceService) -> None:
        assert await service.is_valid_marriage_type(TENANT_A, "married", "civil")
        assert not await service.is_valid_marriage_type(TENANT_A, "married", "other")

    @pytest.mark.anyio
    async def test_status_without_types_accepts_anything(
        self, service: PartyReferenceService,
    ) -> None:
        assert await service.is_valid_marriage_type(TENANT_A, "single", "anything")
        assert await service.is_valid_marriage_type(TENANT_A, None, "anything")


class TestEmploymentTypes:

    @pytest.mark.anyio
    async def test_with_and_without_status(self, service: PartyReferenceService) -> None:
        assert await service.is_valid_employment_type(TENANT_A, "full_time")
        assert await service.is_valid_employment_type(TENANT_A, "full_time", "employed")
        assert not await service.is_valid_employment_type(TENANT_A, "full_time", "retired")


class TestExternalReferences:

    @pytest.mark.anyio
    async def test_type_checks_party_type(self, service: PartyReferenceService) -> None:
        assert await service.is_valid_external_reference_type(TENANT_A, "person", "za_id_number")
        assert not await service.is_valid_external_reference_type(
            TENANT_A, "organization", "za_id_number",
        )

    @pytest.mark.anyio
    async def test_value_must_match_pattern(self, service: PartyReferenceService) -> None:
        assert await service.is_valid_external_reference(
            TENANT_A, "person", "za_id_number", "8001015009087",
        )
        assert not await service.is_valid_external_reference(
            TENANT_A, "person", "za_id_number", "80010",
        )
        assert not await service.is_valid_external_reference(
            TENANT_A, "person", "unknown", "80010",
        )

    @pytest.mark.anyio
    async def test_type_without_pattern_accepts_any_value(
        self, service: PartyReferenceService,
    ) -> None:
        assert await service.is_valid_external_reference(
            TENANT_A, "organization", "company_registration", "2001/123456/07",
        )


class TestPlainCodeLists:

    @pytest.fixture
    async def plain(self, db_session: AsyncSession,
                    service: PartyReferenceService) -> PartyReferenceService:
        fields = ReferenceRepository(db_session, FieldOfStudyRow)
        await fields.save(FieldOfStudyRow(code="law", locale_id="en-US", sort_index=2,
                                          name="Law"))
        await fields.save(FieldOfStudyRow(code="accounting", locale_id="en-US", sort_index=1,
                                          name="Accounting"))
        await fields.save(FieldOfStudyRow(code="actuarial", locale_id="en-US", sort_index=3,
                                          name="Actuarial Science", tenant_id=TENANT_A))
        roles = ReferenceRepository(db_session, ContactMechanismRoleRow)
        await roles.save(ContactMechanismRoleRow(code="work", locale_id="en-US", name="Work"))
        return service

    @pytest.mark.anyio
    async def test_list_is_ordered_and_tenant_scoped(self, plain: PartyReferenceService) -> None:
        own = await plain.get_fields_of_study("en-US", TENANT_A)
        other = await plain.get_fields_of_study("en-US", TENANT_B)
        assert [f.code for f in own] == ["accounting", "law", "actuarial"]
        assert [f.code for f in other] == ["accounting", "law"]

    @pytest.mark.anyio
    async def test_is_valid(self, plain: PartyReferenceService) -> None:
        assert await plain.is_valid_contact_mechanism_role(TENANT_B, "work")
        assert not await plain.is_valid_contact_mechanism_role(TENANT_B, "home")
        assert not await plain.is_valid_contact_mechanism_role(TENANT_B, None)
        assert await plain.is_valid_field_of_study(TENANT_A, "actuarial")
        assert not await plain.is_valid_field_of_study(TENANT_B, "actuarial")

    @pytest.mark.anyio
    async def test_empty_kind(self, plain: PartyReferenceService) -> None:
        assert await plain.get_times_to_contact("en-US") == []
        assert not await plain.is_valid_time_to_contact(TENANT_A, "morning")

    @pytest.mark.anyio
    async def test_cache_key_uses_kind(self, plain: PartyReferenceService,
                                       reference_cache: ReferenceCache) -> None:
        await plain.get_fields_of_study("en-US")
        assert reference_cache.get("party.fieldsOfStudy.en-US") is not None

        plain.invalidate("fieldsOfStudy")
        assert reference_cache.get("party.fieldsOfStudy.en-US") is None

    @pytest.mark.anyio
    @pytest.mark.parametrize("kind", sorted(PARTY_REFERENCE_ROWS))
    async def test_every_stored_kind_has_a_loader(self, service: PartyReferenceService,
                                                  kind: str) -> None:
        service.invalidate(kind)

    @pytest.mark.anyio
    async def test_unknown_kind(self, service: PartyReferenceService) -> None:
        with pytest.raises(InvalidArgumentError):
            service.invalidate("planets")
