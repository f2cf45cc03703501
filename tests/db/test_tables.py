"""Tests for the SQLAlchemy ORM tables in inception/db/tables.py.

Tests verify:
- Every reference, party reference and operations table is created
- Composite keys for parented reference rows and versioned workflow definitions
- FlexJSON list columns round-trip on SQLite
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.session import Base
from inception.db.tables import (
    DocumentDefinitionCategoryRow,
    DocumentDefinitionRow,
    MarriageTypeRow,
    PartyExternalReferenceTypeRow,
    RegionRow,
    WorkflowDefinitionCategoryRow,
    WorkflowDefinitionRow,
)

EXPECTED_TABLES = {
    "reference_countries",
    "reference_languages",
    "reference_regions",
    "reference_measurement_systems",
    "reference_measurement_unit_types",
    "reference_measurement_units",
    "party_reference_genders",
    "party_reference_marital_statuses",
    "party_reference_marriage_types",
    "party_reference_employment_statuses",
    "party_reference_employment_types",
    "party_reference_titles",
    "party_reference_races",
    "party_reference_next_of_kin_types",
    "party_reference_occupations",
    "party_reference_external_reference_types",
    "party_reference_identification_types",
    "party_reference_tax_number_types",
    "party_reference_residency_statuses",
    "party_reference_residence_permit_types",
    "party_reference_residential_types",
    "party_reference_source_of_funds_types",
    "party_reference_source_of_wealth_types",
    "party_reference_contact_mechanism_types",
    "party_reference_contact_mechanism_purposes",
    "party_reference_contact_mechanism_roles",
    "party_reference_physical_address_types",
    "party_reference_physical_address_purposes",
    "party_reference_physical_address_roles",
    "party_reference_qualification_types",
    "party_reference_fields_of_study",
    "party_reference_times_to_contact",
    "party_reference_consent_types",
    "party_reference_preference_types",
    "operations_external_reference_types",
    "document_definition_categories",
    "document_definitions",
    "documents",
    "document_notes",
    "workflow_definition_categories",
    "workflow_definitions",
    "workflows",
    "workflow_notes",
    "interaction_sources",
    "interactions",
    "interaction_notes",
}


class TestSchema:

    def test_all_tables_registered(self) -> None:
        assert set(Base.metadata.tables) == EXPECTED_TABLES

    def test_region_key_includes_country(self) -> None:
        keys = {col.name for col in inspect(RegionRow).primary_key}
        assert keys == {"code", "locale_id", "country"}

    def test_marriage_type_key_includes_marital_status(self) -> None:
        keys = {col.name for col in inspect(MarriageTypeRow).primary_key}
        assert keys == {"code", "locale_id", "marital_status"}

    def test_workflow_definition_is_versioned(self) -> None:
        keys = {col.name for col in inspect(WorkflowDefinitionRow).primary_key}
        assert keys == {"id", "version"}

    def test_party_rows_have_nullable_tenant(self) -> None:
        column = PartyExternalReferenceTypeRow.__table__.c.tenant_id
        assert column.nullable is True


class TestRoundTrip:

    @pytest.mark.anyio
    async def test_flex_json_list_column(self, db_session: AsyncSession) -> None:
        db_session.add(DocumentDefinitionCategoryRow(id="identity", name="Identity"))
        db_session.add(DocumentDefinitionRow(
            id="passport", category_id="identity", name="Passport",
            required_external_reference_types=["account_number", "case_number"],
        ))
        await db_session.flush()
        db_session.expunge_all()

        row = await db_session.get(DocumentDefinitionRow, "passport")
        assert row.required_external_reference_types == ["account_number", "case_number"]
        assert row.description == ""

    @pytest.mark.anyio
    async def test_workflow_definition_versions_coexist(self, db_session: AsyncSession) -> None:
        db_session.add(WorkflowDefinitionCategoryRow(id="onboarding", name="Onboarding"))
        for version in (1, 2):
            db_session.add(WorkflowDefinitionRow(
                id="kyc", version=version, category_id="onboarding", name=f"KYC v{version}",
            ))
        await db_session.flush()

        assert (await db_session.get(WorkflowDefinitionRow, ("kyc", 1))).name == "KYC v1"
        assert (await db_session.get(WorkflowDefinitionRow, ("kyc", 2))).name == "KYC v2"

