"""Initial schema: reference, party reference and operations tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _reference_columns(*extra: sa.Column, tenant: bool = False) -> list[sa.Column]:
    columns = [
        sa.Column("code", sa.String(30), primary_key=True),
        sa.Column("locale_id", sa.String(10), primary_key=True),
        sa.Column("sort_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(200), nullable=False, server_default=""),
    ]
    if tenant:
        columns.append(sa.Column("tenant_id", UUID(as_uuid=True), nullable=True, index=True))
    columns.extend(extra)
    return columns


def _note_table(name: str, parent_column: str, parent_table: str) -> None:
    op.create_table(
        name,
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=False, index=True),
        sa.Column(parent_column, UUID(as_uuid=True),
                  sa.ForeignKey(f"{parent_table}.id", ondelete="CASCADE"),
                  nullable=False, index=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.String(100), nullable=False),
        sa.Column("updated", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_by", sa.String(100), nullable=True),
    )


def upgrade() -> None:
    # -- Reference: general --
    op.create_table(
        "reference_countries",
        *_reference_columns(
            sa.Column("short_name", sa.String(50), nullable=False),
            sa.Column("sovereign_state", sa.String(30), nullable=False),
            sa.Column("nationality", sa.String(50), nullable=False),
        ),
    )
    op.create_table(
        "reference_languages",
        *_reference_columns(sa.Column("short_name", sa.String(50), nullable=False)),
    )
    op.create_table(
        "reference_regions",
        *_reference_columns(sa.Column("country", sa.String(30), primary_key=True)),
    )
    op.create_table("reference_measurement_systems", *_reference_columns())
    op.create_table("reference_measurement_unit_types", *_reference_columns())
    op.create_table(
        "reference_measurement_units",
        *_reference_columns(
            sa.Column("system", sa.String(30), nullable=False),
            sa.Column("type", sa.String(30), nullable=False),
        ),
    )

    # -- Reference: party --
    for name in (
        "genders", "marital_statuses", "employment_statuses", "races",
        "next_of_kin_types", "occupations",
        "identification_types", "tax_number_types", "residency_statuses",
        "residence_permit_types", "residential_types", "source_of_funds_types",
        "source_of_wealth_types", "contact_mechanism_types", "contact_mechanism_purposes",
        "contact_mechanism_roles", "physical_address_types", "physical_address_purposes",
        "physical_address_roles", "qualification_types", "fields_of_study",
        "times_to_contact", "consent_types", "preference_types",
    ):
        op.create_table(f"party_reference_{name}", *_reference_columns(tenant=True))
    op.create_table(
        "party_reference_marriage_types",
        *_reference_columns(
            sa.Column("marital_status", sa.String(30), primary_key=True), tenant=True,
        ),
    )
    op.create_table(
        "party_reference_employment_types",
        *_reference_columns(
            sa.Column("employment_status", sa.String(30), primary_key=True), tenant=True,
        ),
    )
    op.create_table(
        "party_reference_titles",
        *_reference_columns(
            sa.Column("abbreviation", sa.String(20), nullable=False), tenant=True,
        ),
    )
    op.create_table(
        "party_reference_external_reference_types",
        *_reference_columns(
            sa.Column("party_types", JSONB, nullable=False),
            sa.Column("pattern", sa.String(1000), nullable=True),
            tenant=True,
        ),
    )

    # -- Operations: reference --
    op.create_table(
        "operations_external_reference_types",
        sa.Column("code", sa.String(30), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(200), nullable=False, server_default=""),
        sa.Column("object_type", sa.String(30), nullable=False),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=True, index=True),
        sa.Column("value_pattern", sa.String(1000), nullable=True),
    )

    # -- Operations: documents --
    op.create_table(
        "document_definition_categories",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=True, index=True),
        sa.Column("name", sa.String(100), nullable=False),
    )
    op.create_table(
        "document_definitions",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("category_id", sa.String(50),
                  sa.ForeignKey("document_definition_categories.id"),
                  nullable=False, index=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=True, index=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False, server_default=""),
        sa.Column("required_external_reference_types", JSONB, nullable=False),
    )
    op.create_table(
        "documents",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("definition_id", sa.String(50),
                  sa.ForeignKey("document_definitions.id"), nullable=False, index=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("file_type", sa.String(20), nullable=False),
        sa.Column("data", sa.LargeBinary, nullable=False),
        sa.Column("hash", sa.String(64), nullable=False),
        sa.Column("external_references", JSONB, nullable=False),
        sa.Column("source_document_id", UUID(as_uuid=True), nullable=True),
        sa.Column("issue_date", sa.Date, nullable=True),
        sa.Column("expiry_date", sa.Date, nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.String(100), nullable=False),
        sa.Column("updated", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_by", sa.String(100), nullable=True),
    )
    _note_table("document_notes", "document_id", "documents")

    # -- Operations: workflows --
    op.create_table(
        "workflow_definition_categories",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=True, index=True),
        sa.Column("name", sa.String(100), nullable=False),
    )
    op.create_table(
        "workflow_definitions",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("version", sa.Integer, primary_key=True),
        sa.Column("category_id", sa.String(50),
                  sa.ForeignKey("workflow_definition_categories.id"),
                  nullable=False, index=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=True, index=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False, server_default=""),
    )
    op.create_table(
        "workflows",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("parent_id", UUID(as_uuid=True), nullable=True),
        sa.Column("definition_id", sa.String(50), nullable=False, index=True),
        sa.Column("definition_version", sa.Integer, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("data", sa.Text, nullable=True),
        sa.Column("external_references", JSONB, nullable=False),
        sa.Column("initiated", sa.DateTime(timezone=True), nullable=False),
        sa.Column("initiated_by", sa.String(100), nullable=False),
        sa.Column("updated", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_by", sa.String(100), nullable=True),
        sa.Column("finalized", sa.DateTime(timezone=True), nullable=True),
        sa.Column("finalized_by", sa.String(100), nullable=True),
    )
    _note_table("workflow_notes", "workflow_id", "workflows")

    # -- Operations: interactions --
    op.create_table(
        "interaction_sources",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
    )
    op.create_table(
        "interactions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("tenant_id", UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("source_id", sa.String(50),
                  sa.ForeignKey("interaction_sources.id"), nullable=False, index=True),
        sa.Column("source_reference", sa.String(2000), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("direction", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("sender", sa.String(2000), nullable=False),
        sa.Column("recipients", JSONB, nullable=False),
        sa.Column("subject", sa.String(2000), nullable=True),
        sa.Column("content", sa.Text, nullable=False, server_default=""),
        sa.Column("mime_type", sa.String(100), nullable=False),
        sa.Column("party_id", UUID(as_uuid=True), nullable=True),
        sa.Column("assigned_to", sa.String(100), nullable=True),
        sa.Column("assigned", sa.DateTime(timezone=True), nullable=True),
        sa.Column("occurred", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("source_id", "source_reference",
                            name="uq_interaction_source_reference"),
    )
    _note_table("interaction_notes", "interaction_id", "interactions")


def downgrade() -> None:
    for name in (
        "interaction_notes", "interactions", "interaction_sources",
        "workflow_notes", "workflows", "workflow_definitions", "workflow_definition_categories",
        "document_notes", "documents", "document_definitions", "document_definition_categories",
        "operations_external_reference_types",
        "party_reference_external_reference_types", "party_reference_titles",
        "party_reference_employment_types", "party_reference_marriage_types",
        "party_reference_occupations", "party_reference_next_of_kin_types",
        "party_reference_races", "party_reference_employment_statuses",
        "party_reference_marital_statuses", "party_reference_genders",
    ):
        op.drop_table(name)
    for name in (
        "preference_types", "consent_types", "times_to_contact", "fields_of_study",
        "qualification_types", "physical_address_roles", "physical_address_purposes",
        "physical_address_types", "contact_mechanism_roles", "contact_mechanism_purposes",
        "contact_mechanism_types", "source_of_wealth_types", "source_of_funds_types",
        "residential_types", "residence_permit_types", "residency_statuses",
        "tax_number_types", "identification_types",
    ):
        op.drop_table(f"party_reference_{name}")
    for name in (
        "reference_measurement_units", "reference_measurement_unit_types",
        "reference_measurement_systems", "reference_regions",
        "reference_languages", "reference_countries",
    ):
        op.drop_table(name)
