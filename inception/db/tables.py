"""SQLAlchemy ORM table models for Inception.

All tables defined in a single file. Uses FlexJSON (JSONB on Postgres,
JSON on SQLite) for list-valued columns.

Categories:
- REFERENCE: locale-qualified lookup rows keyed by (code, locale_id) plus a
             parent code where one exists. Party rows carry a nullable
             tenant_id (NULL = shared by all tenants).
- OPERATIONS: documents, workflows, interactions, their definitions and notes.
"""

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Integer,
    LargeBinary,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from inception.db.session import Base

# JSONB on PostgreSQL, plain JSON on SQLite (for tests)
FlexJSON = JSONB().with_variant(JSON(), "sqlite")


class ReferenceColumns:
    """Columns shared by every reference table."""

    code: Mapped[str] = mapped_column(String(30), primary_key=True)
    locale_id: Mapped[str] = mapped_column(String(10), primary_key=True)
    sort_index: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(200), default="", nullable=False)


class TenantReferenceColumns(ReferenceColumns):
    tenant_id: Mapped[UUID | None] = mapped_column(nullable=True, index=True)


# ---------------------------------------------------------------------------
# Reference: general
# ---------------------------------------------------------------------------


class CountryRow(ReferenceColumns, Base):
    __tablename__ = "reference_countries"

    short_name: Mapped[str] = mapped_column(String(50), nullable=False)
    sovereign_state: Mapped[str] = mapped_column(String(30), nullable=False)
    nationality: Mapped[str] = mapped_column(String(50), nullable=False)


class LanguageRow(ReferenceColumns, Base):
    __tablename__ = "reference_languages"

    short_name: Mapped[str] = mapped_column(String(50), nullable=False)


class RegionRow(ReferenceColumns, Base):
    __tablename__ = "reference_regions"

    country: Mapped[str] = mapped_column(String(30), primary_key=True)


class MeasurementSystemRow(ReferenceColumns, Base):
    __tablename__ = "reference_measurement_systems"


class MeasurementUnitTypeRow(ReferenceColumns, Base):
    __tablename__ = "reference_measurement_unit_types"


class MeasurementUnitRow(ReferenceColumns, Base):
    __tablename__ = "reference_measurement_units"

    system: Mapped[str] = mapped_column(String(30), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)


# ---------------------------------------------------------------------------
# Reference: party
# ---------------------------------------------------------------------------


class GenderRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_genders"


class MaritalStatusRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_marital_statuses"


class MarriageTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_marriage_types"

    marital_status: Mapped[str] = mapped_column(String(30), primary_key=True)


class EmploymentStatusRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_employment_statuses"


class EmploymentTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_employment_types"

    employment_status: Mapped[str] = mapped_column(String(30), primary_key=True)


class TitleRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_titles"

    abbreviation: Mapped[str] = mapped_column(String(20), nullable=False)


class RaceRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_races"


class NextOfKinTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_next_of_kin_types"


class OccupationRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_occupations"


class IdentificationTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_identification_types"


class TaxNumberTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_tax_number_types"


class ResidencyStatusRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_residency_statuses"


class ResidencePermitTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_residence_permit_types"


class ResidentialTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_residential_types"


class SourceOfFundsTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_source_of_funds_types"


class SourceOfWealthTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_source_of_wealth_types"


class ContactMechanismTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_contact_mechanism_types"


class ContactMechanismPurposeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_contact_mechanism_purposes"


class ContactMechanismRoleRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_contact_mechanism_roles"


class PhysicalAddressTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_physical_address_types"


class PhysicalAddressPurposeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_physical_address_purposes"


class PhysicalAddressRoleRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_physical_address_roles"


class QualificationTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_qualification_types"


class FieldOfStudyRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_fields_of_study"


class TimeToContactRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_times_to_contact"


class ConsentTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_consent_types"


class PreferenceTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_preference_types"


class PartyExternalReferenceTypeRow(TenantReferenceColumns, Base):
    __tablename__ = "party_reference_external_reference_types"

    party_types = mapped_column(FlexJSON, nullable=False, default=list)
    pattern: Mapped[str | None] = mapped_column(String(1000), nullable=True)


# ---------------------------------------------------------------------------
# Operations: reference
# ---------------------------------------------------------------------------


class ExternalReferenceTypeRow(Base):
    __tablename__ = "operations_external_reference_types"

    code: Mapped[str] = mapped_column(String(30), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    object_type: Mapped[str] = mapped_column(String(30), nullable=False)
    tenant_id: Mapped[UUID | None] = mapped_column(nullable=True, index=True)
    value_pattern: Mapped[str | None] = mapped_column(String(1000), nullable=True)


# ---------------------------------------------------------------------------
# Operations: documents
# ---------------------------------------------------------------------------


class DocumentDefinitionCategoryRow(Base):
    __tablename__ = "document_definition_categories"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    tenant_id: Mapped[UUID | None] = mapped_column(nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class DocumentDefinitionRow(Base):
    __tablename__ = "document_definitions"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    category_id: Mapped[str] = mapped_column(
        ForeignKey("document_definition_categories.id"), nullable=False, index=True,
    )
    tenant_id: Mapped[UUID | None] = mapped_column(nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), default="", nullable=False)
    required_external_reference_types = mapped_column(FlexJSON, nullable=False, default=list)


class DocumentRow(Base):
    __tablename__ = "documents"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    definition_id: Mapped[str] = mapped_column(
        ForeignKey("document_definitions.id"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    file_type: Mapped[str] = mapped_column(String(20), nullable=False)
    data: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    hash: Mapped[str] = mapped_column(String(64), nullable=False)
    external_references = mapped_column(FlexJSON, nullable=False, default=list)
    source_document_id: Mapped[UUID | None] = mapped_column(nullable=True)
    issue_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    expiry_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(100), nullable=True)


class DocumentNoteRow(Base):
    __tablename__ = "document_notes"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    document_id: Mapped[UUID] = mapped_column(
        ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(100), nullable=True)


# ---------------------------------------------------------------------------
# Operations: workflows
# ---------------------------------------------------------------------------


class WorkflowDefinitionCategoryRow(Base):
    __tablename__ = "workflow_definition_categories"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    tenant_id: Mapped[UUID | None] = mapped_column(nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class WorkflowDefinitionRow(Base):
    """Versioned definition. (id, version) is the key."""

    __tablename__ = "workflow_definitions"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, primary_key=True)
    category_id: Mapped[str] = mapped_column(
        ForeignKey("workflow_definition_categories.id"), nullable=False, index=True,
    )
    tenant_id: Mapped[UUID | None] = mapped_column(nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), default="", nullable=False)


class WorkflowRow(Base):
    __tablename__ = "workflows"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    parent_id: Mapped[UUID | None] = mapped_column(nullable=True)
    definition_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    definition_version: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    data: Mapped[str | None] = mapped_column(Text, nullable=True)
    external_references = mapped_column(FlexJSON, nullable=False, default=list)
    initiated: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    initiated_by: Mapped[str] = mapped_column(String(100), nullable=False)
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    finalized: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    finalized_by: Mapped[str | None] = mapped_column(String(100), nullable=True)


class WorkflowNoteRow(Base):
    __tablename__ = "workflow_notes"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    workflow_id: Mapped[UUID] = mapped_column(
        ForeignKey("workflows.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(100), nullable=True)


# ---------------------------------------------------------------------------
# Operations: interactions
# ---------------------------------------------------------------------------


class InteractionSourceRow(Base):
    __tablename__ = "interaction_sources"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class InteractionRow(Base):
    __tablename__ = "interactions"
    __table_args__ = (
        UniqueConstraint("source_id", "source_reference", name="uq_interaction_source_reference"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    source_id: Mapped[str] = mapped_column(
        ForeignKey("interaction_sources.id"), nullable=False, index=True,
    )
    source_reference: Mapped[str] = mapped_column(String(2000), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    direction: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    priority: Mapped[str] = mapped_column(String(20), nullable=False)
    sender: Mapped[str] = mapped_column(String(2000), nullable=False)
    recipients = mapped_column(FlexJSON, nullable=False, default=list)
    subject: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    party_id: Mapped[UUID | None] = mapped_column(nullable=True)
    assigned_to: Mapped[str | None] = mapped_column(String(100), nullable=True)
    assigned: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    occurred: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class InteractionNoteRow(Base):
    __tablename__ = "interaction_notes"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    interaction_id: Mapped[UUID] = mapped_column(
        ForeignKey("interactions.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
