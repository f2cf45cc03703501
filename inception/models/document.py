"""Document models: definitions, categories, documents and summaries.

A document is a tenant-owned binary payload (with a SHA-256 hash) created
against a document definition. Definitions are grouped into categories and
may be shared by all tenants (tenant_id None) or owned by one tenant.
"""

from datetime import date
from enum import StrEnum
from uuid import UUID

from pydantic import Field, model_validator

from inception.models.common import (
    Base64Data,
    InceptionBase,
    SortDirection,
    UTCTimestamp,
    UUIDv7,
)
from inception.models.operations_reference import ExternalReference


class FileType(StrEnum):
    """Supported document file types."""

    PDF = "PDF"
    PNG = "PNG"
    JPEG = "JPEG"
    TIFF = "TIFF"
    TEXT = "TEXT"
    HTML = "HTML"
    DOCX = "DOCX"
    XLSX = "XLSX"
    UNKNOWN = "UNKNOWN"


class DocumentSortBy(StrEnum):
    """Sortable properties for document summary listings."""

    NAME = "NAME"
    CREATED = "CREATED"
    UPDATED = "UPDATED"


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


class DocumentDefinitionCategory(InceptionBase):
    id: str = Field(..., min_length=1, max_length=50)
    tenant_id: UUID | None = None
    name: str = Field(..., min_length=1, max_length=100)


class DocumentDefinition(InceptionBase):
    id: str = Field(..., min_length=1, max_length=50)
    category_id: str = Field(..., min_length=1, max_length=50)
    tenant_id: UUID | None = None
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    required_external_reference_types: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class Document(InceptionBase):
    id: UUIDv7
    tenant_id: UUID
    definition_id: str
    name: str = Field(..., min_length=1, max_length=100)
    file_type: FileType
    data: Base64Data
    hash: str = Field(..., description="Base64-encoded SHA-256 of data.")
    external_references: list[ExternalReference] = Field(default_factory=list)
    source_document_id: UUID | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    created: UTCTimestamp
    created_by: str
    updated: UTCTimestamp | None = None
    updated_by: str | None = None


class DocumentSummary(InceptionBase):
    """Document metadata without the data payload."""

    id: UUID
    tenant_id: UUID
    definition_id: str
    name: str
    file_type: FileType
    hash: str
    source_document_id: UUID | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    created: UTCTimestamp
    created_by: str
    updated: UTCTimestamp | None = None
    updated_by: str | None = None


class CreateDocumentRequest(InceptionBase):
    definition_id: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=100)
    file_type: FileType
    data: Base64Data = Field(..., min_length=1)
    external_references: list[ExternalReference] | None = None
    source_document_id: UUID | None = None
    issue_date: date | None = None
    expiry_date: date | None = None

    @model_validator(mode="after")
    def _expiry_after_issue(self) -> "CreateDocumentRequest":
        if self.issue_date and self.expiry_date and self.expiry_date < self.issue_date:
            msg = "expiry_date must not be before issue_date"
            raise ValueError(msg)
        return self


class UpdateDocumentRequest(InceptionBase):
    id: UUID
    name: str | None = Field(default=None, min_length=1, max_length=100)
    file_type: FileType | None = None
    data: Base64Data | None = None
    external_references: list[ExternalReference] | None = None
    issue_date: date | None = None
    expiry_date: date | None = None


class DocumentQuery(InceptionBase):
    definition_id: str | None = None
    filter: str | None = None
    sort_by: DocumentSortBy = DocumentSortBy.CREATED
    sort_direction: SortDirection = SortDirection.DESCENDING
    page_index: int | None = None
    page_size: int | None = None


class CreateDocumentNoteRequest(InceptionBase):
    document_id: UUID
    content: str = Field(..., min_length=1, max_length=4000)
