"""Note models shared by documents, workflows and interactions."""

from uuid import UUID

from pydantic import Field

from inception.models.common import (
    InceptionBase,
    NoteSortBy,
    SortDirection,
    UTCTimestamp,
    UUIDv7,
)


class Note(InceptionBase):
    """Free-text note attached to an operations object within a tenant."""

    id: UUIDv7
    tenant_id: UUID
    content: str = Field(..., min_length=1, max_length=4000)
    created: UTCTimestamp
    created_by: str = Field(..., min_length=1, max_length=100)
    updated: UTCTimestamp | None = None
    updated_by: str | None = None


class DocumentNote(Note):
    document_id: UUID


class WorkflowNote(Note):
    workflow_id: UUID


class InteractionNote(Note):
    interaction_id: UUID


class UpdateNoteRequest(InceptionBase):
    note_id: UUID
    content: str = Field(..., min_length=1, max_length=4000)


class NoteQuery(InceptionBase):
    """Filter, sort and paging arguments for a note listing."""

    filter: str | None = None
    sort_by: NoteSortBy = NoteSortBy.CREATED
    sort_direction: SortDirection = SortDirection.DESCENDING
    page_index: int | None = None
    page_size: int | None = None
