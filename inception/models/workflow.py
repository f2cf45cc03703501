"""Workflow models.

Workflow definitions are versioned: (id, version) is the key and a new
workflow always binds to the latest version of its definition.
"""

from enum import StrEnum
from uuid import UUID

from pydantic import Field

from inception.models.common import (
    InceptionBase,
    SortDirection,
    UTCTimestamp,
    UUIDv7,
)
from inception.models.operations_reference import ExternalReference


class WorkflowStatus(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    SUSPENDED = "SUSPENDED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"

    @property
    def is_final(self) -> bool:
        return self in _FINAL_STATUSES


_FINAL_STATUSES = frozenset({
    WorkflowStatus.COMPLETED,
    WorkflowStatus.CANCELLED,
    WorkflowStatus.FAILED,
})


class WorkflowSortBy(StrEnum):
    INITIATED = "INITIATED"
    UPDATED = "UPDATED"
    STATUS = "STATUS"


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


class WorkflowDefinitionCategory(InceptionBase):
    id: str = Field(..., min_length=1, max_length=50)
    tenant_id: UUID | None = None
    name: str = Field(..., min_length=1, max_length=100)


class WorkflowDefinition(InceptionBase):
    id: str = Field(..., min_length=1, max_length=50)
    version: int = Field(default=1, ge=1)
    category_id: str = Field(..., min_length=1, max_length=50)
    tenant_id: UUID | None = None
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)


# ---------------------------------------------------------------------------
# Workflows
# ---------------------------------------------------------------------------


class Workflow(InceptionBase):
    id: UUIDv7
    tenant_id: UUID
    parent_id: UUID | None = None
    definition_id: str
    definition_version: int
    status: WorkflowStatus
    data: str | None = None
    external_references: list[ExternalReference] = Field(default_factory=list)
    initiated: UTCTimestamp
    initiated_by: str
    updated: UTCTimestamp | None = None
    updated_by: str | None = None
    finalized: UTCTimestamp | None = None
    finalized_by: str | None = None


class WorkflowSummary(InceptionBase):
    """Workflow metadata without the data payload."""

    id: UUID
    tenant_id: UUID
    parent_id: UUID | None = None
    definition_id: str
    definition_version: int
    status: WorkflowStatus
    initiated: UTCTimestamp
    initiated_by: str
    updated: UTCTimestamp | None = None
    updated_by: str | None = None
    finalized: UTCTimestamp | None = None
    finalized_by: str | None = None


class CreateWorkflowRequest(InceptionBase):
    definition_id: str = Field(..., min_length=1, max_length=50)
    parent_id: UUID | None = None
    data: str | None = None
    external_references: list[ExternalReference] | None = None


class UpdateWorkflowRequest(InceptionBase):
    id: UUID
    status: WorkflowStatus | None = None
    data: str | None = None
    external_references: list[ExternalReference] | None = None


class WorkflowQuery(InceptionBase):
    definition_id: str | None = None
    status: WorkflowStatus | None = None
    filter: str | None = None
    sort_by: WorkflowSortBy = WorkflowSortBy.INITIATED
    sort_direction: SortDirection = SortDirection.DESCENDING
    page_index: int | None = None
    page_size: int | None = None


class CreateWorkflowNoteRequest(InceptionBase):
    workflow_id: UUID
    content: str = Field(..., min_length=1, max_length=4000)
