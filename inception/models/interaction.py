"""Interaction models: sources, interactions and summaries."""

from enum import StrEnum
from uuid import UUID

from pydantic import Field

from inception.models.common import (
    InceptionBase,
    SortDirection,
    UTCTimestamp,
    UUIDv7,
)


class InteractionSourceType(StrEnum):
    MAILBOX = "MAILBOX"
    WHATSAPP = "WHATSAPP"
    WEB = "WEB"


class InteractionType(StrEnum):
    EMAIL = "EMAIL"
    WHATSAPP = "WHATSAPP"
    WEB_FORM = "WEB_FORM"
    OTHER = "OTHER"


class InteractionDirection(StrEnum):
    INBOUND = "INBOUND"
    OUTBOUND = "OUTBOUND"


class InteractionStatus(StrEnum):
    RECEIVED = "RECEIVED"
    ASSIGNED = "ASSIGNED"
    AVAILABLE = "AVAILABLE"
    FAILED = "FAILED"


class InteractionPriority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class InteractionSortBy(StrEnum):
    OCCURRED = "OCCURRED"
    PRIORITY = "PRIORITY"


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


class InteractionSource(InceptionBase):
    """Channel interactions arrive through, e.g. a mailbox."""

    id: str = Field(..., min_length=1, max_length=50)
    tenant_id: UUID
    type: InteractionSourceType
    name: str = Field(..., min_length=1, max_length=100)


# ---------------------------------------------------------------------------
# Interactions
# ---------------------------------------------------------------------------


class Interaction(InceptionBase):
    id: UUIDv7
    tenant_id: UUID
    source_id: str
    source_reference: str = Field(..., min_length=1, max_length=2000)
    type: InteractionType
    direction: InteractionDirection
    status: InteractionStatus = InteractionStatus.RECEIVED
    priority: InteractionPriority = InteractionPriority.MEDIUM
    sender: str = Field(..., max_length=2000)
    recipients: list[str] = Field(default_factory=list)
    subject: str | None = Field(default=None, max_length=2000)
    content: str = ""
    mime_type: str = "text/plain"
    party_id: UUID | None = None
    assigned_to: str | None = None
    assigned: UTCTimestamp | None = None
    occurred: UTCTimestamp


class InteractionSummary(InceptionBase):
    """Interaction metadata without the content body."""

    id: UUID
    tenant_id: UUID
    source_id: str
    type: InteractionType
    direction: InteractionDirection
    status: InteractionStatus
    priority: InteractionPriority
    sender: str
    subject: str | None = None
    party_id: UUID | None = None
    assigned_to: str | None = None
    occurred: UTCTimestamp


class CreateInteractionRequest(InceptionBase):
    source_id: str = Field(..., min_length=1, max_length=50)
    source_reference: str = Field(..., min_length=1, max_length=2000)
    type: InteractionType
    direction: InteractionDirection
    priority: InteractionPriority = InteractionPriority.MEDIUM
    sender: str = Field(..., min_length=1, max_length=2000)
    recipients: list[str] = Field(default_factory=list)
    subject: str | None = Field(default=None, max_length=2000)
    content: str = ""
    mime_type: str = "text/plain"
    occurred: UTCTimestamp | None = None


class AssignInteractionRequest(InceptionBase):
    interaction_id: UUID
    username: str = Field(..., min_length=1, max_length=100)


class LinkPartyToInteractionRequest(InceptionBase):
    interaction_id: UUID
    party_id: UUID


class DelinkPartyFromInteractionRequest(InceptionBase):
    interaction_id: UUID


class InteractionQuery(InceptionBase):
    status: InteractionStatus | None = None
    filter: str | None = None
    sort_by: InteractionSortBy = InteractionSortBy.OCCURRED
    sort_direction: SortDirection = SortDirection.DESCENDING
    page_index: int | None = None
    page_size: int | None = None


class CreateInteractionNoteRequest(InceptionBase):
    interaction_id: UUID
    content: str = Field(..., min_length=1, max_length=4000)
