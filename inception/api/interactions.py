"""FastAPI interaction endpoints.

Sources:
  /api/operations/interaction-sources[/{sourceId}]
  GET /api/operations/interaction-sources/{sourceId}/interaction-summaries

Interactions:
  POST   /api/operations/interactions
  GET    /api/operations/interactions/{interactionId}
  DELETE /api/operations/interactions/{interactionId}
  POST   /api/operations/assign-interaction
  POST   /api/operations/link-party-to-interaction
  POST   /api/operations/delink-party-from-interaction

Notes follow the document note routes under /interactions/{interactionId}/notes.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from inception.api.dependencies import get_interaction_service
from inception.api.queries import note_query
from inception.core.errors import InvalidArgumentError
from inception.models.common import Page, SortDirection
from inception.models.interaction import (
    AssignInteractionRequest,
    CreateInteractionNoteRequest,
    CreateInteractionRequest,
    DelinkPartyFromInteractionRequest,
    Interaction,
    InteractionQuery,
    InteractionSortBy,
    InteractionSource,
    InteractionStatus,
    InteractionSummary,
    LinkPartyToInteractionRequest,
)
from inception.models.note import InteractionNote, NoteQuery, UpdateNoteRequest
from inception.operations.interactions import InteractionService
from inception.security.guard import require_tenant_access
from inception.security.principal import (
    INTERACTION_ADMINISTRATION,
    INTERACTION_NOTE_ADMINISTRATION,
    INTERACTION_PARTY_LINK_ADMINISTRATION,
    OPERATIONS_ADMINISTRATION,
    TenantContext,
)

router = APIRouter(prefix="/api/operations", tags=["interactions"])

_TENANT_BYPASS = (OPERATIONS_ADMINISTRATION, INTERACTION_ADMINISTRATION)

_interaction_access = require_tenant_access(
    OPERATIONS_ADMINISTRATION, INTERACTION_ADMINISTRATION,
    tenant_bypass=_TENANT_BYPASS,
)
_party_link_access = require_tenant_access(
    OPERATIONS_ADMINISTRATION, INTERACTION_ADMINISTRATION, INTERACTION_PARTY_LINK_ADMINISTRATION,
    tenant_bypass=_TENANT_BYPASS,
)
_note_access = require_tenant_access(
    OPERATIONS_ADMINISTRATION, INTERACTION_ADMINISTRATION, INTERACTION_NOTE_ADMINISTRATION,
    tenant_bypass=_TENANT_BYPASS,
)


def _check_tenant(ctx: TenantContext, source: InteractionSource) -> None:
    if source.tenant_id != ctx.tenant_id:
        raise InvalidArgumentError(
            "tenantId", "The source tenant must match the Tenant-ID header",
        )


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


@router.get("/interaction-sources", response_model=list[InteractionSource])
async def get_interaction_sources(
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> list[InteractionSource]:
    return await service.get_interaction_sources(ctx.tenant_id)


@router.post("/interaction-sources", status_code=204, response_class=Response)
async def create_interaction_source(
    body: InteractionSource,
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    _check_tenant(ctx, body)
    await service.create_interaction_source(body)


@router.get("/interaction-sources/{source_id}", response_model=InteractionSource)
async def get_interaction_source(
    source_id: str,
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> InteractionSource:
    return await service.get_interaction_source(ctx.tenant_id, source_id)


@router.put("/interaction-sources/{source_id}", status_code=204, response_class=Response)
async def update_interaction_source(
    source_id: str,
    body: InteractionSource,
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    if body.id != source_id:
        raise InvalidArgumentError("interactionSourceId")
    _check_tenant(ctx, body)
    await service.update_interaction_source(body)


@router.delete("/interaction-sources/{source_id}", status_code=204, response_class=Response)
async def delete_interaction_source(
    source_id: str,
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    await service.delete_interaction_source(ctx.tenant_id, source_id)


@router.get(
    "/interaction-sources/{source_id}/interaction-summaries",
    response_model=Page[InteractionSummary],
)
async def get_interaction_summaries(
    source_id: str,
    status: InteractionStatus | None = Query(default=None),
    filter: str | None = Query(default=None),
    sort_by: InteractionSortBy = Query(default=InteractionSortBy.OCCURRED, alias="sortBy"),
    sort_direction: SortDirection = Query(default=SortDirection.DESCENDING, alias="sortDirection"),
    page_index: int | None = Query(default=None, alias="pageIndex"),
    page_size: int | None = Query(default=None, alias="pageSize"),
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> Page[InteractionSummary]:
    query = InteractionQuery(
        status=status, filter=filter, sort_by=sort_by, sort_direction=sort_direction,
        page_index=page_index, page_size=page_size,
    )
    return await service.get_interaction_summaries(ctx.tenant_id, source_id, query)


# ---------------------------------------------------------------------------
# Interactions
# ---------------------------------------------------------------------------


@router.post("/interactions", status_code=201, response_model=UUID)
async def create_interaction(
    body: CreateInteractionRequest,
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> UUID:
    interaction = await service.create_interaction(ctx.tenant_id, body)
    return interaction.id


@router.get("/interactions/{interaction_id}", response_model=Interaction)
async def get_interaction(
    interaction_id: UUID,
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> Interaction:
    return await service.get_interaction(ctx.tenant_id, interaction_id)


@router.delete("/interactions/{interaction_id}", status_code=204, response_class=Response)
async def delete_interaction(
    interaction_id: UUID,
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    await service.delete_interaction(ctx.tenant_id, interaction_id)


@router.post("/assign-interaction", status_code=204, response_class=Response)
async def assign_interaction(
    body: AssignInteractionRequest,
    ctx: TenantContext = Depends(_interaction_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    await service.assign_interaction(ctx.tenant_id, body.interaction_id, body.username)


@router.post("/link-party-to-interaction", status_code=204, response_class=Response)
async def link_party_to_interaction(
    body: LinkPartyToInteractionRequest,
    ctx: TenantContext = Depends(_party_link_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    await service.link_party_to_interaction(ctx.tenant_id, body.interaction_id, body.party_id)


@router.post("/delink-party-from-interaction", status_code=204, response_class=Response)
async def delink_party_from_interaction(
    body: DelinkPartyFromInteractionRequest,
    ctx: TenantContext = Depends(_party_link_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    await service.delink_party_from_interaction(ctx.tenant_id, body.interaction_id)


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


@router.post("/create-interaction-note", status_code=201, response_model=UUID)
async def create_interaction_note(
    body: CreateInteractionNoteRequest,
    ctx: TenantContext = Depends(_note_access),
    service: InteractionService = Depends(get_interaction_service),
) -> UUID:
    note = await service.create_interaction_note(ctx.tenant_id, body, ctx.username)
    return note.id


@router.put("/update-interaction-note", status_code=204, response_class=Response)
async def update_interaction_note(
    body: UpdateNoteRequest,
    ctx: TenantContext = Depends(_note_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    await service.update_interaction_note(ctx.tenant_id, body, ctx.username)


@router.get("/interactions/{interaction_id}/notes", response_model=Page[InteractionNote])
async def get_interaction_notes(
    interaction_id: UUID,
    query: NoteQuery = Depends(note_query),
    ctx: TenantContext = Depends(_note_access),
    service: InteractionService = Depends(get_interaction_service),
) -> Page[InteractionNote]:
    return await service.get_interaction_notes(ctx.tenant_id, interaction_id, query)


@router.get(
    "/interactions/{interaction_id}/notes/{note_id}", response_model=InteractionNote,
)
async def get_interaction_note(
    interaction_id: UUID,
    note_id: UUID,
    ctx: TenantContext = Depends(_note_access),
    service: InteractionService = Depends(get_interaction_service),
) -> InteractionNote:
    return await service.get_interaction_note(ctx.tenant_id, interaction_id, note_id)


@router.delete(
    "/interactions/{interaction_id}/notes/{note_id}", status_code=204, response_class=Response,
)
async def delete_interaction_note(
    interaction_id: UUID,
    note_id: UUID,
    ctx: TenantContext = Depends(_note_access),
    service: InteractionService = Depends(get_interaction_service),
) -> None:
    await service.delete_interaction_note(ctx.tenant_id, interaction_id, note_id)
