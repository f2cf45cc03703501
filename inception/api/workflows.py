"""FastAPI workflow endpoints.

Definition categories and definitions (administration):
  /api/operations/workflow-definition-categories[/{categoryId}]
  /api/operations/workflow-definition-categories/{categoryId}/workflow-definitions[/{definitionId}]
  /api/operations/workflow-definitions/{definitionId}/versions/{version}

Workflows and notes are tenant-scoped via the Tenant-ID header and mirror the
document routes (create-workflow, update-workflow, workflow-summaries, ...).
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from inception.api.dependencies import get_workflow_service
from inception.api.queries import note_query
from inception.core.errors import InvalidArgumentError
from inception.models.common import Page, SortDirection
from inception.models.note import NoteQuery, UpdateNoteRequest, WorkflowNote
from inception.models.workflow import (
    CreateWorkflowNoteRequest,
    CreateWorkflowRequest,
    UpdateWorkflowRequest,
    Workflow,
    WorkflowDefinition,
    WorkflowDefinitionCategory,
    WorkflowQuery,
    WorkflowSortBy,
    WorkflowStatus,
    WorkflowSummary,
)
from inception.operations.workflows import WorkflowService
from inception.security.guard import require_functions, require_tenant_access
from inception.security.principal import (
    OPERATIONS_ADMINISTRATION,
    WORKFLOW_ADMINISTRATION,
    WORKFLOW_NOTE_ADMINISTRATION,
    TenantContext,
)

router = APIRouter(prefix="/api/operations", tags=["workflows"])

_TENANT_BYPASS = (OPERATIONS_ADMINISTRATION, WORKFLOW_ADMINISTRATION)

_administration = require_functions(OPERATIONS_ADMINISTRATION)
_workflow_access = require_tenant_access(
    OPERATIONS_ADMINISTRATION, WORKFLOW_ADMINISTRATION,
    tenant_bypass=_TENANT_BYPASS,
)
_note_access = require_tenant_access(
    OPERATIONS_ADMINISTRATION, WORKFLOW_ADMINISTRATION, WORKFLOW_NOTE_ADMINISTRATION,
    tenant_bypass=_TENANT_BYPASS,
)


# ---------------------------------------------------------------------------
# Definition categories
# ---------------------------------------------------------------------------


@router.get(
    "/workflow-definition-categories", response_model=list[WorkflowDefinitionCategory],
)
async def get_workflow_definition_categories(
    ctx: TenantContext = Depends(_workflow_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> list[WorkflowDefinitionCategory]:
    return await service.get_workflow_definition_categories(ctx.tenant_id)


@router.post(
    "/workflow-definition-categories", status_code=204, response_class=Response,
    dependencies=[Depends(_administration)],
)
async def create_workflow_definition_category(
    body: WorkflowDefinitionCategory,
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    await service.create_workflow_definition_category(body)


@router.get(
    "/workflow-definition-categories/{category_id}",
    response_model=WorkflowDefinitionCategory,
    dependencies=[Depends(_workflow_access)],
)
async def get_workflow_definition_category(
    category_id: str,
    service: WorkflowService = Depends(get_workflow_service),
) -> WorkflowDefinitionCategory:
    return await service.get_workflow_definition_category(category_id)


@router.put(
    "/workflow-definition-categories/{category_id}", status_code=204,
    response_class=Response, dependencies=[Depends(_administration)],
)
async def update_workflow_definition_category(
    category_id: str,
    body: WorkflowDefinitionCategory,
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    if body.id != category_id:
        raise InvalidArgumentError("workflowDefinitionCategoryId")
    await service.update_workflow_definition_category(body)


@router.delete(
    "/workflow-definition-categories/{category_id}", status_code=204,
    response_class=Response, dependencies=[Depends(_administration)],
)
async def delete_workflow_definition_category(
    category_id: str,
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    await service.delete_workflow_definition_category(category_id)


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


@router.get(
    "/workflow-definition-categories/{category_id}/workflow-definitions",
    response_model=list[WorkflowDefinition],
)
async def get_workflow_definitions(
    category_id: str,
    ctx: TenantContext = Depends(_workflow_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> list[WorkflowDefinition]:
    return await service.get_workflow_definitions(ctx.tenant_id, category_id)


@router.post(
    "/workflow-definition-categories/{category_id}/workflow-definitions",
    status_code=204, response_class=Response, dependencies=[Depends(_administration)],
)
async def create_workflow_definition(
    category_id: str,
    body: WorkflowDefinition,
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    if body.category_id != category_id:
        raise InvalidArgumentError("workflowDefinitionCategoryId")
    await service.create_workflow_definition(body)


@router.get(
    "/workflow-definition-categories/{category_id}/workflow-definitions/{definition_id}",
    response_model=WorkflowDefinition,
    dependencies=[Depends(_workflow_access)],
)
async def get_workflow_definition(
    category_id: str,
    definition_id: str,
    service: WorkflowService = Depends(get_workflow_service),
) -> WorkflowDefinition:
    definition = await service.get_workflow_definition(definition_id)
    if definition.category_id != category_id:
        raise InvalidArgumentError("workflowDefinitionCategoryId")
    return definition


@router.put(
    "/workflow-definition-categories/{category_id}/workflow-definitions/{definition_id}",
    status_code=204, response_class=Response, dependencies=[Depends(_administration)],
)
async def update_workflow_definition(
    category_id: str,
    definition_id: str,
    body: WorkflowDefinition,
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    if body.category_id != category_id:
        raise InvalidArgumentError("workflowDefinitionCategoryId")
    if body.id != definition_id:
        raise InvalidArgumentError("workflowDefinitionId")
    await service.update_workflow_definition(body)


@router.delete(
    "/workflow-definition-categories/{category_id}/workflow-definitions/{definition_id}",
    status_code=204, response_class=Response, dependencies=[Depends(_administration)],
)
async def delete_workflow_definition(
    category_id: str,
    definition_id: str,
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    await service.delete_workflow_definition(definition_id)


@router.get(
    "/workflow-definitions/{definition_id}/versions/{version}",
    response_model=WorkflowDefinition,
    dependencies=[Depends(_workflow_access)],
)
async def get_workflow_definition_version(
    definition_id: str,
    version: int,
    service: WorkflowService = Depends(get_workflow_service),
) -> WorkflowDefinition:
    return await service.get_workflow_definition_version(definition_id, version)


@router.delete(
    "/workflow-definitions/{definition_id}/versions/{version}",
    status_code=204, response_class=Response, dependencies=[Depends(_administration)],
)
async def delete_workflow_definition_version(
    definition_id: str,
    version: int,
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    await service.delete_workflow_definition_version(definition_id, version)


# ---------------------------------------------------------------------------
# Workflows
# ---------------------------------------------------------------------------


@router.post("/create-workflow", status_code=201, response_model=UUID)
async def create_workflow(
    body: CreateWorkflowRequest,
    ctx: TenantContext = Depends(_workflow_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> UUID:
    workflow = await service.create_workflow(ctx.tenant_id, body, ctx.username)
    return workflow.id


@router.get("/workflows/{workflow_id}", response_model=Workflow)
async def get_workflow(
    workflow_id: UUID,
    ctx: TenantContext = Depends(_workflow_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> Workflow:
    return await service.get_workflow(ctx.tenant_id, workflow_id)


@router.delete("/workflows/{workflow_id}", status_code=204, response_class=Response)
async def delete_workflow(
    workflow_id: UUID,
    ctx: TenantContext = Depends(_workflow_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    await service.delete_workflow(ctx.tenant_id, workflow_id)


@router.put("/update-workflow", status_code=204, response_class=Response)
async def update_workflow(
    body: UpdateWorkflowRequest,
    ctx: TenantContext = Depends(_workflow_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    await service.update_workflow(ctx.tenant_id, body, ctx.username)


@router.get("/workflow-summaries", response_model=Page[WorkflowSummary])
async def get_workflow_summaries(
    definition_id: str | None = Query(default=None, alias="definitionId"),
    status: WorkflowStatus | None = Query(default=None),
    filter: str | None = Query(default=None),
    sort_by: WorkflowSortBy = Query(default=WorkflowSortBy.INITIATED, alias="sortBy"),
    sort_direction: SortDirection = Query(default=SortDirection.DESCENDING, alias="sortDirection"),
    page_index: int | None = Query(default=None, alias="pageIndex"),
    page_size: int | None = Query(default=None, alias="pageSize"),
    ctx: TenantContext = Depends(_workflow_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> Page[WorkflowSummary]:
    query = WorkflowQuery(
        definition_id=definition_id, status=status, filter=filter, sort_by=sort_by,
        sort_direction=sort_direction, page_index=page_index, page_size=page_size,
    )
    return await service.get_workflow_summaries(ctx.tenant_id, query)


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


@router.post("/create-workflow-note", status_code=201, response_model=UUID)
async def create_workflow_note(
    body: CreateWorkflowNoteRequest,
    ctx: TenantContext = Depends(_note_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> UUID:
    note = await service.create_workflow_note(ctx.tenant_id, body, ctx.username)
    return note.id


@router.put("/update-workflow-note", status_code=204, response_class=Response)
async def update_workflow_note(
    body: UpdateNoteRequest,
    ctx: TenantContext = Depends(_note_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    await service.update_workflow_note(ctx.tenant_id, body, ctx.username)


@router.get("/workflows/{workflow_id}/notes", response_model=Page[WorkflowNote])
async def get_workflow_notes(
    workflow_id: UUID,
    query: NoteQuery = Depends(note_query),
    ctx: TenantContext = Depends(_note_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> Page[WorkflowNote]:
    return await service.get_workflow_notes(ctx.tenant_id, workflow_id, query)


@router.get("/workflows/{workflow_id}/notes/{note_id}", response_model=WorkflowNote)
async def get_workflow_note(
    workflow_id: UUID,
    note_id: UUID,
    ctx: TenantContext = Depends(_note_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> WorkflowNote:
    return await service.get_workflow_note(ctx.tenant_id, workflow_id, note_id)


@router.delete(
    "/workflows/{workflow_id}/notes/{note_id}", status_code=204, response_class=Response,
)
async def delete_workflow_note(
    workflow_id: UUID,
    note_id: UUID,
    ctx: TenantContext = Depends(_note_access),
    service: WorkflowService = Depends(get_workflow_service),
) -> None:
    await service.delete_workflow_note(ctx.tenant_id, workflow_id, note_id)
