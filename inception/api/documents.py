"""FastAPI document endpoints.

Definition categories and definitions (administration):
  /api/operations/document-definition-categories[/{categoryId}]
  /api/operations/document-definition-categories/{categoryId}/document-definitions[/{definitionId}]

Documents and notes (tenant-scoped via the Tenant-ID header):
  POST   /api/operations/create-document
  GET    /api/operations/documents/{documentId}
  DELETE /api/operations/documents/{documentId}
  PUT    /api/operations/update-document
  GET    /api/operations/document-summaries
  POST   /api/operations/create-document-note
  PUT    /api/operations/update-document-note
  GET    /api/operations/documents/{documentId}/notes
  GET    /api/operations/documents/{documentId}/notes/{noteId}
  DELETE /api/operations/documents/{documentId}/notes/{noteId}
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from inception.api.dependencies import get_document_service
from inception.api.queries import note_query
from inception.core.errors import InvalidArgumentError
from inception.models.common import Page, SortDirection
from inception.models.document import (
    CreateDocumentNoteRequest,
    CreateDocumentRequest,
    Document,
    DocumentDefinition,
    DocumentDefinitionCategory,
    DocumentQuery,
    DocumentSortBy,
    DocumentSummary,
    UpdateDocumentRequest,
)
from inception.models.note import DocumentNote, NoteQuery, UpdateNoteRequest
from inception.operations.documents import DocumentService
from inception.security.guard import require_functions, require_tenant_access
from inception.security.principal import (
    DOCUMENT_ADMINISTRATION,
    DOCUMENT_NOTE_ADMINISTRATION,
    INDEXING,
    OPERATIONS_ADMINISTRATION,
    TenantContext,
)

router = APIRouter(prefix="/api/operations", tags=["documents"])

# ---------------------------------------------------------------------------
# Access rules
# ---------------------------------------------------------------------------

_TENANT_BYPASS = (OPERATIONS_ADMINISTRATION, DOCUMENT_ADMINISTRATION)

_administration = require_functions(OPERATIONS_ADMINISTRATION)
_document_access = require_tenant_access(
    OPERATIONS_ADMINISTRATION, DOCUMENT_ADMINISTRATION, INDEXING,
    tenant_bypass=_TENANT_BYPASS,
)
_note_access = require_tenant_access(
    OPERATIONS_ADMINISTRATION, DOCUMENT_ADMINISTRATION, DOCUMENT_NOTE_ADMINISTRATION, INDEXING,
    tenant_bypass=_TENANT_BYPASS,
)


# ---------------------------------------------------------------------------
# Definition categories
# ---------------------------------------------------------------------------


@router.get(
    "/document-definition-categories", response_model=list[DocumentDefinitionCategory],
)
async def get_document_definition_categories(
    ctx: TenantContext = Depends(_document_access),
    service: DocumentService = Depends(get_document_service),
) -> list[DocumentDefinitionCategory]:
    return await service.get_document_definition_categories(ctx.tenant_id)


@router.post(
    "/document-definition-categories", status_code=204, response_class=Response,
    dependencies=[Depends(_administration)],
)
async def create_document_definition_category(
    body: DocumentDefinitionCategory,
    service: DocumentService = Depends(get_document_service),
) -> None:
    await service.create_document_definition_category(body)


@router.get(
    "/document-definition-categories/{category_id}",
    response_model=DocumentDefinitionCategory,
    dependencies=[Depends(_document_access)],
)
async def get_document_definition_category(
    category_id: str,
    service: DocumentService = Depends(get_document_service),
) -> DocumentDefinitionCategory:
    return await service.get_document_definition_category(category_id)


@router.put(
    "/document-definition-categories/{category_id}", status_code=204,
    response_class=Response, dependencies=[Depends(_administration)],
)
async def update_document_definition_category(
    category_id: str,
    body: DocumentDefinitionCategory,
    service: DocumentService = Depends(get_document_service),
) -> None:
    if body.id != category_id:
        raise InvalidArgumentError("documentDefinitionCategoryId")
    await service.update_document_definition_category(body)


@router.delete(
    "/document-definition-categories/{category_id}", status_code=204,
    response_class=Response, dependencies=[Depends(_administration)],
)
async def delete_document_definition_category(
    category_id: str,
    service: DocumentService = Depends(get_document_service),
) -> None:
    await service.delete_document_definition_category(category_id)


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


@router.get(
    "/document-definition-categories/{category_id}/document-definitions",
    response_model=list[DocumentDefinition],
)
async def get_document_definitions(
    category_id: str,
    ctx: TenantContext = Depends(_document_access),
    service: DocumentService = Depends(get_document_service),
) -> list[DocumentDefinition]:
    return await service.get_document_definitions(ctx.tenant_id, category_id)


@router.post(
    "/document-definition-categories/{category_id}/document-definitions",
    status_code=204, response_class=Response, dependencies=[Depends(_administration)],
)
async def create_document_definition(
    category_id: str,
    body: DocumentDefinition,
    service: DocumentService = Depends(get_document_service),
) -> None:
    if body.category_id != category_id:
        raise InvalidArgumentError("documentDefinitionCategoryId")
    await service.create_document_definition(body)


@router.get(
    "/document-definition-categories/{category_id}/document-definitions/{definition_id}",
    response_model=DocumentDefinition,
    dependencies=[Depends(_document_access)],
)
async def get_document_definition(
    category_id: str,
    definition_id: str,
    service: DocumentService = Depends(get_document_service),
) -> DocumentDefinition:
    definition = await service.get_document_definition(definition_id)
    if definition.category_id != category_id:
        raise InvalidArgumentError("documentDefinitionCategoryId")
    return definition


@router.put(
    "/document-definition-categories/{category_id}/document-definitions/{definition_id}",
    status_code=204, response_class=Response, dependencies=[Depends(_administration)],
)
async def update_document_definition(
    category_id: str,
    definition_id: str,
    body: DocumentDefinition,
    service: DocumentService = Depends(get_document_service),
) -> None:
    if body.category_id != category_id:
        raise InvalidArgumentError("documentDefinitionCategoryId")
    if body.id != definition_id:
        raise InvalidArgumentError("documentDefinitionId")
    await service.update_document_definition(body)


@router.delete(
    "/document-definition-categories/{category_id}/document-definitions/{definition_id}",
    status_code=204, response_class=Response, dependencies=[Depends(_administration)],
)
async def delete_document_definition(
    category_id: str,
    definition_id: str,
    service: DocumentService = Depends(get_document_service),
) -> None:
    await service.delete_document_definition(definition_id)


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


@router.post("/create-document", status_code=201, response_model=UUID)
async def create_document(
    body: CreateDocumentRequest,
    ctx: TenantContext = Depends(_document_access),
    service: DocumentService = Depends(get_document_service),
) -> UUID:
    document = await service.create_document(ctx.tenant_id, body, ctx.username)
    return document.id


@router.get("/documents/{document_id}", response_model=Document)
async def get_document(
    document_id: UUID,
    ctx: TenantContext = Depends(_document_access),
    service: DocumentService = Depends(get_document_service),
) -> Document:
    return await service.get_document(ctx.tenant_id, document_id)


@router.delete("/documents/{document_id}", status_code=204, response_class=Response)
async def delete_document(
    document_id: UUID,
    ctx: TenantContext = Depends(_document_access),
    service: DocumentService = Depends(get_document_service),
) -> None:
    await service.delete_document(ctx.tenant_id, document_id)


@router.put("/update-document", status_code=204, response_class=Response)
async def update_document(
    body: UpdateDocumentRequest,
    ctx: TenantContext = Depends(_document_access),
    service: DocumentService = Depends(get_document_service),
) -> None:
    await service.update_document(ctx.tenant_id, body, ctx.username)


@router.get("/document-summaries", response_model=Page[DocumentSummary])
async def get_document_summaries(
    definition_id: str | None = Query(default=None, alias="definitionId"),
    filter: str | None = Query(default=None),
    sort_by: DocumentSortBy = Query(default=DocumentSortBy.CREATED, alias="sortBy"),
    sort_direction: SortDirection = Query(default=SortDirection.DESCENDING, alias="sortDirection"),
    page_index: int | None = Query(default=None, alias="pageIndex"),
    page_size: int | None = Query(default=None, alias="pageSize"),
    ctx: TenantContext = Depends(_document_access),
    service: DocumentService = Depends(get_document_service),
) -> Page[DocumentSummary]:
    query = DocumentQuery(
        definition_id=definition_id, filter=filter, sort_by=sort_by,
        sort_direction=sort_direction, page_index=page_index, page_size=page_size,
    )
    return await service.get_document_summaries(ctx.tenant_id, query)


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


@router.post("/create-document-note", status_code=201, response_model=UUID)
async def create_document_note(
    body: CreateDocumentNoteRequest,
    ctx: TenantContext = Depends(_note_access),
    service: DocumentService = Depends(get_document_service),
) -> UUID:
    note = await service.create_document_note(ctx.tenant_id, body, ctx.username)
    return note.id


@router.put("/update-document-note", status_code=204, response_class=Response)
async def update_document_note(
    body: UpdateNoteRequest,
    ctx: TenantContext = Depends(_note_access),
    service: DocumentService = Depends(get_document_service),
) -> None:
    await service.update_document_note(ctx.tenant_id, body, ctx.username)


@router.get("/documents/{document_id}/notes", response_model=Page[DocumentNote])
async def get_document_notes(
    document_id: UUID,
    query: NoteQuery = Depends(note_query),
    ctx: TenantContext = Depends(_note_access),
    service: DocumentService = Depends(get_document_service),
) -> Page[DocumentNote]:
    return await service.get_document_notes(ctx.tenant_id, document_id, query)


@router.get("/documents/{document_id}/notes/{note_id}", response_model=DocumentNote)
async def get_document_note(
    document_id: UUID,
    note_id: UUID,
    ctx: TenantContext = Depends(_note_access),
    service: DocumentService = Depends(get_document_service),
) -> DocumentNote:
    return await service.get_document_note(ctx.tenant_id, document_id, note_id)


@router.delete(
    "/documents/{document_id}/notes/{note_id}", status_code=204, response_class=Response,
)
async def delete_document_note(
    document_id: UUID,
    note_id: UUID,
    ctx: TenantContext = Depends(_note_access),
    service: DocumentService = Depends(get_document_service),
) -> None:
    await service.delete_document_note(ctx.tenant_id, document_id, note_id)
