"""Document service: definition categories, definitions, documents and notes."""

import base64
import hashlib
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from inception.config.settings import Settings
from inception.core.errors import (
    DocumentDefinitionCategoryNotFoundError,
    DocumentDefinitionNotFoundError,
    DocumentNotFoundError,
    DocumentNoteNotFoundError,
    DuplicateDocumentDefinitionCategoryError,
    DuplicateDocumentDefinitionError,
    InvalidArgumentError,
    unavailable_on_error,
)
from inception.models.common import ObjectType, Page, Paging, has_text, new_uuid7
from inception.models.document import (
    CreateDocumentNoteRequest,
    CreateDocumentRequest,
    Document,
    DocumentDefinition,
    DocumentDefinitionCategory,
    DocumentQuery,
    DocumentSummary,
    UpdateDocumentRequest,
)
from inception.models.note import DocumentNote, NoteQuery, UpdateNoteRequest
from inception.operations.notes import NoteOperations
from inception.operations.reference import OperationsReferenceService
from inception.repositories.documents import (
    DocumentDefinitionCategoryRepository,
    DocumentDefinitionRepository,
    DocumentNoteRepository,
    DocumentRepository,
)

logger = logging.getLogger(__name__)


def document_hash(data: bytes) -> str:
    """Base64-encoded SHA-256 digest of data."""
    return base64.b64encode(hashlib.sha256(data).digest()).decode("ascii")


class DocumentService:
    def __init__(self, session: AsyncSession, reference: OperationsReferenceService,
                 settings: Settings) -> None:
        self._categories = DocumentDefinitionCategoryRepository(session)
        self._definitions = DocumentDefinitionRepository(session)
        self._documents = DocumentRepository(session)
        self._reference = reference
        self._settings = settings
        self._notes = NoteOperations(
            DocumentNoteRepository(session), DocumentNote,
            parent_column="document_id", label="document note",
            not_found=DocumentNoteNotFoundError,
            require_parent=self._require_document,
            max_page_size=settings.MAX_FILTERED_NOTES,
        )

    # ------------------------------------------------------------------
    # Definition categories
    # ------------------------------------------------------------------

    async def create_document_definition_category(self, category: DocumentDefinitionCategory) -> None:
        with unavailable_on_error(
            logger, f"Failed to create the document definition category ({category.id})",
        ):
            if await self._categories.get(category.id) is not None:
                raise DuplicateDocumentDefinitionCategoryError(category.id)
            await self._categories.create(
                category_id=category.id, tenant_id=category.tenant_id, name=category.name,
            )

    async def get_document_definition_category(self, category_id: str) -> DocumentDefinitionCategory:
        with unavailable_on_error(
            logger, f"Failed to retrieve the document definition category ({category_id})",
        ):
            row = await self._categories.get(category_id)
        if row is None:
            raise DocumentDefinitionCategoryNotFoundError(category_id)
        return DocumentDefinitionCategory.model_validate(row)

    async def get_document_definition_categories(
        self, tenant_id: UUID,
    ) -> list[DocumentDefinitionCategory]:
        with unavailable_on_error(logger, "Failed to retrieve the document definition categories"):
            rows = await self._categories.list_for_tenant(tenant_id)
        return [DocumentDefinitionCategory.model_validate(row) for row in rows]

    async def update_document_definition_category(self, category: DocumentDefinitionCategory) -> None:
        with unavailable_on_error(
            logger, f"Failed to update the document definition category ({category.id})",
        ):
            row = await self._categories.get(category.id)
            if row is None:
                raise DocumentDefinitionCategoryNotFoundError(category.id)
            await self._categories.update(row, name=category.name)

    async def delete_document_definition_category(self, category_id: str) -> None:
        with unavailable_on_error(
            logger, f"Failed to delete the document definition category ({category_id})",
        ):
            row = await self._categories.get(category_id)
            if row is None:
                raise DocumentDefinitionCategoryNotFoundError(category_id)
            if await self._definitions.count_by_category(category_id):
                raise InvalidArgumentError(
                    "documentDefinitionCategoryId",
                    f"The document definition category ({category_id}) still has document definitions",
                )
            await self._categories.delete(row)

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    async def create_document_definition(self, definition: DocumentDefinition) -> None:
        with unavailable_on_error(
            logger, f"Failed to create the document definition ({definition.id})",
        ):
            if await self._categories.get(definition.category_id) is None:
                raise DocumentDefinitionCategoryNotFoundError(definition.category_id)
            if await self._definitions.get(definition.id) is not None:
                raise DuplicateDocumentDefinitionError(definition.id)
            await self._definitions.create(
                definition_id=definition.id,
                category_id=definition.category_id,
                tenant_id=definition.tenant_id,
                name=definition.name,
                description=definition.description,
                required_external_reference_types=definition.required_external_reference_types,
            )

    async def get_document_definition(self, definition_id: str) -> DocumentDefinition:
        with unavailable_on_error(
            logger, f"Failed to retrieve the document definition ({definition_id})",
        ):
            row = await self._definitions.get(definition_id)
        if row is None:
            raise DocumentDefinitionNotFoundError(definition_id)
        return DocumentDefinition.model_validate(row)

    async def get_document_definitions(self, tenant_id: UUID,
                                       category_id: str) -> list[DocumentDefinition]:
        with unavailable_on_error(
            logger,
            f"Failed to retrieve the document definitions for the category ({category_id})",
        ):
            if await self._categories.get(category_id) is None:
                raise DocumentDefinitionCategoryNotFoundError(category_id)
            rows = await self._definitions.list_by_category(category_id, tenant_id)
        return [DocumentDefinition.model_validate(row) for row in rows]

    async def document_definition_exists(self, definition_id: str) -> bool:
        with unavailable_on_error(
            logger, f"Failed to check whether the document definition ({definition_id}) exists",
        ):
            return await self._definitions.get(definition_id) is not None

    async def update_document_definition(self, definition: DocumentDefinition) -> None:
        with unavailable_on_error(
            logger, f"Failed to update the document definition ({definition.id})",
        ):
            row = await self._definitions.get(definition.id)
            if row is None:
                raise DocumentDefinitionNotFoundError(definition.id)
            await self._definitions.update(
                row,
                name=definition.name,
                description=definition.description,
                required_external_reference_types=definition.required_external_reference_types,
            )

    async def delete_document_definition(self, definition_id: str) -> None:
        with unavailable_on_error(
            logger, f"Failed to delete the document definition ({definition_id})",
        ):
            row = await self._definitions.get(definition_id)
            if row is None:
                raise DocumentDefinitionNotFoundError(definition_id)
            if await self._documents.exists_for_definition(definition_id):
                raise InvalidArgumentError(
                    "documentDefinitionId",
                    f"The document definition ({definition_id}) is still used by documents",
                )
            await self._definitions.delete(row)

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    async def create_document(self, tenant_id: UUID, request: CreateDocumentRequest,
                              created_by: str) -> Document:
        if not has_text(created_by):
            raise InvalidArgumentError("createdBy")
        with unavailable_on_error(logger, "Failed to create the document"):
            definition = await self._definitions.get(request.definition_id)
            if definition is None:
                raise DocumentDefinitionNotFoundError(request.definition_id)

            external_references = request.external_references or []
            await self._reference.validate_external_references(
                tenant_id, ObjectType.DOCUMENT, external_references,
                definition.required_external_reference_types,
            )

            row = await self._documents.create(
                document_id=new_uuid7(),
                tenant_id=tenant_id,
                definition_id=request.definition_id,
                name=request.name,
                file_type=request.file_type.value,
                data=request.data,
                hash=document_hash(request.data),
                external_references=[ref.model_dump() for ref in external_references],
                created_by=created_by,
                source_document_id=request.source_document_id,
                issue_date=request.issue_date,
                expiry_date=request.expiry_date,
            )
            logger.info("Created document %s (%s) for tenant %s",
                        row.id, request.definition_id, tenant_id)
            return Document.model_validate(row)

    async def _get_document_row(self, tenant_id: UUID, document_id: UUID):
        row = await self._documents.get(tenant_id, document_id)
        if row is None:
            raise DocumentNotFoundError(document_id)
        return row

    async def get_document(self, tenant_id: UUID, document_id: UUID) -> Document:
        with unavailable_on_error(logger, f"Failed to retrieve the document ({document_id})"):
            return Document.model_validate(await self._get_document_row(tenant_id, document_id))

    async def document_exists(self, tenant_id: UUID, document_id: UUID) -> bool:
        with unavailable_on_error(
            logger, f"Failed to check whether the document ({document_id}) exists",
        ):
            return await self._documents.exists(tenant_id, document_id)

    async def update_document(self, tenant_id: UUID, request: UpdateDocumentRequest,
                              updated_by: str) -> Document:
        if not has_text(updated_by):
            raise InvalidArgumentError("updatedBy")
        with unavailable_on_error(logger, f"Failed to update the document ({request.id})"):
            row = await self._get_document_row(tenant_id, request.id)

            if request.external_references is not None:
                definition = await self._definitions.get(row.definition_id)
                await self._reference.validate_external_references(
                    tenant_id, ObjectType.DOCUMENT, request.external_references,
                    definition.required_external_reference_types if definition else None,
                )
                row.external_references = [ref.model_dump() for ref in request.external_references]
            if request.name is not None:
                row.name = request.name
            if request.file_type is not None:
                row.file_type = request.file_type.value
            if request.data:
                row.data = request.data
                row.hash = document_hash(request.data)
            if request.issue_date is not None:
                row.issue_date = request.issue_date
            if request.expiry_date is not None:
                row.expiry_date = request.expiry_date
            if row.issue_date and row.expiry_date and row.expiry_date < row.issue_date:
                raise InvalidArgumentError("expiryDate")

            row = await self._documents.touch(row, updated_by)
            return Document.model_validate(row)

    async def delete_document(self, tenant_id: UUID, document_id: UUID) -> None:
        with unavailable_on_error(logger, f"Failed to delete the document ({document_id})"):
            row = await self._get_document_row(tenant_id, document_id)
            await self._documents.delete(row)

    async def get_document_summaries(self, tenant_id: UUID,
                                     query: DocumentQuery) -> Page[DocumentSummary]:
        paging = Paging.normalise(
            query.page_index, query.page_size,
            max_page_size=self._settings.MAX_FILTERED_SUMMARIES,
        )
        with unavailable_on_error(logger, "Failed to retrieve the filtered document summaries"):
            rows, total = await self._documents.find_summaries(
                tenant_id,
                definition_id=query.definition_id,
                filter_text=query.filter if has_text(query.filter) else None,
                sort_by=query.sort_by,
                sort_direction=query.sort_direction,
                paging=paging,
            )
            items = [DocumentSummary.model_validate(row) for row in rows]
        return Page[DocumentSummary](
            items=items, total=total, sort_direction=query.sort_direction,
            page_index=paging.page_index, page_size=paging.page_size,
        )

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    async def _require_document(self, tenant_id: UUID, document_id: UUID) -> None:
        if not await self._documents.exists(tenant_id, document_id):
            raise DocumentNotFoundError(document_id)

    async def create_document_note(self, tenant_id: UUID, request: CreateDocumentNoteRequest,
                                   created_by: str) -> DocumentNote:
        return await self._notes.create(
            tenant_id, request.document_id, request.content, created_by,
        )

    async def get_document_note(self, tenant_id: UUID, document_id: UUID | None,
                                note_id: UUID) -> DocumentNote:
        return await self._notes.get(tenant_id, document_id, note_id)

    async def update_document_note(self, tenant_id: UUID, request: UpdateNoteRequest,
                                   updated_by: str) -> DocumentNote:
        return await self._notes.update(tenant_id, request.note_id, request.content, updated_by)

    async def delete_document_note(self, tenant_id: UUID, document_id: UUID | None,
                                   note_id: UUID) -> None:
        await self._notes.delete(tenant_id, document_id, note_id)

    async def get_document_notes(self, tenant_id: UUID, document_id: UUID,
                                 query: NoteQuery) -> Page[DocumentNote]:
        return await self._notes.page(tenant_id, document_id, query)
