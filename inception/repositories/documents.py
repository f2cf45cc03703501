"""Document definition category, document definition and document repositories."""

from datetime import date
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.tables import (
    DocumentDefinitionCategoryRow,
    DocumentDefinitionRow,
    DocumentNoteRow,
    DocumentRow,
)
from inception.models.common import Paging, SortDirection, utc_now
from inception.models.document import DocumentSortBy
from inception.repositories.base import contains_ignore_case, fetch_page, ordered
from inception.repositories.notes import NoteRepository


class DocumentDefinitionCategoryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, category_id: str, tenant_id: UUID | None,
                     name: str) -> DocumentDefinitionCategoryRow:
        row = DocumentDefinitionCategoryRow(id=category_id, tenant_id=tenant_id, name=name)
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, category_id: str) -> DocumentDefinitionCategoryRow | None:
        return await self._session.get(DocumentDefinitionCategoryRow, category_id)

    async def list_for_tenant(self, tenant_id: UUID) -> list[DocumentDefinitionCategoryRow]:
        row = DocumentDefinitionCategoryRow
        result = await self._session.execute(
            select(row)
            .where(or_(row.tenant_id.is_(None), row.tenant_id == tenant_id))
            .order_by(row.name)
        )
        return list(result.scalars().all())

    async def update(self, row: DocumentDefinitionCategoryRow, *,
                     name: str) -> DocumentDefinitionCategoryRow:
        row.name = name
        await self._session.flush()
        return row

    async def delete(self, row: DocumentDefinitionCategoryRow) -> None:
        await self._session.delete(row)
        await self._session.flush()


class DocumentDefinitionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, definition_id: str, category_id: str,
                     tenant_id: UUID | None, name: str, description: str,
                     required_external_reference_types: list[str]) -> DocumentDefinitionRow:
        row = DocumentDefinitionRow(
            id=definition_id, category_id=category_id, tenant_id=tenant_id,
            name=name, description=description,
            required_external_reference_types=required_external_reference_types,
        )
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, definition_id: str) -> DocumentDefinitionRow | None:
        return await self._session.get(DocumentDefinitionRow, definition_id)

    async def list_by_category(self, category_id: str,
                               tenant_id: UUID) -> list[DocumentDefinitionRow]:
        row = DocumentDefinitionRow
        result = await self._session.execute(
            select(row)
            .where(
                row.category_id == category_id,
                or_(row.tenant_id.is_(None), row.tenant_id == tenant_id),
            )
            .order_by(row.name)
        )
        return list(result.scalars().all())

    async def count_by_category(self, category_id: str) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(DocumentDefinitionRow)
            .where(DocumentDefinitionRow.category_id == category_id)
        )
        return result.scalar_one()

    async def update(self, row: DocumentDefinitionRow, *, name: str, description: str,
                     required_external_reference_types: list[str]) -> DocumentDefinitionRow:
        row.name = name
        row.description = description
        row.required_external_reference_types = required_external_reference_types
        await self._session.flush()
        return row

    async def delete(self, row: DocumentDefinitionRow) -> None:
        await self._session.delete(row)
        await self._session.flush()


class DocumentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, document_id: UUID, tenant_id: UUID, definition_id: str,
                     name: str, file_type: str, data: bytes, hash: str,
                     external_references: list[dict], created_by: str,
                     source_document_id: UUID | None = None,
                     issue_date: date | None = None,
                     expiry_date: date | None = None) -> DocumentRow:
        row = DocumentRow(
            id=document_id, tenant_id=tenant_id, definition_id=definition_id,
            name=name, file_type=file_type, data=data, hash=hash,
            external_references=external_references,
            source_document_id=source_document_id,
            issue_date=issue_date, expiry_date=expiry_date,
            created=utc_now(), created_by=created_by,
        )
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, tenant_id: UUID, document_id: UUID) -> DocumentRow | None:
        row = await self._session.get(DocumentRow, document_id)
        if row is None or row.tenant_id != tenant_id:
            return None
        return row

    async def exists(self, tenant_id: UUID, document_id: UUID) -> bool:
        result = await self._session.execute(
            select(DocumentRow.id).where(
                DocumentRow.id == document_id, DocumentRow.tenant_id == tenant_id,
            )
        )
        return result.first() is not None

    async def exists_for_definition(self, definition_id: str) -> bool:
        result = await self._session.execute(
            select(DocumentRow.id).where(DocumentRow.definition_id == definition_id).limit(1)
        )
        return result.first() is not None

    async def touch(self, row: DocumentRow, updated_by: str) -> DocumentRow:
        """Stamp updated/updated_by and flush pending attribute changes."""
        row.updated = utc_now()
        row.updated_by = updated_by
        await self._session.flush()
        return row

    async def delete(self, row: DocumentRow) -> None:
        await self._session.execute(
            delete(DocumentNoteRow).where(DocumentNoteRow.document_id == row.id)
        )
        await self._session.delete(row)
        await self._session.flush()

    async def find_summaries(self, tenant_id: UUID, *, definition_id: str | None,
                             filter_text: str | None, sort_by: DocumentSortBy,
                             sort_direction: SortDirection,
                             paging: Paging) -> tuple[list[DocumentRow], int]:
        row = DocumentRow
        stmt = select(row).where(row.tenant_id == tenant_id)
        if definition_id:
            stmt = stmt.where(row.definition_id == definition_id)
        if filter_text:
            stmt = stmt.where(contains_ignore_case(filter_text, row.name, row.created_by))
        sort_column = {
            DocumentSortBy.NAME: row.name,
            DocumentSortBy.CREATED: row.created,
            DocumentSortBy.UPDATED: row.updated,
        }[sort_by]
        return await fetch_page(
            self._session, stmt,
            order_by=[ordered(sort_column, sort_direction), row.id],
            paging=paging,
        )


class DocumentNoteRepository(NoteRepository[DocumentNoteRow]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, DocumentNoteRow, "document_id")
