"""Note repository, shared by document, workflow and interaction notes."""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.tables import DocumentNoteRow, InteractionNoteRow, WorkflowNoteRow
from inception.models.common import NoteSortBy, Paging, SortDirection, utc_now
from inception.repositories.base import contains_ignore_case, fetch_page, ordered

N = TypeVar("N", DocumentNoteRow, WorkflowNoteRow, InteractionNoteRow)


class NoteRepository(Generic[N]):
    """Notes attached to one kind of parent object.

    parent_column names the foreign key column on the row class,
    e.g. "document_id".
    """

    def __init__(self, session: AsyncSession, row_type: type[N], parent_column: str) -> None:
        self._session = session
        self._row_type = row_type
        self._parent = getattr(row_type, parent_column)
        self._parent_column = parent_column

    async def create(self, *, note_id: UUID, tenant_id: UUID, parent_id: UUID,
                     content: str, created_by: str) -> N:
        row = self._row_type(
            id=note_id, tenant_id=tenant_id, content=content,
            created=utc_now(), created_by=created_by,
            **{self._parent_column: parent_id},
        )
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, tenant_id: UUID, note_id: UUID) -> N | None:
        row = await self._session.get(self._row_type, note_id)
        if row is None or row.tenant_id != tenant_id:
            return None
        return row

    async def update(self, row: N, *, content: str, updated_by: str) -> N:
        row.content = content
        row.updated = utc_now()
        row.updated_by = updated_by
        await self._session.flush()
        return row

    async def delete(self, row: N) -> None:
        await self._session.delete(row)
        await self._session.flush()

    async def find_page(self, tenant_id: UUID, parent_id: UUID, *,
                        filter_text: str | None, sort_by: NoteSortBy,
                        sort_direction: SortDirection,
                        paging: Paging) -> tuple[list[N], int]:
        row = self._row_type
        stmt = select(row).where(row.tenant_id == tenant_id, self._parent == parent_id)
        if filter_text:
            stmt = stmt.where(contains_ignore_case(filter_text, row.created_by, row.updated_by))
        sort_column = row.created_by if sort_by == NoteSortBy.CREATED_BY else row.created
        return await fetch_page(
            self._session, stmt,
            order_by=[ordered(sort_column, sort_direction), ordered(row.created, sort_direction)],
            paging=paging,
        )
