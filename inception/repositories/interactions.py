"""Interaction source and interaction repositories."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import case, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.tables import InteractionNoteRow, InteractionRow, InteractionSourceRow
from inception.models.common import Paging, SortDirection
from inception.models.interaction import InteractionPriority, InteractionSortBy
from inception.repositories.base import contains_ignore_case, fetch_page, ordered
from inception.repositories.notes import NoteRepository

# LOW < MEDIUM < HIGH, not alphabetical
_PRIORITY_RANK = {
    InteractionPriority.LOW.value: 1,
    InteractionPriority.MEDIUM.value: 2,
    InteractionPriority.HIGH.value: 3,
}


class InteractionSourceRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, source_id: str, tenant_id: UUID, type: str,
                     name: str) -> InteractionSourceRow:
        row = InteractionSourceRow(id=source_id, tenant_id=tenant_id, type=type, name=name)
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, source_id: str) -> InteractionSourceRow | None:
        return await self._session.get(InteractionSourceRow, source_id)

    async def get_for_tenant(self, tenant_id: UUID, source_id: str) -> InteractionSourceRow | None:
        row = await self.get(source_id)
        if row is None or row.tenant_id != tenant_id:
            return None
        return row

    async def list_for_tenant(self, tenant_id: UUID) -> list[InteractionSourceRow]:
        result = await self._session.execute(
            select(InteractionSourceRow)
            .where(InteractionSourceRow.tenant_id == tenant_id)
            .order_by(InteractionSourceRow.name)
        )
        return list(result.scalars().all())

    async def update(self, row: InteractionSourceRow, *, type: str,
                     name: str) -> InteractionSourceRow:
        row.type = type
        row.name = name
        await self._session.flush()
        return row

    async def delete(self, row: InteractionSourceRow) -> None:
        await self._session.delete(row)
        await self._session.flush()


class InteractionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, interaction_id: UUID, tenant_id: UUID, source_id: str,
                     source_reference: str, type: str, direction: str, status: str,
                     priority: str, sender: str, recipients: list[str],
                     subject: str | None, content: str, mime_type: str,
                     occurred: datetime) -> InteractionRow:
        row = InteractionRow(
            id=interaction_id, tenant_id=tenant_id, source_id=source_id,
            source_reference=source_reference, type=type, direction=direction,
            status=status, priority=priority, sender=sender, recipients=recipients,
            subject=subject, content=content, mime_type=mime_type, occurred=occurred,
        )
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, tenant_id: UUID, interaction_id: UUID) -> InteractionRow | None:
        row = await self._session.get(InteractionRow, interaction_id)
        if row is None or row.tenant_id != tenant_id:
            return None
        return row

    async def exists(self, tenant_id: UUID, interaction_id: UUID) -> bool:
        return await self.get(tenant_id, interaction_id) is not None

    async def exists_with_source_reference(self, source_id: str, source_reference: str) -> bool:
        result = await self._session.execute(
            select(InteractionRow.id).where(
                InteractionRow.source_id == source_id,
                InteractionRow.source_reference == source_reference,
            )
        )
        return result.first() is not None

    async def exists_for_source(self, source_id: str) -> bool:
        result = await self._session.execute(
            select(InteractionRow.id).where(InteractionRow.source_id == source_id).limit(1)
        )
        return result.first() is not None

    async def flush(self) -> None:
        await self._session.flush()

    async def delete(self, row: InteractionRow) -> None:
        await self._session.execute(
            delete(InteractionNoteRow).where(InteractionNoteRow.interaction_id == row.id)
        )
        await self._session.delete(row)
        await self._session.flush()

    async def find_summaries(self, tenant_id: UUID, source_id: str, *,
                             status: str | None, filter_text: str | None,
                             sort_by: InteractionSortBy, sort_direction: SortDirection,
                             paging: Paging) -> tuple[list[InteractionRow], int]:
        row = InteractionRow
        stmt = select(row).where(row.tenant_id == tenant_id, row.source_id == source_id)
        if status:
            stmt = stmt.where(row.status == status)
        if filter_text:
            stmt = stmt.where(contains_ignore_case(filter_text, row.sender, row.subject))
        if sort_by == InteractionSortBy.PRIORITY:
            sort_column = case(_PRIORITY_RANK, value=row.priority, else_=0)
        else:
            sort_column = row.occurred
        return await fetch_page(
            self._session, stmt,
            order_by=[ordered(sort_column, sort_direction), row.id],
            paging=paging,
        )


class InteractionNoteRepository(NoteRepository[InteractionNoteRow]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, InteractionNoteRow, "interaction_id")
