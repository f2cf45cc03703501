"""Workflow definition category, versioned workflow definition and workflow repositories."""

from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.tables import (
    WorkflowDefinitionCategoryRow,
    WorkflowDefinitionRow,
    WorkflowNoteRow,
    WorkflowRow,
)
from inception.models.common import Paging, SortDirection, utc_now
from inception.models.workflow import WorkflowSortBy
from inception.repositories.base import contains_ignore_case, fetch_page, ordered
from inception.repositories.notes import NoteRepository


class WorkflowDefinitionCategoryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, category_id: str, tenant_id: UUID | None,
                     name: str) -> WorkflowDefinitionCategoryRow:
        row = WorkflowDefinitionCategoryRow(id=category_id, tenant_id=tenant_id, name=name)
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, category_id: str) -> WorkflowDefinitionCategoryRow | None:
        return await self._session.get(WorkflowDefinitionCategoryRow, category_id)

    async def list_for_tenant(self, tenant_id: UUID) -> list[WorkflowDefinitionCategoryRow]:
        row = WorkflowDefinitionCategoryRow
        result = await self._session.execute(
            select(row)
            .where(or_(row.tenant_id.is_(None), row.tenant_id == tenant_id))
            .order_by(row.name)
        )
        return list(result.scalars().all())

    async def update(self, row: WorkflowDefinitionCategoryRow, *,
                     name: str) -> WorkflowDefinitionCategoryRow:
        row.name = name
        await self._session.flush()
        return row

    async def delete(self, row: WorkflowDefinitionCategoryRow) -> None:
        await self._session.delete(row)
        await self._session.flush()


class WorkflowDefinitionRepository:
    """Versioned definitions. Reads without a version resolve the latest one."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, definition_id: str, version: int, category_id: str,
                     tenant_id: UUID | None, name: str,
                     description: str) -> WorkflowDefinitionRow:
        row = WorkflowDefinitionRow(
            id=definition_id, version=version, category_id=category_id,
            tenant_id=tenant_id, name=name, description=description,
        )
        self._session.add(row)
        await self._session.flush()
        return row

    async def get_version(self, definition_id: str, version: int) -> WorkflowDefinitionRow | None:
        return await self._session.get(
            WorkflowDefinitionRow, {"id": definition_id, "version": version}
        )

    async def get_latest(self, definition_id: str) -> WorkflowDefinitionRow | None:
        result = await self._session.execute(
            select(WorkflowDefinitionRow)
            .where(WorkflowDefinitionRow.id == definition_id)
            .order_by(WorkflowDefinitionRow.version.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def next_version(self, definition_id: str) -> int:
        result = await self._session.execute(
            select(func.max(WorkflowDefinitionRow.version))
            .where(WorkflowDefinitionRow.id == definition_id)
        )
        return (result.scalar_one_or_none() or 0) + 1

    async def list_latest_by_category(self, category_id: str,
                                      tenant_id: UUID) -> list[WorkflowDefinitionRow]:
        row = WorkflowDefinitionRow
        latest = (
            select(row.id, func.max(row.version).label("version"))
            .group_by(row.id)
            .subquery()
        )
        result = await self._session.execute(
            select(row)
            .join(latest, (row.id == latest.c.id) & (row.version == latest.c.version))
            .where(
                row.category_id == category_id,
                or_(row.tenant_id.is_(None), row.tenant_id == tenant_id),
            )
            .order_by(row.name)
        )
        return list(result.scalars().all())

    async def count_by_category(self, category_id: str) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(WorkflowDefinitionRow)
            .where(WorkflowDefinitionRow.category_id == category_id)
        )
        return result.scalar_one()

    async def delete_all_versions(self, definition_id: str) -> int:
        result = await self._session.execute(
            delete(WorkflowDefinitionRow).where(WorkflowDefinitionRow.id == definition_id)
        )
        return result.rowcount

    async def delete(self, row: WorkflowDefinitionRow) -> None:
        await self._session.delete(row)
        await self._session.flush()


class WorkflowRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, workflow_id: UUID, tenant_id: UUID, parent_id: UUID | None,
                     definition_id: str, definition_version: int, status: str,
                     data: str | None, external_references: list[dict],
                     initiated_by: str) -> WorkflowRow:
        row = WorkflowRow(
            id=workflow_id, tenant_id=tenant_id, parent_id=parent_id,
            definition_id=definition_id, definition_version=definition_version,
            status=status, data=data, external_references=external_references,
            initiated=utc_now(), initiated_by=initiated_by,
        )
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, tenant_id: UUID, workflow_id: UUID) -> WorkflowRow | None:
        row = await self._session.get(WorkflowRow, workflow_id)
        if row is None or row.tenant_id != tenant_id:
            return None
        return row

    async def exists(self, tenant_id: UUID, workflow_id: UUID) -> bool:
        return await self.get(tenant_id, workflow_id) is not None

    async def exists_for_definition(self, definition_id: str) -> bool:
        result = await self._session.execute(
            select(WorkflowRow.id).where(WorkflowRow.definition_id == definition_id).limit(1)
        )
        return result.first() is not None

    async def touch(self, row: WorkflowRow, updated_by: str) -> WorkflowRow:
        row.updated = utc_now()
        row.updated_by = updated_by
        await self._session.flush()
        return row

    async def delete(self, row: WorkflowRow) -> None:
        await self._session.execute(
            delete(WorkflowNoteRow).where(WorkflowNoteRow.workflow_id == row.id)
        )
        await self._session.delete(row)
        await self._session.flush()

    async def find_summaries(self, tenant_id: UUID, *, definition_id: str | None,
                             status: str | None, filter_text: str | None,
                             sort_by: WorkflowSortBy, sort_direction: SortDirection,
                             paging: Paging) -> tuple[list[WorkflowRow], int]:
        row = WorkflowRow
        stmt = select(row).where(row.tenant_id == tenant_id)
        if definition_id:
            stmt = stmt.where(row.definition_id == definition_id)
        if status:
            stmt = stmt.where(row.status == status)
        if filter_text:
            stmt = stmt.where(contains_ignore_case(filter_text, row.initiated_by, row.updated_by))
        sort_column = {
            WorkflowSortBy.INITIATED: row.initiated,
            WorkflowSortBy.UPDATED: row.updated,
            WorkflowSortBy.STATUS: row.status,
        }[sort_by]
        return await fetch_page(
            self._session, stmt,
            order_by=[ordered(sort_column, sort_direction), row.id],
            paging=paging,
        )


class WorkflowNoteRepository(NoteRepository[WorkflowNoteRow]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, WorkflowNoteRow, "workflow_id")
