"""Operations external reference type repository."""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.tables import ExternalReferenceTypeRow


class ExternalReferenceTypeRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, code: str, name: str, description: str,
                     object_type: str, tenant_id: UUID | None,
                     value_pattern: str | None) -> ExternalReferenceTypeRow:
        row = ExternalReferenceTypeRow(
            code=code, name=name, description=description,
            object_type=object_type, tenant_id=tenant_id,
            value_pattern=value_pattern,
        )
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, code: str) -> ExternalReferenceTypeRow | None:
        return await self._session.get(ExternalReferenceTypeRow, code)

    async def exists(self, code: str) -> bool:
        return await self.get(code) is not None

    async def list_all(self) -> list[ExternalReferenceTypeRow]:
        result = await self._session.execute(
            select(ExternalReferenceTypeRow).order_by(ExternalReferenceTypeRow.name)
        )
        return list(result.scalars().all())

    async def list_for_tenant(self, tenant_id: UUID,
                              object_type: str | None = None) -> list[ExternalReferenceTypeRow]:
        row = ExternalReferenceTypeRow
        stmt = select(row).where(or_(row.tenant_id.is_(None), row.tenant_id == tenant_id))
        if object_type is not None:
            stmt = stmt.where(row.object_type == object_type)
        result = await self._session.execute(stmt.order_by(row.name))
        return list(result.scalars().all())

    async def update(self, row: ExternalReferenceTypeRow, *, name: str,
                     description: str, object_type: str, tenant_id: UUID | None,
                     value_pattern: str | None) -> ExternalReferenceTypeRow:
        row.name = name
        row.description = description
        row.object_type = object_type
        row.tenant_id = tenant_id
        row.value_pattern = value_pattern
        await self._session.flush()
        return row

    async def delete(self, row: ExternalReferenceTypeRow) -> None:
        await self._session.delete(row)
        await self._session.flush()
