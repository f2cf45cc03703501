"""Operations reference service: external reference types for operations objects.

Lists are cached under "externalReferenceTypes.*" and every write drops them.
"""

import logging
from uuid import UUID

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from inception.core.cache import ALL, ReferenceCache, cache_key
from inception.core.errors import (
    DuplicateExternalReferenceTypeError,
    ExternalReferenceTypeNotFoundError,
    InvalidArgumentError,
    unavailable_on_error,
)
from inception.models.common import ObjectType, has_text
from inception.models.operations_reference import ExternalReference, ExternalReferenceType
from inception.repositories.operations_reference import ExternalReferenceTypeRepository

logger = logging.getLogger(__name__)

KIND = "externalReferenceTypes"


class OperationsReferenceService:
    def __init__(self, session: AsyncSession, cache: ReferenceCache) -> None:
        self._session = session
        self._repo = ExternalReferenceTypeRepository(session)
        self._cache = cache

    async def create_external_reference_type(self, external_reference_type: ExternalReferenceType) -> None:
        code = external_reference_type.code
        with unavailable_on_error(logger, f"Failed to create the external reference type ({code})"):
            if await self._repo.exists(code):
                raise DuplicateExternalReferenceTypeError(code)
            await self._repo.create(
                code=code,
                name=external_reference_type.name,
                description=external_reference_type.description,
                object_type=external_reference_type.object_type.value,
                tenant_id=external_reference_type.tenant_id,
                value_pattern=external_reference_type.value_pattern,
            )
        self._invalidate_on_write()

    async def get_external_reference_type(self, code: str) -> ExternalReferenceType:
        with unavailable_on_error(logger, f"Failed to retrieve the external reference type ({code})"):
            row = await self._repo.get(code)
        if row is None:
            raise ExternalReferenceTypeNotFoundError(code)
        return ExternalReferenceType.model_validate(row)

    async def get_external_reference_types(
        self, tenant_id: UUID | None = None, object_type: ObjectType | None = None,
    ) -> list[ExternalReferenceType]:
        """All types, or the types visible to tenant_id (shared plus its own)."""
        key = cache_key(
            KIND,
            str(tenant_id) if tenant_id is not None else ALL,
            object_type.value if object_type is not None else ALL,
        )
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        with unavailable_on_error(logger, "Failed to retrieve the external reference types"):
            if tenant_id is None:
                rows = await self._repo.list_all()
                if object_type is not None:
                    rows = [row for row in rows if row.object_type == object_type.value]
            else:
                rows = await self._repo.list_for_tenant(
                    tenant_id, object_type.value if object_type is not None else None,
                )
            items = [ExternalReferenceType.model_validate(row) for row in rows]

        self._cache.put(key, items)
        return list(items)

    async def update_external_reference_type(self, external_reference_type: ExternalReferenceType) -> None:
        code = external_reference_type.code
        with unavailable_on_error(logger, f"Failed to update the external reference type ({code})"):
            row = await self._repo.get(code)
            if row is None:
                raise ExternalReferenceTypeNotFoundError(code)
            await self._repo.update(
                row,
                name=external_reference_type.name,
                description=external_reference_type.description,
                object_type=external_reference_type.object_type.value,
                tenant_id=external_reference_type.tenant_id,
                value_pattern=external_reference_type.value_pattern,
            )
        self._invalidate_on_write()

    async def delete_external_reference_type(self, code: str) -> None:
        with unavailable_on_error(logger, f"Failed to delete the external reference type ({code})"):
            row = await self._repo.get(code)
            if row is None:
                raise ExternalReferenceTypeNotFoundError(code)
            await self._repo.delete(row)
        self._invalidate_on_write()

    async def validate_external_references(
        self, tenant_id: UUID, object_type: ObjectType,
        external_references: list[ExternalReference],
        required_types: list[str] | None = None,
    ) -> None:
        """Raise InvalidArgumentError unless every reference has a known type and a valid value.

        Every code in required_types must also be present.
        """
        types = {
            item.code: item
            for item in await self.get_external_reference_types(tenant_id, object_type)
        }
        for reference in external_references:
            reference_type = types.get(reference.type)
            if reference_type is None:
                raise InvalidArgumentError(
                    "externalReferences",
                    f"Invalid external reference type ({reference.type})",
                )
            if not has_text(reference.value) or not reference_type.accepts(reference.value):
                raise InvalidArgumentError(
                    "externalReferences",
                    f"Invalid value for the external reference type ({reference.type})",
                )
        present = {reference.type for reference in external_references}
        for required in required_types or []:
            if required not in present:
                raise InvalidArgumentError(
                    "externalReferences",
                    f"Missing required external reference ({required})",
                )

    def invalidate(self) -> None:
        self._cache.invalidate_prefix(KIND)

    def _invalidate_on_write(self) -> None:
        """Drop cached lists now and again once the session commits.

        A concurrent request may re-cache the committed rows between the
        write and the commit; the second pass removes them.
        """
        self.invalidate()
        event.listen(self._session.sync_session, "after_commit", self._after_commit, once=True)

    def _after_commit(self, session: Session) -> None:
        self.invalidate()
