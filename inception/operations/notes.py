"""Note operations shared by the document, workflow and interaction services."""

import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar
from uuid import UUID

from inception.core.errors import InvalidArgumentError, NotFoundError, unavailable_on_error
from inception.models.common import Page, Paging, has_text, new_uuid7
from inception.models.note import Note, NoteQuery
from inception.repositories.notes import NoteRepository

logger = logging.getLogger(__name__)

NoteT = TypeVar("NoteT", bound=Note)


class NoteOperations(Generic[NoteT]):
    """CRUD and paged listing for the notes of one kind of parent object.

    require_parent(tenant_id, parent_id) must raise the parent's NotFoundError
    subclass, or return normally when the parent exists in the tenant.
    """

    def __init__(self, repo: NoteRepository, model: type[NoteT], *,
                 parent_column: str, label: str,
                 not_found: type[NotFoundError],
                 require_parent: Callable[[UUID, UUID], Awaitable[None]],
                 max_page_size: int) -> None:
        self._repo = repo
        self._model = model
        self._parent_column = parent_column
        self._label = label
        self._not_found = not_found
        self._require_parent = require_parent
        self._max_page_size = max_page_size

    async def create(self, tenant_id: UUID, parent_id: UUID, content: str,
                     created_by: str) -> NoteT:
        if not has_text(created_by):
            raise InvalidArgumentError("createdBy")
        with unavailable_on_error(logger, f"Failed to create the {self._label}"):
            await self._require_parent(tenant_id, parent_id)
            row = await self._repo.create(
                note_id=new_uuid7(), tenant_id=tenant_id, parent_id=parent_id,
                content=content, created_by=created_by,
            )
            return self._model.model_validate(row)

    async def _get_row(self, tenant_id: UUID, parent_id: UUID | None, note_id: UUID):
        row = await self._repo.get(tenant_id, note_id)
        if row is None or (
            parent_id is not None and getattr(row, self._parent_column) != parent_id
        ):
            raise self._not_found(note_id)
        return row

    async def get(self, tenant_id: UUID, parent_id: UUID | None, note_id: UUID) -> NoteT:
        with unavailable_on_error(logger, f"Failed to retrieve the {self._label} ({note_id})"):
            row = await self._get_row(tenant_id, parent_id, note_id)
            return self._model.model_validate(row)

    async def update(self, tenant_id: UUID, note_id: UUID, content: str,
                     updated_by: str) -> NoteT:
        if not has_text(updated_by):
            raise InvalidArgumentError("updatedBy")
        with unavailable_on_error(logger, f"Failed to update the {self._label} ({note_id})"):
            row = await self._get_row(tenant_id, None, note_id)
            row = await self._repo.update(row, content=content, updated_by=updated_by)
            return self._model.model_validate(row)

    async def delete(self, tenant_id: UUID, parent_id: UUID | None, note_id: UUID) -> None:
        with unavailable_on_error(logger, f"Failed to delete the {self._label} ({note_id})"):
            row = await self._get_row(tenant_id, parent_id, note_id)
            await self._repo.delete(row)

    async def page(self, tenant_id: UUID, parent_id: UUID, query: NoteQuery) -> Page[NoteT]:
        paging = Paging.normalise(
            query.page_index, query.page_size, max_page_size=self._max_page_size,
        )
        with unavailable_on_error(logger, f"Failed to retrieve the filtered {self._label}s"):
            await self._require_parent(tenant_id, parent_id)
            rows, total = await self._repo.find_page(
                tenant_id, parent_id,
                filter_text=query.filter if has_text(query.filter) else None,
                sort_by=query.sort_by,
                sort_direction=query.sort_direction,
                paging=paging,
            )
            items = [self._model.model_validate(row) for row in rows]
        return Page[self._model](
            items=items,
            total=total,
            sort_direction=query.sort_direction,
            page_index=paging.page_index,
            page_size=paging.page_size,
        )
