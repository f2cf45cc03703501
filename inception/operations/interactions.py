"""Interaction service: sources, interactions, assignment, party links and notes."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from inception.config.settings import Settings
from inception.core.errors import (
    DuplicateInteractionError,
    DuplicateInteractionSourceError,
    InteractionNotFoundError,
    InteractionNoteNotFoundError,
    InteractionSourceNotFoundError,
    InvalidArgumentError,
    unavailable_on_error,
)
from inception.models.common import Page, Paging, has_text, new_uuid7, utc_now
from inception.models.interaction import (
    CreateInteractionNoteRequest,
    CreateInteractionRequest,
    Interaction,
    InteractionQuery,
    InteractionSource,
    InteractionStatus,
    InteractionSummary,
)
from inception.models.note import InteractionNote, NoteQuery, UpdateNoteRequest
from inception.operations.notes import NoteOperations
from inception.repositories.interactions import (
    InteractionNoteRepository,
    InteractionRepository,
    InteractionSourceRepository,
)

logger = logging.getLogger(__name__)


class InteractionService:
    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        self._sources = InteractionSourceRepository(session)
        self._interactions = InteractionRepository(session)
        self._settings = settings
        self._notes = NoteOperations(
            InteractionNoteRepository(session), InteractionNote,
            parent_column="interaction_id", label="interaction note",
            not_found=InteractionNoteNotFoundError,
            require_parent=self._require_interaction,
            max_page_size=settings.MAX_FILTERED_NOTES,
        )

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    async def create_interaction_source(self, source: InteractionSource) -> None:
        with unavailable_on_error(logger, f"Failed to create the interaction source ({source.id})"):
            if await self._sources.get(source.id) is not None:
                raise DuplicateInteractionSourceError(source.id)
            await self._sources.create(
                source_id=source.id, tenant_id=source.tenant_id,
                type=source.type.value, name=source.name,
            )

    async def _get_source_row(self, tenant_id: UUID, source_id: str):
        row = await self._sources.get_for_tenant(tenant_id, source_id)
        if row is None:
            raise InteractionSourceNotFoundError(source_id)
        return row

    async def get_interaction_source(self, tenant_id: UUID, source_id: str) -> InteractionSource:
        with unavailable_on_error(
            logger, f"Failed to retrieve the interaction source ({source_id})",
        ):
            return InteractionSource.model_validate(
                await self._get_source_row(tenant_id, source_id)
            )

    async def get_interaction_sources(self, tenant_id: UUID) -> list[InteractionSource]:
        with unavailable_on_error(logger, "Failed to retrieve the interaction sources"):
            rows = await self._sources.list_for_tenant(tenant_id)
        return [InteractionSource.model_validate(row) for row in rows]

    async def update_interaction_source(self, source: InteractionSource) -> None:
        with unavailable_on_error(logger, f"Failed to update the interaction source ({source.id})"):
            row = await self._get_source_row(source.tenant_id, source.id)
            await self._sources.update(row, type=source.type.value, name=source.name)

    async def delete_interaction_source(self, tenant_id: UUID, source_id: str) -> None:
        with unavailable_on_error(logger, f"Failed to delete the interaction source ({source_id})"):
            row = await self._get_source_row(tenant_id, source_id)
            if await self._interactions.exists_for_source(source_id):
                raise InvalidArgumentError(
                    "interactionSourceId",
                    f"The interaction source ({source_id}) still has interactions",
                )
            await self._sources.delete(row)

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    async def create_interaction(self, tenant_id: UUID,
                                 request: CreateInteractionRequest) -> Interaction:
        with unavailable_on_error(logger, "Failed to create the interaction"):
            await self._get_source_row(tenant_id, request.source_id)
            if await self._interactions.exists_with_source_reference(
                request.source_id, request.source_reference,
            ):
                raise DuplicateInteractionError(
                    f"{request.source_id}/{request.source_reference}"
                )
            row = await self._interactions.create(
                interaction_id=new_uuid7(),
                tenant_id=tenant_id,
                source_id=request.source_id,
                source_reference=request.source_reference,
                type=request.type.value,
                direction=request.direction.value,
                status=InteractionStatus.RECEIVED.value,
                priority=request.priority.value,
                sender=request.sender,
                recipients=list(request.recipients),
                subject=request.subject,
                content=request.content,
                mime_type=request.mime_type,
                occurred=request.occurred or utc_now(),
            )
            logger.info("Created interaction %s from source %s for tenant %s",
                        row.id, request.source_id, tenant_id)
            return Interaction.model_validate(row)

    async def _get_interaction_row(self, tenant_id: UUID, interaction_id: UUID):
        row = await self._interactions.get(tenant_id, interaction_id)
        if row is None:
            raise InteractionNotFoundError(interaction_id)
        return row

    async def get_interaction(self, tenant_id: UUID, interaction_id: UUID) -> Interaction:
        with unavailable_on_error(
            logger, f"Failed to retrieve the interaction ({interaction_id})",
        ):
            return Interaction.model_validate(
                await self._get_interaction_row(tenant_id, interaction_id)
            )

    async def interaction_exists(self, tenant_id: UUID, interaction_id: UUID) -> bool:
        with unavailable_on_error(
            logger, f"Failed to check whether the interaction ({interaction_id}) exists",
        ):
            return await self._interactions.exists(tenant_id, interaction_id)

    async def delete_interaction(self, tenant_id: UUID, interaction_id: UUID) -> None:
        with unavailable_on_error(logger, f"Failed to delete the interaction ({interaction_id})"):
            row = await self._get_interaction_row(tenant_id, interaction_id)
            await self._interactions.delete(row)

    async def assign_interaction(self, tenant_id: UUID, interaction_id: UUID,
                                 username: str) -> Interaction:
        if not has_text(username):
            raise InvalidArgumentError("username")
        with unavailable_on_error(logger, f"Failed to assign the interaction ({interaction_id})"):
            row = await self._get_interaction_row(tenant_id, interaction_id)
            row.assigned_to = username
            row.assigned = utc_now()
            row.status = InteractionStatus.ASSIGNED.value
            await self._interactions.flush()
            return Interaction.model_validate(row)

    async def link_party_to_interaction(self, tenant_id: UUID, interaction_id: UUID,
                                        party_id: UUID) -> Interaction:
        with unavailable_on_error(
            logger, f"Failed to link the party ({party_id}) to the interaction ({interaction_id})",
        ):
            row = await self._get_interaction_row(tenant_id, interaction_id)
            row.party_id = party_id
            await self._interactions.flush()
            return Interaction.model_validate(row)

    async def delink_party_from_interaction(self, tenant_id: UUID,
                                            interaction_id: UUID) -> Interaction:
        with unavailable_on_error(
            logger, f"Failed to delink the party from the interaction ({interaction_id})",
        ):
            row = await self._get_interaction_row(tenant_id, interaction_id)
            row.party_id = None
            await self._interactions.flush()
            return Interaction.model_validate(row)

    async def get_interaction_summaries(self, tenant_id: UUID, source_id: str,
                                        query: InteractionQuery) -> Page[InteractionSummary]:
        paging = Paging.normalise(
            query.page_index, query.page_size,
            max_page_size=self._settings.MAX_FILTERED_SUMMARIES,
        )
        with unavailable_on_error(
            logger, f"Failed to retrieve the interaction summaries for the source ({source_id})",
        ):
            await self._get_source_row(tenant_id, source_id)
            rows, total = await self._interactions.find_summaries(
                tenant_id, source_id,
                status=query.status.value if query.status else None,
                filter_text=query.filter if has_text(query.filter) else None,
                sort_by=query.sort_by,
                sort_direction=query.sort_direction,
                paging=paging,
            )
            items = [InteractionSummary.model_validate(row) for row in rows]
        return Page[InteractionSummary](
            items=items, total=total, sort_direction=query.sort_direction,
            page_index=paging.page_index, page_size=paging.page_size,
        )

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    async def _require_interaction(self, tenant_id: UUID, interaction_id: UUID) -> None:
        if not await self._interactions.exists(tenant_id, interaction_id):
            raise InteractionNotFoundError(interaction_id)

    async def create_interaction_note(self, tenant_id: UUID,
                                      request: CreateInteractionNoteRequest,
                                      created_by: str) -> InteractionNote:
        return await self._notes.create(
            tenant_id, request.interaction_id, request.content, created_by,
        )

    async def get_interaction_note(self, tenant_id: UUID, interaction_id: UUID | None,
                                   note_id: UUID) -> InteractionNote:
        return await self._notes.get(tenant_id, interaction_id, note_id)

    async def update_interaction_note(self, tenant_id: UUID, request: UpdateNoteRequest,
                                      updated_by: str) -> InteractionNote:
        return await self._notes.update(tenant_id, request.note_id, request.content, updated_by)

    async def delete_interaction_note(self, tenant_id: UUID, interaction_id: UUID | None,
                                      note_id: UUID) -> None:
        await self._notes.delete(tenant_id, interaction_id, note_id)

    async def get_interaction_notes(self, tenant_id: UUID, interaction_id: UUID,
                                    query: NoteQuery) -> Page[InteractionNote]:
        return await self._notes.page(tenant_id, interaction_id, query)
