"""Workflow service: definition categories, versioned definitions, workflows and notes."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from inception.config.settings import Settings
from inception.core.errors import (
    DuplicateWorkflowDefinitionCategoryError,
    DuplicateWorkflowDefinitionError,
    InvalidArgumentError,
    WorkflowDefinitionCategoryNotFoundError,
    WorkflowDefinitionNotFoundError,
    WorkflowDefinitionVersionNotFoundError,
    WorkflowNotFoundError,
    WorkflowNoteNotFoundError,
    unavailable_on_error,
)
from inception.models.common import ObjectType, Page, Paging, has_text, new_uuid7, utc_now
from inception.models.note import NoteQuery, UpdateNoteRequest, WorkflowNote
from inception.models.workflow import (
    CreateWorkflowNoteRequest,
    CreateWorkflowRequest,
    UpdateWorkflowRequest,
    Workflow,
    WorkflowDefinition,
    WorkflowDefinitionCategory,
    WorkflowQuery,
    WorkflowStatus,
    WorkflowSummary,
)
from inception.operations.notes import NoteOperations
from inception.operations.reference import OperationsReferenceService
from inception.repositories.workflows import (
    WorkflowDefinitionCategoryRepository,
    WorkflowDefinitionRepository,
    WorkflowNoteRepository,
    WorkflowRepository,
)

logger = logging.getLogger(__name__)


class WorkflowService:
    def __init__(self, session: AsyncSession, reference: OperationsReferenceService,
                 settings: Settings) -> None:
        self._categories = WorkflowDefinitionCategoryRepository(session)
        self._definitions = WorkflowDefinitionRepository(session)
        self._workflows = WorkflowRepository(session)
        self._reference = reference
        self._settings = settings
        self._notes = NoteOperations(
            WorkflowNoteRepository(session), WorkflowNote,
            parent_column="workflow_id", label="workflow note",
            not_found=WorkflowNoteNotFoundError,
            require_parent=self._require_workflow,
            max_page_size=settings.MAX_FILTERED_NOTES,
        )

    # ------------------------------------------------------------------
    # Definition categories
    # ------------------------------------------------------------------

    async def create_workflow_definition_category(self, category: WorkflowDefinitionCategory) -> None:
        with unavailable_on_error(
            logger, f"Failed to create the workflow definition category ({category.id})",
        ):
            if await self._categories.get(category.id) is not None:
                raise DuplicateWorkflowDefinitionCategoryError(category.id)
            await self._categories.create(
                category_id=category.id, tenant_id=category.tenant_id, name=category.name,
            )

    async def get_workflow_definition_category(self, category_id: str) -> WorkflowDefinitionCategory:
        with unavailable_on_error(
            logger, f"Failed to retrieve the workflow definition category ({category_id})",
        ):
            row = await self._categories.get(category_id)
        if row is None:
            raise WorkflowDefinitionCategoryNotFoundError(category_id)
        return WorkflowDefinitionCategory.model_validate(row)

    async def get_workflow_definition_categories(
        self, tenant_id: UUID,
    ) -> list[WorkflowDefinitionCategory]:
        with unavailable_on_error(logger, "Failed to retrieve the workflow definition categories"):
            rows = await self._categories.list_for_tenant(tenant_id)
        return [WorkflowDefinitionCategory.model_validate(row) for row in rows]

    async def update_workflow_definition_category(self, category: WorkflowDefinitionCategory) -> None:
        with unavailable_on_error(
            logger, f"Failed to update the workflow definition category ({category.id})",
        ):
            row = await self._categories.get(category.id)
            if row is None:
                raise WorkflowDefinitionCategoryNotFoundError(category.id)
            await self._categories.update(row, name=category.name)

    async def delete_workflow_definition_category(self, category_id: str) -> None:
        with unavailable_on_error(
            logger, f"Failed to delete the workflow definition category ({category_id})",
        ):
            row = await self._categories.get(category_id)
            if row is None:
                raise WorkflowDefinitionCategoryNotFoundError(category_id)
            if await self._definitions.count_by_category(category_id):
                raise InvalidArgumentError(
                    "workflowDefinitionCategoryId",
                    f"The workflow definition category ({category_id}) still has workflow definitions",
                )
            await self._categories.delete(row)

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    async def create_workflow_definition(self, definition: WorkflowDefinition) -> WorkflowDefinition:
        """Create version 1 of a new definition. Any version on the request is ignored."""
        with unavailable_on_error(
            logger, f"Failed to create the workflow definition ({definition.id})",
        ):
            if await self._categories.get(definition.category_id) is None:
                raise WorkflowDefinitionCategoryNotFoundError(definition.category_id)
            if await self._definitions.get_latest(definition.id) is not None:
                raise DuplicateWorkflowDefinitionError(definition.id)
            row = await self._definitions.create(
                definition_id=definition.id,
                version=1,
                category_id=definition.category_id,
                tenant_id=definition.tenant_id,
                name=definition.name,
                description=definition.description,
            )
        return WorkflowDefinition.model_validate(row)

    async def get_workflow_definition(self, definition_id: str) -> WorkflowDefinition:
        """Latest version of the definition."""
        with unavailable_on_error(
            logger, f"Failed to retrieve the workflow definition ({definition_id})",
        ):
            row = await self._definitions.get_latest(definition_id)
        if row is None:
            raise WorkflowDefinitionNotFoundError(definition_id)
        return WorkflowDefinition.model_validate(row)

    async def get_workflow_definition_version(self, definition_id: str,
                                              version: int) -> WorkflowDefinition:
        label = f"{definition_id} v{version}"
        with unavailable_on_error(logger, f"Failed to retrieve the workflow definition ({label})"):
            row = await self._definitions.get_version(definition_id, version)
        if row is None:
            raise WorkflowDefinitionVersionNotFoundError(label)
        return WorkflowDefinition.model_validate(row)

    async def get_workflow_definitions(self, tenant_id: UUID,
                                       category_id: str) -> list[WorkflowDefinition]:
        """Latest version of each definition in the category."""
        with unavailable_on_error(
            logger,
            f"Failed to retrieve the workflow definitions for the category ({category_id})",
        ):
            if await self._categories.get(category_id) is None:
                raise WorkflowDefinitionCategoryNotFoundError(category_id)
            rows = await self._definitions.list_latest_by_category(category_id, tenant_id)
        return [WorkflowDefinition.model_validate(row) for row in rows]

    async def workflow_definition_exists(self, definition_id: str) -> bool:
        with unavailable_on_error(
            logger, f"Failed to check whether the workflow definition ({definition_id}) exists",
        ):
            return await self._definitions.get_latest(definition_id) is not None

    async def update_workflow_definition(self, definition: WorkflowDefinition) -> WorkflowDefinition:
        """Save the definition as a new version after the latest one.

        Earlier versions stay untouched so workflows keep the version they
        were created against.
        """
        with unavailable_on_error(
            logger, f"Failed to update the workflow definition ({definition.id})",
        ):
            if await self._definitions.get_latest(definition.id) is None:
                raise WorkflowDefinitionNotFoundError(definition.id)
            if await self._categories.get(definition.category_id) is None:
                raise WorkflowDefinitionCategoryNotFoundError(definition.category_id)
            row = await self._definitions.create(
                definition_id=definition.id,
                version=await self._definitions.next_version(definition.id),
                category_id=definition.category_id,
                tenant_id=definition.tenant_id,
                name=definition.name,
                description=definition.description,
            )
        return WorkflowDefinition.model_validate(row)

    async def delete_workflow_definition(self, definition_id: str) -> None:
        """Delete every version of the definition."""
        with unavailable_on_error(
            logger, f"Failed to delete the workflow definition ({definition_id})",
        ):
            if await self._definitions.get_latest(definition_id) is None:
                raise WorkflowDefinitionNotFoundError(definition_id)
            if await self._workflows.exists_for_definition(definition_id):
                raise InvalidArgumentError(
                    "workflowDefinitionId",
                    f"The workflow definition ({definition_id}) is still used by workflows",
                )
            await self._definitions.delete_all_versions(definition_id)

    async def delete_workflow_definition_version(self, definition_id: str, version: int) -> None:
        label = f"{definition_id} v{version}"
        with unavailable_on_error(logger, f"Failed to delete the workflow definition ({label})"):
            row = await self._definitions.get_version(definition_id, version)
            if row is None:
                raise WorkflowDefinitionVersionNotFoundError(label)
            await self._definitions.delete(row)

    # ------------------------------------------------------------------
    # Workflows
    # ------------------------------------------------------------------

    async def create_workflow(self, tenant_id: UUID, request: CreateWorkflowRequest,
                              initiated_by: str) -> Workflow:
        """Start a workflow bound to the latest version of its definition."""
        if not has_text(initiated_by):
            raise InvalidArgumentError("initiatedBy")
        with unavailable_on_error(logger, "Failed to create the workflow"):
            definition = await self._definitions.get_latest(request.definition_id)
            if definition is None:
                raise WorkflowDefinitionNotFoundError(request.definition_id)
            if request.parent_id is not None and not await self._workflows.exists(
                tenant_id, request.parent_id,
            ):
                raise WorkflowNotFoundError(request.parent_id)

            external_references = request.external_references or []
            await self._reference.validate_external_references(
                tenant_id, ObjectType.WORKFLOW, external_references,
            )

            row = await self._workflows.create(
                workflow_id=new_uuid7(),
                tenant_id=tenant_id,
                parent_id=request.parent_id,
                definition_id=definition.id,
                definition_version=definition.version,
                status=WorkflowStatus.IN_PROGRESS.value,
                data=request.data,
                external_references=[ref.model_dump() for ref in external_references],
                initiated_by=initiated_by,
            )
            logger.info("Created workflow %s (%s v%d) for tenant %s",
                        row.id, definition.id, definition.version, tenant_id)
            return Workflow.model_validate(row)

    async def _get_workflow_row(self, tenant_id: UUID, workflow_id: UUID):
        row = await self._workflows.get(tenant_id, workflow_id)
        if row is None:
            raise WorkflowNotFoundError(workflow_id)
        return row

    async def get_workflow(self, tenant_id: UUID, workflow_id: UUID) -> Workflow:
        with unavailable_on_error(logger, f"Failed to retrieve the workflow ({workflow_id})"):
            return Workflow.model_validate(await self._get_workflow_row(tenant_id, workflow_id))

    async def workflow_exists(self, tenant_id: UUID, workflow_id: UUID) -> bool:
        with unavailable_on_error(
            logger, f"Failed to check whether the workflow ({workflow_id}) exists",
        ):
            return await self._workflows.exists(tenant_id, workflow_id)

    async def update_workflow(self, tenant_id: UUID, request: UpdateWorkflowRequest,
                              updated_by: str) -> Workflow:
        """Replace data when non-blank and move to status when given.

        Moving into a final status stamps finalized/finalized_by.
        """
        if not has_text(updated_by):
            raise InvalidArgumentError("updatedBy")
        with unavailable_on_error(logger, f"Failed to update the workflow ({request.id})"):
            row = await self._get_workflow_row(tenant_id, request.id)

            if has_text(request.data):
                row.data = request.data
            if request.external_references is not None:
                await self._reference.validate_external_references(
                    tenant_id, ObjectType.WORKFLOW, request.external_references,
                )
                row.external_references = [ref.model_dump() for ref in request.external_references]
            if request.status is not None and request.status.value != row.status:
                row.status = request.status.value
                if request.status.is_final:
                    row.finalized = utc_now()
                    row.finalized_by = updated_by

            row = await self._workflows.touch(row, updated_by)
            return Workflow.model_validate(row)

    async def delete_workflow(self, tenant_id: UUID, workflow_id: UUID) -> None:
        with unavailable_on_error(logger, f"Failed to delete the workflow ({workflow_id})"):
            row = await self._get_workflow_row(tenant_id, workflow_id)
            await self._workflows.delete(row)

    async def get_workflow_summaries(self, tenant_id: UUID,
                                     query: WorkflowQuery) -> Page[WorkflowSummary]:
        paging = Paging.normalise(
            query.page_index, query.page_size,
            max_page_size=self._settings.MAX_FILTERED_SUMMARIES,
        )
        with unavailable_on_error(logger, "Failed to retrieve the filtered workflow summaries"):
            rows, total = await self._workflows.find_summaries(
                tenant_id,
                definition_id=query.definition_id,
                status=query.status.value if query.status else None,
                filter_text=query.filter if has_text(query.filter) else None,
                sort_by=query.sort_by,
                sort_direction=query.sort_direction,
                paging=paging,
            )
            items = [WorkflowSummary.model_validate(row) for row in rows]
        return Page[WorkflowSummary](
            items=items, total=total, sort_direction=query.sort_direction,
            page_index=paging.page_index, page_size=paging.page_size,
        )

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    async def _require_workflow(self, tenant_id: UUID, workflow_id: UUID) -> None:
        if not await self._workflows.exists(tenant_id, workflow_id):
            raise WorkflowNotFoundError(workflow_id)

    async def create_workflow_note(self, tenant_id: UUID, request: CreateWorkflowNoteRequest,
                                   created_by: str) -> WorkflowNote:
        return await self._notes.create(
            tenant_id, request.workflow_id, request.content, created_by,
        )

    async def get_workflow_note(self, tenant_id: UUID, workflow_id: UUID | None,
                                note_id: UUID) -> WorkflowNote:
        return await self._notes.get(tenant_id, workflow_id, note_id)

    async def update_workflow_note(self, tenant_id: UUID, request: UpdateNoteRequest,
                                   updated_by: str) -> WorkflowNote:
        return await self._notes.update(tenant_id, request.note_id, request.content, updated_by)

    async def delete_workflow_note(self, tenant_id: UUID, workflow_id: UUID | None,
                                   note_id: UUID) -> None:
        await self._notes.delete(tenant_id, workflow_id, note_id)

    async def get_workflow_notes(self, tenant_id: UUID, workflow_id: UUID,
                                 query: NoteQuery) -> Page[WorkflowNote]:
        return await self._notes.page(tenant_id, workflow_id, query)
