"""Typed service errors.

Services raise these and nothing else. The API layer maps each to an HTTP
status and an RFC 7807 problem body (see inception.api.errors). Unexpected
failures from repositories are wrapped in ServiceUnavailableError with the
original exception chained as __cause__.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager


class InceptionError(Exception):
    """Base class for all service errors."""

    status_code: int = 500
    title: str = "Internal Server Error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidArgumentError(InceptionError):
    """A request argument failed validation. parameter names the argument."""

    status_code = 400
    title = "Invalid Argument"

    def __init__(self, parameter: str, detail: str | None = None) -> None:
        super().__init__(detail or f"Invalid argument ({parameter})")
        self.parameter = parameter


class AccessDeniedError(InceptionError):
    status_code = 403
    title = "Access Denied"


class NotFoundError(InceptionError):
    status_code = 404
    title = "Not Found"

    entity: str = "entity"

    def __init__(self, entity_id: object) -> None:
        super().__init__(f"The {self.entity} ({entity_id}) could not be found")
        self.entity_id = entity_id


class DuplicateError(InceptionError):
    status_code = 409
    title = "Conflict"

    entity: str = "entity"

    def __init__(self, entity_id: object) -> None:
        super().__init__(f"The {self.entity} ({entity_id}) already exists")
        self.entity_id = entity_id


class ServiceUnavailableError(InceptionError):
    status_code = 500
    title = "Service Unavailable"


# ---------------------------------------------------------------------------
# Operations reference
# ---------------------------------------------------------------------------


class ExternalReferenceTypeNotFoundError(NotFoundError):
    entity = "external reference type"


class DuplicateExternalReferenceTypeError(DuplicateError):
    entity = "external reference type"


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class DocumentDefinitionCategoryNotFoundError(NotFoundError):
    entity = "document definition category"


class DuplicateDocumentDefinitionCategoryError(DuplicateError):
    entity = "document definition category"


class DocumentDefinitionNotFoundError(NotFoundError):
    entity = "document definition"


class DuplicateDocumentDefinitionError(DuplicateError):
    entity = "document definition"


class DocumentNotFoundError(NotFoundError):
    entity = "document"


class DocumentNoteNotFoundError(NotFoundError):
    entity = "document note"


# ---------------------------------------------------------------------------
# Workflows
# ---------------------------------------------------------------------------


class WorkflowDefinitionCategoryNotFoundError(NotFoundError):
    entity = "workflow definition category"


class DuplicateWorkflowDefinitionCategoryError(DuplicateError):
    entity = "workflow definition category"


class WorkflowDefinitionNotFoundError(NotFoundError):
    entity = "workflow definition"


class WorkflowDefinitionVersionNotFoundError(NotFoundError):
    entity = "workflow definition version"


class DuplicateWorkflowDefinitionError(DuplicateError):
    entity = "workflow definition version"


class WorkflowNotFoundError(NotFoundError):
    entity = "workflow"


class WorkflowNoteNotFoundError(NotFoundError):
    entity = "workflow note"


# ---------------------------------------------------------------------------
# Interactions
# ---------------------------------------------------------------------------


class InteractionSourceNotFoundError(NotFoundError):
    entity = "interaction source"


class DuplicateInteractionSourceError(DuplicateError):
    entity = "interaction source"


class InteractionNotFoundError(NotFoundError):
    entity = "interaction"


class DuplicateInteractionError(DuplicateError):
    entity = "interaction"


class InteractionNoteNotFoundError(NotFoundError):
    entity = "interaction note"


# ---------------------------------------------------------------------------
# Translation of unexpected failures
# ---------------------------------------------------------------------------


@contextmanager
def unavailable_on_error(logger: logging.Logger, message: str) -> Iterator[None]:
    """Re-raise InceptionError unchanged; wrap anything else in ServiceUnavailableError.

    Usage::

        with unavailable_on_error(logger, f"Failed to get the document ({document_id})"):
            row = await repo.get(tenant_id, document_id)
    """
    try:
        yield
    except InceptionError:
        raise
    except Exception as e:
        logger.exception(message)
        raise ServiceUnavailableError(message) from e
