"""FastAPI dependency injection factories for services.

Each factory takes AsyncSession via Depends(get_async_session) and returns
a service instance. API endpoints use these via Depends(). FastAPI caches a
dependency per request, so services built for one request share a session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inception.config.settings import Settings, get_settings
from inception.core.cache import ReferenceCache
from inception.db.session import get_async_session
from inception.operations.documents import DocumentService
from inception.operations.interactions import InteractionService
from inception.operations.reference import OperationsReferenceService
from inception.operations.workflows import WorkflowService
from inception.party.reference_service import PartyReferenceService
from inception.reference.service import ReferenceService

# ---------------------------------------------------------------------------
# Cache (process-wide)
# ---------------------------------------------------------------------------

_reference_cache: ReferenceCache | None = None


def get_reference_cache() -> ReferenceCache:
    global _reference_cache
    if _reference_cache is None:
        settings = get_settings()
        _reference_cache = (
            ReferenceCache.from_settings(settings)
            if settings.REFERENCE_CACHE_TTL_SECONDS > 0
            else ReferenceCache.disabled()
        )
    return _reference_cache


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------


async def get_reference_service(
    session: AsyncSession = Depends(get_async_session),
    cache: ReferenceCache = Depends(get_reference_cache),
) -> ReferenceService:
    return ReferenceService(session, cache)


async def get_party_reference_service(
    session: AsyncSession = Depends(get_async_session),
    cache: ReferenceCache = Depends(get_reference_cache),
) -> PartyReferenceService:
    return PartyReferenceService(session, cache)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


async def get_operations_reference_service(
    session: AsyncSession = Depends(get_async_session),
    cache: ReferenceCache = Depends(get_reference_cache),
) -> OperationsReferenceService:
    return OperationsReferenceService(session, cache)


async def get_document_service(
    session: AsyncSession = Depends(get_async_session),
    reference: OperationsReferenceService = Depends(get_operations_reference_service),
    settings: Settings = Depends(get_settings),
) -> DocumentService:
    return DocumentService(session, reference, settings)


async def get_workflow_service(
    session: AsyncSession = Depends(get_async_session),
    reference: OperationsReferenceService = Depends(get_operations_reference_service),
    settings: Settings = Depends(get_settings),
) -> WorkflowService:
    return WorkflowService(session, reference, settings)


async def get_interaction_service(
    session: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> InteractionService:
    return InteractionService(session, settings)
