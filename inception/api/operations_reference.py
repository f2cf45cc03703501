"""FastAPI operations reference endpoints.

GET    /api/operations/reference/external-reference-types         list (Tenant-ID, objectType)
POST   /api/operations/reference/external-reference-types         create
GET    /api/operations/reference/external-reference-types/{code}  get
PUT    /api/operations/reference/external-reference-types/{code}  update
DELETE /api/operations/reference/external-reference-types/{code}  delete

Reads are public; writes require Operations.OperationsAdministration.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from inception.api.dependencies import get_operations_reference_service
from inception.core.errors import InvalidArgumentError
from inception.models.common import ObjectType
from inception.models.operations_reference import ExternalReferenceType
from inception.operations.reference import OperationsReferenceService
from inception.security.guard import get_tenant_id, require_functions
from inception.security.principal import OPERATIONS_ADMINISTRATION

router = APIRouter(prefix="/api/operations/reference", tags=["operations-reference"])

_administration = require_functions(OPERATIONS_ADMINISTRATION)


@router.get("/external-reference-types", response_model=list[ExternalReferenceType])
async def get_external_reference_types(
    tenant_id: UUID = Depends(get_tenant_id),
    object_type: ObjectType | None = Query(default=None, alias="objectType"),
    service: OperationsReferenceService = Depends(get_operations_reference_service),
) -> list[ExternalReferenceType]:
    return await service.get_external_reference_types(tenant_id, object_type)


@router.post(
    "/external-reference-types", status_code=204, response_class=Response,
    dependencies=[Depends(_administration)],
)
async def create_external_reference_type(
    body: ExternalReferenceType,
    service: OperationsReferenceService = Depends(get_operations_reference_service),
) -> None:
    await service.create_external_reference_type(body)


@router.get("/external-reference-types/{code}", response_model=ExternalReferenceType)
async def get_external_reference_type(
    code: str,
    service: OperationsReferenceService = Depends(get_operations_reference_service),
) -> ExternalReferenceType:
    return await service.get_external_reference_type(code)


@router.put(
    "/external-reference-types/{code}", status_code=204, response_class=Response,
    dependencies=[Depends(_administration)],
)
async def update_external_reference_type(
    code: str,
    body: ExternalReferenceType,
    service: OperationsReferenceService = Depends(get_operations_reference_service),
) -> None:
    if body.code != code:
        raise InvalidArgumentError("code", "The code in the path and body must match")
    await service.update_external_reference_type(body)


@router.delete(
    "/external-reference-types/{code}", status_code=204, response_class=Response,
    dependencies=[Depends(_administration)],
)
async def delete_external_reference_type(
    code: str,
    service: OperationsReferenceService = Depends(get_operations_reference_service),
) -> None:
    await service.delete_external_reference_type(code)
