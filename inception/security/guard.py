"""Access guard expressed as FastAPI dependencies.

Every protected route declares the functions that may call it. The function
check passes when security is disabled, the principal holds the
Administrator role, or it holds any of the listed functions. Tenant-scoped
routes then check the Tenant-ID header (default DEFAULT_TENANT_ID): the
principal must be an administrator, hold one of the route's tenant-bypass
functions, or be granted the tenant.
"""

import logging
from collections.abc import Awaitable, Callable
from uuid import UUID

from fastapi import Depends, Header, HTTPException

from inception.config.settings import Settings, get_settings
from inception.core.errors import AccessDeniedError
from inception.security.principal import SYSTEM_PRINCIPAL, Principal, TenantContext
from inception.security.tokens import TokenError, verify_bearer_token

logger = logging.getLogger(__name__)


async def get_principal(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """Resolve the caller from the bearer token (401 when missing or invalid)."""
    if settings.SECURITY_DISABLED:
        return SYSTEM_PRINCIPAL

    if not authorization:
        raise HTTPException(
            status_code=401, detail="Unauthorized", headers={"WWW-Authenticate": "Bearer"},
        )
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=401, detail="Unauthorized", headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return verify_bearer_token(parts[1].strip(), settings)
    except TokenError as e:
        logger.info("Rejected bearer token: %s", e)
        raise HTTPException(
            status_code=401, detail="Unauthorized", headers={"WWW-Authenticate": "Bearer"},
        ) from e


def _check_functions(principal: Principal, functions: tuple[str, ...],
                     settings: Settings) -> None:
    if settings.SECURITY_DISABLED or principal.is_administrator:
        return
    if not principal.has_any_function(functions):
        raise AccessDeniedError("Access denied")


def require_functions(*functions: str) -> Callable[..., Awaitable[Principal]]:
    """Dependency: the caller must hold one of functions (or be an administrator)."""

    async def dependency(
        principal: Principal = Depends(get_principal),
        settings: Settings = Depends(get_settings),
    ) -> Principal:
        _check_functions(principal, functions, settings)
        return principal

    return dependency


def require_tenant_access(
    *functions: str, tenant_bypass: tuple[str, ...] = (),
) -> Callable[..., Awaitable[TenantContext]]:
    """Dependency: function check, then access to the Tenant-ID tenant.

    Resolves to the TenantContext the route passes to its service.
    """

    async def dependency(
        tenant_id: UUID | None = Header(default=None, alias="Tenant-ID"),
        principal: Principal = Depends(get_principal),
        settings: Settings = Depends(get_settings),
    ) -> TenantContext:
        _check_functions(principal, functions, settings)
        tenant_id = tenant_id or settings.DEFAULT_TENANT_ID
        if not (
            settings.SECURITY_DISABLED
            or principal.is_administrator
            or principal.has_any_function(tenant_bypass)
            or principal.has_access_to_tenant(tenant_id)
        ):
            raise AccessDeniedError(f"Access denied to the tenant ({tenant_id})")
        return TenantContext(tenant_id=tenant_id, principal=principal)

    return dependency


async def get_tenant_id(
    tenant_id: UUID | None = Header(default=None, alias="Tenant-ID"),
    settings: Settings = Depends(get_settings),
) -> UUID:
    """Tenant-ID header for public routes, defaulting to DEFAULT_TENANT_ID."""
    return tenant_id or settings.DEFAULT_TENANT_ID
