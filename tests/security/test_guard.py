"""Tests for the access guard dependencies, called directly."""

from uuid import UUID

import pytest
from fastapi import HTTPException

from inception.config.settings import Settings
from inception.core.errors import AccessDeniedError
from inception.security.guard import (
    get_principal,
    get_tenant_id,
    require_functions,
    require_tenant_access,
)
from inception.security.principal import (
    ADMINISTRATOR_ROLE,
    DOCUMENT_ADMINISTRATION,
    INDEXING,
    OPERATIONS_ADMINISTRATION,
    SYSTEM_PRINCIPAL,
    Principal,
)
from inception.security.tokens import issue_token

TENANT_A = UUID("00000000-0000-0000-0000-00000000000a")
TENANT_B = UUID("00000000-0000-0000-0000-00000000000b")

SECURED = Settings(_env_file=None, SECURITY_DISABLED=False, JWT_SECRET="guard-secret")
OPEN = Settings(_env_file=None, SECURITY_DISABLED=True, JWT_SECRET="guard-secret")

document_access = require_tenant_access(
    INDEXING, DOCUMENT_ADMINISTRATION,
    tenant_bypass=(OPERATIONS_ADMINISTRATION, DOCUMENT_ADMINISTRATION),
)


class TestGetPrincipal:

    @pytest.mark.anyio
    async def test_security_disabled(self) -> None:
        assert await get_principal(authorization=None, settings=OPEN) is SYSTEM_PRINCIPAL

    @pytest.mark.anyio
    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer", "Bearer not-a-jwt"])
    async def test_rejected(self, header: str | None) -> None:
        with pytest.raises(HTTPException) as exc_info:
            await get_principal(authorization=header, settings=SECURED)
        assert exc_info.value.status_code == 401
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    @pytest.mark.anyio
    async def test_valid_token(self) -> None:
        token = issue_token(SECURED, name="alice", functions=[INDEXING])
        principal = await get_principal(authorization=f"Bearer {token}", settings=SECURED)
        assert principal.name == "alice"
        assert INDEXING in principal.functions


class TestRequireFunctions:

    @pytest.mark.anyio
    async def test_function_granted(self) -> None:
        check = require_functions(OPERATIONS_ADMINISTRATION)
        principal = Principal(name="ops", functions=frozenset({OPERATIONS_ADMINISTRATION}))
        assert await check(principal=principal, settings=SECURED) is principal

    @pytest.mark.anyio
    async def test_administrator_passes(self) -> None:
        check = require_functions(OPERATIONS_ADMINISTRATION)
        admin = Principal(name="root", roles=frozenset({ADMINISTRATOR_ROLE}))
        assert await check(principal=admin, settings=SECURED) is admin

    @pytest.mark.anyio
    async def test_missing_function(self) -> None:
        check = require_functions(OPERATIONS_ADMINISTRATION)
        with pytest.raises(AccessDeniedError):
            await check(principal=Principal(name="clerk", functions=frozenset({INDEXING})),
                        settings=SECURED)


class TestRequireTenantAccess:

    @pytest.mark.anyio
    async def test_granted_tenant(self) -> None:
        clerk = Principal(name="clerk", functions=frozenset({INDEXING}),
                          tenant_ids=frozenset({TENANT_A}))
        ctx = await document_access(tenant_id=TENANT_A, principal=clerk, settings=SECURED)
        assert ctx.tenant_id == TENANT_A
        assert ctx.username == "clerk"

    @pytest.mark.anyio
    async def test_other_tenant_denied(self) -> None:
        clerk = Principal(name="clerk", functions=frozenset({INDEXING}),
                          tenant_ids=frozenset({TENANT_A}))
        with pytest.raises(AccessDeniedError):
            await document_access(tenant_id=TENANT_B, principal=clerk, settings=SECURED)

    @pytest.mark.anyio
    async def test_bypass_function(self) -> None:
        admin = Principal(name="docs", functions=frozenset({DOCUMENT_ADMINISTRATION}))
        ctx = await document_access(tenant_id=TENANT_B, principal=admin, settings=SECURED)
        assert ctx.tenant_id == TENANT_B

    @pytest.mark.anyio
    async def test_default_tenant(self) -> None:
        ctx = await document_access(tenant_id=None, principal=SYSTEM_PRINCIPAL, settings=SECURED)
        assert ctx.tenant_id == SECURED.DEFAULT_TENANT_ID

    @pytest.mark.anyio
    async def test_function_checked_before_tenant(self) -> None:
        outsider = Principal(name="x", tenant_ids=frozenset({TENANT_A}))
        with pytest.raises(AccessDeniedError, match="Access denied$"):
            await document_access(tenant_id=TENANT_A, principal=outsider, settings=SECURED)


class TestGetTenantId:

    @pytest.mark.anyio
    async def test_header_or_default(self) -> None:
        assert await get_tenant_id(tenant_id=TENANT_A, settings=OPEN) == TENANT_A
        assert await get_tenant_id(tenant_id=None, settings=OPEN) == OPEN.DEFAULT_TENANT_ID
