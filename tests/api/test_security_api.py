"""Tests for bearer-token security and tenant access on the HTTP surface."""

from collections.abc import Callable
from uuid import UUID

import pytest
from httpx import AsyncClient

from inception.security.principal import (
    ADMINISTRATOR_ROLE,
    DOCUMENT_ADMINISTRATION,
    INDEXING,
    WORKFLOW_ADMINISTRATION,
)

TENANT_A = UUID("00000000-0000-0000-0000-00000000000a")
TENANT_B = UUID("00000000-0000-0000-0000-00000000000b")

SUMMARIES = "/api/operations/document-summaries"

Bearer = Callable[..., dict[str, str]]


class TestAuthentication:

    @pytest.mark.anyio
    async def test_missing_token(self, secured_client: AsyncClient) -> None:
        resp = await secured_client.get(SUMMARIES)
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == "Bearer"
        assert resp.headers["content-type"].startswith("application/problem+json")

    @pytest.mark.anyio
    async def test_garbage_token(self, secured_client: AsyncClient) -> None:
        resp = await secured_client.get(SUMMARIES, headers={"Authorization": "Bearer nope"})
        assert resp.status_code == 401

    @pytest.mark.anyio
    async def test_reference_data_is_public(self, secured_client: AsyncClient) -> None:
        resp = await secured_client.get("/api/reference/countries")
        assert resp.status_code == 200
        resp = await secured_client.get("/api/party/reference/genders")
        assert resp.status_code == 200


class TestTenantAccess:

    @pytest.mark.anyio
    async def test_granted_tenant(self, secured_client: AsyncClient, bearer: Bearer) -> None:
        headers = bearer(functions=[INDEXING], tenants=[TENANT_A])
        headers["Tenant-ID"] = str(TENANT_A)
        resp = await secured_client.get(SUMMARIES, headers=headers)
        assert resp.status_code == 200
        assert resp.json()["total"] == 0

    @pytest.mark.anyio
    async def test_other_tenant(self, secured_client: AsyncClient, bearer: Bearer) -> None:
        headers = bearer(functions=[INDEXING], tenants=[TENANT_A])
        headers["Tenant-ID"] = str(TENANT_B)
        resp = await secured_client.get(SUMMARIES, headers=headers)
        assert resp.status_code == 403
        assert str(TENANT_B) in resp.json()["detail"]

    @pytest.mark.anyio
    async def test_bypass_function(self, secured_client: AsyncClient, bearer: Bearer) -> None:
        headers = bearer(functions=[DOCUMENT_ADMINISTRATION])
        headers["Tenant-ID"] = str(TENANT_B)
        resp = await secured_client.get(SUMMARIES, headers=headers)
        assert resp.status_code == 200

    @pytest.mark.anyio
    async def test_wrong_function(self, secured_client: AsyncClient, bearer: Bearer) -> None:
        headers = bearer(functions=[WORKFLOW_ADMINISTRATION], tenants=[TENANT_A])
        headers["Tenant-ID"] = str(TENANT_A)
        resp = await secured_client.get(SUMMARIES, headers=headers)
        assert resp.status_code == 403
        assert resp.json()["detail"] == "Access denied"


class TestAdministration:

    PAYLOAD = {"code": "case_number", "name": "Case", "objectType": "WORKFLOW"}

    @pytest.mark.anyio
    async def test_requires_operations_administration(self, secured_client: AsyncClient,
                                                      bearer: Bearer) -> None:
        resp = await secured_client.post(
            "/api/operations/reference/external-reference-types",
            json=self.PAYLOAD, headers=bearer(functions=[INDEXING]),
        )
        assert resp.status_code == 403

    @pytest.mark.anyio
    async def test_administrator_role(self, secured_client: AsyncClient, bearer: Bearer) -> None:
        resp = await secured_client.post(
            "/api/operations/reference/external-reference-types",
            json=self.PAYLOAD, headers=bearer("root", roles=[ADMINISTRATOR_ROLE]),
        )
        assert resp.status_code == 204
