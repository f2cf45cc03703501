"""Tests for the document, workflow and interaction endpoints (security disabled)."""

import base64

import pytest
from httpx import AsyncClient

TENANT = {"Tenant-ID": "00000000-0000-0000-0000-00000000000a"}
OTHER_TENANT = {"Tenant-ID": "00000000-0000-0000-0000-00000000000b"}


async def _document_definition(client: AsyncClient) -> None:
    resp = await client.post("/api/operations/document-definition-categories",
                             json={"id": "identity", "name": "Identity"})
    assert resp.status_code == 204
    resp = await client.post(
        "/api/operations/document-definition-categories/identity/document-definitions",
        json={"id": "passport", "categoryId": "identity", "name": "Passport"},
    )
    assert resp.status_code == 204


async def _workflow_definition(client: AsyncClient) -> None:
    resp = await client.post("/api/operations/workflow-definition-categories",
                             json={"id": "onboarding", "name": "Onboarding"})
    assert resp.status_code == 204
    resp = await client.post(
        "/api/operations/workflow-definition-categories/onboarding/workflow-definitions",
        json={"id": "kyc", "categoryId": "onboarding", "name": "KYC v1"},
    )
    assert resp.status_code == 204
    resp = await client.put(
        "/api/operations/workflow-definition-categories/onboarding/workflow-definitions/kyc",
        json={"id": "kyc", "categoryId": "onboarding", "name": "KYC v2"},
    )
    assert resp.status_code == 204


class TestDocumentEndpoints:

    @pytest.mark.anyio
    async def test_definitions(self, client: AsyncClient) -> None:
        await _document_definition(client)

        resp = await client.get(
            "/api/operations/document-definition-categories/identity/document-definitions",
        )
        assert [d["id"] for d in resp.json()] == ["passport"]

        resp = await client.get(
            "/api/operations/document-definition-categories/other/document-definitions/passport",
        )
        assert resp.status_code == 400

        resp = await client.delete("/api/operations/document-definition-categories/identity")
        assert resp.status_code == 400

    @pytest.mark.anyio
    async def test_document_lifecycle(self, client: AsyncClient) -> None:
        await _document_definition(client)
        payload = {
            "definitionId": "passport", "name": "scan.pdf", "fileType": "PDF",
            "data": base64.b64encode(b"%PDF-1.7").decode("ascii"),
        }
        resp = await client.post("/api/operations/create-document", json=payload, headers=TENANT)
        assert resp.status_code == 201
        document_id = resp.json()

        resp = await client.get(f"/api/operations/documents/{document_id}", headers=TENANT)
        assert resp.status_code == 200
        body = resp.json()
        assert base64.b64decode(body["data"]) == b"%PDF-1.7"
        assert body["createdBy"] == "system"
        assert body["fileType"] == "PDF"

        resp = await client.get(f"/api/operations/documents/{document_id}", headers=OTHER_TENANT)
        assert resp.status_code == 404

        resp = await client.put("/api/operations/update-document", headers=TENANT,
                                json={"id": document_id, "name": "renamed.pdf"})
        assert resp.status_code == 204

        resp = await client.get("/api/operations/document-summaries", headers=TENANT,
                                params={"filter": "renamed", "sortBy": "NAME"})
        page = resp.json()
        assert page["total"] == 1
        assert "data" not in page["items"][0]
        assert page["items"][0]["name"] == "renamed.pdf"

        resp = await client.delete(f"/api/operations/documents/{document_id}", headers=TENANT)
        assert resp.status_code == 204

    @pytest.mark.anyio
    async def test_document_notes(self, client: AsyncClient) -> None:
        await _document_definition(client)
        resp = await client.post("/api/operations/create-document", headers=TENANT, json={
            "definitionId": "passport", "name": "scan.pdf", "fileType": "PDF",
            "data": base64.b64encode(b"x").decode("ascii"),
        })
        document_id = resp.json()

        resp = await client.post("/api/operations/create-document-note", headers=TENANT,
                                 json={"documentId": document_id, "content": "Checked"})
        assert resp.status_code == 201
        note_id = resp.json()

        resp = await client.put("/api/operations/update-document-note", headers=TENANT,
                                json={"noteId": note_id, "content": "Re-checked"})
        assert resp.status_code == 204

        resp = await client.get(f"/api/operations/documents/{document_id}/notes", headers=TENANT,
                                params={"sortBy": "CREATED_BY", "pageSize": 10})
        page = resp.json()
        assert page["total"] == 1
        assert page["pageSize"] == 10
        assert page["items"][0]["content"] == "Re-checked"
        assert page["items"][0]["updatedBy"] == "system"

        resp = await client.delete(
            f"/api/operations/documents/{document_id}/notes/{note_id}", headers=TENANT,
        )
        assert resp.status_code == 204
        resp = await client.get(
            f"/api/operations/documents/{document_id}/notes/{note_id}", headers=TENANT,
        )
        assert resp.status_code == 404


class TestWorkflowEndpoints:

    @pytest.mark.anyio
    async def test_definition_versions(self, client: AsyncClient) -> None:
        await _workflow_definition(client)

        resp = await client.get(
            "/api/operations/workflow-definition-categories/onboarding/workflow-definitions/kyc",
        )
        assert resp.json()["version"] == 2

        resp = await client.get("/api/operations/workflow-definitions/kyc/versions/1")
        assert resp.json()["name"] == "KYC v1"

        resp = await client.delete("/api/operations/workflow-definitions/kyc/versions/2")
        assert resp.status_code == 204
        resp = await client.get("/api/operations/workflow-definitions/kyc/versions/2")
        assert resp.status_code == 404

    @pytest.mark.anyio
    async def test_workflow_lifecycle(self, client: AsyncClient) -> None:
        await _workflow_definition(client)
        resp = await client.post("/api/operations/create-workflow", headers=TENANT,
                                 json={"definitionId": "kyc", "data": "{}"})
        assert resp.status_code == 201
        workflow_id = resp.json()

        resp = await client.put("/api/operations/update-workflow", headers=TENANT,
                                json={"id": workflow_id, "status": "COMPLETED"})
        assert resp.status_code == 204

        resp = await client.get(f"/api/operations/workflows/{workflow_id}", headers=TENANT)
        body = resp.json()
        assert body["definitionVersion"] == 2
        assert body["status"] == "COMPLETED"
        assert body["finalizedBy"] == "system"

        resp = await client.get("/api/operations/workflow-summaries", headers=TENANT,
                                params={"status": "COMPLETED"})
        assert resp.json()["total"] == 1

        resp = await client.post("/api/operations/create-workflow-note", headers=TENANT,
                                 json={"workflowId": workflow_id, "content": "Done"})
        assert resp.status_code == 201
        resp = await client.get(f"/api/operations/workflows/{workflow_id}/notes", headers=TENANT)
        assert resp.json()["total"] == 1

        resp = await client.delete(f"/api/operations/workflows/{workflow_id}", headers=TENANT)
        assert resp.status_code == 204

    @pytest.mark.anyio
    async def test_invalid_status(self, client: AsyncClient) -> None:
        resp = await client.get("/api/operations/workflow-summaries", headers=TENANT,
                                params={"status": "PAUSED"})
        assert resp.status_code == 400


class TestInteractionEndpoints:

    @pytest.mark.anyio
    async def test_source_tenant_must_match_header(self, client: AsyncClient) -> None:
        resp = await client.post("/api/operations/interaction-sources", headers=OTHER_TENANT, json={
            "id": "support", "tenantId": TENANT["Tenant-ID"], "type": "MAILBOX", "name": "Support",
        })
        assert resp.status_code == 400
        assert resp.json()["parameter"] == "tenantId"

    @pytest.mark.anyio
    async def test_interaction_lifecycle(self, client: AsyncClient) -> None:
        resp = await client.post("/api/operations/interaction-sources", headers=TENANT, json={
            "id": "support", "tenantId": TENANT["Tenant-ID"], "type": "MAILBOX", "name": "Support",
        })
        assert resp.status_code == 204

        resp = await client.post("/api/operations/interactions", headers=TENANT, json={
            "sourceId": "support", "sourceReference": "<msg-1@example.com>", "type": "EMAIL",
            "direction": "INBOUND", "priority": "HIGH", "sender": "customer@example.com",
            "subject": "Help", "occurred": "2026-03-01T09:30:00Z",
        })
        assert resp.status_code == 201
        interaction_id = resp.json()

        resp = await client.post("/api/operations/assign-interaction", headers=TENANT,
                                 json={"interactionId": interaction_id, "username": "agent"})
        assert resp.status_code == 204

        party_id = "00000000-0000-0000-0000-0000000000ff"
        resp = await client.post("/api/operations/link-party-to-interaction", headers=TENANT,
                                 json={"interactionId": interaction_id, "partyId": party_id})
        assert resp.status_code == 204

        resp = await client.get(f"/api/operations/interactions/{interaction_id}", headers=TENANT)
        body = resp.json()
        assert body["status"] == "ASSIGNED"
        assert body["assignedTo"] == "agent"
        assert body["partyId"] == party_id

        resp = await client.post("/api/operations/delink-party-from-interaction", headers=TENANT,
                                 json={"interactionId": interaction_id})
        assert resp.status_code == 204

        resp = await client.get(
            "/api/operations/interaction-sources/support/interaction-summaries", headers=TENANT,
        )
        page = resp.json()
        assert page["total"] == 1
        assert page["items"][0]["partyId"] is None

        resp = await client.post("/api/operations/create-interaction-note", headers=TENANT,
                                 json={"interactionId": interaction_id, "content": "Called"})
        assert resp.status_code == 201

        resp = await client.delete(f"/api/operations/interactions/{interaction_id}", headers=TENANT)
        assert resp.status_code == 204

        resp = await client.delete("/api/operations/interaction-sources/support", headers=TENANT)
        assert resp.status_code == 204

    @pytest.mark.anyio
    async def test_duplicate_interaction_is_conflict(self, client: AsyncClient) -> None:
        await client.post("/api/operations/interaction-sources", headers=TENANT, json={
            "id": "web", "tenantId": TENANT["Tenant-ID"], "type": "WEB", "name": "Web",
        })
        payload = {
            "sourceId": "web", "sourceReference": "form-1", "type": "WEB_FORM",
            "direction": "INBOUND", "sender": "visitor",
        }
        first = await client.post("/api/operations/interactions", headers=TENANT, json=payload)
        second = await client.post("/api/operations/interactions", headers=TENANT, json=payload)
        assert first.status_code == 201
        assert second.status_code == 409
