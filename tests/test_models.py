"""Tests for the Pydantic domain models."""

import base64
from datetime import date
from uuid import UUID

import pytest
from pydantic import ValidationError

from inception.models.common import Page, Paging, SortDirection, has_text, new_uuid7
from inception.models.document import CreateDocumentRequest, FileType
from inception.models.operations_reference import ExternalReferenceType
from inception.models.reference import (
    Country,
    MarriageType,
    PartyExternalReferenceType,
    Region,
    ReferenceKey,
)
from inception.models.workflow import WorkflowStatus

TENANT = UUID("00000000-0000-0000-0000-00000000000a")
OTHER_TENANT = UUID("00000000-0000-0000-0000-00000000000b")


class TestCommon:

    def test_has_text(self) -> None:
        assert has_text("a")
        assert not has_text(None)
        assert not has_text("   ")

    def test_new_uuid7_is_version_7(self) -> None:
        assert new_uuid7().version == 7

    def test_paging_defaults(self) -> None:
        paging = Paging.normalise(None, None, max_page_size=100)
        assert (paging.page_index, paging.page_size, paging.offset) == (0, 50, 0)

    def test_paging_clamps(self) -> None:
        paging = Paging.normalise(-3, 500, max_page_size=100)
        assert paging.page_index == 0
        assert paging.page_size == 100

        paging = Paging.normalise(2, 0, max_page_size=100)
        assert paging.page_size == 1
        assert paging.offset == 2

    def test_page_serialises_camel_case(self) -> None:
        page = Page[int](items=[1, 2], total=7, sort_direction=SortDirection.DESCENDING,
                         page_index=1, page_size=2)
        data = page.model_dump(mode="json", by_alias=True)
        assert data == {
            "items": [1, 2], "total": 7, "sortDirection": "DESCENDING",
            "pageIndex": 1, "pageSize": 2,
        }


class TestReferenceModels:

    def test_key_without_parent(self) -> None:
        country = Country(code="ZA", locale_id="en-US", name="South Africa",
                          short_name="South Africa", sovereign_state="ZA",
                          nationality="South African")
        assert country.key == ReferenceKey("ZA", "en-US", None)

    def test_key_with_parent(self) -> None:
        region = Region(code="GP", locale_id="en-US", name="Gauteng", country="ZA")
        assert region.key == ReferenceKey("GP", "en-US", "ZA")

    def test_locale_match_is_case_insensitive(self) -> None:
        region = Region(code="GP", locale_id="en-US", name="Gauteng", country="ZA")
        assert region.matches_locale("EN-us")
        assert not region.matches_locale("en-GB")

    def test_shared_row_visible_to_every_tenant(self) -> None:
        marriage_type = MarriageType(code="civil", locale_id="en-US", name="Civil",
                                     marital_status="married")
        assert marriage_type.visible_to(TENANT)
        assert marriage_type.visible_to(None)

    def test_tenant_row_visible_only_to_owner(self) -> None:
        marriage_type = MarriageType(code="custom", locale_id="en-US", name="Custom",
                                     marital_status="married", tenant_id=TENANT)
        assert marriage_type.visible_to(TENANT)
        assert not marriage_type.visible_to(OTHER_TENANT)

    def test_party_external_reference_type_pattern(self) -> None:
        ref_type = PartyExternalReferenceType(
            code="za_id_number", locale_id="en-US", name="ID Number",
            party_types=["person"], pattern=r"\d{13}",
        )
        assert ref_type.valid_for_party_type("person")
        assert not ref_type.valid_for_party_type("organization")
        assert not ref_type.valid_for_party_type(None)
        assert ref_type.accepts("8001015009087")
        assert not ref_type.accepts("80010150090871")
        assert not ref_type.accepts(None)

    def test_party_external_reference_type_without_pattern_accepts_anything(self) -> None:
        ref_type = PartyExternalReferenceType(
            code="passport_number", locale_id="en-US", name="Passport", party_types=["person"],
        )
        assert ref_type.accepts("A1234567")


class TestExternalReferenceType:

    def test_rejects_invalid_pattern(self) -> None:
        with pytest.raises(ValidationError):
            ExternalReferenceType(code="x", name="X", object_type="DOCUMENT",
                                  value_pattern="[unclosed")

    def test_accepts_full_match_only(self) -> None:
        ref_type = ExternalReferenceType(code="acc", name="Account", object_type="DOCUMENT",
                                         value_pattern=r"[0-9]{6}")
        assert ref_type.accepts("123456")
        assert not ref_type.accepts("1234567")

    def test_accepts_camel_case_payload(self) -> None:
        ref_type = ExternalReferenceType.model_validate(
            {"code": "acc", "name": "Account", "objectType": "WORKFLOW",
             "tenantId": str(TENANT), "valuePattern": None},
        )
        assert ref_type.tenant_id == TENANT
        assert ref_type.visible_to(TENANT)
        assert not ref_type.visible_to(OTHER_TENANT)


class TestDocumentRequests:

    def test_data_is_base64_decoded(self) -> None:
        request = CreateDocumentRequest.model_validate({
            "definitionId": "passport", "name": "scan.pdf", "fileType": "PDF",
            "data": base64.b64encode(b"%PDF-1.7").decode("ascii"),
        })
        assert request.data == b"%PDF-1.7"
        assert request.file_type == FileType.PDF

    def test_data_serialises_as_base64(self) -> None:
        request = CreateDocumentRequest(definition_id="passport", name="scan.pdf",
                                        file_type=FileType.PDF, data=b"hello")
        assert request.model_dump(mode="json", by_alias=True)["data"] == "aGVsbG8="

    def test_invalid_base64_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CreateDocumentRequest.model_validate({
                "definitionId": "passport", "name": "scan.pdf", "fileType": "PDF",
                "data": "not base64!",
            })

    def test_expiry_before_issue_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CreateDocumentRequest(definition_id="passport", name="scan.pdf",
                                  file_type=FileType.PDF, data=b"x",
                                  issue_date=date(2026, 1, 1), expiry_date=date(2025, 1, 1))


class TestWorkflowStatus:

    @pytest.mark.parametrize("status", ["COMPLETED", "CANCELLED", "FAILED"])
    def test_final_statuses(self, status: str) -> None:
        assert WorkflowStatus(status).is_final

    @pytest.mark.parametrize("status", ["IN_PROGRESS", "SUSPENDED"])
    def test_open_statuses(self, status: str) -> None:
        assert not WorkflowStatus(status).is_final
