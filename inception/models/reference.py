"""Reference data models.

Every reference row is keyed by (code, locale_id) plus, for child types, the
code of its parent (region → country, marriage type → marital status,
employment type → employment status). ReferenceKey is that tuple as a value.
"""

import re
from functools import cached_property
from typing import ClassVar, NamedTuple
from uuid import UUID

from pydantic import Field

from inception.models.common import Code, InceptionBase, LocaleId


class ReferenceKey(NamedTuple):
    """Composite key of a reference row."""

    code: str
    locale_id: str
    parent_code: str | None = None


class ReferenceData(InceptionBase):
    """Fields shared by every locale-qualified reference row."""

    parent_field: ClassVar[str | None] = None

    code: Code
    locale_id: LocaleId
    sort_index: int = Field(default=0, ge=0)
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=200)

    @property
    def key(self) -> ReferenceKey:
        parent = getattr(self, self.parent_field) if self.parent_field else None
        return ReferenceKey(self.code, self.locale_id, parent)

    def matches_locale(self, locale_id: str) -> bool:
        return self.locale_id.lower() == locale_id.lower()


class TenantReferenceData(ReferenceData):
    """Reference row that is either shared (tenant_id is None) or tenant-owned."""

    tenant_id: UUID | None = None

    def visible_to(self, tenant_id: UUID | None) -> bool:
        return self.tenant_id is None or self.tenant_id == tenant_id


# ---------------------------------------------------------------------------
# General reference data
# ---------------------------------------------------------------------------


class Country(ReferenceData):
    short_name: str = Field(..., max_length=50)
    sovereign_state: str = Field(..., max_length=30)
    nationality: str = Field(..., max_length=50)


class Language(ReferenceData):
    short_name: str = Field(..., max_length=50)


class Region(ReferenceData):
    parent_field: ClassVar[str | None] = "country"

    country: Code


class MeasurementSystem(ReferenceData):
    pass


class MeasurementUnitType(ReferenceData):
    pass


class MeasurementUnit(ReferenceData):
    system: Code
    type: Code


class TimeZone(ReferenceData):
    """IANA time zone. Derived at runtime, never stored."""

    code: str = Field(..., min_length=1, max_length=64)


# ---------------------------------------------------------------------------
# Party reference data
# ---------------------------------------------------------------------------


class Gender(TenantReferenceData):
    pass


class MaritalStatus(TenantReferenceData):
    pass


class MarriageType(TenantReferenceData):
    parent_field: ClassVar[str | None] = "marital_status"

    marital_status: Code


class EmploymentStatus(TenantReferenceData):
    pass


class EmploymentType(TenantReferenceData):
    parent_field: ClassVar[str | None] = "employment_status"

    employment_status: Code


class Title(TenantReferenceData):
    abbreviation: str = Field(..., max_length=20)


class Race(TenantReferenceData):
    pass


class NextOfKinType(TenantReferenceData):
    pass


class Occupation(TenantReferenceData):
    pass


class IdentificationType(TenantReferenceData):
    pass


class TaxNumberType(TenantReferenceData):
    pass


class ResidencyStatus(TenantReferenceData):
    pass


class ResidencePermitType(TenantReferenceData):
    pass


class ResidentialType(TenantReferenceData):
    pass


class SourceOfFundsType(TenantReferenceData):
    pass


class SourceOfWealthType(TenantReferenceData):
    pass


class ContactMechanismType(TenantReferenceData):
    pass


class ContactMechanismPurpose(TenantReferenceData):
    pass


class ContactMechanismRole(TenantReferenceData):
    pass


class PhysicalAddressType(TenantReferenceData):
    pass


class PhysicalAddressPurpose(TenantReferenceData):
    pass


class PhysicalAddressRole(TenantReferenceData):
    pass


class QualificationType(TenantReferenceData):
    pass


class FieldOfStudy(TenantReferenceData):
    pass


class TimeToContact(TenantReferenceData):
    pass


class ConsentType(TenantReferenceData):
    pass


class PreferenceType(TenantReferenceData):
    pass


class PartyExternalReferenceType(TenantReferenceData):
    """External identifier type (e.g. tax number) that may be attached to a party."""

    party_types: list[str] = Field(default_factory=list)
    pattern: str | None = Field(default=None, max_length=1000)

    def valid_for_party_type(self, party_type: str | None) -> bool:
        return party_type is not None and party_type in self.party_types

    @cached_property
    def compiled_pattern(self) -> re.Pattern[str] | None:
        return re.compile(self.pattern) if self.pattern else None

    def accepts(self, value: str | None) -> bool:
        if self.compiled_pattern is None:
            return True
        return value is not None and self.compiled_pattern.fullmatch(value) is not None
