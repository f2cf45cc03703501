"""FastAPI party reference data endpoints.

GET /api/party/reference/{kind}  for genders, marital-statuses, marriage-types,
employment-statuses, employment-types, titles, races, next-of-kin-types,
occupations, external-reference-types and the plain code lists
(identification-types, tax-number-types, contact-mechanism-purposes,
physical-address-roles, fields-of-study, times-to-contact, ...).

Each takes localeId (default DEFAULT_LOCALE_ID) and the Tenant-ID header, and
returns the shared rows plus the tenant's own rows for that locale.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from inception.api.dependencies import get_party_reference_service
from inception.api.reference import resolve_locale
from inception.models.reference import (
    ConsentType,
    ContactMechanismPurpose,
    ContactMechanismRole,
    ContactMechanismType,
    EmploymentStatus,
    EmploymentType,
    FieldOfStudy,
    Gender,
    IdentificationType,
    MaritalStatus,
    MarriageType,
    NextOfKinType,
    Occupation,
    PartyExternalReferenceType,
    PhysicalAddressPurpose,
    PhysicalAddressRole,
    PhysicalAddressType,
    PreferenceType,
    QualificationType,
    Race,
    ResidencePermitType,
    ResidencyStatus,
    ResidentialType,
    SourceOfFundsType,
    SourceOfWealthType,
    TaxNumberType,
    TimeToContact,
    Title,
)
from inception.party.reference_service import PartyReferenceService
from inception.security.guard import get_tenant_id

router = APIRouter(prefix="/api/party/reference", tags=["party-reference"])


@router.get("/genders", response_model=list[Gender])
async def get_genders(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[Gender]:
    return await service.get_genders(locale_id, tenant_id)


@router.get("/marital-statuses", response_model=list[MaritalStatus])
async def get_marital_statuses(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[MaritalStatus]:
    return await service.get_marital_statuses(locale_id, tenant_id)


@router.get("/marriage-types", response_model=list[MarriageType])
async def get_marriage_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[MarriageType]:
    return await service.get_marriage_types(locale_id, tenant_id)


@router.get("/employment-statuses", response_model=list[EmploymentStatus])
async def get_employment_statuses(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[EmploymentStatus]:
    return await service.get_employment_statuses(locale_id, tenant_id)


@router.get("/employment-types", response_model=list[EmploymentType])
async def get_employment_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[EmploymentType]:
    return await service.get_employment_types(locale_id, tenant_id)


@router.get("/titles", response_model=list[Title])
async def get_titles(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[Title]:
    return await service.get_titles(locale_id, tenant_id)


@router.get("/races", response_model=list[Race])
async def get_races(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[Race]:
    return await service.get_races(locale_id, tenant_id)


@router.get("/next-of-kin-types", response_model=list[NextOfKinType])
async def get_next_of_kin_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[NextOfKinType]:
    return await service.get_next_of_kin_types(locale_id, tenant_id)


@router.get("/occupations", response_model=list[Occupation])
async def get_occupations(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[Occupation]:
    return await service.get_occupations(locale_id, tenant_id)


@router.get("/external-reference-types", response_model=list[PartyExternalReferenceType])
async def get_external_reference_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[PartyExternalReferenceType]:
    return await service.get_external_reference_types(locale_id, tenant_id)


@router.get("/identification-types", response_model=list[IdentificationType])
async def get_identification_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[IdentificationType]:
    return await service.get_identification_types(locale_id, tenant_id)


@router.get("/tax-number-types", response_model=list[TaxNumberType])
async def get_tax_number_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[TaxNumberType]:
    return await service.get_tax_number_types(locale_id, tenant_id)


@router.get("/residency-statuses", response_model=list[ResidencyStatus])
async def get_residency_statuses(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[ResidencyStatus]:
    return await service.get_residency_statuses(locale_id, tenant_id)


@router.get("/residence-permit-types", response_model=list[ResidencePermitType])
async def get_residence_permit_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[ResidencePermitType]:
    return await service.get_residence_permit_types(locale_id, tenant_id)


@router.get("/residential-types", response_model=list[ResidentialType])
async def get_residential_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[ResidentialType]:
    return await service.get_residential_types(locale_id, tenant_id)


@router.get("/source-of-funds-types", response_model=list[SourceOfFundsType])
async def get_source_of_funds_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[SourceOfFundsType]:
    return await service.get_source_of_funds_types(locale_id, tenant_id)


@router.get("/source-of-wealth-types", response_model=list[SourceOfWealthType])
async def get_source_of_wealth_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[SourceOfWealthType]:
    return await service.get_source_of_wealth_types(locale_id, tenant_id)


@router.get("/contact-mechanism-types", response_model=list[ContactMechanismType])
async def get_contact_mechanism_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[ContactMechanismType]:
    return await service.get_contact_mechanism_types(locale_id, tenant_id)


@router.get("/contact-mechanism-purposes", response_model=list[ContactMechanismPurpose])
async def get_contact_mechanism_purposes(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[ContactMechanismPurpose]:
    return await service.get_contact_mechanism_purposes(locale_id, tenant_id)


@router.get("/contact-mechanism-roles", response_model=list[ContactMechanismRole])
async def get_contact_mechanism_roles(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[ContactMechanismRole]:
    return await service.get_contact_mechanism_roles(locale_id, tenant_id)


@router.get("/physical-address-types", response_model=list[PhysicalAddressType])
async def get_physical_address_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[PhysicalAddressType]:
    return await service.get_physical_address_types(locale_id, tenant_id)


@router.get("/physical-address-purposes", response_model=list[PhysicalAddressPurpose])
async def get_physical_address_purposes(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[PhysicalAddressPurpose]:
    return await service.get_physical_address_purposes(locale_id, tenant_id)


@router.get("/physical-address-roles", response_model=list[PhysicalAddressRole])
async def get_physical_address_roles(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[PhysicalAddressRole]:
    return await service.get_physical_address_roles(locale_id, tenant_id)


@router.get("/qualification-types", response_model=list[QualificationType])
async def get_qualification_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[QualificationType]:
    return await service.get_qualification_types(locale_id, tenant_id)


@router.get("/fields-of-study", response_model=list[FieldOfStudy])
async def get_fields_of_study(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[FieldOfStudy]:
    return await service.get_fields_of_study(locale_id, tenant_id)


@router.get("/times-to-contact", response_model=list[TimeToContact])
async def get_times_to_contact(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[TimeToContact]:
    return await service.get_times_to_contact(locale_id, tenant_id)


@router.get("/consent-types", response_model=list[ConsentType])
async def get_consent_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[ConsentType]:
    return await service.get_consent_types(locale_id, tenant_id)


@router.get("/preference-types", response_model=list[PreferenceType])
async def get_preference_types(
    locale_id: str = Depends(resolve_locale),
    tenant_id: UUID = Depends(get_tenant_id),
    service: PartyReferenceService = Depends(get_party_reference_service),
) -> list[PreferenceType]:
    return await service.get_preference_types(locale_id, tenant_id)
