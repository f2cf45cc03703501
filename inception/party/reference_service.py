"""Party reference data service.

Genders, marital statuses, marriage types, employment statuses, employment
types, titles, races, next-of-kin types, occupations, party external reference
types and the plain code lists such as identification types, tax number
types and the contact mechanism and physical address types, purposes and
roles. Rows with a tenant_id are only visible to that tenant; rows without
one are shared. Cache keys live under "party.<kind>".
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from inception.core.cache import ReferenceCache
from inception.core.errors import InvalidArgumentError
from inception.db.tables import (
    ConsentTypeRow,
    ContactMechanismPurposeRow,
    ContactMechanismRoleRow,
    ContactMechanismTypeRow,
    EmploymentStatusRow,
    EmploymentTypeRow,
    FieldOfStudyRow,
    GenderRow,
    IdentificationTypeRow,
    MaritalStatusRow,
    MarriageTypeRow,
    NextOfKinTypeRow,
    OccupationRow,
    PartyExternalReferenceTypeRow,
    PhysicalAddressPurposeRow,
    PhysicalAddressRoleRow,
    PhysicalAddressTypeRow,
    PreferenceTypeRow,
    QualificationTypeRow,
    RaceRow,
    ResidencePermitTypeRow,
    ResidencyStatusRow,
    ResidentialTypeRow,
    SourceOfFundsTypeRow,
    SourceOfWealthTypeRow,
    TaxNumberTypeRow,
    TimeToContactRow,
    TitleRow,
)
from inception.models.common import has_text
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
from inception.reference.loader import ReferenceLoader
from inception.repositories.reference import ReferenceRepository

logger = logging.getLogger(__name__)

NAMESPACE = "party"


class PartyReferenceService:
    def __init__(self, session: AsyncSession, cache: ReferenceCache) -> None:
        self._cache = cache
        self._loaders: dict[str, ReferenceLoader] = {}

        def loader(row_type, model, kind: str, label: str) -> ReferenceLoader:
            self._loaders[kind] = ReferenceLoader(
                ReferenceRepository(session, row_type), model, cache,
                kind=f"{NAMESPACE}.{kind}", label=label,
            )
            return self._loaders[kind]

        self._genders = loader(GenderRow, Gender, "genders", "gender")
        self._marital_statuses = loader(
            MaritalStatusRow, MaritalStatus, "maritalStatuses", "marital status",
        )
        self._marriage_types = loader(
            MarriageTypeRow, MarriageType, "marriageTypes", "marriage type",
        )
        self._employment_statuses = loader(
            EmploymentStatusRow, EmploymentStatus, "employmentStatuses", "employment status",
        )
        self._employment_types = loader(
            EmploymentTypeRow, EmploymentType, "employmentTypes", "employment type",
        )
        self._titles = loader(TitleRow, Title, "titles", "title")
        self._races = loader(RaceRow, Race, "races", "race")
        self._next_of_kin_types = loader(
            NextOfKinTypeRow, NextOfKinType, "nextOfKinTypes", "next of kin type",
        )
        self._occupations = loader(OccupationRow, Occupation, "occupations", "occupation")
        self._external_reference_types = loader(
            PartyExternalReferenceTypeRow, PartyExternalReferenceType,
            "externalReferenceTypes", "external reference type",
        )
        self._identification_types = loader(
            IdentificationTypeRow, IdentificationType,
            "identificationTypes", "identification type",
        )
        self._tax_number_types = loader(
            TaxNumberTypeRow, TaxNumberType,
            "taxNumberTypes", "tax number type",
        )
        self._residency_statuses = loader(
            ResidencyStatusRow, ResidencyStatus,
            "residencyStatuses", "residency status",
        )
        self._residence_permit_types = loader(
            ResidencePermitTypeRow, ResidencePermitType,
            "residencePermitTypes", "residence permit type",
        )
        self._residential_types = loader(
            ResidentialTypeRow, ResidentialType,
            "residentialTypes", "residential type",
        )
        self._source_of_funds_types = loader(
            SourceOfFundsTypeRow, SourceOfFundsType,
            "sourceOfFundsTypes", "source of funds type",
        )
        self._source_of_wealth_types = loader(
            SourceOfWealthTypeRow, SourceOfWealthType,
            "sourceOfWealthTypes", "source of wealth type",
        )
        self._contact_mechanism_types = loader(
            ContactMechanismTypeRow, ContactMechanismType,
            "contactMechanismTypes", "contact mechanism type",
        )
        self._contact_mechanism_purposes = loader(
            ContactMechanismPurposeRow, ContactMechanismPurpose,
            "contactMechanismPurposes", "contact mechanism purpose",
        )
        self._contact_mechanism_roles = loader(
            ContactMechanismRoleRow, ContactMechanismRole,
            "contactMechanismRoles", "contact mechanism role",
        )
        self._physical_address_types = loader(
            PhysicalAddressTypeRow, PhysicalAddressType,
            "physicalAddressTypes", "physical address type",
        )
        self._physical_address_purposes = loader(
            PhysicalAddressPurposeRow, PhysicalAddressPurpose,
            "physicalAddressPurposes", "physical address purpose",
        )
        self._physical_address_roles = loader(
            PhysicalAddressRoleRow, PhysicalAddressRole,
            "physicalAddressRoles", "physical address role",
        )
        self._qualification_types = loader(
            QualificationTypeRow, QualificationType,
            "qualificationTypes", "qualification type",
        )
        self._fields_of_study = loader(
            FieldOfStudyRow, FieldOfStudy,
            "fieldsOfStudy", "field of study",
        )
        self._times_to_contact = loader(
            TimeToContactRow, TimeToContact,
            "timesToContact", "time to contact",
        )
        self._consent_types = loader(
            ConsentTypeRow, ConsentType,
            "consentTypes", "consent type",
        )
        self._preference_types = loader(
            PreferenceTypeRow, PreferenceType,
            "preferenceTypes", "preference type",
        )

    # ------------------------------------------------------------------
    # Shared lookups
    # ------------------------------------------------------------------

    @staticmethod
    async def _get(loader: ReferenceLoader, locale_id: str | None,
                   tenant_id: UUID | None) -> list:
        items = await (loader.all() if locale_id is None else loader.for_locale(locale_id))
        if tenant_id is None:
            return items
        return [item for item in items if item.visible_to(tenant_id)]

    @staticmethod
    async def _is_valid(loader: ReferenceLoader, tenant_id: UUID | None,
                        code: str | None) -> bool:
        return await loader.contains_code(
            code, lambda item: item.visible_to(tenant_id),
        )

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    async def get_genders(self, locale_id: str | None = None,
                          tenant_id: UUID | None = None) -> list[Gender]:
        return await self._get(self._genders, locale_id, tenant_id)

    async def get_marital_statuses(self, locale_id: str | None = None,
                                   tenant_id: UUID | None = None) -> list[MaritalStatus]:
        return await self._get(self._marital_statuses, locale_id, tenant_id)

    async def get_marriage_types(self, locale_id: str | None = None,
                                 tenant_id: UUID | None = None) -> list[MarriageType]:
        return await self._get(self._marriage_types, locale_id, tenant_id)

    async def get_employment_statuses(self, locale_id: str | None = None,
                                      tenant_id: UUID | None = None) -> list[EmploymentStatus]:
        return await self._get(self._employment_statuses, locale_id, tenant_id)

    async def get_employment_types(self, locale_id: str | None = None,
                                   tenant_id: UUID | None = None) -> list[EmploymentType]:
        return await self._get(self._employment_types, locale_id, tenant_id)

    async def get_titles(self, locale_id: str | None = None,
                         tenant_id: UUID | None = None) -> list[Title]:
        return await self._get(self._titles, locale_id, tenant_id)

    async def get_races(self, locale_id: str | None = None,
                        tenant_id: UUID | None = None) -> list[Race]:
        return await self._get(self._races, locale_id, tenant_id)

    async def get_next_of_kin_types(self, locale_id: str | None = None,
                                    tenant_id: UUID | None = None) -> list[NextOfKinType]:
        return await self._get(self._next_of_kin_types, locale_id, tenant_id)

    async def get_occupations(self, locale_id: str | None = None,
                              tenant_id: UUID | None = None) -> list[Occupation]:
        return await self._get(self._occupations, locale_id, tenant_id)

    async def get_external_reference_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[PartyExternalReferenceType]:
        return await self._get(self._external_reference_types, locale_id, tenant_id)

    async def get_identification_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[IdentificationType]:
        return await self._get(self._identification_types, locale_id, tenant_id)

    async def get_tax_number_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[TaxNumberType]:
        return await self._get(self._tax_number_types, locale_id, tenant_id)

    async def get_residency_statuses(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[ResidencyStatus]:
        return await self._get(self._residency_statuses, locale_id, tenant_id)

    async def get_residence_permit_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[ResidencePermitType]:
        return await self._get(self._residence_permit_types, locale_id, tenant_id)

    async def get_residential_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[ResidentialType]:
        return await self._get(self._residential_types, locale_id, tenant_id)

    async def get_source_of_funds_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[SourceOfFundsType]:
        return await self._get(self._source_of_funds_types, locale_id, tenant_id)

    async def get_source_of_wealth_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[SourceOfWealthType]:
        return await self._get(self._source_of_wealth_types, locale_id, tenant_id)

    async def get_contact_mechanism_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[ContactMechanismType]:
        return await self._get(self._contact_mechanism_types, locale_id, tenant_id)

    async def get_contact_mechanism_purposes(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[ContactMechanismPurpose]:
        return await self._get(self._contact_mechanism_purposes, locale_id, tenant_id)

    async def get_contact_mechanism_roles(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[ContactMechanismRole]:
        return await self._get(self._contact_mechanism_roles, locale_id, tenant_id)

    async def get_physical_address_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[PhysicalAddressType]:
        return await self._get(self._physical_address_types, locale_id, tenant_id)

    async def get_physical_address_purposes(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[PhysicalAddressPurpose]:
        return await self._get(self._physical_address_purposes, locale_id, tenant_id)

    async def get_physical_address_roles(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[PhysicalAddressRole]:
        return await self._get(self._physical_address_roles, locale_id, tenant_id)

    async def get_qualification_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[QualificationType]:
        return await self._get(self._qualification_types, locale_id, tenant_id)

    async def get_fields_of_study(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[FieldOfStudy]:
        return await self._get(self._fields_of_study, locale_id, tenant_id)

    async def get_times_to_contact(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[TimeToContact]:
        return await self._get(self._times_to_contact, locale_id, tenant_id)

    async def get_consent_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[ConsentType]:
        return await self._get(self._consent_types, locale_id, tenant_id)

    async def get_preference_types(
        self, locale_id: str | None = None, tenant_id: UUID | None = None,
    ) -> list[PreferenceType]:
        return await self._get(self._preference_types, locale_id, tenant_id)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    async def is_valid_gender(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._genders, tenant_id, code)

    async def is_valid_marital_status(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._marital_statuses, tenant_id, code)

    async def is_valid_marriage_type(self, tenant_id: UUID | None,
                                     marital_status_code: str | None,
                                     marriage_type_code: str | None) -> bool:
        """Whether marriage_type_code is allowed for the marital status.

        A blank marital status, or one with no marriage types visible to the
        tenant, accepts any marriage type.
        """
        if not has_text(marital_status_code):
            return True

        candidates = [
            item for item in await self._marriage_types.all()
            if item.marital_status == marital_status_code and item.visible_to(tenant_id)
        ]
        if not candidates:
            return True
        return any(item.code == marriage_type_code for item in candidates)

    async def is_valid_employment_status(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._employment_statuses, tenant_id, code)

    async def is_valid_employment_type(self, tenant_id: UUID | None,
                                       employment_type_code: str | None,
                                       employment_status_code: str | None = None) -> bool:
        if not has_text(employment_status_code):
            return await self._is_valid(self._employment_types, tenant_id, employment_type_code)
        return await self._employment_types.contains_code(
            employment_type_code,
            lambda item: (
                item.visible_to(tenant_id)
                and item.employment_status == employment_status_code
            ),
        )

    async def is_valid_title(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._titles, tenant_id, code)

    async def is_valid_race(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._races, tenant_id, code)

    async def is_valid_next_of_kin_type(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._next_of_kin_types, tenant_id, code)

    async def is_valid_occupation(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._occupations, tenant_id, code)

    async def is_valid_identification_type(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._identification_types, tenant_id, code)

    async def is_valid_tax_number_type(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._tax_number_types, tenant_id, code)

    async def is_valid_residency_status(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._residency_statuses, tenant_id, code)

    async def is_valid_residence_permit_type(self, tenant_id: UUID | None,
                                             code: str | None) -> bool:
        return await self._is_valid(self._residence_permit_types, tenant_id, code)

    async def is_valid_residential_type(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._residential_types, tenant_id, code)

    async def is_valid_source_of_funds_type(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._source_of_funds_types, tenant_id, code)

    async def is_valid_source_of_wealth_type(self, tenant_id: UUID | None,
                                             code: str | None) -> bool:
        return await self._is_valid(self._source_of_wealth_types, tenant_id, code)

    async def is_valid_contact_mechanism_type(self, tenant_id: UUID | None,
                                              code: str | None) -> bool:
        return await self._is_valid(self._contact_mechanism_types, tenant_id, code)

    async def is_valid_contact_mechanism_purpose(self, tenant_id: UUID | None,
                                                 code: str | None) -> bool:
        return await self._is_valid(self._contact_mechanism_purposes, tenant_id, code)

    async def is_valid_contact_mechanism_role(self, tenant_id: UUID | None,
                                              code: str | None) -> bool:
        return await self._is_valid(self._contact_mechanism_roles, tenant_id, code)

    async def is_valid_physical_address_type(self, tenant_id: UUID | None,
                                             code: str | None) -> bool:
        return await self._is_valid(self._physical_address_types, tenant_id, code)

    async def is_valid_physical_address_purpose(self, tenant_id: UUID | None,
                                                code: str | None) -> bool:
        return await self._is_valid(self._physical_address_purposes, tenant_id, code)

    async def is_valid_physical_address_role(self, tenant_id: UUID | None,
                                             code: str | None) -> bool:
        return await self._is_valid(self._physical_address_roles, tenant_id, code)

    async def is_valid_qualification_type(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._qualification_types, tenant_id, code)

    async def is_valid_field_of_study(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._fields_of_study, tenant_id, code)

    async def is_valid_time_to_contact(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._times_to_contact, tenant_id, code)

    async def is_valid_consent_type(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._consent_types, tenant_id, code)

    async def is_valid_preference_type(self, tenant_id: UUID | None, code: str | None) -> bool:
        return await self._is_valid(self._preference_types, tenant_id, code)

    async def is_valid_external_reference_type(self, tenant_id: UUID | None,
                                               party_type: str | None,
                                               code: str | None) -> bool:
        return await self._external_reference_types.contains_code(
            code,
            lambda item: item.visible_to(tenant_id) and item.valid_for_party_type(party_type),
        )

    async def is_valid_external_reference(self, tenant_id: UUID | None,
                                          party_type: str | None, code: str | None,
                                          value: str | None) -> bool:
        """Whether value is a valid external reference of type code for the party type."""
        if not has_text(code):
            return False
        for item in await self._external_reference_types.all():
            if (
                item.code == code
                and item.visible_to(tenant_id)
                and item.valid_for_party_type(party_type)
            ):
                return item.accepts(value)
        return False

    # ------------------------------------------------------------------
    # Cache control
    # ------------------------------------------------------------------

    def invalidate(self, kind: str | None = None) -> None:
        """Drop the cached lists for one kind (e.g. "genders") or all party reference data."""
        if kind is None:
            self._cache.invalidate_prefix(NAMESPACE)
            return
        if kind not in self._loaders:
            raise InvalidArgumentError("kind", f"Unknown party reference data kind ({kind})")
        logger.info("Invalidating cached party %s reference data", kind)
        self._loaders[kind].invalidate()

