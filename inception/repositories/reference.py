"""Reference data repositories.

Every reference table has the same shape, so one generic repository serves
them all, parametrised by the ORM row class. Rows come back ordered by
(locale_id, sort_index, name).
"""

from typing import Generic, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.tables import (
    ConsentTypeRow,
    ContactMechanismPurposeRow,
    ContactMechanismRoleRow,
    ContactMechanismTypeRow,
    CountryRow,
    EmploymentStatusRow,
    EmploymentTypeRow,
    FieldOfStudyRow,
    GenderRow,
    IdentificationTypeRow,
    LanguageRow,
    MaritalStatusRow,
    MarriageTypeRow,
    MeasurementSystemRow,
    MeasurementUnitRow,
    MeasurementUnitTypeRow,
    NextOfKinTypeRow,
    OccupationRow,
    PartyExternalReferenceTypeRow,
    PhysicalAddressPurposeRow,
    PhysicalAddressRoleRow,
    PhysicalAddressTypeRow,
    PreferenceTypeRow,
    QualificationTypeRow,
    RaceRow,
    ReferenceColumns,
    RegionRow,
    ResidencePermitTypeRow,
    ResidencyStatusRow,
    ResidentialTypeRow,
    SourceOfFundsTypeRow,
    SourceOfWealthTypeRow,
    TaxNumberTypeRow,
    TimeToContactRow,
    TitleRow,
)
from inception.models.reference import ReferenceKey

R = TypeVar("R", bound=ReferenceColumns)


class ReferenceRepository(Generic[R]):
    def __init__(self, session: AsyncSession, row_type: type[R]) -> None:
        self._session = session
        self._row_type = row_type
        pk_names = [col.name for col in inspect(row_type).primary_key]
        parents = [name for name in pk_names if name not in ("code", "locale_id")]
        self._parent_column = parents[0] if parents else None

    @property
    def row_type(self) -> type[R]:
        return self._row_type

    def _ordered(self):
        row = self._row_type
        return select(row).order_by(row.locale_id, row.sort_index, row.name)

    async def find_all(self) -> list[R]:
        result = await self._session.execute(self._ordered())
        return list(result.scalars().all())

    async def find_all_by_locale(self, locale_id: str) -> list[R]:
        stmt = self._ordered().where(
            func.lower(self._row_type.locale_id) == locale_id.lower()
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_key(self, key: ReferenceKey) -> R | None:
        identity = {"code": key.code, "locale_id": key.locale_id}
        if self._parent_column is not None:
            if key.parent_code is None:
                return None
            identity[self._parent_column] = key.parent_code
        return await self._session.get(self._row_type, identity)

    async def save(self, row: R) -> R:
        """Insert or replace a row by primary key."""
        merged = await self._session.merge(row)
        await self._session.flush()
        return merged


# ---------------------------------------------------------------------------
# Row classes per reference kind
# ---------------------------------------------------------------------------

REFERENCE_ROWS: dict[str, type[ReferenceColumns]] = {
    "countries": CountryRow,
    "languages": LanguageRow,
    "regions": RegionRow,
    "measurementSystems": MeasurementSystemRow,
    "measurementUnitTypes": MeasurementUnitTypeRow,
    "measurementUnits": MeasurementUnitRow,
}

PARTY_REFERENCE_ROWS: dict[str, type[ReferenceColumns]] = {
    "genders": GenderRow,
    "maritalStatuses": MaritalStatusRow,
    "marriageTypes": MarriageTypeRow,
    "employmentStatuses": EmploymentStatusRow,
    "employmentTypes": EmploymentTypeRow,
    "titles": TitleRow,
    "races": RaceRow,
    "nextOfKinTypes": NextOfKinTypeRow,
    "occupations": OccupationRow,
    "identificationTypes": IdentificationTypeRow,
    "taxNumberTypes": TaxNumberTypeRow,
    "residencyStatuses": ResidencyStatusRow,
    "residencePermitTypes": ResidencePermitTypeRow,
    "residentialTypes": ResidentialTypeRow,
    "sourceOfFundsTypes": SourceOfFundsTypeRow,
    "sourceOfWealthTypes": SourceOfWealthTypeRow,
    "contactMechanismTypes": ContactMechanismTypeRow,
    "contactMechanismPurposes": ContactMechanismPurposeRow,
    "contactMechanismRoles": ContactMechanismRoleRow,
    "physicalAddressTypes": PhysicalAddressTypeRow,
    "physicalAddressPurposes": PhysicalAddressPurposeRow,
    "physicalAddressRoles": PhysicalAddressRoleRow,
    "qualificationTypes": QualificationTypeRow,
    "fieldsOfStudy": FieldOfStudyRow,
    "timesToContact": TimeToContactRow,
    "consentTypes": ConsentTypeRow,
    "preferenceTypes": PreferenceTypeRow,
    "externalReferenceTypes": PartyExternalReferenceTypeRow,
}
