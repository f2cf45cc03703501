"""FastAPI reference data endpoints.

GET /api/reference/countries                 countries for localeId
GET /api/reference/languages                 languages for localeId
GET /api/reference/regions                   regions for localeId, optionally one country
GET /api/reference/time-zones                IANA time zones
GET /api/reference/measurement-systems       measurement systems for localeId
GET /api/reference/measurement-unit-types    measurement unit types for localeId
GET /api/reference/measurement-units         measurement units for localeId

Reference reads are public. localeId defaults to DEFAULT_LOCALE_ID.
"""

from fastapi import APIRouter, Depends, Query

from inception.api.dependencies import get_reference_service
from inception.config.settings import Settings, get_settings
from inception.models.reference import (
    Country,
    Language,
    MeasurementSystem,
    MeasurementUnit,
    MeasurementUnitType,
    Region,
    TimeZone,
)
from inception.reference.service import ReferenceService

router = APIRouter(prefix="/api/reference", tags=["reference"])


def resolve_locale(
    locale_id: str | None = Query(default=None, alias="localeId"),
    settings: Settings = Depends(get_settings),
) -> str:
    return settings.DEFAULT_LOCALE_ID if locale_id is None else locale_id


@router.get("/countries", response_model=list[Country])
async def get_countries(
    locale_id: str = Depends(resolve_locale),
    service: ReferenceService = Depends(get_reference_service),
) -> list[Country]:
    return await service.get_countries(locale_id)


@router.get("/languages", response_model=list[Language])
async def get_languages(
    locale_id: str = Depends(resolve_locale),
    service: ReferenceService = Depends(get_reference_service),
) -> list[Language]:
    return await service.get_languages(locale_id)


@router.get("/regions", response_model=list[Region])
async def get_regions(
    locale_id: str = Depends(resolve_locale),
    country: str | None = Query(default=None),
    service: ReferenceService = Depends(get_reference_service),
) -> list[Region]:
    return await service.get_regions(locale_id, country)


@router.get("/time-zones", response_model=list[TimeZone])
async def get_time_zones(
    locale_id: str = Depends(resolve_locale),
    service: ReferenceService = Depends(get_reference_service),
) -> list[TimeZone]:
    return await service.get_time_zones(locale_id)


@router.get("/measurement-systems", response_model=list[MeasurementSystem])
async def get_measurement_systems(
    locale_id: str = Depends(resolve_locale),
    service: ReferenceService = Depends(get_reference_service),
) -> list[MeasurementSystem]:
    return await service.get_measurement_systems(locale_id)


@router.get("/measurement-unit-types", response_model=list[MeasurementUnitType])
async def get_measurement_unit_types(
    locale_id: str = Depends(resolve_locale),
    service: ReferenceService = Depends(get_reference_service),
) -> list[MeasurementUnitType]:
    return await service.get_measurement_unit_types(locale_id)


@router.get("/measurement-units", response_model=list[MeasurementUnit])
async def get_measurement_units(
    locale_id: str = Depends(resolve_locale),
    service: ReferenceService = Depends(get_reference_service),
) -> list[MeasurementUnit]:
    return await service.get_measurement_units(locale_id)
