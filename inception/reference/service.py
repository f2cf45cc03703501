"""Reference data service.

Countries, languages, regions, measurement systems, measurement unit types,
measurement units and time zones. Every list is cached through the injected
ReferenceCache; call invalidate() after changing the underlying tables.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from inception.core.cache import ALL, ReferenceCache, cache_key
from inception.core.errors import InvalidArgumentError
from inception.db.tables import (
    CountryRow,
    LanguageRow,
    MeasurementSystemRow,
    MeasurementUnitRow,
    MeasurementUnitTypeRow,
    RegionRow,
)
from inception.models.common import has_text
from inception.models.reference import (
    Country,
    Language,
    MeasurementSystem,
    MeasurementUnit,
    MeasurementUnitType,
    Region,
    TimeZone,
)
from inception.reference.loader import ReferenceLoader, require_locale
from inception.reference.time_zones import build_time_zones, is_known_time_zone
from inception.repositories.reference import ReferenceRepository

logger = logging.getLogger(__name__)

TIME_ZONES = "timeZones"


class ReferenceService:
    def __init__(self, session: AsyncSession, cache: ReferenceCache) -> None:
        self._cache = cache

        def loader(row_type, model, kind: str, label: str) -> ReferenceLoader:
            return ReferenceLoader(
                ReferenceRepository(session, row_type), model, cache, kind=kind, label=label,
            )

        self._countries = loader(CountryRow, Country, "countries", "country")
        self._languages = loader(LanguageRow, Language, "languages", "language")
        self._regions = loader(RegionRow, Region, "regions", "region")
        self._measurement_systems = loader(
            MeasurementSystemRow, MeasurementSystem, "measurementSystems", "measurement system",
        )
        self._measurement_unit_types = loader(
            MeasurementUnitTypeRow, MeasurementUnitType, "measurementUnitTypes",
            "measurement unit type",
        )
        self._measurement_units = loader(
            MeasurementUnitRow, MeasurementUnit, "measurementUnits", "measurement unit",
        )
        self._loaders = {
            ld.kind: ld for ld in (
                self._countries, self._languages, self._regions,
                self._measurement_systems, self._measurement_unit_types,
                self._measurement_units,
            )
        }

    # --- Lists ---

    async def get_countries(self, locale_id: str | None = None) -> list[Country]:
        if locale_id is None:
            return await self._countries.all()
        return await self._countries.for_locale(locale_id)

    async def get_languages(self, locale_id: str | None = None) -> list[Language]:
        if locale_id is None:
            return await self._languages.all()
        return await self._languages.for_locale(locale_id)

    async def get_measurement_systems(self, locale_id: str | None = None) -> list[MeasurementSystem]:
        if locale_id is None:
            return await self._measurement_systems.all()
        return await self._measurement_systems.for_locale(locale_id)

    async def get_measurement_unit_types(
        self, locale_id: str | None = None,
    ) -> list[MeasurementUnitType]:
        if locale_id is None:
            return await self._measurement_unit_types.all()
        return await self._measurement_unit_types.for_locale(locale_id)

    async def get_measurement_units(self, locale_id: str | None = None) -> list[MeasurementUnit]:
        if locale_id is None:
            return await self._measurement_units.all()
        return await self._measurement_units.for_locale(locale_id)

    async def get_regions(self, locale_id: str | None = None,
                          country: str | None = None) -> list[Region]:
        """Regions, optionally for one locale and one country (case-insensitive)."""
        if locale_id is None and not has_text(country):
            return await self._regions.all()
        if locale_id is not None:
            locale_id = require_locale(locale_id)
        if not has_text(country):
            return await self._regions.for_locale(locale_id)

        return await self._regions.derived(
            self._regions.key(country, locale_id or ALL),
            lambda region: (
                region.country.lower() == country.lower()
                and (locale_id is None or region.matches_locale(locale_id))
            ),
        )

    async def get_time_zones(self, locale_id: str = "en-US") -> list[TimeZone]:
        locale_id = require_locale(locale_id)
        key = cache_key(TIME_ZONES, locale_id)
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)
        time_zones = build_time_zones(locale_id)
        self._cache.put(key, time_zones)
        return list(time_zones)

    # --- Validation ---

    async def is_valid_country(self, code: str | None) -> bool:
        return await self._countries.contains_code(code)

    async def is_valid_language(self, code: str | None) -> bool:
        return await self._languages.contains_code(code)

    async def is_valid_measurement_system(self, code: str | None) -> bool:
        return await self._measurement_systems.contains_code(code)

    async def is_valid_measurement_unit_type(self, code: str | None) -> bool:
        return await self._measurement_unit_types.contains_code(code)

    async def is_valid_measurement_unit(self, code: str | None) -> bool:
        return await self._measurement_units.contains_code(code)

    async def is_valid_region(self, code: str | None) -> bool:
        return await self._regions.contains_code(code)

    async def is_valid_time_zone(self, code: str | None) -> bool:
        return is_known_time_zone(code)

    # --- Cache control ---

    def invalidate(self, kind: str | None = None) -> None:
        """Drop the cached lists for one kind (e.g. "countries") or all reference data."""
        if kind is None:
            for ld in self._loaders.values():
                ld.invalidate()
            self._cache.invalidate_prefix(TIME_ZONES)
            return
        if kind == TIME_ZONES:
            self._cache.invalidate_prefix(TIME_ZONES)
            return
        if kind not in self._loaders:
            raise InvalidArgumentError("kind", f"Unknown reference data kind ({kind})")
        logger.info("Invalidating cached %s reference data", kind)
        self._loaders[kind].invalidate()
