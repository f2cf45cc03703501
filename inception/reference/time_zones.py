"""Time zone reference data derived from the IANA database (zoneinfo).

Only canonical region ids are listed: ids containing "/" and not in the
legacy SystemV namespace. Display-name localisation is not attempted; name
and description are the zone id itself.
"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from inception.models.common import has_text
from inception.models.reference import TimeZone


def time_zone_ids() -> list[str]:
    return sorted(
        zone_id for zone_id in available_timezones()
        if "/" in zone_id and not zone_id.startswith("SystemV")
    )


def build_time_zones(locale_id: str) -> list[TimeZone]:
    return [
        TimeZone(
            code=zone_id,
            locale_id=locale_id,
            sort_index=index,
            name=zone_id,
            description=zone_id,
        )
        for index, zone_id in enumerate(time_zone_ids(), start=1)
    ]


def is_known_time_zone(code: str | None) -> bool:
    if not has_text(code):
        return False
    try:
        ZoneInfo(code)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True
