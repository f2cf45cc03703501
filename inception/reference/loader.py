"""Cached loading of one kind of reference data.

The unfiltered list is read from the repository once and cached under
"<kind>.ALL". Locale-filtered lists are derived from it and cached under
"<kind>.<localeId>". Locale matching is case-insensitive.
"""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from inception.core.cache import ALL, ReferenceCache, cache_key
from inception.core.errors import InvalidArgumentError, unavailable_on_error
from inception.models.common import has_text
from inception.models.reference import ReferenceData
from inception.repositories.reference import ReferenceRepository

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ReferenceData)


def require_locale(locale_id: str | None) -> str:
    if not has_text(locale_id):
        raise InvalidArgumentError("localeId")
    return locale_id


def _sort_key(item: ReferenceData) -> tuple[str, int, str]:
    return (item.locale_id, item.sort_index, item.name)


class ReferenceLoader(Generic[M]):
    def __init__(self, repository: ReferenceRepository, model: type[M],
                 cache: ReferenceCache, *, kind: str, label: str) -> None:
        self._repository = repository
        self._model = model
        self._cache = cache
        self.kind = kind
        self.label = label

    def key(self, *parts: str) -> str:
        return cache_key(self.kind, *parts)

    async def all(self) -> list[M]:
        key = self.key(ALL)
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        with unavailable_on_error(logger, f"Failed to retrieve the {self.label} reference data"):
            rows = await self._repository.find_all()
            items = sorted((self._model.model_validate(row) for row in rows), key=_sort_key)

        self._cache.put(key, items)
        return list(items)

    async def for_locale(self, locale_id: str | None) -> list[M]:
        locale_id = require_locale(locale_id)
        return await self.derived(
            self.key(locale_id),
            lambda item: item.matches_locale(locale_id),
        )

    async def derived(self, key: str, predicate: Callable[[M], bool]) -> list[M]:
        """Filter the full list with predicate and cache the result under key."""
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)
        items = [item for item in await self.all() if predicate(item)]
        self._cache.put(key, items)
        return list(items)

    async def contains_code(self, code: str | None,
                            predicate: Callable[[M], bool] | None = None) -> bool:
        """Linear scan of the full list for code (and predicate, when given)."""
        if not has_text(code):
            return False
        return any(
            item.code == code and (predicate is None or predicate(item))
            for item in await self.all()
        )

    def invalidate(self) -> None:
        self._cache.invalidate_prefix(self.kind)
