"""Shared types, enums, and base models used across Inception domain models."""

import base64
from datetime import datetime, timezone
from enum import StrEnum
from typing import Annotated, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel
from uuid_extensions import uuid7


def utc_now() -> datetime:
    """Return the current UTC timestamp (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def new_uuid7() -> UUID:
    """Generate a new time-sortable UUID v7."""
    return uuid7()


def has_text(value: str | None) -> bool:
    """True when value contains at least one non-whitespace character."""
    return value is not None and value.strip() != ""


# --- Reusable annotated types ---

UUIDv7 = Annotated[UUID, Field(description="Time-sortable UUID v7.")]
UTCTimestamp = Annotated[
    datetime, Field(description="UTC timezone-aware timestamp.")
]
LocaleId = Annotated[
    str, Field(min_length=2, max_length=10, description="Unicode locale identifier, e.g. en-US.")
]
Code = Annotated[str, Field(min_length=1, max_length=30)]


def _decode_base64(value: object) -> object:
    if isinstance(value, str):
        return base64.b64decode(value, validate=True)
    return value


# Binary payload: raw bytes in Python, base64 text on the wire.
Base64Data = Annotated[
    bytes,
    BeforeValidator(_decode_base64),
    PlainSerializer(lambda v: base64.b64encode(v).decode("ascii"), return_type=str, when_used="json"),
]


# --- Shared enums ---


class SortDirection(StrEnum):
    """Sort direction for paged listings."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"


class NoteSortBy(StrEnum):
    """Sortable properties for note listings."""

    CREATED = "CREATED"
    CREATED_BY = "CREATED_BY"


class ObjectType(StrEnum):
    """Operations object an external reference type applies to."""

    DOCUMENT = "DOCUMENT"
    INTERACTION = "INTERACTION"
    PARTY = "PARTY"
    WORKFLOW = "WORKFLOW"


# --- Base model ---


class InceptionBase(BaseModel):
    """Base model with common configuration for all Inception Pydantic models.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        protected_namespaces=(),
    )


class Paging(InceptionBase):
    """Normalised paging window."""

    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=50, ge=1)

    @classmethod
    def normalise(
        cls, page_index: int | None, page_size: int | None, *, max_page_size: int,
    ) -> "Paging":
        """Clamp page_index to >= 0 and page_size to [1, max_page_size] (default 50)."""
        index = 0 if page_index is None else max(0, page_index)
        size = 50 if page_size is None else page_size
        size = max(1, min(size, max_page_size))
        return cls(page_index=index, page_size=size)

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size


T = TypeVar("T")


class Page(InceptionBase, Generic[T]):
    """One page of a filtered, sorted listing plus the total match count."""

    items: list[T]
    total: int = Field(..., ge=0)
    sort_direction: SortDirection = SortDirection.ASCENDING
    page_index: int = 0
    page_size: int = 50
