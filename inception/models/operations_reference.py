"""Operations reference models: external reference types and values."""

import re
from uuid import UUID

from pydantic import Field, field_validator

from inception.models.common import Code, InceptionBase, ObjectType


class ExternalReferenceType(InceptionBase):
    """Type of external identifier that may be attached to an operations object.

    tenant_id None means the type is shared by all tenants.
    """

    code: Code
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=200)
    object_type: ObjectType
    tenant_id: UUID | None = None
    value_pattern: str | None = Field(default=None, max_length=1000)

    @field_validator("value_pattern")
    @classmethod
    def _pattern_compiles(cls, v: str | None) -> str | None:
        if v:
            try:
                re.compile(v)
            except re.error as e:
                msg = f"value_pattern is not a valid regular expression: {e}"
                raise ValueError(msg) from e
        return v

    def visible_to(self, tenant_id: UUID | None) -> bool:
        return self.tenant_id is None or self.tenant_id == tenant_id

    def accepts(self, value: str) -> bool:
        if not self.value_pattern:
            return True
        return re.fullmatch(self.value_pattern, value) is not None


class ExternalReference(InceptionBase):
    """External identifier value attached to a document, workflow or interaction."""

    type: Code
    value: str = Field(..., min_length=1, max_length=100)
