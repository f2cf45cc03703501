"""Authenticated principal and the function codes used to authorise requests."""

from dataclasses import dataclass, field
from uuid import UUID

ADMINISTRATOR_ROLE = "Administrator"

# --- Function codes ---

OPERATIONS_ADMINISTRATION = "Operations.OperationsAdministration"
INDEXING = "Operations.Indexing"

DOCUMENT_ADMINISTRATION = "Operations.DocumentAdministration"
DOCUMENT_NOTE_ADMINISTRATION = "Operations.DocumentNoteAdministration"

WORKFLOW_ADMINISTRATION = "Operations.WorkflowAdministration"
WORKFLOW_NOTE_ADMINISTRATION = "Operations.WorkflowNoteAdministration"

INTERACTION_ADMINISTRATION = "Operations.InteractionAdministration"
INTERACTION_NOTE_ADMINISTRATION = "Operations.InteractionNoteAdministration"
INTERACTION_PARTY_LINK_ADMINISTRATION = "Operations.InteractionPartyLinkAdministration"


@dataclass(frozen=True)
class Principal:
    name: str
    roles: frozenset[str] = field(default_factory=frozenset)
    functions: frozenset[str] = field(default_factory=frozenset)
    tenant_ids: frozenset[UUID] = field(default_factory=frozenset)

    @property
    def is_administrator(self) -> bool:
        return ADMINISTRATOR_ROLE in self.roles

    def has_any_function(self, functions: tuple[str, ...] | list[str]) -> bool:
        return any(code in self.functions for code in functions)

    def has_access_to_tenant(self, tenant_id: UUID) -> bool:
        return tenant_id in self.tenant_ids


SYSTEM_PRINCIPAL = Principal(name="system", roles=frozenset({ADMINISTRATOR_ROLE}))


@dataclass(frozen=True)
class TenantContext:
    """Tenant a request operates on, and who is making it."""

    tenant_id: UUID
    principal: Principal

    @property
    def username(self) -> str:
        return self.principal.name
