"""Bearer token issue and verification (HS256 JWT via python-jose).

Claims: sub (username), roles, functions, tenants (tenant UUIDs), exp.
"""

import time
from typing import Any
from uuid import UUID

from jose import JWTError, jwt

from inception.config.settings import Settings
from inception.security.principal import Principal


class TokenError(Exception):
    """The bearer token is missing, malformed, expired or badly signed."""


def issue_token(settings: Settings, *, name: str, roles: list[str] | None = None,
                functions: list[str] | None = None, tenants: list[UUID] | None = None,
                expires_in: int = 3600) -> str:
    claims: dict[str, Any] = {
        "sub": name,
        "roles": roles or [],
        "functions": functions or [],
        "tenants": [str(t) for t in tenants or []],
        "exp": int(time.time()) + expires_in,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_bearer_token(token: str, settings: Settings) -> Principal:
    if not token:
        raise TokenError("missing token")
    try:
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise TokenError(str(e)) from e

    sub = str(claims.get("sub") or "").strip()
    if not sub:
        raise TokenError("missing sub")

    try:
        tenant_ids = frozenset(UUID(str(t)) for t in claims.get("tenants") or [])
    except ValueError as e:
        raise TokenError("invalid tenants claim") from e

    return Principal(
        name=sub,
        roles=frozenset(str(r) for r in claims.get("roles") or []),
        functions=frozenset(str(f) for f in claims.get("functions") or []),
        tenant_ids=tenant_ids,
    )
