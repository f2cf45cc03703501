"""Tests for bearer token issue and verification."""

from uuid import UUID

import pytest
from jose import jwt

from inception.config.settings import Settings
from inception.security.principal import ADMINISTRATOR_ROLE, INDEXING, Principal
from inception.security.tokens import TokenError, issue_token, verify_bearer_token

TENANT = UUID("00000000-0000-0000-0000-00000000000a")


@pytest.fixture
def token_settings() -> Settings:
    return Settings(_env_file=None, JWT_SECRET="unit-test-secret")


class TestTokens:

    def test_round_trip(self, token_settings: Settings) -> None:
        token = issue_token(token_settings, name="alice", roles=[ADMINISTRATOR_ROLE],
                            functions=[INDEXING], tenants=[TENANT])
        principal = verify_bearer_token(token, token_settings)
        assert principal == Principal(
            name="alice",
            roles=frozenset({ADMINISTRATOR_ROLE}),
            functions=frozenset({INDEXING}),
            tenant_ids=frozenset({TENANT}),
        )
        assert principal.is_administrator
        assert principal.has_access_to_tenant(TENANT)

    def test_wrong_secret(self, token_settings: Settings) -> None:
        token = issue_token(token_settings, name="alice")
        other = Settings(_env_file=None, JWT_SECRET="another-secret")
        with pytest.raises(TokenError):
            verify_bearer_token(token, other)

    def test_expired(self, token_settings: Settings) -> None:
        token = issue_token(token_settings, name="alice", expires_in=-60)
        with pytest.raises(TokenError):
            verify_bearer_token(token, token_settings)

    def test_malformed(self, token_settings: Settings) -> None:
        with pytest.raises(TokenError):
            verify_bearer_token("not.a.jwt", token_settings)
        with pytest.raises(TokenError):
            verify_bearer_token("", token_settings)

    def test_missing_subject(self, token_settings: Settings) -> None:
        token = jwt.encode({"roles": []}, token_settings.JWT_SECRET,
                           algorithm=token_settings.JWT_ALGORITHM)
        with pytest.raises(TokenError, match="sub"):
            verify_bearer_token(token, token_settings)

    def test_invalid_tenant_claim(self, token_settings: Settings) -> None:
        token = jwt.encode({"sub": "alice", "tenants": ["not-a-uuid"]},
                           token_settings.JWT_SECRET, algorithm=token_settings.JWT_ALGORITHM)
        with pytest.raises(TokenError, match="tenants"):
            verify_bearer_token(token, token_settings)
