"""
Tests for password hashing, access tokens, and identifier parsing.
"""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from podcast_analytics.configs.auth import AuthSettings
from podcast_analytics.core.exceptions import AuthenticationError, InvalidIdentifierError
from podcast_analytics.core.identifiers import parse_identifier
from podcast_analytics.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(secret="test-secret", expire_days=1)


class TestPasswords:
    def test_hash_and_verify(self) -> None:
        hashed = hash_password("hunter22")

        assert hashed != "hunter22"
        assert verify_password("hunter22", hashed)
        assert not verify_password("wrong-pass", hashed)

    def test_malformed_hash_does_not_verify(self) -> None:
        assert not verify_password("hunter22", "not-a-bcrypt-hash")


class TestAccessTokens:
    def test_round_trip_returns_user_id(self, auth_settings: AuthSettings) -> None:
        user_id = uuid.uuid4()
        token = create_access_token(user_id, auth_settings)

        assert decode_access_token(token, auth_settings) == str(user_id)

    def test_tampered_secret_rejected(self, auth_settings: AuthSettings) -> None:
        token = create_access_token(uuid.uuid4(), auth_settings)
        other = AuthSettings(secret="another-secret")

        with pytest.raises(AuthenticationError, match="Not authorized"):
            decode_access_token(token, other)

    def test_expired_token_rejected(self, auth_settings: AuthSettings) -> None:
        past = datetime.now(timezone.utc) - timedelta(days=2)
        token = jwt.encode(
            {"id": str(uuid.uuid4()), "iat": past, "exp": past + timedelta(hours=1)},
            auth_settings.secret,
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError) as exc_info:
            decode_access_token(token, auth_settings)
        assert exc_info.value.details["reason"] == "ExpiredSignatureError"


class TestParseIdentifier:
    def test_parses_uuid(self) -> None:
        value = uuid.uuid4()
        assert parse_identifier(str(value)) == value

    @pytest.mark.parametrize("raw", [None, "", "undefined"])
    def test_missing_value(self, raw) -> None:
        with pytest.raises(InvalidIdentifierError, match="Podcast ID is required"):
            parse_identifier(raw, "podcast")

    def test_malformed_value(self) -> None:
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_identifier("not-an-id", "podcast")
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid podcast ID format: not-an-id"
