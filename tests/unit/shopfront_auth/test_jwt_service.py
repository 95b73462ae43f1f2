"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt as pyjwt
import pytest

from shopfront_auth.exceptions import InvalidTokenError
from shopfront_auth.services import JWTService


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(secret_key="test-secret-key")
        assert service.access_token_lifetime == timedelta(hours=24)

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_init_with_custom_expiry(self):
        service = JWTService(secret_key="test-secret", access_token_expire_hours=1)
        assert service.access_token_lifetime == timedelta(hours=1)


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key="test-secret-key-12345")
        self.subject_id = uuid4()
        self.email = "test@example.com"

    def test_verify_valid_access_token(self):
        token = self.service.create_access_token(
            subject_id=self.subject_id,
            email=self.email,
            role="admin",
        )

        payload = self.service.verify_token(token)

        assert payload.subject_id == self.subject_id
        assert payload.email == self.email
        assert payload.role == "admin"
        assert not payload.is_expired()

    def test_token_carries_standard_claims(self):
        token = self.service.create_access_token(
            subject_id=self.subject_id,
            email=self.email,
            role="user",
        )

        claims = pyjwt.decode(token, "test-secret-key-12345", algorithms=["HS256"])

        assert claims["sub"] == str(self.subject_id)
        assert {"iat", "exp", "role", "email"} <= set(claims)

    def test_expired_token_raises(self):
        token = self.service.create_access_token(
            subject_id=self.subject_id,
            email=self.email,
            role="user",
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_token_signed_with_other_secret_raises(self):
        other = JWTService(secret_key="another-secret")
        token = other.create_access_token(
            subject_id=self.subject_id,
            email=self.email,
            role="superuser",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_garbage_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not-a-jwt")

    def test_token_without_subject_raises(self):
        token = pyjwt.encode(
            {"email": self.email, "role": "user", "exp": 9999999999},
            "test-secret-key-12345",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)
