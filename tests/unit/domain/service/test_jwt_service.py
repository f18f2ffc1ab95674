"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from miniblog.config import AuthSettings
from miniblog.domain.service import JWTService
from miniblog.util.jwt import JWTError

SETTINGS = AuthSettings(
    jwt_secret="test-secret-with-at-least-32-bytes!", operator_name="editor"
)


class TestOperatorToken:
    """Tests for issuing and checking operator tokens."""

    def test_issued_token_is_privileged(self):
        """A freshly issued token identifies the operator."""
        service = JWTService(auth_settings=SETTINGS)

        token = service.create_token()

        assert service.verify_token(token).sub == "editor"
        assert service.is_privileged(token)

    def test_missing_token_is_anonymous(self):
        """No cookie means an anonymous caller."""
        service = JWTService(auth_settings=SETTINGS)

        assert not service.is_privileged(None)
        assert not service.is_privileged("")

    def test_token_signed_with_another_secret_is_anonymous(self):
        """Tokens not signed with the configured secret are rejected."""
        service = JWTService(auth_settings=SETTINGS)
        other = JWTService(
            auth_settings=AuthSettings(jwt_secret="other-secret-with-at-least-32-bytes")
        )

        token = other.create_token()

        assert not service.is_privileged(token)
        with pytest.raises(JWTError, match="Invalid token"):
            service.verify_token(token)

    def test_expired_token_is_anonymous(self):
        """Expired tokens are rejected."""
        service = JWTService(auth_settings=SETTINGS)
        token = jwt.encode(
            {
                "sub": "editor",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        assert not service.is_privileged(token)
        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)
