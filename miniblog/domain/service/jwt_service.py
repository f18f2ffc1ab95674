"""JWT token domain service."""

import logfire

from miniblog.config import AuthSettings
from miniblog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for operator JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, name: str | None = None) -> str:
        """Create an operator token.

        Args:
            name: Token subject, defaults to the configured operator name

        Returns:
            JWT token string
        """
        subject = name or self.auth_settings.operator_name
        with logfire.span("jwt_service.create_token", subject=subject):
            token = create_token(self.auth_settings, subject)
            logfire.info("JWT token created", subject=subject)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", subject=payload.sub)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def is_privileged(self, token: str | None) -> bool:
        """Resolve whether a request comes from the operator.

        Missing, expired or invalid tokens mean an anonymous caller.

        Args:
            token: JWT token string (optional)

        Returns:
            True if the token is a valid operator token
        """
        if not token:
            return False

        try:
            self.verify_token(token)
        except JWTError:
            return False
        return True
