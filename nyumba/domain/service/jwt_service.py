"""JWT token domain service."""

import logfire

from nyumba.config import AuthSettings
from nyumba.domain.value import Caller, Role, UserId
from nyumba.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, role: Role) -> str:
        """Create JWT token for an account.

        Args:
            user_id: Account ID
            role: Account role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role.value):
            return create_token(user_id, role, self.auth_settings)

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
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_caller_from_token(self, token: str | None) -> Caller | None:
        """Build the caller context from a JWT without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Caller if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            return None

        return Caller(id=UserId(payload.user_id), role=payload.role)
