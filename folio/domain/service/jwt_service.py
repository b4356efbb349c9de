"""JWT token domain service."""

import logfire

from folio.config import AuthSettings
from folio.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Tokens are issued by the admin panel's login flow; this API only needs
    to verify them and answer "is this caller an admin".
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_admin_token(self, user_id: str, email: str | None = None) -> str:
        """Create a JWT token carrying the admin role.

        Args:
            user_id: Admin user ID
            email: Admin email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_admin_token", user_id=user_id):
            token = create_token(
                user_id, self.auth_settings.admin_role, self.auth_settings, email=email
            )
            logfire.info("Admin JWT token created", user_id=user_id)
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
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def is_admin(self, token: str | None) -> bool:
        """Check whether a token belongs to an admin, without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            True only for a valid, unexpired token with the admin role
        """
        if not token:
            return False

        try:
            payload = self.verify_token(token)
        except JWTError:
            return False
        return payload.role == self.auth_settings.admin_role
