"""Admin gate for API routes.

Admin sessions are JWTs issued by the admin panel. They arrive either as
the ``auth_token`` cookie (browser) or as an ``Authorization: Bearer``
header (tooling).
"""

from folio.domain.error import UnauthorizedError
from folio.domain.service import JWTService


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the session token from the cookie or the Authorization header.

    The cookie wins when both are present.
    """
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return None


def require_admin(jwt_service: JWTService, token: str | None, action: str) -> None:
    """Reject non-admin callers.

    Must run before any storage access in admin-only routes.

    Raises:
        UnauthorizedError: If the token is missing, invalid or not an admin token
    """
    if not jwt_service.is_admin(token):
        raise UnauthorizedError(action)
