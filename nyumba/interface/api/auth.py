"""Caller resolution for API routes."""

from nyumba.domain.service import JWTService
from nyumba.domain.value import Caller
from nyumba.interface.error import unauthorized


def resolve_caller(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> Caller:
    """Build the caller from the auth cookie or a bearer header.

    The cookie wins when both are present.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        authorization: Raw ``Authorization`` header

    Returns:
        The authenticated caller

    Raises:
        HTTPException: 401 if no valid token was supplied
    """
    token = auth_token
    if not token and authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer":
            token = credentials.strip()

    caller = jwt_service.get_caller_from_token(token)
    if caller is None:
        raise unauthorized()
    return caller
