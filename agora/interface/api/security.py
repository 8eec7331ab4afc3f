"""Bearer credential extraction for routes."""

from agora.domain.error import AuthenticationError
from agora.domain.service import JWTService
from agora.domain.value import UserId

BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the token out of an ``Authorization: Bearer <token>`` header.

    Returns None when the header is absent or uses another scheme.
    """
    if not authorization:
        return None
    if not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


def require_user_id(jwt_service: JWTService, authorization: str | None) -> UserId:
    """Resolve the authenticated user for routes that need one.

    Args:
        jwt_service: JWT service for token verification
        authorization: Raw Authorization header

    Returns:
        ID of the authenticated user

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise AuthenticationError("Authentication required")
    return UserId(jwt_service.verify_token(token).user_id)


def optional_user_id(
    jwt_service: JWTService, authorization: str | None
) -> UserId | None:
    """Resolve the viewer on routes where authentication is optional."""
    return jwt_service.get_user_id_from_token(extract_bearer_token(authorization))
