"""
Authorization gates for mutating routes.

Bearer tokens are issued elsewhere; this module only verifies them. The token
subject (``sub``) is the id of a document in the ``users`` collection, and the
user's ``admin`` flag decides access to admin-only routes.
"""

import logging

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies import get_user_repository
from app.config import settings
from app.exceptions import ForbiddenError, UnauthorizedError
from domain.schemas import AuthenticatedUser
from repositories import UserRepository

logger = logging.getLogger("dishes.api.security")

bearer = HTTPBearer(auto_error=False)

ADMIN_REQUIRED = "You are not authorized to perform this operation!"


def decode_token(token: str) -> dict:
    """Verify the token signature and expiry and return its claims.

    Raises:
        UnauthorizedError: If the token is expired, malformed or badly signed
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        logger.info("Bearer token has expired")
        raise UnauthorizedError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid bearer token: {e}")
        raise UnauthorizedError("Invalid token") from e


def verify_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer),
    users: UserRepository = Depends(get_user_repository),
) -> AuthenticatedUser:
    """Dependency producing the authenticated identity, or failing with 401."""
    if credentials is None:
        raise UnauthorizedError("Not authenticated")
    claims = decode_token(credentials.credentials)
    user = users.get_by_id(claims["sub"])
    if user is None:
        logger.warning(f"token_for_unknown_user sub={claims['sub']}")
        raise UnauthorizedError("User no longer exists")
    return AuthenticatedUser(
        id=str(user["_id"]),
        username=user.get("username"),
        admin=bool(user.get("admin", False)),
    )


def verify_admin(user: AuthenticatedUser = Depends(verify_user)) -> AuthenticatedUser:
    """Dependency confirming the authenticated user is an admin, or failing with 403."""
    if not user.admin:
        logger.warning(f"admin_required user={user.id}")
        raise ForbiddenError(ADMIN_REQUIRED)
    return user
