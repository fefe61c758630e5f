from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional
import logging

from ..core.database import get_db
from ..core.security import (
    security, verify_token, AuthenticationError, AuthorizationError,
    TokenError, TokenPayload, UserRole
)
from ..models.user import User
from ..services.auth_service import AuthService

logger = logging.getLogger(__name__)

async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenPayload:
    """Extract and verify the bearer token from the Authorization header.

    A missing or empty header is a 401; a header that is not a usable bearer token,
    or a token that fails verification, is a 403.
    """
    if not request.headers.get("authorization"):
        raise AuthenticationError()

    if credentials is None:
        raise AuthorizationError()

    try:
        return verify_token(credentials.credentials)
    except TokenError as exc:
        logger.warning(f"Rejected bearer token: {exc}")
        raise AuthorizationError()

# Role-based access control dependencies
def require_role(role: UserRole):
    """Create a dependency that requires the caller to hold ``role``."""
    def role_checker(
        identity: TokenPayload = Depends(get_current_identity),
        db: Session = Depends(get_db)
    ) -> User:
        return AuthService(db).require_role(identity, role)

    return role_checker

get_admin_user = require_role(UserRole.ADMIN)
