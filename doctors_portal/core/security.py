from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt
from fastapi import HTTPException, status
from fastapi.security import HTTPBearer
from pydantic import BaseModel, ValidationError
from enum import Enum

from .config import settings

# Missing credentials are reported by get_current_identity, not by HTTPBearer
security = HTTPBearer(auto_error=False)

class UserRole(str, Enum):
    ADMIN = "admin"

class TokenPayload(BaseModel):
    email: Optional[str] = None
    exp: Optional[int] = None

class AccessToken(BaseModel):
    accessToken: str

# Token errors
class TokenError(Exception):
    """Base class for token verification failures."""

class InvalidTokenError(TokenError):
    """Malformed token, bad signature or missing identity claim."""

class ExpiredTokenError(TokenError):
    """Token validity window has elapsed."""

# JWT utilities
def create_access_token(
    email: str,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create a signed access token carrying the email claim."""
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    to_encode = {
        "email": email,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )

def verify_token(token: str) -> TokenPayload:
    """Verify and decode an access token.

    Raises ExpiredTokenError once the token's validity window has elapsed and
    InvalidTokenError for anything else that fails verification.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except ExpiredSignatureError as exc:
        raise ExpiredTokenError("Token has expired") from exc
    except JWTError as exc:
        raise InvalidTokenError("Invalid token") from exc

    try:
        token_payload = TokenPayload(**payload)
    except ValidationError as exc:
        raise InvalidTokenError("Invalid token payload") from exc

    if not token_payload.email:
        raise InvalidTokenError("Token carries no email claim")

    return token_payload

# Security exceptions
class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "unauthorized access"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "forbidden access"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )

class UnknownUserError(Exception):
    """Token issuance refused because the email has no user record."""
