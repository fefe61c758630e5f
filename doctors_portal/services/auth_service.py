from sqlalchemy.orm import Session
import logging

from ..core.security import (
    AuthorizationError, TokenPayload, UnknownUserError, UserRole,
    create_access_token
)
from ..models.user import User

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def issue_access_token(self, email: str) -> str:
        """Issue an access token for a registered email."""
        user = self.db.query(User).filter(User.email == email).first()

        if not user:
            logger.warning(f"Refused token for unknown email {email}")
            raise UnknownUserError(email)

        return create_access_token(email)

    def require_role(self, identity: TokenPayload, role: UserRole) -> User:
        """Check that the verified identity holds ``role``.

        Only meaningful for an identity taken from a verified token.
        """
        user = self.db.query(User).filter(User.email == identity.email).first()

        if not user or user.role != role.value:
            logger.warning(f"{identity.email} denied: {role.value} role required")
            raise AuthorizationError()

        return user
