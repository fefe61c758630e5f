from sqlalchemy.orm import Session
from typing import List
import logging

from ..core.security import UserRole
from ..models.user import User
from ..schemas.common import InsertResult, Rejected, UpdateResult
from ..schemas.user import UserCreate

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str):
        return self.db.query(User).filter(User.email == email).first()

    def create_user(self, user_data: UserCreate):
        """Store a user record; an email is registered at most once."""
        if self.get_by_email(user_data.email):
            return Rejected(message="User already exists")

        user = User(
            email=user_data.email,
            name=user_data.name,
            extra=user_data.extras or None
        )

        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Created user {user!r}")
        return InsertResult(insertedId=user.id)

    def list_users(self) -> List[dict]:
        users = self.db.query(User).order_by(User.created_at, User.id).all()
        return [user.to_document() for user in users]

    def is_admin(self, email: str) -> bool:
        user = self.get_by_email(email)
        return user is not None and user.role == UserRole.ADMIN.value

    def promote_to_admin(self, user_id: str) -> UpdateResult:
        """Set the admin role on a user, creating the record if it is missing."""
        user = self.db.query(User).filter(User.id == user_id).first()

        if user is None:
            user = User(id=user_id, role=UserRole.ADMIN.value)
            self.db.add(user)
            self.db.commit()
            logger.info(f"Upserted admin user {user_id}")
            return UpdateResult(upsertedId=user_id, upsertedCount=1)

        modified = 0
        if user.role != UserRole.ADMIN.value:
            user.role = UserRole.ADMIN.value
            self.db.commit()
            modified = 1

        logger.info(f"Promoted user {user_id} to admin")
        return UpdateResult(matchedCount=1, modifiedCount=modified)
