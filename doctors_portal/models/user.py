from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func
from datetime import datetime

from ..core.database import Base, new_object_id

RESERVED_FIELDS = ("_id", "id", "email", "name", "role")

class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=new_object_id)
    # Nullable: promoting an unknown id upserts a record with only a role
    email = Column(String(255), unique=True, index=True, nullable=True)
    name = Column(String(255), nullable=True)
    role = Column(String(32), nullable=True)

    extra = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, server_default=func.now(), index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def to_document(self) -> dict:
        # Columns own these keys, whatever the stored extras hold
        document = {
            key: value for key, value in (self.extra or {}).items()
            if key not in RESERVED_FIELDS
        }
        document["_id"] = self.id
        for key, value in (("email", self.email), ("name", self.name), ("role", self.role)):
            if value is not None:
                document[key] = value
        return document

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
