from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func
from datetime import datetime

from ..core.database import Base, new_object_id

class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(String(64), primary_key=True, default=new_object_id)

    name = Column(String(255), nullable=False)
    # Named after an AppointmentOption, not enforced
    specialty = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    image = Column(String(1024), nullable=True)
    slots = Column(JSON, nullable=True)

    extra = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, server_default=func.now(), index=True)

    def to_document(self) -> dict:
        document = dict(self.extra or {})
        document.update({"_id": self.id, "name": self.name, "specialty": self.specialty})
        for key, value in (("email", self.email), ("image", self.image), ("slots", self.slots)):
            if value is not None:
                document[key] = value
        return document

    def __repr__(self):
        return f"<Doctor(id={self.id}, name='{self.name}', specialty='{self.specialty}')>"
