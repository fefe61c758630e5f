from sqlalchemy import Column, String, Float, DateTime, JSON
from sqlalchemy.sql import func
from datetime import datetime

from ..core.database import Base, new_object_id

class AppointmentOption(Base):
    __tablename__ = "appointment_options"

    id = Column(String(64), primary_key=True, default=new_object_id)

    # Treatment identifier, matched by Booking.treatment
    name = Column(String(255), nullable=False, index=True)
    slots = Column(JSON, nullable=False, default=list)
    price = Column(Float, nullable=True)

    extra = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, server_default=func.now(), index=True)

    def to_document(self) -> dict:
        document = dict(self.extra or {})
        document.update({"_id": self.id, "name": self.name, "slots": list(self.slots or [])})
        if self.price is not None:
            document["price"] = self.price
        return document

    def __repr__(self):
        return f"<AppointmentOption(id={self.id}, name='{self.name}', slots={len(self.slots or [])})>"
