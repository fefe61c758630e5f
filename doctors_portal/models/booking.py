from sqlalchemy import Column, String, Float, DateTime, JSON
from sqlalchemy.sql import func
from datetime import datetime

from ..core.database import Base, new_object_id

class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(64), primary_key=True, default=new_object_id)

    # Conflict check looks bookings up by (appointment_date, email, treatment)
    email = Column(String(255), nullable=False, index=True)
    appointment_date = Column(String(64), nullable=False, index=True)
    treatment = Column(String(255), nullable=False)
    slot = Column(String(64), nullable=False)

    # Patient details
    patient = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    price = Column(Float, nullable=True)

    extra = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, server_default=func.now(), index=True)

    def to_document(self) -> dict:
        document = dict(self.extra or {})
        document.update({
            "_id": self.id,
            "email": self.email,
            "appointmentDate": self.appointment_date,
            "treatment": self.treatment,
            "slot": self.slot,
        })
        for key, value in (("patient", self.patient), ("phone", self.phone), ("price", self.price)):
            if value is not None:
                document[key] = value
        return document

    def __repr__(self):
        return f"<Booking(id={self.id}, email='{self.email}', date='{self.appointment_date}', treatment='{self.treatment}', slot='{self.slot}')>"
