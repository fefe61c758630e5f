from sqlalchemy.orm import Session
from typing import List
import logging

from ..models.booking import Booking
from ..schemas.booking import BookingCreate
from ..schemas.common import InsertResult, Rejected

logger = logging.getLogger(__name__)

class BookingService:
    def __init__(self, db: Session):
        self.db = db

    def has_conflict(self, candidate: BookingCreate) -> bool:
        """Check whether the patient already booked this treatment on that date.

        The requested slot is not considered: two patients may hold the same
        slot, and one patient may not book the same treatment twice a day.
        """
        existing = self.db.query(Booking).filter(
            Booking.appointment_date == candidate.appointment_date,
            Booking.email == candidate.email,
            Booking.treatment == candidate.treatment
        ).first()

        return existing is not None

    def create_booking(self, candidate: BookingCreate):
        """Insert a booking unless it conflicts with an existing one."""
        # Check and insert are separate round trips; concurrent duplicates can both pass
        if self.has_conflict(candidate):
            logger.info(
                f"Rejected duplicate booking for {candidate.email} "
                f"({candidate.treatment} on {candidate.appointment_date})"
            )
            return Rejected(
                message=f"You already have a booking on {candidate.appointment_date}"
            )

        booking = Booking(
            email=candidate.email,
            appointment_date=candidate.appointment_date,
            treatment=candidate.treatment,
            slot=candidate.slot,
            patient=candidate.patient,
            phone=candidate.phone,
            price=candidate.price,
            extra=candidate.extras or None
        )

        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)

        logger.info(f"Created booking {booking!r}")
        return InsertResult(insertedId=booking.id)

    def list_bookings(self, email: str) -> List[dict]:
        """List all bookings made with ``email``."""
        bookings = self.db.query(Booking).filter(
            Booking.email == email
        ).order_by(Booking.created_at, Booking.id).all()
        return [booking.to_document() for booking in bookings]
