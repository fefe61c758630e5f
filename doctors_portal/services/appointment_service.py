from sqlalchemy.orm import Session
from typing import List, Optional

from ..models.appointment_option import AppointmentOption
from ..models.booking import Booking
from .availability import compute_availability, project_specialties

class AppointmentService:
    def __init__(self, db: Session):
        self.db = db

    def _all_options(self) -> List[dict]:
        options = self.db.query(AppointmentOption).order_by(
            AppointmentOption.created_at, AppointmentOption.id
        ).all()
        return [option.to_document() for option in options]

    def list_available_options(self, date: Optional[str]) -> List[dict]:
        """List every option with the slots still open on ``date``."""
        options = self._all_options()

        # Exact string match on the date label, no date parsing
        booked = self.db.query(Booking).filter(
            Booking.appointment_date == date
        ).all() if date is not None else []

        return compute_availability(options, [booking.to_document() for booking in booked])

    def list_specialties(self) -> List[dict]:
        """List option names for treatment selection."""
        return project_specialties(self._all_options())
