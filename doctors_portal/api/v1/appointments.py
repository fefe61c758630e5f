from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...schemas.appointment import AppointmentOptionResponse, AppointmentSpecialty
from ...services.appointment_service import AppointmentService

router = APIRouter(tags=["Appointments"])

@router.get(
    "/appointmentOptions",
    response_model=List[AppointmentOptionResponse],
    response_model_exclude_none=True
)
def list_appointment_options(
    date: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List treatments with the slots still open on ``date``."""
    return AppointmentService(db).list_available_options(date)

@router.get("/appointmentSpecialty", response_model=List[AppointmentSpecialty])
def list_appointment_specialties(db: Session = Depends(get_db)):
    """List treatment names."""
    return AppointmentService(db).list_specialties()
