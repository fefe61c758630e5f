from sqlalchemy.orm import Session
from typing import List
import logging

from ..models.doctor import Doctor
from ..schemas.common import DeleteResult, InsertResult
from ..schemas.doctor import DoctorCreate

logger = logging.getLogger(__name__)

class DoctorService:
    def __init__(self, db: Session):
        self.db = db

    def list_doctors(self) -> List[dict]:
        doctors = self.db.query(Doctor).order_by(Doctor.created_at, Doctor.id).all()
        return [doctor.to_document() for doctor in doctors]

    def create_doctor(self, doctor_data: DoctorCreate) -> InsertResult:
        doctor = Doctor(
            name=doctor_data.name,
            specialty=doctor_data.specialty,
            email=doctor_data.email,
            image=doctor_data.image,
            slots=doctor_data.slots,
            extra=doctor_data.extras or None
        )

        self.db.add(doctor)
        self.db.commit()
        self.db.refresh(doctor)

        logger.info(f"Added doctor {doctor!r}")
        return InsertResult(insertedId=doctor.id)

    def delete_doctor(self, doctor_id: str) -> DeleteResult:
        deleted = self.db.query(Doctor).filter(Doctor.id == doctor_id).delete()
        self.db.commit()

        logger.info(f"Deleted {deleted} doctor record(s) with id {doctor_id}")
        return DeleteResult(deletedCount=deleted)
