from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...api.deps import get_admin_user
from ...schemas.common import DeleteResult, InsertResult
from ...schemas.doctor import DoctorCreate, DoctorResponse
from ...services.doctor_service import DoctorService

# Doctor roster management is admin only
router = APIRouter(
    prefix="/doctors",
    tags=["Doctors"],
    dependencies=[Depends(get_admin_user)]
)

@router.get("", response_model=List[DoctorResponse], response_model_exclude_none=True)
def list_doctors(db: Session = Depends(get_db)):
    return DoctorService(db).list_doctors()

@router.post("", response_model=InsertResult)
def add_doctor(doctor_data: DoctorCreate, db: Session = Depends(get_db)):
    return DoctorService(db).create_doctor(doctor_data)

@router.delete("/{doctor_id}", response_model=DeleteResult)
def delete_doctor(doctor_id: str, db: Session = Depends(get_db)):
    return DoctorService(db).delete_doctor(doctor_id)
