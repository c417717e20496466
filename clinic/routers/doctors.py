from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..crud import delete_row, get_row, insert_row, list_rows, parse_id, update_row
from ..database import get_db
from ..models import Doctor
from ..schemas import DoctorIn, DoctorOut

router = APIRouter(prefix="/doctors", tags=["doctors"])


@router.get("", response_model=List[DoctorOut])
def list_doctors(db: Session = Depends(get_db)):
    return list_rows(db, Doctor, DoctorOut, "doctors")


@router.get("/{doctor_id}", response_model=DoctorOut)
def get_doctor(doctor_id: str, db: Session = Depends(get_db)):
    return get_row(db, Doctor, DoctorOut, parse_id(doctor_id, "doctor"), "doctor")


@router.post("", response_model=DoctorOut, status_code=status.HTTP_201_CREATED)
def create_doctor(payload: DoctorIn, db: Session = Depends(get_db)):
    """Register a doctor profile for an existing user account (user_id is not checked)."""
    return insert_row(db, Doctor, DoctorOut, payload.model_dump(), "doctor")


@router.put("/{doctor_id}")
def update_doctor(doctor_id: str, payload: DoctorIn, db: Session = Depends(get_db)):
    return update_row(db, Doctor, parse_id(doctor_id, "doctor"), payload.model_dump(), "doctor")


@router.delete("/{doctor_id}")
def delete_doctor(doctor_id: str, db: Session = Depends(get_db)):
    return delete_row(db, Doctor, parse_id(doctor_id, "doctor"), "doctor")
