from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..crud import delete_row, get_row, insert_row, list_rows, parse_id, update_row
from ..database import get_db
from ..models import PatientAppointment
from ..schemas import AppointmentIn, AppointmentOut

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.get("", response_model=List[AppointmentOut])
def list_appointments(db: Session = Depends(get_db)):
    return list_rows(db, PatientAppointment, AppointmentOut, "appointments")


@router.get("/{appointment_id}", response_model=AppointmentOut)
def get_appointment(appointment_id: str, db: Session = Depends(get_db)):
    return get_row(db, PatientAppointment, AppointmentOut, parse_id(appointment_id, "appointment"), "appointment")


@router.post("", response_model=AppointmentOut, status_code=status.HTTP_201_CREATED)
def create_appointment(payload: AppointmentIn, db: Session = Depends(get_db)):
    """patient_id and user_id are stored as given; neither is checked against its table."""
    return insert_row(db, PatientAppointment, AppointmentOut, payload.model_dump(), "appointment")


@router.put("/{appointment_id}")
def update_appointment(appointment_id: str, payload: AppointmentIn, db: Session = Depends(get_db)):
    row_id = parse_id(appointment_id, "appointment")
    return update_row(db, PatientAppointment, row_id, payload.model_dump(), "appointment")


@router.delete("/{appointment_id}")
def delete_appointment(appointment_id: str, db: Session = Depends(get_db)):
    return delete_row(db, PatientAppointment, parse_id(appointment_id, "appointment"), "appointment")
