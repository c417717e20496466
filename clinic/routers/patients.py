from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth import get_password_hash
from ..crud import delete_row, get_row, insert_row, list_rows, parse_id, update_row
from ..database import get_db
from ..models import Patient
from ..schemas import PatientIn, PatientOut

router = APIRouter(prefix="/patients", tags=["patients"])


def _patient_values(payload: PatientIn) -> Dict[str, Any]:
    """Writable columns for a patient row; the password is stored hashed."""
    values = payload.model_dump()
    values["password"] = get_password_hash(values["password"])
    return values


@router.get("", response_model=List[PatientOut])
def list_patients(db: Session = Depends(get_db)):
    return list_rows(db, Patient, PatientOut, "patients")


@router.get("/{patient_id}", response_model=PatientOut)
def get_patient(patient_id: str, db: Session = Depends(get_db)):
    return get_row(db, Patient, PatientOut, parse_id(patient_id, "patient"), "patient")


@router.post("", response_model=PatientOut, status_code=status.HTTP_201_CREATED)
def create_patient(payload: PatientIn, db: Session = Depends(get_db)):
    return insert_row(db, Patient, PatientOut, _patient_values(payload), "patient")


@router.put("/{patient_id}")
def update_patient(patient_id: str, payload: PatientIn, db: Session = Depends(get_db)):
    # appointments and transactions referencing this patient are left untouched
    row_id = parse_id(patient_id, "patient")
    return update_row(db, Patient, row_id, _patient_values(payload), "patient")


@router.delete("/{patient_id}")
def delete_patient(patient_id: str, db: Session = Depends(get_db)):
    return delete_row(db, Patient, parse_id(patient_id, "patient"), "patient")
