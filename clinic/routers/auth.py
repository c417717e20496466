import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..auth import dummy_verify, verify_password
from ..database import get_db
from ..models import Patient
from ..schemas import Credentials, PatientOut

log = logging.getLogger("clinic-api.auth")

router = APIRouter(tags=["auth"])

INVALID_CREDENTIALS = "Invalid NIK or password"


@router.post("/login", response_model=PatientOut)
def login(credentials: Credentials, db: Session = Depends(get_db)):
    """Check a patient's NIK and password and return the patient record.

    An unknown NIK and a wrong password produce the same 401 response, so
    the endpoint cannot be used to find out which NIKs are registered. No
    token or session is issued.
    """
    try:
        patient = db.execute(select(Patient).where(Patient.nik == credentials.nik)).scalars().first()
    except SQLAlchemyError as e:
        log.error("Error getting patient: %s", e)
        raise HTTPException(status_code=500, detail="Failed to get patient")

    if patient is None:
        dummy_verify()
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)
    if not verify_password(credentials.password, patient.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    try:
        return PatientOut.model_validate(patient)
    except ValidationError as e:
        log.error("Error reading patient %s: %s", patient.id, e)
        raise HTTPException(status_code=500, detail="Failed to get patient")
