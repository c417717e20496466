# Request bodies carry only writable fields, each defaulting to its zero value.
# Record shapes are strict: a NULL in any column makes the row unreadable.
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1


def _format_timestamp(value):
    # DATETIME columns come back from the driver as datetime objects
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return value


Timestamp = Annotated[str, BeforeValidator(_format_timestamp)]
RowRef = Annotated[int, Field(ge=0, le=INT64_MAX)]  # unsigned reference to another table
SignedInt = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class Record(BaseModel):
    id: int

    model_config = ConfigDict(from_attributes=True)


class UserIn(BaseModel):
    name: str = ""
    email: str = ""


class UserOut(Record):
    name: str
    email: str
    created_at: Timestamp
    updated_at: Timestamp


class AppointmentIn(BaseModel):
    patient_id: RowRef = 0
    user_id: SignedInt = 0
    appointment_date: str = ""
    notes: str = ""
    prescription: str = ""
    status: str = ""


class AppointmentOut(Record):
    patient_id: int
    user_id: int
    appointment_date: str
    notes: str
    prescription: str
    status: str
    created_at: Timestamp
    updated_at: Timestamp


class DrugIn(BaseModel):
    name: str = ""
    type: str = ""
    description: str = ""
    composition: str = ""
    packaging: str = ""
    dosage: str = ""
    contraindications: str = ""
    side_effects: str = ""
    price: float = 0.0
    currency: str = ""
    expiration_date: str = ""


class DrugOut(Record):
    name: str
    type: str
    description: str
    composition: str
    packaging: str
    dosage: str
    contraindications: str
    side_effects: str
    price: float
    currency: str
    expiration_date: str
    created_at: Timestamp
    updated_at: Timestamp


class PatientIn(BaseModel):
    nik: str = ""
    name: str = ""
    gender: str = ""
    date_of_birth: str = ""
    address: str = ""
    password: str = ""


class PatientOut(Record):
    nik: str
    name: str
    gender: str
    date_of_birth: str
    address: str
    password: str
    created_at: Timestamp
    updated_at: Timestamp


class DoctorIn(BaseModel):
    user_id: SignedInt = 0
    specialization: str = ""
    profile_photo_path: str = ""


class DoctorOut(Record):
    user_id: int
    specialization: str
    profile_photo_path: str
    created_at: Timestamp
    updated_at: Timestamp


class TransactionIn(BaseModel):
    patient_id: RowRef = 0
    drug_id: RowRef = 0
    quantity: float = 0.0
    total_price: float = 0.0
    currency: str = ""
    prescription: str = ""


class TransactionOut(Record):
    patient_id: int
    drug_id: int
    quantity: float
    total_price: float
    currency: str
    prescription: str
    created_at: Timestamp
    updated_at: Timestamp


class Credentials(BaseModel):
    nik: str = ""
    password: str = ""
