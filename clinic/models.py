from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Float, Numeric
from .database import Base


def _timestamp() -> str:
    # stored as an opaque string, same shape as a MySQL DATETIME
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


class TimestampMixin:
    created_at = Column(String(32), default=_timestamp)
    updated_at = Column(String(32), default=_timestamp, onupdate=_timestamp)


class User(TimestampMixin, Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255))
    email = Column(String(255))


class PatientAppointment(TimestampMixin, Base):
    __tablename__ = "patient_appointments"
    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer)  # patients.id, never validated
    user_id = Column(Integer)  # users.id, never validated
    appointment_date = Column(String(32))
    notes = Column(Text)
    prescription = Column(Text)
    status = Column(String(50))


class Drug(TimestampMixin, Base):
    __tablename__ = "drugs"
    id = Column(Integer, primary_key=True, index=True)
    name = Column("drug_name", String(255))
    type = Column("drug_type", String(100))
    description = Column(Text)
    composition = Column(Text)
    packaging = Column(String(255))
    dosage = Column(String(255))
    contraindications = Column(Text)
    side_effects = Column(Text)
    price = Column(Numeric(12, 2, asdecimal=False))
    currency = Column(String(10))
    expiration_date = Column(String(32))


class Patient(TimestampMixin, Base):
    __tablename__ = "patients"
    id = Column(Integer, primary_key=True, index=True)
    nik = Column(String(32), unique=True, index=True)
    name = Column(String(255))
    gender = Column(String(20))
    date_of_birth = Column(String(32))
    address = Column(Text)
    password = Column(String(255))  # passlib hash


class Doctor(TimestampMixin, Base):
    __tablename__ = "doctors"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer)  # users.id, never validated
    specialization = Column(String(255))
    profile_photo_path = Column(String(255))


class Transaction(TimestampMixin, Base):
    __tablename__ = "transactions"
    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer)
    drug_id = Column(Integer)
    quantity = Column(Float)
    total_price = Column(Float)
    currency = Column(String(10))
    prescription = Column(Text)
