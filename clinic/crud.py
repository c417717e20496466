"""Single-statement row helpers shared by the resource routers.

Every helper maps a database failure onto a static HTTP error: the
underlying exception is logged here and never reaches the client.
"""
import logging
import re
from typing import Any, Dict, List, Type

from fastapi import HTTPException, status
from pydantic import BaseModel, ValidationError
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = logging.getLogger("clinic-api.crud")

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN, _ID_MAX = -(2 ** 63), 2 ** 63 - 1


def parse_id(raw: str, label: str) -> int:
    """Parse a path id; anything but a signed 64-bit integer is a 400."""
    if _ID_PATTERN.fullmatch(raw):
        value = int(raw)
        if _ID_MIN <= value <= _ID_MAX:
            return value
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {label} ID")


def list_rows(db: Session, model, schema: Type[BaseModel], plural: str) -> List[BaseModel]:
    """All rows in storage order. Rows that do not fit ``schema`` are logged and skipped."""
    try:
        rows = db.execute(select(model)).scalars().all()
    except SQLAlchemyError as e:
        log.error("Error querying %s: %s", plural, e)
        raise HTTPException(status_code=500, detail=f"Failed to get {plural}")

    items = []
    for row in rows:
        try:
            items.append(schema.model_validate(row))
        except ValidationError as e:
            log.warning("Error reading %s row id=%s, skipped: %s", plural, getattr(row, "id", None), e)
            continue
    return items


def get_row(db: Session, model, schema: Type[BaseModel], row_id: int, label: str) -> BaseModel:
    try:
        row = db.get(model, row_id)
    except SQLAlchemyError as e:
        log.error("Error getting %s %s: %s", label, row_id, e)
        raise HTTPException(status_code=500, detail=f"Failed to get {label}")
    if row is None:
        raise HTTPException(status_code=404, detail=f"{label.capitalize()} not found")
    try:
        return schema.model_validate(row)
    except ValidationError as e:
        log.error("Error reading %s %s: %s", label, row_id, e)
        raise HTTPException(status_code=500, detail=f"Failed to get {label}")


def insert_row(db: Session, model, schema: Type[BaseModel], values: Dict[str, Any], label: str) -> BaseModel:
    """Insert one row and return it as stored, with its new id and timestamps."""
    row = model(**values)
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as e:
        db.rollback()
        log.error("Error inserting %s: %s", label, e)
        raise HTTPException(status_code=500, detail=f"Failed to insert {label}")
    return schema.model_validate(row)


def update_row(db: Session, model, row_id: int, values: Dict[str, Any], label: str) -> Dict[str, Any]:
    # no existence check: zero affected rows is still a success
    try:
        db.execute(update(model).where(model.id == row_id).values(**values))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("Error updating %s %s: %s", label, row_id, e)
        raise HTTPException(status_code=500, detail=f"Failed to update {label}")
    return {"id": row_id, **values}


def delete_row(db: Session, model, row_id: int, label: str) -> Dict[str, str]:
    try:
        db.execute(delete(model).where(model.id == row_id))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("Error deleting %s %s: %s", label, row_id, e)
        raise HTTPException(status_code=500, detail=f"Failed to delete {label}")
    return {"message": f"{label.capitalize()} with ID {row_id} deleted"}
