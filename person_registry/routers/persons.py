import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..crud import insert_person
from ..database import get_db
from ..models import Person
from ..schemas import PersonIn, PersonOut

log = logging.getLogger("person-registry.persons")

router = APIRouter(prefix="/persons", tags=["persons"])


@router.get("", response_model=List[PersonOut])
def list_persons(db: Session = Depends(get_db)):
    """All persons, ordered by id (plain string comparison)."""
    try:
        rows = db.execute(select(Person)).scalars().all()
        persons = [PersonOut.model_validate(p) for p in rows]
    except (SQLAlchemyError, ValidationError) as e:
        log.error("Error querying persons: %s", e)
        raise HTTPException(status_code=500, detail="Failed to get persons")
    return sorted(persons, key=lambda p: p.id)


@router.get("/{person_id}", response_model=PersonOut)
def get_person(person_id: str, db: Session = Depends(get_db)):
    try:
        person = db.get(Person, person_id)
        if person is None:
            raise HTTPException(status_code=404, detail="Person not found")
        return PersonOut.model_validate(person)
    except (SQLAlchemyError, ValidationError) as e:
        log.error("Error getting person %s: %s", person_id, e)
        raise HTTPException(status_code=500, detail="Failed to get person")


@router.post("", response_model=PersonOut, status_code=status.HTTP_201_CREATED)
def create_person(payload: PersonIn, db: Session = Depends(get_db)):
    try:
        insert_person(db, payload)
    except SQLAlchemyError as e:
        # a duplicate id lands here too; there is no separate 409
        log.error("Error inserting person %s: %s", payload.id, e)
        raise HTTPException(status_code=500, detail="Failed to insert person")
    return PersonOut(**payload.model_dump())


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: str, db: Session = Depends(get_db)):
    try:
        db.execute(delete(Person).where(Person.id == person_id))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("Error deleting person %s: %s", person_id, e)
        raise HTTPException(status_code=500, detail="Failed to delete person")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
