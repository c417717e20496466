import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .models import Person
from .schemas import PersonIn

log = logging.getLogger("person-registry.crud")


def insert_person(db: Session, person: PersonIn) -> None:
    """Insert one person row. Errors, duplicate ids included, propagate to the caller."""
    db.add(Person(id=person.id, full_name=person.full_name, age=person.age))
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    log.info("Inserted person %s", person.id)
