from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..crud import delete_row, get_row, insert_row, list_rows, parse_id, update_row
from ..database import get_db
from ..models import Drug
from ..schemas import DrugIn, DrugOut

router = APIRouter(prefix="/drugs", tags=["drugs"])


@router.get("", response_model=List[DrugOut])
def list_drugs(db: Session = Depends(get_db)):
    return list_rows(db, Drug, DrugOut, "drugs")


@router.get("/{drug_id}", response_model=DrugOut)
def get_drug(drug_id: str, db: Session = Depends(get_db)):
    return get_row(db, Drug, DrugOut, parse_id(drug_id, "drug"), "drug")


@router.post("", response_model=DrugOut, status_code=status.HTTP_201_CREATED)
def create_drug(payload: DrugIn, db: Session = Depends(get_db)):
    return insert_row(db, Drug, DrugOut, payload.model_dump(), "drug")


@router.put("/{drug_id}")
def update_drug(drug_id: str, payload: DrugIn, db: Session = Depends(get_db)):
    return update_row(db, Drug, parse_id(drug_id, "drug"), payload.model_dump(), "drug")


@router.delete("/{drug_id}")
def delete_drug(drug_id: str, db: Session = Depends(get_db)):
    return delete_row(db, Drug, parse_id(drug_id, "drug"), "drug")
