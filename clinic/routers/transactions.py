from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..crud import delete_row, get_row, insert_row, list_rows, parse_id, update_row
from ..database import get_db
from ..models import Transaction
from ..schemas import TransactionIn, TransactionOut

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionOut])
def list_transactions(db: Session = Depends(get_db)):
    return list_rows(db, Transaction, TransactionOut, "transactions")


@router.get("/{transaction_id}", response_model=TransactionOut)
def get_transaction(transaction_id: str, db: Session = Depends(get_db)):
    return get_row(db, Transaction, TransactionOut, parse_id(transaction_id, "transaction"), "transaction")


@router.post("", response_model=TransactionOut, status_code=status.HTTP_201_CREATED)
def create_transaction(payload: TransactionIn, db: Session = Depends(get_db)):
    # total_price is taken as sent, not recomputed from quantity x drug price
    return insert_row(db, Transaction, TransactionOut, payload.model_dump(), "transaction")


@router.put("/{transaction_id}")
def update_transaction(transaction_id: str, payload: TransactionIn, db: Session = Depends(get_db)):
    row_id = parse_id(transaction_id, "transaction")
    return update_row(db, Transaction, row_id, payload.model_dump(), "transaction")


@router.delete("/{transaction_id}")
def delete_transaction(transaction_id: str, db: Session = Depends(get_db)):
    return delete_row(db, Transaction, parse_id(transaction_id, "transaction"), "transaction")
