# clinic/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..crud import delete_row, get_row, insert_row, list_rows, parse_id, update_row
from ..database import get_db
from ..models import User
from ..schemas import UserIn, UserOut

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
    return list_rows(db, User, UserOut, "users")


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, db: Session = Depends(get_db)):
    return get_row(db, User, UserOut, parse_id(user_id, "user"), "user")


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserIn, db: Session = Depends(get_db)):
    return insert_row(db, User, UserOut, payload.model_dump(), "user")


@router.put("/{user_id}")
def update_user(user_id: str, payload: UserIn, db: Session = Depends(get_db)):
    return update_row(db, User, parse_id(user_id, "user"), payload.model_dump(), "user")


@router.delete("/{user_id}")
def delete_user(user_id: str, db: Session = Depends(get_db)):
    return delete_row(db, User, parse_id(user_id, "user"), "user")
