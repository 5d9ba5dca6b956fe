# gamedev_tasks/api/user.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from gamedev_tasks.schemas.user import UserCreate, UserRead
from gamedev_tasks.crud.user import get_all_users, get_user, add_user
from gamedev_tasks.dependencies import get_db, get_current_user_id

router = APIRouter(prefix="/users", tags=["Users"])

@router.get("/", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db)):
    return get_all_users(db)

@router.get("/me", response_model=UserRead)
def read_current_user(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Пользователь из заголовка X-User-Id (или пользователь по умолчанию).
    """
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User '{user_id}' not found")
    return user

@router.get("/{user_id}", response_model=UserRead)
def read_user(user_id: str, db: Session = Depends(get_db)):
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user

@router.put("/", response_model=UserRead)
def put_user(data: UserCreate, db: Session = Depends(get_db)):
    """
    Создать или перезаписать пользователя по id.
    """
    return add_user(db, data.model_dump())
