# gamedev_tasks/crud/user.py
from sqlalchemy.orm import Session
from typing import Optional, List
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.user import User
from gamedev_tasks.core.settings import settings

logger = logging.getLogger("GameDevTasks.Users")

def get_all_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.name.asc()).all()

def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)

def add_user(db: Session, data: dict) -> User:
    """
    Создаёт или перезаписывает пользователя по id (put-семантика).
    """
    user = get_user(db, data["id"])
    with atomic(db, "Database error while saving user."):
        if user is None:
            user = User(id=data["id"])
            db.add(user)
        user.name = data["name"]
        user.email = data.get("email")
        user.avatar = data.get("avatar")
    logger.info(f"Saved user '{user.id}'")
    return user

def init_demo_user(db: Session) -> User:
    """
    Создаёт пользователя по умолчанию, если его ещё нет.
    """
    user = get_user(db, settings.DEFAULT_USER_ID)
    if user:
        return user
    logger.info(f"Demo user '{settings.DEFAULT_USER_ID}' not found. Creating...")
    return add_user(db, {
        "id": settings.DEFAULT_USER_ID,
        "name": "Current User",
        "email": "user@example.com",
        "avatar": "",
    })
