# gamedev_tasks/dependencies.py

from typing import Optional
from fastapi import Header

from gamedev_tasks.core.settings import settings
from gamedev_tasks.database import get_db

__all__ = ["get_db", "get_current_user_id"]

def get_current_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """
    Кто выполняет действие: заголовок X-User-Id, иначе пользователь по умолчанию.
    Идёт в user_id журнала действий.
    """
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return settings.DEFAULT_USER_ID
