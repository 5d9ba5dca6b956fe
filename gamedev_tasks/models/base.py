# gamedev_tasks/models/base.py
"""
Базовый класс для всех ORM-моделей проекта.

Использовать как Base при описании моделей:
    from gamedev_tasks.models.base import Base

Все временные метки храним как naive UTC (SQLite не хранит tzinfo).
"""
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()

def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)
