# gamedev_tasks/database.py

import logging
from contextlib import contextmanager
from typing import Generator, Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, scoped_session

from gamedev_tasks.core.settings import settings
from gamedev_tasks.core.exceptions import StorageError

logger = logging.getLogger("GameDevTasks.Database")

# SQLite: сессия может использоваться из потока threadpool'а FastAPI
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

# Фабрика сессий (scoped_session для потокобезопасности)
SessionLocal = scoped_session(
    sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )
)

def get_db() -> Generator[Session, None, None]:
    """
    Dependency для FastAPI: отдаёт сессию и гарантирует её закрытие.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def atomic(db: Session, message: str = "Database error") -> Iterator[Session]:
    """
    Граница транзакции для мутаций.

    Основная запись, строка activity log и строка sync-очереди пишутся
    внутри одного блока и коммитятся вместе; при любой ошибке всё
    откатывается. Ошибки SQLAlchemy превращаются в StorageError.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{message}: {e}")
        raise StorageError(message) from e
    except Exception:
        db.rollback()
        raise
