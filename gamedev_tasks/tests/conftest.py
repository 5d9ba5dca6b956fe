import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
import os
from typing import Generator

# Тестовая БД задаётся до импорта настроек и приложения
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

# Все модели регистрируются в Base.metadata через gamedev_tasks/models/__init__.py
import gamedev_tasks.models
from gamedev_tasks.models.base import Base
from gamedev_tasks.main import app
from gamedev_tasks.dependencies import get_db
from gamedev_tasks.crud.project import create_project
from gamedev_tasks.crud.task import create_task
from gamedev_tasks.models.project import Project as ProjectModel
from gamedev_tasks.models.task import Task as TaskModel


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """
    Свежая in-memory SQLite на каждый тест.

    Мутации сами коммитят и откатывают транзакции (database.atomic),
    поэтому изоляция достигается отдельным движком, а не внешней транзакцией.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    TestClient, у которого get_db отдаёт сессию тестовой БД.
    """
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    del app.dependency_overrides[get_db]


@pytest.fixture(scope="function")
def project(db: Session) -> ProjectModel:
    return create_project(db, {"name": "Space Shooter", "phase": "production"})


@pytest.fixture(scope="function")
def task(db: Session, project: ProjectModel) -> TaskModel:
    return create_task(db, {"title": "Implement player controller", "project_id": project.id, "category": "programming"})
