# gamedev_tasks/crud/project.py
from sqlalchemy.orm import Session
from typing import Optional, List
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.project import Project
from gamedev_tasks.models.task import Task
from gamedev_tasks.models.block import Block
from gamedev_tasks.models.notification import Notification
from gamedev_tasks.schemas.project import ProjectRead
from gamedev_tasks.crud.activity_log import record_activity, nullify_activity_references
from gamedev_tasks.crud.sync_log import enqueue_change, snapshot
from gamedev_tasks.crud.task import delete_task_rows

logger = logging.getLogger("GameDevTasks.Projects")

UPDATABLE_FIELDS = [
    "name", "description", "phase", "color", "deadline",
    "progress", "game_engine", "development_tools",
]
NON_NULLABLE_FIELDS = {"name", "phase", "color", "progress", "development_tools"}

def get_all_projects(db: Session) -> List[Project]:
    return db.query(Project).order_by(Project.id.asc()).all()

def get_project(db: Session, project_id: int) -> Optional[Project]:
    """
    Возвращает проект по ID или None.
    """
    return db.get(Project, project_id)

def create_project(db: Session, data: dict, user_id: Optional[str] = None) -> Project:
    """
    Создаёт проект. Поля, не переданные клиентом, берут значения по умолчанию модели.
    """
    project = Project(**{k: v for k, v in data.items() if k in UPDATABLE_FIELDS and v is not None})
    with atomic(db, "Database error while creating project."):
        db.add(project)
        db.flush()
        record_activity(
            db, "create", f"Created project: {project.name}",
            project_id=project.id, user_id=user_id,
        )
        enqueue_change(db, "project", project.id, "create", snapshot(ProjectRead, project))
    logger.info(f"Created project '{project.name}' (ID: {project.id})")
    return project

def update_project(db: Session, project_id: int, data: dict, user_id: Optional[str] = None) -> Optional[Project]:
    """
    Частичное обновление: поверх сохранённой записи накладываются только переданные поля.
    None, если проекта нет.
    """
    project = get_project(db, project_id)
    if not project:
        return None
    old_name = project.name
    with atomic(db, "Database error while updating project."):
        changes = {}
        for field in UPDATABLE_FIELDS:
            if field in NON_NULLABLE_FIELDS and data.get(field) is None:
                continue
            if field in data and getattr(project, field) != data[field]:
                changes[field] = (getattr(project, field), data[field])
                setattr(project, field, data[field])
        db.flush()
        record_activity(
            db, "update", f"Updated project: {old_name}",
            project_id=project.id, user_id=user_id,
        )
        enqueue_change(db, "project", project.id, "update", snapshot(ProjectRead, project))
    if changes:
        logger.info(f"Updated project {project.id} fields: {changes}")
    else:
        logger.info(f"Update called but no changes for project {project.id}")
    return project

def delete_project(db: Session, project_id: int, user_id: Optional[str] = None) -> bool:
    """
    Удаляет проект вместе с задачами (и их подзадачами, комментариями, учётом времени)
    и kanban-блоками. Всё — одной транзакцией. False, если проекта нет.
    """
    project = get_project(db, project_id)
    if not project:
        return False
    name = project.name
    tasks = db.query(Task).filter(Task.project_id == project_id).all()
    blocks = db.query(Block).filter(Block.project_id == project_id).all()
    with atomic(db, "Database error while deleting project."):
        for task in tasks:
            delete_task_rows(db, task)
        for block in blocks:
            db.delete(block)
            enqueue_change(db, "block", block.id, "delete", None)
        nullify_activity_references(db, project_id=project_id)
        db.query(Notification).filter(Notification.project_id == project_id).update(
            {Notification.project_id: None}, synchronize_session=False
        )
        db.delete(project)
        db.flush()
        record_activity(db, "delete", f"Deleted project: {name}", user_id=user_id)
        enqueue_change(db, "project", project_id, "delete", None)
    logger.info(f"Deleted project {project_id} with {len(tasks)} tasks and {len(blocks)} blocks")
    return True
