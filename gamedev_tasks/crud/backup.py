# gamedev_tasks/crud/backup.py
from sqlalchemy.orm import Session
from pydantic import ValidationError as PydanticValidationError
from datetime import datetime, timezone
from typing import Dict, Any, Optional
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.base import utcnow
from gamedev_tasks.models.project import Project
from gamedev_tasks.models.task import Task
from gamedev_tasks.models.subtask import Subtask
from gamedev_tasks.models.block import Block
from gamedev_tasks.models.comment import Comment
from gamedev_tasks.models.time_log import TimeLog
from gamedev_tasks.models.activity_log import ActivityLog
from gamedev_tasks.models.notification import Notification
from gamedev_tasks.models.user import User
from gamedev_tasks.models.settings import Settings as SettingsModel, SETTINGS_ID
from gamedev_tasks.schemas.backup import Backup
from gamedev_tasks.schemas.project import ProjectRead
from gamedev_tasks.schemas.task import TaskRead
from gamedev_tasks.schemas.subtask import SubtaskRead
from gamedev_tasks.schemas.block import BlockRead
from gamedev_tasks.schemas.comment import CommentRead
from gamedev_tasks.schemas.time_log import TimeLogRead
from gamedev_tasks.schemas.activity_log import ActivityLogRead
from gamedev_tasks.schemas.notification import NotificationRead
from gamedev_tasks.schemas.user import UserRead
from gamedev_tasks.schemas.settings import SettingsBase, SettingsRead
from gamedev_tasks.core.exceptions import BackupValidationError
from gamedev_tasks.crud.activity_log import record_activity

logger = logging.getLogger("GameDevTasks.Backup")

# Таблицы, которые очищаются при любом восстановлении (дети раньше родителей)
ALWAYS_REPLACED = (Subtask, Comment, TimeLog, Task, Block, Project)

def get_backup_data(db: Session) -> Dict[str, Any]:
    """
    Собирает JSON-документ бэкапа: все таблицы + настройки + дата экспорта (ISO).
    """
    def rows(model, schema):
        return [schema.model_validate(obj) for obj in db.query(model).order_by(model.id).all()]

    settings_row = db.get(SettingsModel, SETTINGS_ID)
    backup = Backup(
        projects=rows(Project, ProjectRead),
        tasks=rows(Task, TaskRead),
        subtasks=rows(Subtask, SubtaskRead),
        blocks=rows(Block, BlockRead),
        comments=rows(Comment, CommentRead),
        time_logs=rows(TimeLog, TimeLogRead),
        activity_log=rows(ActivityLog, ActivityLogRead),
        notifications=rows(Notification, NotificationRead),
        users=rows(User, UserRead),
        settings=SettingsBase.model_validate(SettingsRead.model_validate(settings_row).model_dump()) if settings_row else None,
        date=utcnow().isoformat() + "Z",
    )
    logger.info(f"Exported backup: {len(backup.projects)} projects, {len(backup.tasks)} tasks")
    return backup.model_dump(mode="json", by_alias=True)

def parse_backup(payload: Any) -> Backup:
    """
    Разбирает документ бэкапа целиком; любая ошибка — BackupValidationError.
    """
    if not isinstance(payload, dict):
        raise BackupValidationError("Backup must be a JSON object.")
    try:
        return Backup.model_validate(payload)
    except PydanticValidationError as e:
        raise BackupValidationError(f"Invalid backup file: {e.error_count()} error(s): {e.errors()[0]['msg']}") from e

def _naive_utc(row: Dict[str, Any]) -> Dict[str, Any]:
    # Даты со смещением приводятся к UTC: в базе всё хранится naive UTC
    return {
        key: value.astimezone(timezone.utc).replace(tzinfo=None)
        if isinstance(value, datetime) and value.tzinfo is not None else value
        for key, value in row.items()
    }

def restore_from_backup(db: Session, payload: Any, user_id: Optional[str] = None) -> bool:
    """
    Восстанавливает данные из бэкапа.

    Сначала документ разбирается полностью (даты ISO -> datetime); если он невалиден,
    ничего не трогается. Затем одной транзакцией: очистка таблиц, вставка строк
    с исходными id, замена настроек. Журнал действий, уведомления и пользователи
    заменяются, только если присутствуют в бэкапе; оставшиеся записи теряют
    ссылки на задачи и проекты. Sync-очередь не трогается.
    """
    backup = parse_backup(payload)

    optional_tables = [
        (ActivityLog, backup.activity_log),
        (Notification, backup.notifications),
        (User, backup.users),
    ]
    with atomic(db, "Database error while restoring backup."):
        # Сохраняемые журнал и уведомления не должны ссылаться на чужие восстановленные id
        for model, rows in optional_tables[:2]:
            if rows is None:
                db.query(model).update(
                    {model.task_id: None, model.project_id: None}, synchronize_session=False
                )
        for model in ALWAYS_REPLACED:
            db.query(model).delete(synchronize_session=False)
        for model, rows in optional_tables:
            if rows is not None:
                db.query(model).delete(synchronize_session=False)
        db.flush()
        db.expunge_all()

        inserts = [
            (Project, backup.projects),
            (Block, backup.blocks or []),
            (Task, backup.tasks),
            (Subtask, backup.subtasks or []),
            (Comment, backup.comments or []),
            (TimeLog, backup.time_logs or []),
        ] + [(model, rows) for model, rows in optional_tables if rows is not None]
        for model, rows in inserts:
            db.add_all(model(**_naive_utc(row.model_dump())) for row in rows)
        db.flush()

        if backup.settings is not None:
            db.merge(SettingsModel(id=SETTINGS_ID, **backup.settings.model_dump()))
        record_activity(db, "restore", f"Restored backup from {backup.date}", user_id=user_id)

    logger.info(
        f"Restored backup from {backup.date}: {len(backup.projects)} projects, {len(backup.tasks)} tasks"
    )
    return True
