# gamedev_tasks/crud/notification.py
from sqlalchemy.orm import Session
from datetime import datetime, timedelta
from typing import Optional, List
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.base import utcnow
from gamedev_tasks.models.notification import Notification
from gamedev_tasks.models.task import Task
from gamedev_tasks.crud.settings import get_settings

logger = logging.getLogger("GameDevTasks.Notifications")

def get_notifications(db: Session, unread_only: bool = False) -> List[Notification]:
    query = db.query(Notification)
    if unread_only:
        query = query.filter(Notification.is_read == False)
    return query.order_by(Notification.created_at.desc(), Notification.id.desc()).all()

def get_notification(db: Session, notification_id: int) -> Optional[Notification]:
    return db.get(Notification, notification_id)

def create_notification(db: Session, data: dict) -> Notification:
    notification = Notification(
        title=data["title"],
        message=data["message"],
        type=data["type"],
        task_id=data.get("task_id"),
        project_id=data.get("project_id"),
        scheduled_for=data.get("scheduled_for"),
        is_read=False,
    )
    with atomic(db, "Database error while creating notification."):
        db.add(notification)
    logger.info(f"Created {notification.type} notification {notification.id}")
    return notification

def mark_notification_read(db: Session, notification_id: int) -> Optional[Notification]:
    notification = get_notification(db, notification_id)
    if not notification:
        return None
    with atomic(db, "Database error while updating notification."):
        notification.is_read = True
    return notification

def mark_all_notifications_read(db: Session) -> int:
    with atomic(db, "Database error while updating notifications."):
        count = db.query(Notification).filter(Notification.is_read == False).update(
            {Notification.is_read: True}, synchronize_session="fetch"
        )
    logger.info(f"Marked {count} notifications as read")
    return count

def delete_notification(db: Session, notification_id: int) -> bool:
    notification = get_notification(db, notification_id)
    if not notification:
        return False
    with atomic(db, "Database error while deleting notification."):
        db.delete(notification)
    return True

def _deadline_message(deadline: datetime, now: datetime) -> str:
    time_str = deadline.strftime("%H:%M")
    if deadline.date() == now.date():
        return f"Due today at {time_str}"
    if deadline.date() == (now + timedelta(days=1)).date():
        return f"Due tomorrow at {time_str}"
    return f"Due {deadline.strftime('%Y-%m-%d')} at {time_str}"

def check_deadline_notifications(db: Session, now: Optional[datetime] = None) -> List[Notification]:
    """
    Создаёт deadline-уведомления для незавершённых задач, чей дедлайн попадает
    в окно [now, now + reminder_time часов] из настроек.

    Идемпотентно: на пару (задача, дедлайн) создаётся не больше одного уведомления.
    Возвращает только новые уведомления, ближайший дедлайн первым.
    """
    user_settings = get_settings(db)
    if not user_settings.notifications_enabled:
        return []
    now = now or utcnow()
    horizon = now + timedelta(hours=user_settings.reminder_time)
    upcoming = (
        db.query(Task)
        .filter(
            Task.deadline.isnot(None),
            Task.status != "completed",
            Task.deadline >= now,
            Task.deadline <= horizon,
        )
        .order_by(Task.deadline.asc())
        .all()
    )
    created = []
    with atomic(db, "Database error while creating deadline notifications."):
        for task in upcoming:
            exists = db.query(Notification).filter(
                Notification.task_id == task.id,
                Notification.type == "deadline",
                Notification.scheduled_for == task.deadline,
            ).first()
            if exists:
                continue
            notification = Notification(
                title=task.title,
                message=_deadline_message(task.deadline, now),
                type="deadline",
                task_id=task.id,
                project_id=task.project_id,
                scheduled_for=task.deadline,
                is_read=False,
            )
            db.add(notification)
            created.append(notification)
    if created:
        logger.info(f"Created {len(created)} deadline notifications")
    return created
