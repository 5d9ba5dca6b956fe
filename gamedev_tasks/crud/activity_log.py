# gamedev_tasks/crud/activity_log.py
from sqlalchemy.orm import Session
from typing import Optional, List, Iterable
import logging

from gamedev_tasks.models.activity_log import ActivityLog
from gamedev_tasks.core.settings import settings

logger = logging.getLogger("GameDevTasks.ActivityLog")

def record_activity(
    db: Session,
    action: str,
    details: str,
    task_id: Optional[int] = None,
    project_id: Optional[int] = None,
    user_id: Optional[str] = None,
) -> ActivityLog:
    """
    Добавляет строку в журнал действий.

    Только flush: коммит делает транзакция вызывающей мутации (database.atomic),
    так что запись журнала появляется вместе с основной записью или не появляется вовсе.
    """
    entry = ActivityLog(
        task_id=task_id,
        project_id=project_id,
        action=action,
        details=details,
        user_id=user_id or settings.DEFAULT_USER_ID,
    )
    db.add(entry)
    db.flush()
    logger.debug(f"Activity '{action}' task={task_id} project={project_id}: {details}")
    return entry

def get_activity_log(
    db: Session,
    project_id: Optional[int] = None,
    task_id: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[ActivityLog]:
    """
    Возвращает записи журнала, новые сверху. Фильтры по проекту и задаче комбинируются через AND.
    """
    query = db.query(ActivityLog)
    if project_id is not None:
        query = query.filter(ActivityLog.project_id == project_id)
    if task_id is not None:
        query = query.filter(ActivityLog.task_id == task_id)
    query = query.order_by(ActivityLog.timestamp.desc(), ActivityLog.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()

def nullify_activity_references(
    db: Session,
    task_ids: Iterable[int] = (),
    project_id: Optional[int] = None,
) -> None:
    """
    Обнуляет ссылки журнала на удаляемые задачи/проект (ON DELETE SET NULL).
    Единственная разрешённая модификация существующих строк журнала.
    """
    task_ids = list(task_ids)
    if task_ids:
        db.query(ActivityLog).filter(ActivityLog.task_id.in_(task_ids)).update(
            {ActivityLog.task_id: None}, synchronize_session=False
        )
    if project_id is not None:
        db.query(ActivityLog).filter(ActivityLog.project_id == project_id).update(
            {ActivityLog.project_id: None}, synchronize_session=False
        )
