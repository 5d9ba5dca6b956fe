# gamedev_tasks/crud/task.py
from sqlalchemy.orm import Session
from typing import Optional, List, Dict, Any
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.base import utcnow
from gamedev_tasks.models.task import Task
from gamedev_tasks.models.subtask import Subtask
from gamedev_tasks.models.comment import Comment
from gamedev_tasks.models.time_log import TimeLog
from gamedev_tasks.models.notification import Notification
from gamedev_tasks.schemas.task import TaskRead
from gamedev_tasks.crud.activity_log import record_activity, nullify_activity_references
from gamedev_tasks.crud.sync_log import enqueue_change, snapshot

logger = logging.getLogger("GameDevTasks.Tasks")

UPDATABLE_FIELDS = [
    "title", "description", "project_id", "status", "priority", "category",
    "deadline", "parent_task_id", "order", "block_id", "assigned_to",
]
NON_NULLABLE_FIELDS = {"title", "status", "priority", "category", "order"}

def get_all_tasks(db: Session, filters: Optional[Dict[str, Any]] = None) -> List[Task]:
    """
    Возвращает задачи с фильтрами (по индексам проекта, статуса, категории и т.д.),
    отсортированные по order, затем по id.
    """
    query = db.query(Task)
    filters = filters or {}

    if filters.get("project_id") is not None:
        query = query.filter(Task.project_id == filters["project_id"])
    if filters.get("status"):
        query = query.filter(Task.status == filters["status"])
    if filters.get("category"):
        query = query.filter(Task.category == filters["category"])
    if filters.get("priority"):
        query = query.filter(Task.priority == filters["priority"])
    if filters.get("block_id"):
        query = query.filter(Task.block_id == filters["block_id"])
    if filters.get("assigned_to"):
        query = query.filter(Task.assigned_to == filters["assigned_to"])
    if filters.get("search"):
        val = f"%{filters['search']}%"
        query = query.filter(Task.title.ilike(val) | Task.description.ilike(val))

    return query.order_by(Task.order.asc(), Task.id.asc()).all()

def get_task(db: Session, task_id: int) -> Optional[Task]:
    return db.get(Task, task_id)

def get_tasks_by_project(db: Session, project_id: int) -> List[Task]:
    return get_all_tasks(db, {"project_id": project_id})

def create_task(db: Session, data: dict, user_id: Optional[str] = None) -> Task:
    """
    Создаёт задачу. status/priority/category по умолчанию: not-started/medium/other.
    completed_at всегда пуст — его выставляет только complete_task.
    """
    fields = {k: v for k, v in data.items() if k in UPDATABLE_FIELDS and v is not None}
    fields.setdefault("status", "not-started")
    fields.setdefault("priority", "medium")
    fields.setdefault("category", "other")
    task = Task(**fields, completed_at=None)
    with atomic(db, "Database error while creating task."):
        db.add(task)
        db.flush()
        record_activity(
            db, "create", f"Created task: {task.title}",
            task_id=task.id, project_id=task.project_id, user_id=user_id,
        )
        enqueue_change(db, "task", task.id, "create", snapshot(TaskRead, task))
    logger.info(f"Created task {task.id} for project {task.project_id}")
    return task

def update_task(db: Session, task_id: int, data: dict, user_id: Optional[str] = None) -> Optional[Task]:
    """
    Частичное обновление задачи. None, если задачи нет.

    Переход в статус completed проходит тем же путём, что и complete_task
    (completed_at = now); уход из completed очищает completed_at.
    """
    task = get_task(db, task_id)
    if not task:
        return None
    old_title = task.title
    was_completed = task.status == "completed"
    with atomic(db, "Database error while updating task."):
        changes = {}
        for field in UPDATABLE_FIELDS:
            if field in NON_NULLABLE_FIELDS and data.get(field) is None:
                continue
            if field in data and getattr(task, field) != data[field]:
                changes[field] = (getattr(task, field), data[field])
                setattr(task, field, data[field])

        action, details = "update", f"Updated task: {old_title}"
        if task.status == "completed" and not was_completed:
            task.completed_at = utcnow()
            action, details = "complete", f"Completed task: {task.title}"
        elif task.status != "completed":
            task.completed_at = None
        db.flush()
        record_activity(db, action, details, task_id=task.id, project_id=task.project_id, user_id=user_id)
        enqueue_change(db, "task", task.id, "update", snapshot(TaskRead, task))
    if changes:
        logger.info(f"Updated task {task.id} fields: {changes}")
    else:
        logger.info(f"Update called but no changes for task {task.id}")
    return task

def complete_task(db: Session, task_id: int, user_id: Optional[str] = None) -> Optional[Task]:
    """
    Завершает задачу: status=completed, completed_at=now. None, если задачи нет.
    """
    task = get_task(db, task_id)
    if not task:
        return None
    with atomic(db, "Database error while completing task."):
        task.status = "completed"
        task.completed_at = utcnow()
        db.flush()
        record_activity(
            db, "complete", f"Completed task: {task.title}",
            task_id=task.id, project_id=task.project_id, user_id=user_id,
        )
        enqueue_change(db, "task", task.id, "update", snapshot(TaskRead, task))
    logger.info(f"Completed task {task.id}")
    return task

def delete_task_rows(db: Session, task: Task) -> None:
    """
    Удаляет задачу и всё, чем она владеет (подзадачи, комментарии, учёт времени),
    обнуляет обратные ссылки журнала и уведомлений, ставит delete в sync-очередь.
    Без коммита: вызывается внутри транзакции delete_task / delete_project.
    """
    for model, entity_type in ((Subtask, "subtask"), (Comment, "comment"), (TimeLog, "timeLog")):
        for child in db.query(model).filter(model.task_id == task.id).all():
            db.delete(child)
            enqueue_change(db, entity_type, child.id, "delete", None)
    nullify_activity_references(db, task_ids=[task.id])
    db.query(Notification).filter(Notification.task_id == task.id).update(
        {Notification.task_id: None}, synchronize_session=False
    )
    db.delete(task)
    enqueue_change(db, "task", task.id, "delete", None)

def delete_task(db: Session, task_id: int, user_id: Optional[str] = None) -> bool:
    """
    Удаляет задачу с каскадом на её подзадачи/комментарии/учёт времени. False, если задачи нет.
    """
    task = get_task(db, task_id)
    if not task:
        return False
    title, project_id = task.title, task.project_id
    with atomic(db, "Database error while deleting task."):
        delete_task_rows(db, task)
        db.flush()
        record_activity(db, "delete", f"Deleted task: {title}", project_id=project_id, user_id=user_id)
    logger.info(f"Deleted task {task_id}")
    return True
