# gamedev_tasks/crud/subtask.py
from sqlalchemy.orm import Session
from typing import Optional, List
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.subtask import Subtask
from gamedev_tasks.models.task import Task
from gamedev_tasks.schemas.subtask import SubtaskRead
from gamedev_tasks.core.exceptions import SubtaskValidationError
from gamedev_tasks.crud.activity_log import record_activity
from gamedev_tasks.crud.sync_log import enqueue_change, snapshot

logger = logging.getLogger("GameDevTasks.Subtasks")

def get_subtasks_by_task(db: Session, task_id: int) -> List[Subtask]:
    """
    Подзадачи задачи в порядке order.
    """
    return (
        db.query(Subtask)
        .filter(Subtask.task_id == task_id)
        .order_by(Subtask.order.asc(), Subtask.id.asc())
        .all()
    )

def get_subtask(db: Session, subtask_id: int) -> Optional[Subtask]:
    return db.get(Subtask, subtask_id)

def _densify(db: Session, task_id: int) -> List[Subtask]:
    siblings = get_subtasks_by_task(db, task_id)
    for index, sibling in enumerate(siblings):
        if sibling.order != index:
            sibling.order = index
            enqueue_change(db, "subtask", sibling.id, "update", snapshot(SubtaskRead, sibling))
    return siblings

def create_subtask(db: Session, data: dict, user_id: Optional[str] = None) -> Optional[Subtask]:
    """
    Добавляет подзадачу в конец списка (order = число соседей). None, если задачи нет.
    """
    task = db.get(Task, data["task_id"])
    if not task:
        return None
    position = db.query(Subtask).filter(Subtask.task_id == task.id).count()
    subtask = Subtask(task_id=task.id, title=data["title"].strip(), is_completed=False, order=position)
    with atomic(db, "Database error while creating subtask."):
        db.add(subtask)
        db.flush()
        record_activity(
            db, "create", f'Added subtask to "{task.title}": {subtask.title}',
            task_id=task.id, project_id=task.project_id, user_id=user_id,
        )
        enqueue_change(db, "subtask", subtask.id, "create", snapshot(SubtaskRead, subtask))
    logger.info(f"Created subtask {subtask.id} for task {task.id} at position {position}")
    return subtask

def update_subtask(db: Session, subtask_id: int, data: dict, user_id: Optional[str] = None) -> Optional[Subtask]:
    """
    Обновляет title / is_completed. Изменение is_completed пишется в журнал как complete/reopen.
    """
    subtask = get_subtask(db, subtask_id)
    if not subtask:
        return None
    old_title = subtask.title
    action, details = "update", f'Updated subtask "{old_title}"'
    if data.get("is_completed") is not None and data["is_completed"] != subtask.is_completed:
        if data["is_completed"]:
            action, details = "complete", f'Completed subtask "{old_title}"'
        else:
            action, details = "reopen", f'Reopened subtask "{old_title}"'
    task = db.get(Task, subtask.task_id)
    with atomic(db, "Database error while updating subtask."):
        if data.get("title"):
            subtask.title = data["title"].strip()
        if data.get("is_completed") is not None:
            subtask.is_completed = data["is_completed"]
        db.flush()
        record_activity(
            db, action, details,
            task_id=subtask.task_id, project_id=task.project_id if task else None, user_id=user_id,
        )
        enqueue_change(db, "subtask", subtask.id, "update", snapshot(SubtaskRead, subtask))
    logger.info(f"Updated subtask {subtask.id} ({action})")
    return subtask

def delete_subtask(db: Session, subtask_id: int, user_id: Optional[str] = None) -> bool:
    """
    Удаляет подзадачу; оставшиеся соседи перенумеровываются 0..n-1.
    """
    subtask = get_subtask(db, subtask_id)
    if not subtask:
        return False
    task = db.get(Task, subtask.task_id)
    with atomic(db, "Database error while deleting subtask."):
        db.delete(subtask)
        db.flush()
        _densify(db, subtask.task_id)
        record_activity(
            db, "delete", f'Deleted subtask "{subtask.title}"',
            task_id=subtask.task_id, project_id=task.project_id if task else None, user_id=user_id,
        )
        enqueue_change(db, "subtask", subtask_id, "delete", None)
    logger.info(f"Deleted subtask {subtask_id}")
    return True

def reorder_subtasks(
    db: Session, task_id: int, ordered_ids: List[int], user_id: Optional[str] = None
) -> Optional[List[Subtask]]:
    """
    Переставляет подзадачи задачи: order становится 0..n-1 в порядке ordered_ids.

    ordered_ids обязан содержать ровно все подзадачи задачи, без повторов,
    иначе SubtaskValidationError. None, если задачи нет.
    """
    task = db.get(Task, task_id)
    if not task:
        return None
    siblings = {s.id: s for s in get_subtasks_by_task(db, task_id)}
    if len(ordered_ids) != len(set(ordered_ids)):
        raise SubtaskValidationError("Duplicate subtask ids in reorder request.")
    if set(ordered_ids) != set(siblings):
        raise SubtaskValidationError(
            f"Reorder must list exactly the subtasks of task {task_id}."
        )
    with atomic(db, "Database error while reordering subtasks."):
        for index, subtask_id in enumerate(ordered_ids):
            subtask = siblings[subtask_id]
            subtask.order = index
            enqueue_change(db, "subtask", subtask.id, "update", snapshot(SubtaskRead, subtask))
        db.flush()
        record_activity(
            db, "reorder", f"Reordered {len(ordered_ids)} subtasks",
            task_id=task.id, project_id=task.project_id, user_id=user_id,
        )
    logger.info(f"Reordered {len(ordered_ids)} subtasks of task {task_id}")
    return get_subtasks_by_task(db, task_id)
