# gamedev_tasks/api/task.py
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from gamedev_tasks.schemas.task import TaskCreate, TaskRead, TaskUpdate
from gamedev_tasks.schemas.subtask import SubtaskRead, SubtaskReorder
from gamedev_tasks.schemas.comment import CommentRead
from gamedev_tasks.schemas.time_log import TimeLogRead
from gamedev_tasks.schemas.activity_log import ActivityLogRead
from gamedev_tasks.schemas.response import SuccessResponse
from gamedev_tasks.core.constants import TaskStatus, TaskPriority, TaskCategory
from gamedev_tasks.core.exceptions import ProjectNotFound, SubtaskValidationError
from gamedev_tasks.crud.task import (
    create_task,
    get_task,
    get_all_tasks,
    update_task,
    complete_task,
    delete_task,
)
from gamedev_tasks.crud.project import get_project
from gamedev_tasks.crud.subtask import get_subtasks_by_task, reorder_subtasks
from gamedev_tasks.crud.comment import get_comments_by_task
from gamedev_tasks.crud.time_log import get_time_logs_by_task, get_active_time_log
from gamedev_tasks.crud.activity_log import get_activity_log
from gamedev_tasks.dependencies import get_db, get_current_user_id

logger = logging.getLogger("GameDevTasks.TasksAPI")

router = APIRouter(prefix="/tasks", tags=["Tasks"])

def _task_not_found(task_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Task with id {task_id} not found.")

def _check_project_exists(db: Session, project_id: Optional[int]) -> None:
    if project_id is not None and not get_project(db, project_id):
        raise ProjectNotFound(f"Project with id {project_id} not found.")

def _get_task_or_404(db: Session, task_id: int):
    task = get_task(db, task_id)
    if not task:
        raise _task_not_found(task_id)
    return task

@router.post("/", response_model=TaskRead)
def create_new_task(
    data: TaskCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Создать новую задачу.
    """
    _check_project_exists(db, data.project_id)
    return create_task(db, data.model_dump(), user_id=user_id)

@router.get("/", response_model=List[TaskRead])
def list_tasks(
    project_id: Optional[int] = Query(None),
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    category: Optional[TaskCategory] = Query(None),
    priority: Optional[TaskPriority] = Query(None),
    block_id: Optional[str] = Query(None),
    assigned_to: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Получить список задач с фильтрацией и поиском.
    """
    filters = {
        "project_id": project_id,
        "status": task_status,
        "category": category,
        "priority": priority,
        "block_id": block_id,
        "assigned_to": assigned_to,
        "search": search,
    }
    filters = {k: v for k, v in filters.items() if v is not None}
    return get_all_tasks(db, filters)

@router.get("/{task_id}", response_model=TaskRead)
def get_one_task(task_id: int, db: Session = Depends(get_db)):
    """
    Получить задачу по ID.
    """
    return _get_task_or_404(db, task_id)

@router.patch("/{task_id}", response_model=TaskRead)
def update_one_task(
    task_id: int,
    data: TaskUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Обновить задачу (только переданные поля).
    """
    update_data = data.model_dump(exclude_unset=True)
    if "project_id" in update_data:
        _check_project_exists(db, update_data["project_id"])
    task = update_task(db, task_id, update_data, user_id=user_id)
    if not task:
        raise _task_not_found(task_id)
    return task

@router.post("/{task_id}/complete", response_model=TaskRead)
def complete_one_task(
    task_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Завершить задачу (status=completed, completed_at=сейчас).
    """
    task = complete_task(db, task_id, user_id=user_id)
    if not task:
        raise _task_not_found(task_id)
    return task

@router.delete("/{task_id}", response_model=SuccessResponse)
def delete_one_task(
    task_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Удалить задачу вместе с подзадачами, комментариями и учётом времени.
    """
    if not delete_task(db, task_id, user_id=user_id):
        raise _task_not_found(task_id)
    return SuccessResponse(result=task_id, detail="Task deleted")

@router.get("/{task_id}/subtasks", response_model=List[SubtaskRead])
def list_task_subtasks(task_id: int, db: Session = Depends(get_db)):
    _get_task_or_404(db, task_id)
    return get_subtasks_by_task(db, task_id)

@router.put("/{task_id}/subtasks/order", response_model=List[SubtaskRead])
def reorder_task_subtasks(
    task_id: int,
    data: SubtaskReorder,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Переставить подзадачи: ordered_ids должен содержать ровно все подзадачи задачи.
    """
    try:
        subtasks = reorder_subtasks(db, task_id, data.ordered_ids, user_id=user_id)
    except SubtaskValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if subtasks is None:
        raise _task_not_found(task_id)
    return subtasks

@router.get("/{task_id}/comments", response_model=List[CommentRead])
def list_task_comments(task_id: int, db: Session = Depends(get_db)):
    _get_task_or_404(db, task_id)
    return get_comments_by_task(db, task_id)

@router.get("/{task_id}/time-logs", response_model=List[TimeLogRead])
def list_task_time_logs(task_id: int, db: Session = Depends(get_db)):
    _get_task_or_404(db, task_id)
    return get_time_logs_by_task(db, task_id)

@router.get("/{task_id}/time-logs/active", response_model=Optional[TimeLogRead])
def get_task_active_time_log(task_id: int, db: Session = Depends(get_db)):
    """
    Открытый интервал учёта времени по задаче или null.
    """
    _get_task_or_404(db, task_id)
    return get_active_time_log(db, task_id)

@router.get("/{task_id}/activity", response_model=List[ActivityLogRead])
def list_task_activity(
    task_id: int,
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    _get_task_or_404(db, task_id)
    return get_activity_log(db, task_id=task_id, limit=limit)
