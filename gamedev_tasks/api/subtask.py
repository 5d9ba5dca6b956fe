# gamedev_tasks/api/subtask.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from gamedev_tasks.schemas.subtask import SubtaskCreate, SubtaskUpdate, SubtaskRead
from gamedev_tasks.schemas.response import SuccessResponse
from gamedev_tasks.crud.subtask import create_subtask, get_subtask, update_subtask, delete_subtask
from gamedev_tasks.core.exceptions import SubtaskNotFound
from gamedev_tasks.dependencies import get_db, get_current_user_id

router = APIRouter(prefix="/subtasks", tags=["Subtasks"])
logger = logging.getLogger("GameDevTasks.SubtasksAPI")

@router.post("/", response_model=SubtaskRead)
def create_new_subtask(
    data: SubtaskCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Добавить подзадачу в конец списка задачи.
    """
    subtask = create_subtask(db, data.model_dump(), user_id=user_id)
    if not subtask:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Task with id {data.task_id} not found.")
    return subtask

@router.get("/{subtask_id}", response_model=SubtaskRead)
def get_one_subtask(subtask_id: int, db: Session = Depends(get_db)):
    subtask = get_subtask(db, subtask_id)
    if not subtask:
        raise SubtaskNotFound("Subtask not found")
    return subtask

@router.patch("/{subtask_id}", response_model=SubtaskRead)
def update_one_subtask(
    subtask_id: int,
    data: SubtaskUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Переименовать подзадачу или отметить её выполненной / невыполненной.
    """
    subtask = update_subtask(db, subtask_id, data.model_dump(exclude_unset=True), user_id=user_id)
    if not subtask:
        raise SubtaskNotFound("Subtask not found")
    return subtask

@router.delete("/{subtask_id}", response_model=SuccessResponse)
def delete_one_subtask(
    subtask_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not delete_subtask(db, subtask_id, user_id=user_id):
        raise SubtaskNotFound("Subtask not found")
    return SuccessResponse(result=subtask_id, detail="Subtask deleted")
