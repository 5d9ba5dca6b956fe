# gamedev_tasks/api/project.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from gamedev_tasks.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from gamedev_tasks.schemas.task import TaskRead
from gamedev_tasks.schemas.block import BlockRead
from gamedev_tasks.schemas.activity_log import ActivityLogRead
from gamedev_tasks.schemas.response import SuccessResponse
from gamedev_tasks.crud.project import (
    create_project,
    get_project,
    get_all_projects,
    update_project,
    delete_project,
)
from gamedev_tasks.crud.task import get_tasks_by_project
from gamedev_tasks.crud.block import get_blocks_by_project
from gamedev_tasks.crud.activity_log import get_activity_log
from gamedev_tasks.core.exceptions import ProjectNotFound
from gamedev_tasks.dependencies import get_db, get_current_user_id

router = APIRouter(prefix="/projects", tags=["Projects"])
logger = logging.getLogger("GameDevTasks.ProjectsAPI")

def _get_project_or_404(db: Session, project_id: int):
    project = get_project(db, project_id)
    if not project:
        raise ProjectNotFound(f"Project with id {project_id} not found.")
    return project

@router.post("/", response_model=ProjectRead)
def create_new_project(
    data: ProjectCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Создать новый проект.
    """
    return create_project(db, data.model_dump(), user_id=user_id)

@router.get("/", response_model=List[ProjectRead])
def list_projects(db: Session = Depends(get_db)):
    """
    Получить все проекты.
    """
    return get_all_projects(db)

@router.get("/{project_id}", response_model=ProjectRead)
def get_one_project(project_id: int, db: Session = Depends(get_db)):
    """
    Получить проект по ID.
    """
    return _get_project_or_404(db, project_id)

@router.patch("/{project_id}", response_model=ProjectRead)
def update_one_project(
    project_id: int,
    data: ProjectUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Обновить проект (только переданные поля).
    """
    project = update_project(db, project_id, data.model_dump(exclude_unset=True), user_id=user_id)
    if not project:
        raise ProjectNotFound(f"Project with id {project_id} not found.")
    return project

@router.delete("/{project_id}", response_model=SuccessResponse)
def delete_one_project(
    project_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Удалить проект вместе с его задачами и kanban-колонками.
    """
    if not delete_project(db, project_id, user_id=user_id):
        raise ProjectNotFound(f"Project with id {project_id} not found.")
    return SuccessResponse(result=project_id, detail="Project deleted")

@router.get("/{project_id}/tasks", response_model=List[TaskRead])
def list_project_tasks(project_id: int, db: Session = Depends(get_db)):
    _get_project_or_404(db, project_id)
    return get_tasks_by_project(db, project_id)

@router.get("/{project_id}/blocks", response_model=List[BlockRead])
def list_project_blocks(project_id: int, db: Session = Depends(get_db)):
    _get_project_or_404(db, project_id)
    return get_blocks_by_project(db, project_id)

@router.get("/{project_id}/activity", response_model=List[ActivityLogRead])
def list_project_activity(
    project_id: int,
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """
    Журнал действий по проекту, новые сверху.
    """
    _get_project_or_404(db, project_id)
    return get_activity_log(db, project_id=project_id, limit=limit)
