# gamedev_tasks/api/activity.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from gamedev_tasks.schemas.activity_log import ActivityLogRead
from gamedev_tasks.crud.activity_log import get_activity_log
from gamedev_tasks.dependencies import get_db

router = APIRouter(prefix="/activity", tags=["Activity"])

@router.get("/", response_model=List[ActivityLogRead])
def list_activity(
    project_id: Optional[int] = Query(None),
    task_id: Optional[int] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """
    Журнал действий, новые сверху. project_id и task_id комбинируются через AND.
    """
    return get_activity_log(db, project_id=project_id, task_id=task_id, limit=limit)
