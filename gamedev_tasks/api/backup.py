# gamedev_tasks/api/backup.py
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Any, Dict
import logging

from gamedev_tasks.schemas.response import SuccessResponse
from gamedev_tasks.core.exceptions import BackupValidationError
from gamedev_tasks.crud.backup import get_backup_data, restore_from_backup
from gamedev_tasks.dependencies import get_db, get_current_user_id

router = APIRouter(tags=["Backup"])
logger = logging.getLogger("GameDevTasks.BackupAPI")

@router.get("/backup", response_model=Dict[str, Any])
def export_backup(db: Session = Depends(get_db)):
    """
    Выгрузить все данные одним JSON-документом.
    """
    return get_backup_data(db)

@router.post("/restore", response_model=SuccessResponse)
def import_backup(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Заменить данные содержимым бэкапа. Невалидный документ — 400, данные не трогаются.
    """
    try:
        restore_from_backup(db, payload, user_id=user_id)
    except BackupValidationError as e:
        logger.warning(f"Rejected backup: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return SuccessResponse(result=True, detail="Backup restored")
