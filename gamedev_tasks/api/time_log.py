# gamedev_tasks/api/time_log.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from gamedev_tasks.schemas.time_log import TimeLogStart, TimeLogRead
from gamedev_tasks.crud.time_log import start_time_tracking, stop_time_tracking, get_time_log
from gamedev_tasks.dependencies import get_db, get_current_user_id

router = APIRouter(prefix="/time-logs", tags=["Time Tracking"])
logger = logging.getLogger("GameDevTasks.TimeTrackingAPI")

@router.post("/start", response_model=TimeLogRead)
def start_tracking(
    data: TimeLogStart,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Запустить учёт времени по задаче. Если таймер по задаче уже идёт — 409.
    """
    time_log = start_time_tracking(db, data.task_id, data.description, user_id=user_id)
    if not time_log:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Task with id {data.task_id} not found.")
    return time_log

@router.post("/{time_log_id}/stop", response_model=TimeLogRead)
def stop_tracking(
    time_log_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Остановить учёт времени. Повторная остановка — 409.
    """
    time_log = stop_time_tracking(db, time_log_id, user_id=user_id)
    if not time_log:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Time log not found")
    return time_log

@router.get("/{time_log_id}", response_model=TimeLogRead)
def get_one_time_log(time_log_id: int, db: Session = Depends(get_db)):
    time_log = get_time_log(db, time_log_id)
    if not time_log:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Time log not found")
    return time_log
