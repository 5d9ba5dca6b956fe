# gamedev_tasks/api/statistics.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from gamedev_tasks.schemas.statistics import StatisticsRead
from gamedev_tasks.crud.statistics import compute_statistics
from gamedev_tasks.dependencies import get_db

router = APIRouter(prefix="/statistics", tags=["Statistics"])

@router.get("/", response_model=StatisticsRead)
def read_statistics(
    window_days: Optional[int] = Query(None, ge=1, le=366),
    db: Session = Depends(get_db),
):
    """
    Агрегаты по проектам, задачам, подзадачам и учёту времени (пересчёт на каждый запрос).
    """
    return compute_statistics(db, window_days=window_days)
