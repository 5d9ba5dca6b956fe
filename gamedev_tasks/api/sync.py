# gamedev_tasks/api/sync.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from gamedev_tasks.schemas.sync_log import SyncLogRead
from gamedev_tasks.schemas.response import SuccessResponse
from gamedev_tasks.crud.sync_log import list_unsynced, get_all_sync_entries, mark_synced, prune_synced
from gamedev_tasks.dependencies import get_db

router = APIRouter(prefix="/sync", tags=["Sync"])

@router.get("/", response_model=List[SyncLogRead])
def list_sync_entries(
    include_synced: bool = Query(False),
    db: Session = Depends(get_db),
):
    """
    Offline-очередь изменений в порядке вставки (по умолчанию только несинхронизированные).
    """
    if include_synced:
        return get_all_sync_entries(db)
    return list_unsynced(db)

@router.post("/{entry_id}/synced", response_model=SuccessResponse)
def mark_entry_synced(entry_id: int, db: Session = Depends(get_db)):
    """
    Отметить запись очереди как доставленную.
    """
    if not mark_synced(db, entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sync entry not found")
    return SuccessResponse(result=entry_id, detail="Marked as synced")

@router.post("/prune", response_model=SuccessResponse)
def prune_sync_entries(
    keep: Optional[int] = Query(None, ge=0),
    db: Session = Depends(get_db),
):
    removed = prune_synced(db, keep)
    return SuccessResponse(result=removed, detail="Synced entries pruned")
