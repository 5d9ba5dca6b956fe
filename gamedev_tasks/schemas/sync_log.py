# gamedev_tasks/schemas/sync_log.py
from pydantic import BaseModel
from typing import Optional, Any, Dict
from datetime import datetime

from gamedev_tasks.core.constants import SyncEntityType, SyncAction

class SyncLogRead(BaseModel):
    """
    SyncLogRead — запись offline-очереди изменений.
    """
    id: int
    entity_type: SyncEntityType
    entity_id: str
    action: SyncAction
    timestamp: datetime
    synced: bool
    data: Optional[Dict[str, Any]] = None

    class Config:
        from_attributes = True
