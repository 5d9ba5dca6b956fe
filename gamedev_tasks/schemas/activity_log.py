# gamedev_tasks/schemas/activity_log.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class ActivityLogRead(BaseModel):
    id: int
    task_id: Optional[int] = None
    project_id: Optional[int] = None
    action: str
    timestamp: datetime
    user_id: Optional[str] = None
    details: Optional[str] = None

    class Config:
        from_attributes = True
