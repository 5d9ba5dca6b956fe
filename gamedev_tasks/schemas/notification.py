# gamedev_tasks/schemas/notification.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from gamedev_tasks.core.constants import NotificationType

class NotificationCreate(BaseModel):
    title: str = Field(..., min_length=1)
    message: str
    type: NotificationType
    task_id: Optional[int] = None
    project_id: Optional[int] = None
    scheduled_for: Optional[datetime] = None

class NotificationRead(NotificationCreate):
    id: int
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True
