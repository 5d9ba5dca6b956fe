# gamedev_tasks/schemas/backup.py
from pydantic import BaseModel, Field
from typing import Optional, List

from gamedev_tasks.schemas.project import ProjectRead
from gamedev_tasks.schemas.task import TaskRead
from gamedev_tasks.schemas.subtask import SubtaskRead
from gamedev_tasks.schemas.block import BlockRead
from gamedev_tasks.schemas.comment import CommentRead
from gamedev_tasks.schemas.time_log import TimeLogRead
from gamedev_tasks.schemas.activity_log import ActivityLogRead
from gamedev_tasks.schemas.notification import NotificationRead
from gamedev_tasks.schemas.user import UserRead
from gamedev_tasks.schemas.settings import SettingsBase

class Backup(BaseModel):
    """
    Backup — JSON-документ экспорта/импорта.

    Ключи верхнего уровня совпадают с форматом клиентского бэкапа
    (timeLogs, activityLog); строки — в формате Read-схем, даты ISO-8601.
    """
    projects: List[ProjectRead]
    tasks: List[TaskRead]
    subtasks: Optional[List[SubtaskRead]] = None
    blocks: Optional[List[BlockRead]] = None
    comments: Optional[List[CommentRead]] = None
    time_logs: Optional[List[TimeLogRead]] = Field(None, alias="timeLogs")
    activity_log: Optional[List[ActivityLogRead]] = Field(None, alias="activityLog")
    notifications: Optional[List[NotificationRead]] = None
    users: Optional[List[UserRead]] = None
    settings: Optional[SettingsBase] = None
    date: str = Field(..., description="Момент экспорта, ISO-8601")

    class Config:
        populate_by_name = True
