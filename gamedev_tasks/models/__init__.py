from .base import Base
from .project import Project
from .task import Task
from .subtask import Subtask
from .block import Block
from .comment import Comment
from .time_log import TimeLog
from .activity_log import ActivityLog
from .sync_log import SyncLogEntry
from .notification import Notification
from .user import User
from .settings import Settings

# все модели должны быть импортированы здесь, чтобы попасть в Base.metadata
