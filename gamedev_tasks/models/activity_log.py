# gamedev_tasks/models/activity_log.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from gamedev_tasks.models.base import Base, utcnow

class ActivityLog(Base):
    """
    ActivityLog — append-only журнал действий. Ссылки на задачу/проект обнуляются при их удалении.
    """
    __tablename__ = "activity_log"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    task_id: int = Column(Integer, ForeignKey("tasks.id", ondelete="SET NULL"), nullable=True)
    project_id: int = Column(Integer, ForeignKey("projects.id", ondelete="SET NULL"), nullable=True)
    action: str = Column(String(32), nullable=False, doc="create, update, delete, complete, reorder, comment, time-start, time-stop ...")
    timestamp: datetime = Column(DateTime, nullable=False, default=utcnow)
    user_id: str = Column(String(64), nullable=True)
    details: str = Column(Text, nullable=True)

    __table_args__ = (
        Index("ix_activity_log_task_id", "task_id"),
        Index("ix_activity_log_project_id", "project_id"),
        Index("ix_activity_log_timestamp", "timestamp"),
    )

    def __repr__(self):
        return f"<ActivityLog(id={self.id}, action='{self.action}', task_id={self.task_id}, project_id={self.project_id})>"
