# gamedev_tasks/models/notification.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey
from gamedev_tasks.models.base import Base, utcnow

class Notification(Base):
    __tablename__ = "notifications"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    title: str = Column(String(256), nullable=False)
    message: str = Column(Text, nullable=False)
    type: str = Column(String(16), nullable=False, doc="deadline, reminder, update, completion")
    task_id: int = Column(Integer, ForeignKey("tasks.id", ondelete="SET NULL"), nullable=True, index=True)
    project_id: int = Column(Integer, ForeignKey("projects.id", ondelete="SET NULL"), nullable=True)
    is_read: bool = Column(Boolean, nullable=False, default=False, index=True)
    created_at: datetime = Column(DateTime, nullable=False, default=utcnow)
    scheduled_for: datetime = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<Notification(id={self.id}, type='{self.type}', task_id={self.task_id}, is_read={self.is_read})>"
