# gamedev_tasks/models/comment.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from gamedev_tasks.models.base import Base, utcnow

class Comment(Base):
    __tablename__ = "comments"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    task_id: int = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    content: str = Column(Text, nullable=False)
    created_at: datetime = Column(DateTime, nullable=False, default=utcnow)
    created_by: str = Column(String(64), nullable=False)

    def __repr__(self):
        return f"<Comment(id={self.id}, task_id={self.task_id}, created_by='{self.created_by}')>"
