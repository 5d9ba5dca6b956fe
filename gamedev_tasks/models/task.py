# gamedev_tasks/models/task.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, Index
from gamedev_tasks.models.base import Base, utcnow

class Task(Base):
    """
    Task — задача проекта. completed_at выставляется только через complete_task.
    """
    __tablename__ = "tasks"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    project_id: int = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True, doc="ID проекта")
    title: str = Column(String(256), nullable=False, doc="Название задачи")
    description: str = Column(Text, nullable=True, doc="Описание")
    status: str = Column(String(24), nullable=False, default="not-started", doc="Статус: not-started, in-progress, completed")
    priority: str = Column(String(16), nullable=False, default="medium", doc="Приоритет: high, medium, low")
    category: str = Column(String(24), nullable=False, default="other", doc="Категория")
    deadline: datetime = Column(DateTime, nullable=True, doc="Дедлайн")
    created_at: datetime = Column(DateTime, nullable=False, default=utcnow, doc="Дата создания")
    completed_at: datetime = Column(DateTime, nullable=True, doc="Дата завершения")
    parent_task_id: int = Column(Integer, nullable=True, doc="ID родительской задачи")
    order: int = Column(Integer, nullable=False, default=0, doc="Порядок сортировки")
    block_id: str = Column(String(64), nullable=True, doc="Kanban-колонка")
    assigned_to: str = Column(String(64), nullable=True, doc="ID исполнителя")

    __table_args__ = (
        Index("ix_tasks_project_id", "project_id"),
        Index("ix_tasks_status", "status"),
        Index("ix_tasks_category", "category"),
        Index("ix_tasks_deadline", "deadline"),
    )

    def __repr__(self):
        return (
            f"<Task(id={self.id}, title='{self.title}', status={self.status}, "
            f"project_id={self.project_id}, priority={self.priority})>"
        )
