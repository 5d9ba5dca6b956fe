# gamedev_tasks/models/subtask.py
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from gamedev_tasks.models.base import Base

class Subtask(Base):
    """
    Subtask — пункт чек-листа задачи. order — плотная последовательность 0..n-1 среди соседей.
    """
    __tablename__ = "subtasks"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    task_id: int = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    title: str = Column(String(256), nullable=False)
    is_completed: bool = Column(Boolean, nullable=False, default=False)
    order: int = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Subtask(id={self.id}, task_id={self.task_id}, order={self.order}, is_completed={self.is_completed})>"
