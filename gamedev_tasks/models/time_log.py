# gamedev_tasks/models/time_log.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from gamedev_tasks.models.base import Base, utcnow

class TimeLog(Base):
    """
    TimeLog — интервал учёта времени по задаче. end_time IS NULL — таймер ещё идёт.
    """
    __tablename__ = "time_logs"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    task_id: int = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    start_time: datetime = Column(DateTime, nullable=False, default=utcnow)
    end_time: datetime = Column(DateTime, nullable=True)
    duration: int = Column(Integer, nullable=False, default=0, doc="Длительность в секундах")
    description: str = Column(String(512), nullable=True)

    def __repr__(self):
        return f"<TimeLog(id={self.id}, task_id={self.task_id}, duration={self.duration})>"
