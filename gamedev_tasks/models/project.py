# gamedev_tasks/models/project.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, Index
from gamedev_tasks.models.base import Base, utcnow

class Project(Base):
    """
    Project — игровой проект: фаза производства, цвет, дедлайн, прогресс, движок и инструменты.
    Удаление проекта каскадно удаляет его задачи и kanban-блоки.
    """
    __tablename__ = "projects"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    name: str = Column(String(128), nullable=False, index=True, doc="Название проекта")
    description: str = Column(Text, nullable=True, doc="Описание")
    phase: str = Column(String(32), nullable=False, default="pre-production", doc="Фаза: pre-production, production, post-production")
    color: str = Column(String(16), nullable=False, default="#6200EA", doc="Цветовая метка (#hex)")
    deadline: datetime = Column(DateTime, nullable=True, doc="Дедлайн")
    progress: int = Column(Integer, nullable=False, default=0, doc="Прогресс 0-100")
    created_at: datetime = Column(DateTime, nullable=False, default=utcnow, doc="Дата создания")
    game_engine: str = Column(String(32), nullable=True, doc="Игровой движок")
    development_tools: list = Column(JSON, nullable=False, default=lambda: [], doc="Инструменты разработки")

    __table_args__ = (
        Index("ix_projects_deadline", "deadline"),
    )

    def __repr__(self):
        return f"<Project(id={self.id}, name='{self.name}', phase='{self.phase}', progress={self.progress})>"
