# gamedev_tasks/schemas/project.py
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from gamedev_tasks.core.constants import ProjectPhase, GameEngine, DevelopmentTool, DEFAULT_COLOR

class ProjectBase(BaseModel):
    """
    ProjectBase — базовая схема проекта.
    """
    name: str = Field(..., min_length=1, examples=["Space Shooter"], description="Название проекта")
    description: Optional[str] = Field(None, description="Описание")
    phase: ProjectPhase = Field("pre-production", description="Фаза: pre-production, production, post-production")
    color: str = Field(DEFAULT_COLOR, examples=["#FFAA00"], description="Цветовая метка (HEX)")
    deadline: Optional[datetime] = Field(None, description="Дедлайн")
    progress: int = Field(0, ge=0, le=100, description="Прогресс (0-100)")
    game_engine: Optional[GameEngine] = Field(None, examples=["godot"], description="Игровой движок")
    development_tools: List[DevelopmentTool] = Field(default_factory=list, examples=[["blender", "fmod"]], description="Инструменты разработки")

class ProjectCreate(ProjectBase):
    """
    ProjectCreate — схема для создания проекта.
    """
    pass

class ProjectUpdate(BaseModel):
    """
    ProjectUpdate — частичное обновление проекта (все поля опциональны).
    """
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    phase: Optional[ProjectPhase] = None
    color: Optional[str] = None
    deadline: Optional[datetime] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    game_engine: Optional[GameEngine] = None
    development_tools: Optional[List[DevelopmentTool]] = None

class ProjectRead(ProjectBase):
    """
    ProjectRead — полный вывод проекта (response, снимок для sync-очереди и бэкапа).
    """
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
