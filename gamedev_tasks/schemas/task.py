# gamedev_tasks/schemas/task.py
from pydantic import BaseModel, Field
from typing import Optional, Literal
from datetime import datetime

from gamedev_tasks.core.constants import TaskStatus, TaskPriority, TaskCategory

class TaskBase(BaseModel):
    """
    TaskBase — общие поля задачи.
    """
    title: str = Field(..., min_length=1, examples=["Implement player controller"], description="Название задачи")
    description: Optional[str] = Field(None, description="Описание задачи")
    project_id: Optional[int] = Field(None, examples=[1], description="ID проекта")
    priority: TaskPriority = Field("medium", description="Приоритет: high, medium, low")
    category: TaskCategory = Field("other", description="Категория: programming, design, audio, marketing, other")
    deadline: Optional[datetime] = Field(None, description="Дедлайн")
    parent_task_id: Optional[int] = Field(None, description="ID родительской задачи")
    order: int = Field(0, description="Порядок сортировки")
    block_id: Optional[str] = Field(None, description="Kanban-колонка")
    assigned_to: Optional[str] = Field(None, examples=["current-user"], description="ID исполнителя")

class TaskCreate(TaskBase):
    """
    TaskCreate — создание задачи. Завершённой задачу делает только complete_task.
    """
    status: Literal["not-started", "in-progress"] = Field("not-started", description="Начальный статус")

class TaskUpdate(BaseModel):
    """
    TaskUpdate — частичное обновление задачи (все поля опциональны).
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    project_id: Optional[int] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    category: Optional[TaskCategory] = None
    deadline: Optional[datetime] = None
    parent_task_id: Optional[int] = None
    order: Optional[int] = None
    block_id: Optional[str] = None
    assigned_to: Optional[str] = None

class TaskRead(TaskBase):
    """
    TaskRead — полная схема задачи (response, снимок для sync-очереди и бэкапа).
    """
    id: int
    status: TaskStatus
    created_at: datetime
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True
