# gamedev_tasks/schemas/subtask.py
from pydantic import BaseModel, Field
from typing import Optional, List

class SubtaskCreate(BaseModel):
    """
    SubtaskCreate — новая подзадача добавляется в конец списка.
    """
    task_id: int = Field(..., description="ID задачи")
    title: str = Field(..., min_length=1, description="Текст пункта")

class SubtaskUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    is_completed: Optional[bool] = None

class SubtaskReorder(BaseModel):
    """
    SubtaskReorder — полный список ID подзадач задачи в желаемом порядке.
    """
    ordered_ids: List[int] = Field(..., description="ID подзадач в новом порядке")

class SubtaskRead(BaseModel):
    id: int
    task_id: int
    title: str
    is_completed: bool
    order: int

    class Config:
        from_attributes = True
