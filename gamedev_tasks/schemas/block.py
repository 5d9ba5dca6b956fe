# gamedev_tasks/schemas/block.py
from pydantic import BaseModel, Field
from typing import Optional

from gamedev_tasks.core.constants import DEFAULT_COLOR

class BlockCreate(BaseModel):
    """
    BlockCreate — kanban-колонка. id можно передать, иначе он генерируется.
    """
    id: Optional[str] = Field(None, max_length=64, description="Ключ колонки")
    title: str = Field(..., min_length=1, examples=["In review"])
    order: int = 0
    color: str = DEFAULT_COLOR
    project_id: Optional[int] = None

class BlockUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    order: Optional[int] = None
    color: Optional[str] = None
    project_id: Optional[int] = None

class BlockRead(BaseModel):
    id: str
    title: str
    order: int
    color: str
    project_id: Optional[int] = None

    class Config:
        from_attributes = True
