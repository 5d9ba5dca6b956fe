# gamedev_tasks/schemas/comment.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class CommentCreate(BaseModel):
    task_id: int
    content: str = Field(..., min_length=1)
    created_by: Optional[str] = Field(None, description="Автор; по умолчанию текущий пользователь")

class CommentRead(BaseModel):
    id: int
    task_id: int
    content: str
    created_at: datetime
    created_by: str

    class Config:
        from_attributes = True
