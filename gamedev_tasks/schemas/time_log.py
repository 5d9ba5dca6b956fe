# gamedev_tasks/schemas/time_log.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class TimeLogStart(BaseModel):
    task_id: int
    description: Optional[str] = Field("", description="Что делаем")

class TimeLogRead(BaseModel):
    """
    TimeLogRead — интервал учёта времени; end_time=None пока таймер идёт.
    """
    id: int
    task_id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: int = Field(0, description="Секунды")
    description: Optional[str] = None

    class Config:
        from_attributes = True
