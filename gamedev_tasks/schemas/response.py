# gamedev_tasks/schemas/response.py
from pydantic import BaseModel, Field
from typing import Any, Optional

class SuccessResponse(BaseModel):
    """
    SuccessResponse — ответ мутаций без тела сущности (удаление, mark-synced, restore).
    result — ID затронутой сущности или счётчик.
    """
    result: Any = Field(..., description="ID сущности, счётчик или флаг")
    detail: Optional[str] = Field(None, examples=["Task deleted"], description="Что произошло")

class ErrorResponse(BaseModel):
    """
    ErrorResponse — тело ответа обработчиков исключений приложения.
    """
    detail: str = Field(..., examples=["Time tracking already running for task 1 (log 3)."])
    error: str = Field(..., examples=["TimeTrackingError"], description="Класс исключения")
