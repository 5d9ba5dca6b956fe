# gamedev_tasks/schemas/pomodoro.py
from pydantic import BaseModel, Field
from typing import Optional, Literal

PomodoroMode = Literal["work", "shortBreak", "longBreak"]

class PomodoroState(BaseModel):
    """
    PomodoroState — состояние таймера, которое держит клиент.
    """
    mode: PomodoroMode = "work"
    completed_pomodoros: int = Field(0, ge=0)
    task_id: Optional[int] = Field(None, description="Задача, на которую пишется время в фазе work")
    time_log_id: Optional[int] = Field(None, description="Открытый интервал учёта времени")

class PomodoroPhase(PomodoroState):
    duration_seconds: int

class PomodoroSwitch(PomodoroState):
    """
    PomodoroSwitch — текущее состояние + режим, в который переключаемся вручную.
    """
    target: PomodoroMode
