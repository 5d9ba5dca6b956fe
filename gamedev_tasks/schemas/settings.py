# gamedev_tasks/schemas/settings.py
from pydantic import BaseModel, Field
from typing import Optional, Literal

from gamedev_tasks.core.constants import DEFAULT_COLOR

class WidgetSettings(BaseModel):
    showCompleted: bool = False
    maxItems: int = Field(5, ge=1)
    sortBy: str = "deadline"

class PomodoroSettings(BaseModel):
    """
    PomodoroSettings — длительности в минутах, интервал длинного перерыва в помидорах.
    """
    workDuration: int = Field(25, ge=1)
    breakDuration: int = Field(5, ge=1)
    longBreakDuration: int = Field(15, ge=1)
    longBreakInterval: int = Field(4, ge=1)

class SettingsBase(BaseModel):
    theme: Literal["light", "dark", "system"] = "light"
    language: str = Field("en", min_length=2, max_length=8)
    primary_color: str = DEFAULT_COLOR
    notifications_enabled: bool = True
    reminder_time: int = Field(24, ge=0, description="Часов до дедлайна")
    widget_enabled: bool = True
    widget_settings: WidgetSettings = Field(default_factory=WidgetSettings)
    offline_mode: bool = False
    pomodoro_settings: PomodoroSettings = Field(default_factory=PomodoroSettings)

class SettingsUpdate(BaseModel):
    """
    SettingsUpdate — частичное сохранение настроек (мерж поверх текущих).
    """
    theme: Optional[Literal["light", "dark", "system"]] = None
    language: Optional[str] = Field(None, min_length=2, max_length=8)
    primary_color: Optional[str] = None
    notifications_enabled: Optional[bool] = None
    reminder_time: Optional[int] = Field(None, ge=0)
    widget_enabled: Optional[bool] = None
    widget_settings: Optional[WidgetSettings] = None
    offline_mode: Optional[bool] = None
    pomodoro_settings: Optional[PomodoroSettings] = None

class SettingsRead(SettingsBase):
    id: int

    class Config:
        from_attributes = True
