# gamedev_tasks/models/settings.py
from sqlalchemy import Column, Integer, String, Boolean, JSON
from gamedev_tasks.models.base import Base
from gamedev_tasks.core.constants import DEFAULT_COLOR, DEFAULT_WIDGET_SETTINGS, DEFAULT_POMODORO_SETTINGS

SETTINGS_ID = 1

class Settings(Base):
    """
    Settings — единственная запись (id=1) с пользовательскими настройками приложения.
    """
    __tablename__ = "settings"

    id: int = Column(Integer, primary_key=True, default=SETTINGS_ID)
    theme: str = Column(String(16), nullable=False, default="light")
    language: str = Column(String(8), nullable=False, default="en")
    primary_color: str = Column(String(16), nullable=False, default=DEFAULT_COLOR)
    notifications_enabled: bool = Column(Boolean, nullable=False, default=True)
    reminder_time: int = Column(Integer, nullable=False, default=24, doc="За сколько часов до дедлайна напоминать")
    widget_enabled: bool = Column(Boolean, nullable=False, default=True)
    widget_settings: dict = Column(JSON, nullable=False, default=lambda: dict(DEFAULT_WIDGET_SETTINGS))
    offline_mode: bool = Column(Boolean, nullable=False, default=False)
    pomodoro_settings: dict = Column(JSON, nullable=False, default=lambda: dict(DEFAULT_POMODORO_SETTINGS))

    def __repr__(self):
        return f"<Settings(theme='{self.theme}', language='{self.language}')>"
