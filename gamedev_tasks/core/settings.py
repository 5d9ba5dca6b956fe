# gamedev_tasks/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pydantic import field_validator

class Settings(BaseSettings):
    """
    Основные переменные окружения и настройки приложения.
    Значения берутся из окружения или .env.
    """
    # Database
    DATABASE_URL: str = "sqlite:///./gamedev_tasks.db"

    # App meta
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Пользователь по умолчанию (для activity log, если клиент не представился)
    DEFAULT_USER_ID: str = "current-user"

    # Статистика / sync-очередь / уведомления
    STATS_WINDOW_DAYS: int = 30
    SYNC_LOG_RETENTION: int = 1000
    NOTIFICATION_CHECK_MINUTES: int = 5

    # Авто-сплит строкового списка ALLOWED_ORIGINS из .env
    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

settings = Settings()
