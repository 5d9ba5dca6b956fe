# gamedev_tasks/crud/settings.py
from sqlalchemy.orm import Session
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.settings import Settings as SettingsModel, SETTINGS_ID

logger = logging.getLogger("GameDevTasks.Settings")

SETTINGS_FIELDS = [
    "theme", "language", "primary_color", "notifications_enabled", "reminder_time",
    "widget_enabled", "widget_settings", "offline_mode", "pomodoro_settings",
]

def get_settings(db: Session) -> SettingsModel:
    """
    Возвращает единственную запись настроек, при первом обращении создаёт её с дефолтами.
    """
    settings_row = db.get(SettingsModel, SETTINGS_ID)
    if settings_row is None:
        settings_row = SettingsModel(id=SETTINGS_ID)
        with atomic(db, "Database error while creating settings."):
            db.add(settings_row)
        logger.info("Created default settings")
    return settings_row

def save_settings(db: Session, data: dict) -> SettingsModel:
    """
    Мержит переданные поля поверх текущих настроек. id всегда 1.
    """
    settings_row = get_settings(db)
    with atomic(db, "Database error while saving settings."):
        for field in SETTINGS_FIELDS:
            if data.get(field) is not None:
                setattr(settings_row, field, data[field])
    logger.info(f"Saved settings fields: {sorted(k for k in data if k in SETTINGS_FIELDS)}")
    return settings_row
