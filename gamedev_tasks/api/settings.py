# gamedev_tasks/api/settings.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gamedev_tasks.schemas.settings import SettingsRead, SettingsUpdate
from gamedev_tasks.crud.settings import get_settings, save_settings
from gamedev_tasks.dependencies import get_db

router = APIRouter(prefix="/settings", tags=["Settings"])

@router.get("/", response_model=SettingsRead)
def read_settings(db: Session = Depends(get_db)):
    """
    Текущие настройки (при первом обращении создаются значения по умолчанию).
    """
    return get_settings(db)

@router.patch("/", response_model=SettingsRead)
def update_settings(data: SettingsUpdate, db: Session = Depends(get_db)):
    """
    Сохранить настройки: переданные поля мержатся поверх текущих.
    """
    return save_settings(db, data.model_dump(exclude_unset=True))
