# gamedev_tasks/initial_data.py

import logging
from sqlalchemy.orm import Session

from gamedev_tasks.database import SessionLocal, engine
from gamedev_tasks.models import Base
from gamedev_tasks.crud.user import init_demo_user
from gamedev_tasks.crud.settings import get_settings

logger = logging.getLogger("GameDevTasks.InitialData")

def seed_defaults(db: Session) -> None:
    """
    Пользователь по умолчанию + запись настроек. Повторный запуск ничего не меняет.
    """
    user = init_demo_user(db)
    get_settings(db)
    logger.info(f"Initial data ready (default user '{user.id}')")

def main() -> None:
    logger.info("Initializing database schema and initial data...")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_defaults(db)
    finally:
        db.close()
    logger.info("Finished initial data setup.")

if __name__ == "__main__":
    from dotenv import load_dotenv
    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    main()
