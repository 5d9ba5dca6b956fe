# gamedev_tasks/main.py

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import os
import logging

from gamedev_tasks.api.activity import router as activity_router
from gamedev_tasks.api.backup import router as backup_router
from gamedev_tasks.api.block import router as block_router
from gamedev_tasks.api.comment import router as comment_router
from gamedev_tasks.api.notification import router as notification_router
from gamedev_tasks.api.pomodoro import router as pomodoro_router
from gamedev_tasks.api.project import router as project_router
from gamedev_tasks.api.settings import router as settings_router
from gamedev_tasks.api.statistics import router as statistics_router
from gamedev_tasks.api.subtask import router as subtask_router
from gamedev_tasks.api.sync import router as sync_router
from gamedev_tasks.api.task import router as task_router
from gamedev_tasks.api.time_log import router as time_log_router
from gamedev_tasks.api.user import router as user_router

from gamedev_tasks.core.settings import settings
from gamedev_tasks.core.exceptions import (
    BlockAlreadyExists, NotFoundError, StorageError, TimeTrackingError, ValidationError,
)
from gamedev_tasks.schemas.response import ErrorResponse
from gamedev_tasks.database import engine, SessionLocal
from gamedev_tasks.models import Base
from gamedev_tasks.initial_data import seed_defaults

# Логирование
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("GameDevTasks.App")

app = FastAPI(
    title="GameDev Tasks API",
    version="1.0.0",
    description="Offline-first task tracker for game development projects",
)

# Middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Роутеры
app.include_router(project_router)
app.include_router(task_router)
app.include_router(subtask_router)
app.include_router(block_router)
app.include_router(comment_router)
app.include_router(time_log_router)
app.include_router(activity_router)
app.include_router(sync_router)
app.include_router(notification_router)
app.include_router(settings_router)
app.include_router(user_router)
app.include_router(statistics_router)
app.include_router(backup_router)
app.include_router(pomodoro_router)

# Health check & root
@app.get("/", tags=["Health"])
def root():
    return {"status": "GameDev Tasks API is running!"}

@app.get("/health", tags=["Health"])
def health():
    return {"ok": True}

@app.on_event("startup")
def startup_event():
    logger.info(f"Starting GameDev Tasks API ({settings.ENV})")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_defaults(db)
    finally:
        db.close()

@app.on_event("shutdown")
def shutdown_event():
    logger.info("Stopping GameDev Tasks API")
    SessionLocal.remove()

def _error(status_code: int, exc: Exception) -> JSONResponse:
    body = ErrorResponse(detail=str(exc), error=exc.__class__.__name__)
    return JSONResponse(status_code=status_code, content=body.model_dump())

@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    return _error(404, exc)

@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    return _error(400, exc)

@app.exception_handler(BlockAlreadyExists)
async def block_conflict_exception_handler(request: Request, exc: BlockAlreadyExists):
    return _error(409, exc)

@app.exception_handler(TimeTrackingError)
async def time_tracking_exception_handler(request: Request, exc: TimeTrackingError):
    return _error(409, exc)

@app.exception_handler(StorageError)
async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return _error(500, exc)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "gamedev_tasks.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=settings.DEBUG,
    )
