# gamedev_tasks/api/notification.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List

from gamedev_tasks.schemas.notification import NotificationCreate, NotificationRead
from gamedev_tasks.schemas.response import SuccessResponse
from gamedev_tasks.crud.notification import (
    create_notification,
    get_notifications,
    mark_notification_read,
    mark_all_notifications_read,
    delete_notification,
    check_deadline_notifications,
)
from gamedev_tasks.dependencies import get_db

router = APIRouter(prefix="/notifications", tags=["Notifications"])

@router.get("/", response_model=List[NotificationRead])
def list_notifications(
    unread_only: bool = Query(False),
    db: Session = Depends(get_db),
):
    return get_notifications(db, unread_only=unread_only)

@router.post("/", response_model=NotificationRead)
def create_new_notification(data: NotificationCreate, db: Session = Depends(get_db)):
    return create_notification(db, data.model_dump())

@router.post("/check", response_model=List[NotificationRead])
def check_deadlines(db: Session = Depends(get_db)):
    """
    Проверить приближающиеся дедлайны и создать новые уведомления.
    Клиенты опрашивают этот эндпоинт раз в NOTIFICATION_CHECK_MINUTES.
    """
    return check_deadline_notifications(db)

@router.post("/read-all", response_model=SuccessResponse)
def read_all_notifications(db: Session = Depends(get_db)):
    count = mark_all_notifications_read(db)
    return SuccessResponse(result=count, detail="Notifications marked as read")

@router.post("/{notification_id}/read", response_model=NotificationRead)
def read_notification(notification_id: int, db: Session = Depends(get_db)):
    notification = mark_notification_read(db, notification_id)
    if not notification:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return notification

@router.delete("/{notification_id}", response_model=SuccessResponse)
def delete_one_notification(notification_id: int, db: Session = Depends(get_db)):
    if not delete_notification(db, notification_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return SuccessResponse(result=notification_id, detail="Notification deleted")
