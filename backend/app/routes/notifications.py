from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.deps import get_db, get_current_user
from app.models.user import User
from app.schemas.notification import MarkedAsRead, NotificationRead
from app.services.notifications import list_notifications, mark_notifications_read

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[NotificationRead])
def my_notifications(
    unread: bool = False,
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_notifications(db, current_user, unread_only=unread, limit=limit)


@router.post("/mark-as-read", response_model=MarkedAsRead)
def mark_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    marked = mark_notifications_read(db, current_user)
    return {"status": "Notifications marked as read", "marked": marked}
