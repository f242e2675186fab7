import logging
from datetime import datetime, timezone

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.models.notification import Notification
from app.models.user import User

logger = logging.getLogger(__name__)


def mark_notifications_read(db: Session, user: User) -> int:
    """Set read_at on all of the user's unread notifications in one UPDATE. Returns the count."""
    user_id = user.id
    result = db.execute(
        update(Notification)
        .where(Notification.notifiable_user_id == user_id, Notification.read_at.is_(None))
        .values(read_at=datetime.now(timezone.utc))
        .execution_options(synchronize_session=False)
    )
    db.commit()

    marked = result.rowcount or 0
    if marked:
        logger.info("Marked %d notification(s) read for user %s", marked, user_id)
    return marked


def list_notifications(db: Session, user: User, unread_only: bool = False, limit: int = 50) -> list[Notification]:
    query = db.query(Notification).filter(Notification.notifiable_user_id == user.id)
    if unread_only:
        query = query.filter(Notification.read_at.is_(None))
    return query.order_by(Notification.created_at.desc()).limit(limit).all()
