# app/notifications/channels.py
import logging
from typing import Callable

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from app.models.notification import Notification
from app.models.user import User
from app.notifications.base import BaseNotification
from app.services.mailer import deliver_mail

logger = logging.getLogger(__name__)

ChannelHandler = Callable[[Session, User, BaseNotification, BackgroundTasks], None]


def send_database_channel(db: Session, notifiable: User, notification: BaseNotification,
                          background_tasks: BackgroundTasks) -> None:
    row = Notification(
        notifiable_user_id=notifiable.id,
        type=notification.type,
        data=notification.to_array(notifiable),
        read_at=None,
    )
    db.add(row)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.debug("Stored %s notification %s for user %s", notification.type, row.id, notifiable.id)


def send_mail_channel(db: Session, notifiable: User, notification: BaseNotification,
                      background_tasks: BackgroundTasks) -> None:
    # Only enqueue; the response never waits on the transport.
    message = notification.to_mail(notifiable)
    background_tasks.add_task(deliver_mail, notifiable.email, message)
    logger.info("Queued %s mail for %s", notification.type, notifiable.email)


CHANNELS: dict[str, ChannelHandler] = {
    "mail": send_mail_channel,
    "database": send_database_channel,
}


def notify(db: Session, notifiable: User, notification: BaseNotification,
           background_tasks: BackgroundTasks) -> None:
    """
    Send a notification through every channel it names.
    A failing channel is logged and skipped; callers never see the error.
    """
    names = notification.via(notifiable)
    user_id = notifiable.id
    unknown = [name for name in names if name not in CHANNELS]
    if unknown:
        raise ValueError(f"Unknown notification channel(s): {', '.join(unknown)}")

    for name in names:
        try:
            CHANNELS[name](db, notifiable, notification, background_tasks)
        except Exception:  # noqa: BLE001 - delivery must not undo the caller's work
            logger.exception(
                "%s notification via %s failed for user %s", notification.type, name, user_id
            )
