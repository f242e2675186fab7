import asyncio
import logging

import httpx

from app.core.config import settings
from app.notifications.mail import MailMessage

logger = logging.getLogger(__name__)


class MailDeliveryError(RuntimeError):
    pass


async def send_mail(to: str, message: MailMessage) -> None:
    """
    Hand one message to the mail transport.
    Without MAIL_API_URL the message is only written to the log.
    """
    if not settings.MAIL_API_URL:
        logger.info("Mail to %s [%s]\n%s", to, message.subject, message.render_text())
        return

    payload = {
        "from": settings.MAIL_FROM,
        "to": to,
        "subject": message.subject,
        "text": message.render_text(),
        "html": message.render_html(),
    }
    headers = {}
    if settings.MAIL_API_KEY:
        headers["Authorization"] = f"Bearer {settings.MAIL_API_KEY}"

    async with httpx.AsyncClient(timeout=settings.MAIL_TIMEOUT_SECONDS) as client:
        resp = await client.post(settings.MAIL_API_URL, json=payload, headers=headers)

    if resp.status_code < 200 or resp.status_code >= 300:
        raise MailDeliveryError(
            f"Mail API returned {resp.status_code}: {resp.text[:300]}"
        )
    logger.debug("Mail to %s accepted by transport", to)


async def deliver_mail(to: str, message: MailMessage) -> None:
    """Background task: send with retries, log the final failure instead of raising."""
    attempts = max(1, settings.MAIL_MAX_ATTEMPTS)
    for attempt in range(1, attempts + 1):
        try:
            await send_mail(to, message)
            return
        except Exception as e:  # noqa: BLE001 - mail is fire-and-forget
            logger.warning("Mail to %s failed (attempt %d/%d): %s", to, attempt, attempts, e)
            if attempt < attempts:
                await asyncio.sleep(settings.MAIL_RETRY_BACKOFF_SECONDS * attempt)

    logger.error("Giving up on mail to %s [%s] after %d attempts", to, message.subject, attempts)
