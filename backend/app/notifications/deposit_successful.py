# app/notifications/deposit_successful.py
from decimal import Decimal

from app.core.config import settings
from app.models.user import User
from app.notifications.base import BaseNotification
from app.notifications.mail import MailMessage


def format_amount(amount) -> str:
    # Keep the caller's precision ("42.50" stays "42.50"), never scientific notation.
    if isinstance(amount, Decimal):
        return format(amount, "f")
    return str(amount)


class DepositSuccessful(BaseNotification):

    def __init__(self, amount):
        self.amount = amount

    @property
    def message(self) -> str:
        return f"Your deposit of {format_amount(self.amount)} was successful."

    def via(self, notifiable: User) -> list[str]:
        return ["mail", "database"]

    def to_mail(self, notifiable: User) -> MailMessage:
        return (
            MailMessage(subject=self.subject)
            .greeting("Hello,")
            .line(self.message)
            .action("View dashboard", f"{settings.APP_URL}/home")
            .line("Thank you for using our application!")
        )

    def to_array(self, notifiable: User) -> dict:
        return {"data": self.message}
