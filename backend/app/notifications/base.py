# app/notifications/base.py
import re

from app.models.user import User
from app.notifications.mail import MailMessage


class BaseNotification:
    """
    A message for one user, delivered through the channels named by via().
    Subclasses implement the representation each of those channels needs.
    """

    @property
    def type(self) -> str:
        return type(self).__name__

    @property
    def subject(self) -> str:
        # DepositSuccessful -> "Deposit Successful"
        return re.sub(r"(?<!^)(?=[A-Z])", " ", self.type)

    def via(self, notifiable: User) -> list[str]:
        raise NotImplementedError

    def to_mail(self, notifiable: User) -> MailMessage:
        raise NotImplementedError

    def to_array(self, notifiable: User) -> dict:
        raise NotImplementedError
