# app/models/notification.py
import uuid
from sqlalchemy import Column, ForeignKey, DateTime, String, JSON, Uuid
from sqlalchemy.sql import func
from app.database import Base

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    notifiable_user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)

    type = Column(String, nullable=False)  # e.g. DepositSuccessful
    data = Column(JSON, nullable=False, default=dict)

    read_at = Column(DateTime(timezone=True), nullable=True)  # NULL = unread

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def is_read(self) -> bool:
        return self.read_at is not None
