from pydantic import BaseModel
from uuid import UUID
from datetime import datetime
from typing import Any, Optional

class NotificationRead(BaseModel):
    id: UUID
    type: str
    data: dict[str, Any]
    is_read: bool
    read_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class MarkedAsRead(BaseModel):
    status: str
    marked: int
