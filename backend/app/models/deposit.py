# app/models/deposit.py
import uuid
from sqlalchemy import Column, ForeignKey, DateTime, Numeric, Uuid
from sqlalchemy.sql import func
from app.database import Base

class Deposit(Base):
    __tablename__ = "deposits"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)

    # single implicit currency, always > 0
    amount = Column(Numeric(12, 2), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
