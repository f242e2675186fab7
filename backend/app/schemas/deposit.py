from pydantic import BaseModel, Field
from uuid import UUID
from decimal import Decimal
from datetime import datetime
from typing import Optional

class DepositCreate(BaseModel):
    # Numeric(12, 2) column; no currency field, single implicit currency
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)

class DepositRead(BaseModel):
    id: UUID
    user_id: UUID
    amount: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class DepositCreated(BaseModel):
    status: str
    deposit: DepositRead
