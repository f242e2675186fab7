import logging
from decimal import Decimal, InvalidOperation

from fastapi import BackgroundTasks
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.deposit import Deposit
from app.models.user import User
from app.notifications.channels import notify
from app.notifications.deposit_successful import DepositSuccessful

logger = logging.getLogger(__name__)

# Deposit.amount is Numeric(12, 2)
MAX_AMOUNT = Decimal("1E10")
CENT = Decimal("0.01")


class DepositPersistenceError(Exception):
    """The deposit row could not be written."""


def clean_amount(amount) -> Decimal:
    """Coerce to Decimal and reject anything the amount column cannot hold exactly."""
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValueError("Invalid deposit amount")

    if not value.is_finite() or value <= 0 or value >= MAX_AMOUNT:
        raise ValueError("Invalid deposit amount")
    if value != value.quantize(CENT):
        raise ValueError("Invalid deposit amount")
    return value


def record_deposit(db: Session, user: User, amount, background_tasks: BackgroundTasks) -> Deposit:
    amount = clean_amount(amount)

    user_id = user.id
    deposit = Deposit(user_id=user_id, amount=amount)

    db.add(deposit)
    try:
        db.commit()
        db.refresh(deposit)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to record deposit of %s for user %s", amount, user_id)
        raise DepositPersistenceError("Deposit could not be recorded") from e

    logger.info("Deposit %s of %s recorded for user %s", deposit.id, amount, user_id)

    # Committed above; notification is best-effort from here on.
    notify(db, user, DepositSuccessful(amount), background_tasks)

    return deposit


def list_deposits(db: Session, user: User, limit: int = 50) -> list[Deposit]:
    return (
        db.query(Deposit)
        .filter(Deposit.user_id == user.id)
        .order_by(Deposit.created_at.desc())
        .limit(limit)
        .all()
    )
