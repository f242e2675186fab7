from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.deps import get_db, get_current_user
from app.models.user import User
from app.schemas.deposit import DepositCreate, DepositCreated, DepositRead
from app.services.deposits import DepositPersistenceError, list_deposits, record_deposit

router = APIRouter(prefix="/deposits", tags=["Deposits"])


@router.post("", response_model=DepositCreated, status_code=status.HTTP_201_CREATED)
def create_deposit(
    payload: DepositCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        deposit = record_deposit(db, current_user, payload.amount, background_tasks)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DepositPersistenceError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Deposit could not be recorded. Please try again later.",
        )

    return {"status": "Your deposit was successful!", "deposit": deposit}


@router.get("", response_model=list[DepositRead])
def my_deposits(
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_deposits(db, current_user, limit)
