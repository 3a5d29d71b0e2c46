# backend/croptracker/api/expenses.py

import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.auth import CurrentUser, get_current_user
from ..core.database import get_db
from ..core.logger import logger
from ..crud import crops as crud_crops
from ..crud import expenses as crud_expenses
from ..schemas.common import Message
from ..schemas.ledger import DateRange, ExpenseCreate, ExpenseOut

router = APIRouter(prefix="/api/expenses", tags=["Expenses"])


@router.get(
    "/{crop_id}",
    response_model=List[ExpenseOut],
    summary="Get all expenses for a specific crop",
)
async def list_expenses(
    crop_id: str,
    from_date: Optional[datetime.date] = Query(None, alias="fromDate"),
    to_date: Optional[datetime.date] = Query(None, alias="toDate"),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    period = DateRange(from_date=from_date, to_date=to_date)
    return await crud_expenses.list_expenses(crop_id, user.id, period, db)


@router.post(
    "",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new expense for a crop",
)
async def create_expense(
    payload: ExpenseCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    crop = await crud_crops.get_owned_crop(payload.crop_id, user.id, db)
    if not crop:
        raise HTTPException(status_code=404, detail="Crop not found")

    expense = await crud_expenses.create_expense(payload, db)
    logger.info(f"Expense {expense.id} saved for crop {crop.id}", extra={"user_id": user.id})
    return {"message": "expense saved"}


@router.delete("/{expense_id}", response_model=Message, summary="Delete an expense by ID")
async def delete_expense(
    expense_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    deleted = await crud_expenses.delete_expense(expense_id, user.id, db)
    if not deleted:
        raise HTTPException(status_code=404, detail="Expense not found")

    logger.info(f"Expense {expense_id} deleted", extra={"user_id": user.id})
    return {"message": "expense deleted"}
