# backend/croptracker/api/incomes.py

import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.auth import CurrentUser, get_current_user
from ..core.database import get_db
from ..core.logger import logger
from ..crud import crops as crud_crops
from ..crud import incomes as crud_incomes
from ..schemas.common import Message
from ..schemas.ledger import DateRange, IncomeCreate, IncomeOut

router = APIRouter(prefix="/api/incomes", tags=["Incomes"])


@router.get(
    "/{crop_id}",
    response_model=List[IncomeOut],
    summary="Get all incomes for a specific crop",
)
async def list_incomes(
    crop_id: str,
    from_date: Optional[datetime.date] = Query(None, alias="fromDate"),
    to_date: Optional[datetime.date] = Query(None, alias="toDate"),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    period = DateRange(from_date=from_date, to_date=to_date)
    return await crud_incomes.list_incomes(crop_id, user.id, period, db)


@router.post("", response_model=Message, summary="Add a new income for a crop")
async def create_income(
    payload: IncomeCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    crop = await crud_crops.get_owned_crop(payload.crop_id, user.id, db)
    if not crop:
        raise HTTPException(status_code=404, detail="Crop not found")

    income = await crud_incomes.create_income(payload, db)
    logger.info(f"Income {income.id} saved for crop {crop.id}", extra={"user_id": user.id})
    return {"message": "income saved"}


@router.delete("/{income_id}", response_model=Message, summary="Delete an income by ID")
async def delete_income(
    income_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    deleted = await crud_incomes.delete_income(income_id, user.id, db)
    if not deleted:
        raise HTTPException(status_code=404, detail="Income not found")

    logger.info(f"Income {income_id} deleted", extra={"user_id": user.id})
    return {"message": "income deleted"}
