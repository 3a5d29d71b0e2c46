# backend/croptracker/crud/incomes.py

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.crop import Crop, Income
from ..schemas.ledger import DateRange, IncomeCreate


async def list_incomes(
    crop_id: str, user_id: str, period: DateRange, db: AsyncSession
) -> List[Income]:
    q = (
        select(Income)
        .join(Crop, Income.crop_id == Crop.id)
        .where(Income.crop_id == crop_id, Crop.user_id == user_id)
    )
    if period.from_date:
        q = q.where(Income.date >= period.from_date)
    if period.to_date:
        q = q.where(Income.date <= period.to_date)

    rows = await db.scalars(q.order_by(Income.date.desc()))
    return rows.all()


async def create_income(payload: IncomeCreate, db: AsyncSession) -> Income:
    income = Income(
        crop_id=payload.crop_id,
        quantity=payload.quantity,
        amount=payload.amount,
        date=payload.date,
        notes=payload.notes,
    )
    db.add(income)
    await db.commit()
    await db.refresh(income)
    return income


async def delete_income(income_id: str, user_id: str, db: AsyncSession) -> bool:
    income = await db.scalar(
        select(Income)
        .join(Crop, Income.crop_id == Crop.id)
        .where(Income.id == income_id, Crop.user_id == user_id)
    )
    if not income:
        return False

    await db.delete(income)
    await db.commit()
    return True
