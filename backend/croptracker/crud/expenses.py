# backend/croptracker/crud/expenses.py

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.crop import Crop, Expense
from ..schemas.ledger import DateRange, ExpenseCreate


async def list_expenses(
    crop_id: str, user_id: str, period: DateRange, db: AsyncSession
) -> List[Expense]:
    q = (
        select(Expense)
        .join(Crop, Expense.crop_id == Crop.id)
        .where(Expense.crop_id == crop_id, Crop.user_id == user_id)
    )
    if period.from_date:
        q = q.where(Expense.date >= period.from_date)
    if period.to_date:
        q = q.where(Expense.date <= period.to_date)

    rows = await db.scalars(q.order_by(Expense.date.desc()))
    return rows.all()


async def create_expense(payload: ExpenseCreate, db: AsyncSession) -> Expense:
    expense = Expense(
        crop_id=payload.crop_id,
        type=payload.type,
        date=payload.date,
        amount=payload.amount,
        notes=payload.notes,
    )
    db.add(expense)
    await db.commit()
    await db.refresh(expense)
    return expense


async def delete_expense(expense_id: str, user_id: str, db: AsyncSession) -> bool:
    expense = await db.scalar(
        select(Expense)
        .join(Crop, Expense.crop_id == Crop.id)
        .where(Expense.id == expense_id, Crop.user_id == user_id)
    )
    if not expense:
        return False

    await db.delete(expense)
    await db.commit()
    return True
