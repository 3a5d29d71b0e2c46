# backend/croptracker/services/crop_summary_service.py

import asyncio
import math
from typing import Iterable, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from ..core.logger import logger
from ..crud.crops import count_crops, list_crop_page
from ..models.crop import Crop, Expense, Income
from ..schemas.crop import CropFilter, CropPage, CropSummary

PAGE_SIZE = 5


# ----------------------------------------------------------
# ARITHMETIC
# ----------------------------------------------------------

def total_expense(amounts: Iterable[float]) -> float:
    return sum(amounts)


def total_income(lines: Iterable[Tuple[float, float]]) -> float:
    """Sum of quantity x unit amount over income lines."""
    return sum(quantity * amount for quantity, amount in lines)


def summarize_crop(crop: Crop, expense_amounts, income_lines) -> CropSummary:
    expense_amount = total_expense(expense_amounts)
    income_amount = total_income(income_lines)

    return CropSummary(
        id=crop.id,
        name=crop.name,
        acre=crop.acres,
        expense_amount=expense_amount,
        income_amount=income_amount,
        profit=income_amount - expense_amount,
    )


def page_count(total_records: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(total_records / page_size)


# ----------------------------------------------------------
# PER-CROP TOTALS
# ----------------------------------------------------------

async def compute_crop_summary(crop: Crop, engine: AsyncEngine) -> CropSummary:
    """
    Fetch every expense and income of one crop and total them.

    Runs in its own session so that several crops can be summed
    concurrently. No date filter: the listing's date range only
    selects crops.
    """
    async with AsyncSession(engine) as session:
        expense_rows = await session.scalars(
            select(Expense.amount).where(Expense.crop_id == crop.id)
        )
        income_rows = await session.execute(
            select(Income.quantity, Income.amount).where(Income.crop_id == crop.id)
        )
        expense_amounts = expense_rows.all()
        income_lines = income_rows.all()

    return summarize_crop(crop, expense_amounts, income_lines)


# ----------------------------------------------------------
# CROP LISTING WITH PROFIT
# ----------------------------------------------------------

async def list_crop_summaries(user_id: str, filters: CropFilter, db: AsyncSession) -> CropPage:
    total_records = await count_crops(user_id, filters, db)
    total_pages = page_count(total_records)

    crops = await list_crop_page(user_id, filters, PAGE_SIZE, db)

    # gather keeps the page order; any failure fails the whole listing
    summaries = await asyncio.gather(
        *(compute_crop_summary(crop, db.bind) for crop in crops)
    )

    logger.debug(
        f"Summarised {len(summaries)} of {total_records} crops (page {filters.page_number})",
        extra={"user_id": user_id},
    )

    return CropPage(
        current_page=filters.page_number,
        total_pages=total_pages,
        total_records=total_records,
        data=list(summaries),
    )
