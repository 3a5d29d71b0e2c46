# backend/croptracker/schemas/ledger.py

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models.crop import ExpenseType


# ------------------------------------------------------------
# EXPENSES
# ------------------------------------------------------------

class ExpenseCreate(BaseModel):
    crop_id: str = Field(alias="cropId")
    type: ExpenseType
    date: datetime.date
    amount: float
    notes: Optional[str] = None

    class Config:
        populate_by_name = True


class ExpenseOut(BaseModel):
    id: str
    type: ExpenseType
    date: datetime.date
    amount: float
    notes: Optional[str] = None

    class Config:
        from_attributes = True


# ------------------------------------------------------------
# INCOMES
# ------------------------------------------------------------

class IncomeCreate(BaseModel):
    crop_id: str = Field(alias="cropId")
    quantity: float
    amount: float
    date: datetime.date
    notes: Optional[str] = None

    class Config:
        populate_by_name = True


class IncomeOut(BaseModel):
    id: str
    date: datetime.date
    quantity: float
    amount: float
    notes: Optional[str] = None

    class Config:
        from_attributes = True


# ------------------------------------------------------------
# DATE RANGE (query string)
# ------------------------------------------------------------

class DateRange(BaseModel):
    from_date: Optional[datetime.date] = None
    to_date: Optional[datetime.date] = None
