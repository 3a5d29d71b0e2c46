# backend/croptracker/schemas/crop.py

import datetime
import math
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# ============================================================
# REQUEST SCHEMAS
# ============================================================

class CropCreate(BaseModel):
    name: str
    acres: int
    date: datetime.date

    @field_validator("acres", mode="before")
    @classmethod
    def truncate_acres(cls, value):
        # "5", 5.0 and "5.7" are all accepted as 5
        if isinstance(value, (str, float)):
            number = float(value)
            if not math.isfinite(number):
                raise ValueError("acres must be a finite number")
            return int(number)
        return value


class CropFilter(BaseModel):
    from_date: Optional[datetime.date] = None
    to_date: Optional[datetime.date] = None
    crop_id: Optional[str] = None
    page_number: int = Field(default=1, ge=1)


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class CropSummary(BaseModel):
    id: str
    name: str
    acre: int
    expense_amount: float = Field(alias="expenseAmount")
    income_amount: float = Field(alias="incomeAmount")
    profit: float

    class Config:
        populate_by_name = True


class CropPage(BaseModel):
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_records: int = Field(alias="totalRecords")
    data: List[CropSummary] = []

    class Config:
        populate_by_name = True
