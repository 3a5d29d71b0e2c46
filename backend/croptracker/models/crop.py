# backend/croptracker/models/crop.py

from sqlalchemy import (
    Column, String, Integer, Float, Date, DateTime, Text,
    ForeignKey, Enum as SAEnum
)
from sqlalchemy.orm import relationship
import enum

from ..core.database import Base
from .base import gen_uuid, utcnow


class ExpenseType(str, enum.Enum):
    ploughing = "ploughing"
    planting = "planting"
    fertilizer = "fertilizer"
    pesticide = "pesticide"
    irrigation = "irrigation"
    harvesting = "harvesting"
    labor = "labor"
    others = "others"


# ============================================================
# CROP (one growing cycle owned by a user)
# ============================================================
class Crop(Base):
    __tablename__ = "crops"

    id = Column(String(36), primary_key=True, default=gen_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    acres = Column(Integer, nullable=False)
    date = Column(Date, nullable=False, index=True)  # planting date
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="crops")
    expenses = relationship("Expense", back_populates="crop", cascade="all, delete-orphan")
    incomes = relationship("Income", back_populates="crop", cascade="all, delete-orphan")


# ============================================================
# EXPENSE
# ============================================================
class Expense(Base):
    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=gen_uuid)
    crop_id = Column(String(36), ForeignKey("crops.id"), nullable=False, index=True)
    type = Column(SAEnum(ExpenseType, name="expense_type", native_enum=False), nullable=False)
    date = Column(Date, nullable=False)
    amount = Column(Float, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow)

    crop = relationship("Crop", back_populates="expenses")


# ============================================================
# INCOME (quantity sold x unit price)
# ============================================================
class Income(Base):
    __tablename__ = "incomes"

    id = Column(String(36), primary_key=True, default=gen_uuid)
    crop_id = Column(String(36), ForeignKey("crops.id"), nullable=False, index=True)
    quantity = Column(Float, nullable=False)
    amount = Column(Float, nullable=False)  # unit price
    date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow)

    crop = relationship("Crop", back_populates="incomes")
