from .user import User
from .crop import Crop, Expense, Income, ExpenseType
from ..core.database import Base

__all__ = [
    "User",
    "Crop",
    "Expense",
    "Income",
    "ExpenseType",
    "Base",
]
