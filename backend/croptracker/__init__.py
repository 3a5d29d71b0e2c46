"""Crop Ledger: crops, expenses, incomes and per-crop profit."""

__version__ = "1.0.0"
