"""
Model package initialization.
"""

from app.models.user import User
from app.models.income_record import IncomeRecord
from app.models.purchase_record import PurchaseRecord

__all__ = [
    'User',
    'IncomeRecord',
    'PurchaseRecord'
]
