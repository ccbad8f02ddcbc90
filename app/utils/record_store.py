"""
Persistence of income and purchase records.

Each insert is independent; there are no update or delete operations.
"""

from app import db
from app.errors import StorageError
from app.models.income_record import IncomeRecord
from app.models.purchase_record import PurchaseRecord, DEFAULT_CATEGORY
from datetime import date
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


def _commit(record, action: str):
    db.session.add(record)
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Failed to {action}: {e}", exc_info=True)
        raise StorageError(f'Error {action}')
    return record


def add_income(user_id: int, primary_income: float, additional_income: float, year: int) -> IncomeRecord:
    """Insert an income record for a tax year."""
    record = IncomeRecord(
        user_id=user_id,
        primary_income=primary_income,
        additional_income=additional_income or 0.0,
        year=year
    )
    _commit(record, 'adding income')
    logger.info(f"Added income record {record.id} for user {user_id}, year {year}")
    return record


def list_income(user_id: int) -> List[IncomeRecord]:
    """All income records for a user, newest tax year first."""
    try:
        return IncomeRecord.query.filter_by(user_id=user_id).order_by(
            IncomeRecord.year.desc(), IncomeRecord.id
        ).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to list income for user {user_id}: {e}", exc_info=True)
        raise StorageError('Error retrieving income data')


def find_income(user_id: int, year: int) -> Optional[IncomeRecord]:
    """First income record for (user, year), by insertion order."""
    try:
        return IncomeRecord.query.filter_by(user_id=user_id, year=year).order_by(
            IncomeRecord.id
        ).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to find income for user {user_id}, year {year}: {e}", exc_info=True)
        raise StorageError('Error retrieving income data')


def add_purchase(user_id: int, amount: float, purchase_date: date,
                 category: Optional[str] = None, description: Optional[str] = None) -> PurchaseRecord:
    """Insert a purchase record."""
    record = PurchaseRecord(
        user_id=user_id,
        amount=amount,
        category=category or DEFAULT_CATEGORY,
        description=description or '',
        purchase_date=purchase_date
    )
    _commit(record, 'adding purchase')
    logger.info(f"Added purchase record {record.id} for user {user_id} on {purchase_date}")
    return record


def list_purchases(user_id: int) -> List[PurchaseRecord]:
    """All purchases for a user, most recent first."""
    try:
        return PurchaseRecord.query.filter_by(user_id=user_id).order_by(
            PurchaseRecord.purchase_date.desc(), PurchaseRecord.id
        ).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to list purchases for user {user_id}: {e}", exc_info=True)
        raise StorageError('Error retrieving purchases')


def find_purchases_in_range(user_id: int, start_date: date, end_date: date) -> List[PurchaseRecord]:
    """Purchases dated within [start_date, end_date], inclusive."""
    try:
        return PurchaseRecord.query.filter(
            PurchaseRecord.user_id == user_id,
            PurchaseRecord.purchase_date >= start_date,
            PurchaseRecord.purchase_date <= end_date
        ).order_by(PurchaseRecord.purchase_date, PurchaseRecord.id).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to retrieve purchases for user {user_id}: {e}", exc_info=True)
        raise StorageError('Error retrieving purchase data')
