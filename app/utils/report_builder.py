"""
Tax calculation and report assembly for one tax year.

Both entry points read the income record and the purchases dated within the
calendar year, then run them through the tax calculator. Nothing is written.
"""

from app.errors import NotFoundError
from app.utils import record_store
from app.utils.tax_calculator import calculator_from_config, total_purchases
from datetime import date, datetime, timezone
from flask import current_app
from typing import Tuple

NO_INCOME_MESSAGE = 'No income data found for the specified year'


def tax_year_bounds(year: int) -> Tuple[date, date]:
    """First and last day of a tax year."""
    return date(year, 1, 1), date(year, 12, 31)


def _load_year(user_id: int, year: int):
    income = record_store.find_income(user_id, year)
    if income is None:
        raise NotFoundError(NO_INCOME_MESSAGE)

    start_date, end_date = tax_year_bounds(year)
    purchases = record_store.find_purchases_in_range(user_id, start_date, end_date)
    return income, purchases


def calculate_tax_for_year(user_id: int, year: int) -> dict:
    """
    Tax summary for a year.

    Raises:
        NotFoundError: no income record for the year
    """
    income, purchases = _load_year(user_id, year)
    income_total = income.total_income
    purchase_total = total_purchases(purchases)
    breakdown = calculator_from_config(current_app.config).calculate(income_total, purchase_total)

    return {
        'year': year,
        'totalIncome': income_total,
        'totalPurchases': purchase_total,
        'taxDetails': breakdown.to_dict()
    }


def build_tax_report(user, year: int) -> dict:
    """
    Full report for a year: user details, income, purchases and tax.

    Raises:
        NotFoundError: no income record for the year
    """
    income, purchases = _load_year(user.id, year)
    income_total = income.total_income
    purchase_total = total_purchases(purchases)
    breakdown = calculator_from_config(current_app.config).calculate(income_total, purchase_total)

    return {
        'reportDate': datetime.now(timezone.utc).isoformat(),
        'taxYear': year,
        'userDetails': {
            'username': user.username,
            'email': user.email
        },
        'incomeDetails': {
            'primaryIncome': income.primary_income,
            'additionalIncome': income.additional_income,
            'totalIncome': income_total
        },
        'purchaseDetails': {
            'totalPurchases': purchase_total,
            'purchaseCount': len(purchases),
            'purchases': [
                {
                    'amount': p.amount,
                    'category': p.category,
                    'description': p.description,
                    'date': p.purchase_date.isoformat()
                }
                for p in purchases
            ]
        },
        'taxCalculation': breakdown.to_dict()
    }
