"""
Request payload parsing for the JSON API.
"""

from datetime import date, datetime
from flask import request
from typing import Any, Optional

from app.errors import ValidationError


def json_body() -> dict:
    """Return the request's JSON object; an absent body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def get_field(data: dict, *names: str) -> Any:
    """Return the first present, non-blank value among names (camelCase or snake_case)."""
    for name in names:
        value = data.get(name)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def parse_amount(value: Any, field: str) -> float:
    """Parse a non-negative currency amount."""
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a number')
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{field} must be a number')
    if amount != amount or amount in (float('inf'), float('-inf')):
        raise ValidationError(f'{field} must be a number')
    if amount < 0:
        raise ValidationError(f'{field} must not be negative')
    return amount


def parse_year(value: Any) -> int:
    """Parse a tax year."""
    if isinstance(value, bool):
        raise ValidationError('Year must be an integer')
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError('Year must be an integer')
        value = int(value)
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError('Year must be an integer')
    if year < date.min.year or year > date.max.year:
        raise ValidationError(f'Year must be between {date.min.year} and {date.max.year}')
    return year


def parse_date(value: Any, field: str) -> date:
    """Parse an ISO date (YYYY-MM-DD); a full ISO datetime keeps only its date."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        raise ValidationError(f'{field} must be an ISO date (YYYY-MM-DD)')


def optional_text(value: Any) -> Optional[str]:
    """Strip a free-text field, treating blanks as absent."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
