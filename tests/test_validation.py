"""
Payload parsing, password policy and CSV rendering helpers.
"""
import csv
import io
from datetime import date

import pytest

from app.errors import ValidationError
from app.utils.password_security import PasswordValidator, validate_password
from app.utils.report_export import report_to_csv
from app.utils.validation import get_field, optional_text, parse_amount, parse_date, parse_year


class TestParsing:

    def test_get_field_prefers_first_present_name(self):
        assert get_field({'primaryIncome': 1, 'primary_income': 2}, 'primaryIncome', 'primary_income') == 1
        assert get_field({'primary_income': 2}, 'primaryIncome', 'primary_income') == 2
        assert get_field({'primaryIncome': '  '}, 'primaryIncome') is None

    def test_zero_amount_is_allowed(self):
        assert parse_amount(0, 'Amount') == 0.0

    @pytest.mark.parametrize('value', [-0.01, 'abc', None, True, 'nan'])
    def test_bad_amounts(self, value):
        with pytest.raises(ValidationError):
            parse_amount(value, 'Amount')

    def test_year_from_string(self):
        assert parse_year('2024') == 2024

    @pytest.mark.parametrize('value', ['20x4', 2024.5, 0, 10000])
    def test_bad_years(self, value):
        with pytest.raises(ValidationError):
            parse_year(value)

    def test_date_accepts_iso_datetime(self):
        assert parse_date('2024-03-15T10:30:00', 'Purchase date') == date(2024, 3, 15)

    def test_optional_text(self):
        assert optional_text('  Food ') == 'Food'
        assert optional_text('') is None
        assert optional_text(None) is None


class TestPasswordPolicy:

    def test_app_policy_only_requires_a_character(self):
        assert validate_password('x') == (True, [])

    def test_overlong_password_is_rejected(self):
        is_valid, errors = validate_password('x' * 129)

        assert not is_valid
        assert errors == ['Password must not exceed 128 characters']

    def test_minimum_length(self):
        is_valid, errors = PasswordValidator(min_length=8).validate('short')

        assert not is_valid
        assert errors == ['Password must be at least 8 characters long']


def test_report_to_csv_sections():
    report = {
        'taxYear': 2024,
        'userDetails': {'username': 'alice', 'email': 'alice@finance.org'},
        'incomeDetails': {'primaryIncome': 5000.0, 'additionalIncome': 500.0, 'totalIncome': 5500.0},
        'purchaseDetails': {
            'totalPurchases': 300.0,
            'purchaseCount': 1,
            'purchases': [
                {'amount': 300.0, 'category': 'Office', 'description': 'Desk, oak', 'date': '2024-02-01'},
            ],
        },
        'taxCalculation': {'basicTax': 1100.0, 'purchaseDeduction': 15.0, 'finalTax': 1085.0},
    }

    rows = list(csv.reader(io.StringIO(report_to_csv(report))))

    assert rows[0] == ['Tax Report for 2024']
    assert ['Total Income', '$5500.00'] in rows
    assert ['Number of Purchases', '1'] in rows
    assert ['2024-02-01', 'Office', 'Desk, oak', '$300.00'] in rows
    assert ['Basic Tax (20% of income)', '$1100.00'] in rows
    assert ['Purchase Deduction (5% of purchases)', '$15.00'] in rows
    assert ['Final Tax Payable', '$1085.00'] in rows
