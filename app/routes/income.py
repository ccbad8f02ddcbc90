"""
Income routes - record and list annual income.
"""

from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from app.errors import ValidationError
from app.utils import record_store
from app.utils.validation import get_field, json_body, parse_amount, parse_year

income_bp = Blueprint('income', __name__, url_prefix='/api')


@income_bp.route('/income', methods=['POST'])
@login_required
def add_income():
    """Add an income record. Accepts JSON {primaryIncome, additionalIncome?, year}."""
    data = json_body()

    primary_income = get_field(data, 'primaryIncome', 'primary_income')
    additional_income = get_field(data, 'additionalIncome', 'additional_income')
    year = get_field(data, 'year')

    if primary_income is None or year is None:
        raise ValidationError('Primary income and year are required')

    income = record_store.add_income(
        current_user.id,
        parse_amount(primary_income, 'Primary income'),
        parse_amount(additional_income, 'Additional income') if additional_income is not None else 0.0,
        parse_year(year)
    )

    return jsonify({
        'message': 'Income added successfully',
        'income': income.to_dict()
    }), 201


@income_bp.route('/income', methods=['GET'])
@login_required
def list_income():
    """List the current user's income records, newest year first."""
    incomes = record_store.list_income(current_user.id)
    return jsonify({'incomes': [i.to_dict() for i in incomes]})
