"""
Purchase routes - record and list itemized purchases.
"""

from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from app.errors import ValidationError
from app.utils import record_store
from app.utils.validation import get_field, json_body, optional_text, parse_amount, parse_date

purchases_bp = Blueprint('purchases', __name__, url_prefix='/api')


@purchases_bp.route('/purchases', methods=['POST'])
@login_required
def add_purchase():
    """Add a purchase. Accepts JSON {amount, category?, description?, purchaseDate}."""
    data = json_body()

    amount = get_field(data, 'amount')
    purchase_date = get_field(data, 'purchaseDate', 'purchase_date')

    if amount is None or purchase_date is None:
        raise ValidationError('Amount and purchase date are required')

    purchase = record_store.add_purchase(
        current_user.id,
        parse_amount(amount, 'Amount'),
        parse_date(purchase_date, 'Purchase date'),
        category=optional_text(data.get('category')),
        description=optional_text(data.get('description'))
    )

    return jsonify({
        'message': 'Purchase added successfully',
        'purchase': purchase.to_dict()
    }), 201


@purchases_bp.route('/purchases', methods=['GET'])
@login_required
def list_purchases():
    """List the current user's purchases, most recent first."""
    purchases = record_store.list_purchases(current_user.id)
    return jsonify({'purchases': [p.to_dict() for p in purchases]})
