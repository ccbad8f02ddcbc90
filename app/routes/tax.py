"""
Tax routes - yearly tax calculation and report export.
"""

from flask import Blueprint, Response, current_app, jsonify
from flask_login import login_required, current_user
from app.errors import ValidationError
from app.utils.report_builder import build_tax_report, calculate_tax_for_year
from app.utils.report_export import report_to_csv
from app.utils.validation import get_field, json_body, parse_year
import logging

logger = logging.getLogger(__name__)

tax_bp = Blueprint('tax', __name__, url_prefix='/api')


@tax_bp.route('/calculate-tax', methods=['POST'])
@login_required
def calculate_tax():
    """Calculate tax for a year. Accepts JSON {year}."""
    data = json_body()

    year = get_field(data, 'year')
    if year is None:
        raise ValidationError('Year is required for tax calculation')

    result = calculate_tax_for_year(current_user.id, parse_year(year))
    logger.info(f"Calculated {result['year']} tax for user {current_user.id}")
    return jsonify(result)


@tax_bp.route('/tax-report/<int:year>', methods=['GET'])
@login_required
def tax_report(year):
    """Full tax report for a year as JSON."""
    return jsonify(build_tax_report(current_user, parse_year(year)))


@tax_bp.route('/tax-report/<int:year>/csv', methods=['GET'])
@login_required
def tax_report_csv(year):
    """Full tax report for a year as a CSV download.

    CSV is the only server-side export. PDF rendering is left to clients,
    which build it from the JSON report.
    """
    report = build_tax_report(current_user, parse_year(year))
    content = report_to_csv(
        report,
        basic_rate=current_app.config['BASIC_TAX_RATE'],
        deduction_rate=current_app.config['PURCHASE_DEDUCTION_RATE']
    )
    return Response(
        content,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename=tax-report-{year}.csv'}
    )
