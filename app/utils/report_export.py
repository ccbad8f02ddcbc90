"""
CSV rendering of a tax report.
"""

import csv
import io


def _money(value: float) -> str:
    return f'${value:.2f}'


def report_to_csv(report: dict, basic_rate: float = 0.20, deduction_rate: float = 0.05) -> str:
    """Render a report built by build_tax_report as a sectioned CSV document."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\r\n')

    income = report['incomeDetails']
    purchases = report['purchaseDetails']
    tax = report['taxCalculation']

    writer.writerow([f"Tax Report for {report['taxYear']}"])
    writer.writerow([])
    writer.writerow(['User', report['userDetails']['username']])
    writer.writerow(['Email', report['userDetails']['email']])
    writer.writerow([])

    writer.writerow(['Income Information'])
    writer.writerow(['Category', 'Amount'])
    writer.writerow(['Primary Income', _money(income['primaryIncome'])])
    writer.writerow(['Additional Income', _money(income['additionalIncome'])])
    writer.writerow(['Total Income', _money(income['totalIncome'])])
    writer.writerow([])

    writer.writerow(['Purchase Summary'])
    writer.writerow(['Total Purchases', _money(purchases['totalPurchases'])])
    writer.writerow(['Number of Purchases', purchases['purchaseCount']])
    writer.writerow([])

    writer.writerow(['Purchase Details'])
    writer.writerow(['Date', 'Category', 'Description', 'Amount'])
    for p in purchases['purchases']:
        writer.writerow([p['date'], p['category'], p['description'], _money(p['amount'])])
    writer.writerow([])

    writer.writerow(['Tax Calculation'])
    writer.writerow(['Item', 'Amount'])
    writer.writerow([f'Basic Tax ({basic_rate * 100:g}% of income)', _money(tax['basicTax'])])
    writer.writerow([f'Purchase Deduction ({deduction_rate * 100:g}% of purchases)', _money(tax['purchaseDeduction'])])
    writer.writerow(['Final Tax Payable', _money(tax['finalTax'])])

    return buf.getvalue()
