"""
Simplified annual tax calculator.

Basic tax is a flat share of total income. Purchases earn a deduction that is
capped at a share of total income. Final tax is basic tax minus the deduction.
"""

from dataclasses import dataclass
from typing import Iterable

# Tax constants (defaults for app config)
BASIC_TAX_RATE = 0.20  # 20% of total income
PURCHASE_DEDUCTION_RATE = 0.05  # 5% of total purchases
DEDUCTION_CAP_RATE = 0.10  # deduction capped at 10% of total income


@dataclass(frozen=True)
class TaxBreakdown:
    """Derived tax figures for one tax year. Never persisted."""

    basic_tax: float
    purchase_deduction: float
    final_tax: float

    def to_dict(self) -> dict:
        return {
            'basicTax': self.basic_tax,
            'purchaseDeduction': self.purchase_deduction,
            'finalTax': self.final_tax
        }


class TaxCalculator:
    """Calculate basic tax, purchase deduction and final tax."""

    def __init__(self, basic_rate: float = BASIC_TAX_RATE,
                 deduction_rate: float = PURCHASE_DEDUCTION_RATE,
                 cap_rate: float = DEDUCTION_CAP_RATE):
        """
        Initialize tax calculator.

        Args:
            basic_rate: Share of total income owed as basic tax (e.g., 0.20)
            deduction_rate: Share of total purchases that is deductible (e.g., 0.05)
            cap_rate: Deduction ceiling as a share of total income (e.g., 0.10)
        """
        self.basic_rate = basic_rate
        self.deduction_rate = deduction_rate
        self.cap_rate = cap_rate

    def calculate(self, total_income: float, total_purchases: float) -> TaxBreakdown:
        """
        Calculate the tax breakdown for a year.

        Inputs are validated upstream. Final tax is not floored at zero.

        Args:
            total_income: Primary plus additional income for the year
            total_purchases: Sum of purchase amounts dated within the year

        Returns:
            TaxBreakdown
        """
        basic_tax = total_income * self.basic_rate
        max_deduction = total_income * self.cap_rate
        purchase_deduction = min(total_purchases * self.deduction_rate, max_deduction)
        final_tax = basic_tax - purchase_deduction

        return TaxBreakdown(
            basic_tax=basic_tax,
            purchase_deduction=purchase_deduction,
            final_tax=final_tax
        )


def calculator_from_config(config) -> TaxCalculator:
    """Build a calculator from the rates in a Flask config mapping."""
    return TaxCalculator(
        basic_rate=config.get('BASIC_TAX_RATE', BASIC_TAX_RATE),
        deduction_rate=config.get('PURCHASE_DEDUCTION_RATE', PURCHASE_DEDUCTION_RATE),
        cap_rate=config.get('DEDUCTION_CAP_RATE', DEDUCTION_CAP_RATE)
    )


def total_purchases(purchases: Iterable) -> float:
    """Sum of purchase amounts."""
    return sum((p.amount for p in purchases), 0.0)
