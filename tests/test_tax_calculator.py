"""
Tax formula tests (pure calculator, no app needed).
"""
import pytest

from app.utils.tax_calculator import (
    BASIC_TAX_RATE,
    DEDUCTION_CAP_RATE,
    PURCHASE_DEDUCTION_RATE,
    TaxBreakdown,
    TaxCalculator,
    calculator_from_config,
    total_purchases,
)


class _Purchase:
    def __init__(self, amount):
        self.amount = amount


class TestFormula:

    @pytest.mark.parametrize('income,purchases', [
        (0, 0),
        (1000, 0),
        (1000, 500),
        (1000, 10000),
        (54321.5, 1234.25),
        (0, 999),
    ])
    def test_breakdown_matches_formula(self, income, purchases):
        result = TaxCalculator().calculate(income, purchases)

        assert result.basic_tax == pytest.approx(0.20 * income)
        assert result.purchase_deduction == pytest.approx(min(0.05 * purchases, 0.10 * income))
        assert result.final_tax == pytest.approx(result.basic_tax - result.purchase_deduction)

    def test_no_purchases_means_no_deduction(self):
        result = TaxCalculator().calculate(8000, 0)

        assert result.purchase_deduction == 0
        assert result.final_tax == pytest.approx(result.basic_tax)

    def test_deduction_is_capped_at_ten_percent_of_income(self):
        result = TaxCalculator().calculate(1000, 10000)

        assert result.basic_tax == pytest.approx(200)
        assert result.purchase_deduction == pytest.approx(100)
        assert result.final_tax == pytest.approx(100)

    def test_reference_scenario(self):
        result = TaxCalculator().calculate(5000 + 500, 300)

        assert result.basic_tax == pytest.approx(1100.00)
        assert result.purchase_deduction == pytest.approx(15.00)
        assert result.final_tax == pytest.approx(1085.00)

    def test_final_tax_is_not_floored(self):
        # Only reachable with negative income, which validation rejects upstream
        result = TaxCalculator().calculate(-1000, 0)

        assert result.basic_tax == pytest.approx(-200)
        assert result.purchase_deduction == pytest.approx(-100)
        assert result.final_tax == pytest.approx(-100)


class TestConfiguration:

    def test_default_rates(self):
        assert BASIC_TAX_RATE == 0.20
        assert PURCHASE_DEDUCTION_RATE == 0.05
        assert DEDUCTION_CAP_RATE == 0.10

    def test_custom_rates(self):
        calc = TaxCalculator(basic_rate=0.30, deduction_rate=0.10, cap_rate=0.05)
        result = calc.calculate(1000, 200)

        assert result.basic_tax == pytest.approx(300)
        assert result.purchase_deduction == pytest.approx(20)
        assert result.final_tax == pytest.approx(280)

    def test_calculator_from_config_falls_back_to_defaults(self):
        calc = calculator_from_config({'BASIC_TAX_RATE': 0.25})

        assert calc.basic_rate == 0.25
        assert calc.deduction_rate == PURCHASE_DEDUCTION_RATE
        assert calc.cap_rate == DEDUCTION_CAP_RATE


def test_total_purchases_sums_amounts():
    assert total_purchases([_Purchase(100), _Purchase(50.5), _Purchase(0)]) == pytest.approx(150.5)
    assert total_purchases([]) == 0


def test_breakdown_serializes_with_camel_case_keys():
    breakdown = TaxBreakdown(basic_tax=200.0, purchase_deduction=10.0, final_tax=190.0)

    assert breakdown.to_dict() == {
        'basicTax': 200.0,
        'purchaseDeduction': 10.0,
        'finalTax': 190.0,
    }
