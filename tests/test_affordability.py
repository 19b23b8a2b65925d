"""Tests for borrowing power calculations."""

import pytest
from homeloan.affordability import (
    affordability,
    budget_breakdown,
    max_loan,
    max_price,
    purchase_costs,
    serviceable_payment,
)
from homeloan.jurisdictions import Jurisdiction
from homeloan.lmi import estimate_lmi
from homeloan.params import AffordabilityScenario
from homeloan.tax import calc_stamp_duty


def _present_value(payment, annual_rate_percent, years):
    r = annual_rate_percent / 12 / 100
    n = years * 12
    return payment * ((1 + r) ** n - 1) / (r * (1 + r) ** n)


class TestServiceability:
    def test_35_percent_of_net_income(self):
        assert serviceable_payment(150_000, 2_500) == pytest.approx(3_500)

    def test_expenses_exceed_income(self):
        assert serviceable_payment(24_000, 3_000) < 0


class TestMaxLoan:
    def test_known_scenario(self):
        loan = max_loan(150_000, 2_500, 6.2, 30)
        assert loan == pytest.approx(_present_value(3_500, 6.2, 30))
        assert 560_000 < loan < 580_000

    def test_nothing_serviceable(self):
        assert max_loan(24_000, 3_000, 6.2, 30) == 0
        assert max_loan(30_000, 2_500, 6.2, 30) == 0

    def test_zero_rate(self):
        assert max_loan(150_000, 2_500, 0, 30) == 0

    def test_zero_term(self):
        assert max_loan(150_000, 2_500, 6.2, 0) == 0

    def test_higher_rate_borrows_less(self):
        assert max_loan(150_000, 2_500, 7, 30) < max_loan(150_000, 2_500, 5, 30)


class TestMaxPrice:
    def test_with_deposit(self):
        assert max_price(400_000, 0.2) == pytest.approx(500_000)

    def test_no_deposit(self):
        assert max_price(400_000, 0) == 400_000

    def test_deposit_only_purchase(self):
        assert max_price(400_000, 1) == 400_000
        assert max_price(400_000, 1.5) == 400_000

    def test_negative_deposit_clamped(self):
        assert max_price(400_000, -0.1) == 400_000


class TestAffordability:
    def test_defaults(self):
        result = affordability(AffordabilityScenario())
        loan = max_loan(150_000, 2_500, 6.2, 30)
        assert result.max_loan == round(loan)
        assert result.max_price == round(loan / (1 - 0.2))
        assert result.max_monthly_payment == pytest.approx(3_500)

    def test_unaffordable(self):
        result = affordability(AffordabilityScenario(annual_income=20_000))
        assert result.max_loan == 0
        assert result.max_price == 0
        assert result.max_monthly_payment == 0

    def test_full_deposit(self):
        result = affordability(AffordabilityScenario(deposit_fraction=1.0))
        assert result.max_price == result.max_loan


class TestPurchaseCosts:
    def test_costs_at_max_price(self):
        costs = purchase_costs(600_000, 540_000, Jurisdiction.NSW, 0.1)
        assert costs.deposit == 60_000
        assert costs.stamp_duty == calc_stamp_duty(600_000, Jurisdiction.NSW)
        assert costs.lmi == estimate_lmi(540_000, 90)
        assert costs.lmi > 0
        assert costs.total == costs.deposit + costs.stamp_duty + costs.lmi

    def test_no_lmi_with_large_deposit(self):
        costs = purchase_costs(800_000, 600_000, Jurisdiction.VIC, 0.25)
        assert costs.lmi == 0

    def test_no_first_home_concession(self):
        costs = purchase_costs(700_000, 560_000, Jurisdiction.NSW, 0.2)
        assert costs.stamp_duty > 0


class TestBudgetBreakdown:
    def test_breakdown(self):
        budget = budget_breakdown(150_000, 2_500, 3_500)
        assert budget.monthly_income == pytest.approx(12_500)
        assert budget.repayment == 3_500
        assert budget.remaining == 6_500
