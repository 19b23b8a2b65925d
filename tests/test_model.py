"""Tests for the combined calculator."""

from dataclasses import replace

import pytest
from homeloan.affordability import affordability
from homeloan.amortization import monthly_repayment
from homeloan.frequency import Frequency
from homeloan.jurisdictions import Jurisdiction
from homeloan.model import calculate, display_payment
from homeloan.params import LoanScenario


class TestScenario:
    def test_derived_loan(self):
        s = LoanScenario()
        assert s.deposit == 170_000
        assert s.loan_amount == 680_000
        assert s.lvr == pytest.approx(80)

    def test_zero_price_lvr(self):
        assert LoanScenario(property_price=0).lvr == 0

    def test_frozen(self):
        with pytest.raises(AttributeError):
            LoanScenario().property_price = 1


class TestCalculate:
    def test_default_scenario(self):
        s = LoanScenario()
        r = calculate(s)
        assert r.loan_amount == 680_000
        assert r.monthly_payment == pytest.approx(monthly_repayment(680_000, 6.2, 30))
        assert r.actual_months == 360
        assert r.schedule[-1].remaining_balance == 0
        # NSW: 10,530 + 499,000 * 4.5%
        assert r.stamp_duty == 32_985
        assert r.lmi == 0
        assert r.upfront_costs == 170_000 + 32_985

    def test_totals_are_row_sums(self):
        r = calculate(LoanScenario(extra_monthly_payment=300))
        assert r.total_paid == sum(row.total_payment for row in r.schedule)
        assert r.total_interest == sum(row.interest_component for row in r.schedule)
        assert r.total_paid == pytest.approx(r.loan_amount + r.total_interest, abs=r.actual_months)

    def test_500k_loan_full_term(self):
        # 500k loan at 6% over 30 years
        s = LoanScenario(property_price=625_000, annual_rate_percent=6, term_years=30)
        r = calculate(s)
        assert r.loan_amount == 500_000
        assert len(r.schedule) == 360
        assert r.schedule[-1].remaining_balance == 0

    def test_lmi_with_small_deposit(self):
        r = calculate(LoanScenario(property_price=600_000, deposit_fraction=0.1))
        assert r.lvr == pytest.approx(90)
        assert r.lmi == round(540_000 * 0.032)

    def test_first_home_buyer_exempt(self):
        r = calculate(LoanScenario(property_price=700_000, is_first_home_buyer=True))
        assert r.stamp_duty == 0

    def test_jurisdiction(self):
        nsw = calculate(LoanScenario(property_price=1_000_000))
        nt = calculate(LoanScenario(property_price=1_000_000, jurisdiction=Jurisdiction.NT))
        assert nt.stamp_duty == 49_500
        assert nsw.stamp_duty != nt.stamp_duty

    def test_offset_lowers_headline_repayment(self):
        s = LoanScenario(offset_balance=50_000)
        r = calculate(s)
        assert r.monthly_payment == pytest.approx(monthly_repayment(630_000, 6.2, 30))

    def test_early_payoff(self):
        base = calculate(LoanScenario())
        extra = calculate(LoanScenario(extra_monthly_payment=1_000))
        offset = calculate(LoanScenario(offset_balance=100_000))
        assert extra.actual_months < base.actual_months
        assert offset.actual_months < base.actual_months
        assert extra.total_interest < base.total_interest
        assert offset.total_interest < base.total_interest

    def test_yearly_rollup(self):
        r = calculate(LoanScenario(term_years=25))
        assert len(r.yearly) == 25
        assert r.yearly[-1].remaining_balance == 0

    def test_affordability_fields(self):
        s = LoanScenario(annual_income=180_000, monthly_expenses=3_000)
        r = calculate(s)
        expected = affordability(s.affordability())
        assert r.max_loan == expected.max_loan
        assert r.max_price == expected.max_price
        assert r.max_monthly_payment == expected.max_monthly_payment

    def test_idempotent(self):
        s = LoanScenario(extra_monthly_payment=250, offset_balance=20_000, is_first_home_buyer=True)
        first = calculate(s)
        second = calculate(s)
        assert first == second
        assert repr(first) == repr(second)

    def test_scenario_unchanged(self):
        s = LoanScenario()
        before = replace(s)
        calculate(s)
        assert s == before


class TestDegenerateScenarios:
    def test_zero_price(self):
        r = calculate(LoanScenario(property_price=0))
        assert r.schedule == ()
        assert r.total_paid == 0
        assert r.total_interest == 0
        assert r.lmi == 0
        assert r.stamp_duty == 0

    def test_zero_rate(self):
        r = calculate(LoanScenario(annual_rate_percent=0))
        assert r.monthly_payment == 0
        assert r.max_loan == 0
        assert r.total_interest == 0

    def test_full_deposit(self):
        r = calculate(LoanScenario(deposit_fraction=1.0))
        assert r.loan_amount == 0
        assert r.schedule == ()
        assert r.max_price == r.max_loan

    def test_offset_larger_than_loan(self):
        r = calculate(LoanScenario(offset_balance=1_000_000))
        assert r.monthly_payment == 0
        assert r.total_interest == 0
        assert r.schedule[-1].remaining_balance == 0


class TestDisplayPayment:
    def test_monthly(self):
        s = LoanScenario(extra_monthly_payment=200)
        r = calculate(s)
        assert display_payment(r, s) == pytest.approx(r.monthly_payment + 200)

    def test_fortnightly(self):
        s = LoanScenario(extra_monthly_payment=200)
        r = calculate(s)
        expected = (r.monthly_payment + 200) * 12 / 26
        assert display_payment(r, s, Frequency.FORTNIGHTLY) == pytest.approx(expected)

    def test_conversion_does_not_change_schedule(self):
        s = LoanScenario()
        r = calculate(s)
        display_payment(r, s, "weekly")
        assert r == calculate(s)
