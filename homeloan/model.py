"""Core mortgage calculator.

Combines every calculation for one loan scenario:

  - Repayment: monthly P&I on the loan less any offset balance
  - Schedule: month-by-month amortization with extra repayments and offset
  - Upfront: deposit + stamp duty + LMI
  - Affordability: maximum loan and price serviceable from income

``calculate`` is a pure function of its scenario. Calling it again with an
equal scenario gives an equal result.
"""

import logging
from dataclasses import dataclass

from homeloan.affordability import affordability
from homeloan.amortization import (
    AmortizationRow,
    YearSummary,
    build_amortization,
    monthly_repayment,
    yearly_summary,
)
from homeloan.frequency import Frequency, convert_frequency
from homeloan.lmi import estimate_lmi
from homeloan.params import LoanScenario
from homeloan.tax import calc_stamp_duty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MortgageResults:
    """Everything derived from a LoanScenario."""

    monthly_payment: float  # scheduled P&I, excluding extra repayments
    schedule: tuple[AmortizationRow, ...]
    total_paid: float
    total_interest: float
    stamp_duty: float
    lmi: float

    # Affordability
    max_loan: float
    max_price: float
    max_monthly_payment: float

    loan_amount: float
    deposit: float
    lvr: float  # percent
    yearly: tuple[YearSummary, ...]

    @property
    def actual_months(self) -> int:
        return len(self.schedule)

    @property
    def upfront_costs(self) -> float:
        return self.deposit + self.stamp_duty + self.lmi


def calculate(scenario: LoanScenario) -> MortgageResults:
    """Run every calculation for a scenario."""
    loan_amount = scenario.loan_amount
    rate = scenario.annual_rate_percent
    term = scenario.term_years

    monthly = monthly_repayment(loan_amount - scenario.offset_balance, rate, term)
    schedule = build_amortization(
        loan_amount,
        rate,
        term,
        extra_monthly=scenario.extra_monthly_payment,
        offset=scenario.offset_balance,
    )
    if schedule and len(schedule) < term * 12:
        logger.debug("Loan repaid after %d of %d months", len(schedule), term * 12)

    stamp_duty = calc_stamp_duty(
        scenario.property_price,
        scenario.jurisdiction,
        first_home_buyer=scenario.is_first_home_buyer,
    )
    lmi = estimate_lmi(loan_amount, scenario.lvr)
    afford = affordability(scenario.affordability())

    return MortgageResults(
        monthly_payment=monthly,
        schedule=schedule,
        total_paid=sum(row.total_payment for row in schedule),
        total_interest=sum(row.interest_component for row in schedule),
        stamp_duty=stamp_duty,
        lmi=lmi,
        max_loan=afford.max_loan,
        max_price=afford.max_price,
        max_monthly_payment=afford.max_monthly_payment,
        loan_amount=loan_amount,
        deposit=scenario.deposit,
        lvr=scenario.lvr,
        yearly=yearly_summary(schedule),
    )


def display_payment(
    results: MortgageResults,
    scenario: LoanScenario,
    frequency: "Frequency | str" = Frequency.MONTHLY,
) -> float:
    """Scheduled repayment plus extra repayments, at the chosen cadence."""
    return convert_frequency(results.monthly_payment + scenario.extra_monthly_payment, frequency)
