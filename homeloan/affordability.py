"""Maximum borrowing capacity from income and expenses.

Serviceability uses a fixed ceiling: at most 35% of net monthly income
(income after living expenses) may go to loan repayments. The maximum loan
is the present value of that repayment over the loan term.
"""

from dataclasses import dataclass

from homeloan.amortization import monthly_rate, monthly_repayment
from homeloan.jurisdictions import Jurisdiction
from homeloan.lmi import estimate_lmi
from homeloan.params import AffordabilityScenario
from homeloan.tax import calc_stamp_duty

DEBT_SERVICE_RATIO = 0.35


@dataclass(frozen=True)
class AffordabilityResult:
    max_loan: float
    max_price: float
    max_monthly_payment: float


@dataclass(frozen=True)
class PurchaseCosts:
    """Upfront cash needed to buy at the maximum price."""

    deposit: float
    stamp_duty: float
    lmi: float

    @property
    def total(self) -> float:
        return self.deposit + self.stamp_duty + self.lmi


@dataclass(frozen=True)
class BudgetBreakdown:
    """Where monthly income goes at the maximum repayment."""

    monthly_income: float
    expenses: float
    repayment: float
    remaining: float


def serviceable_payment(annual_income: float, monthly_expenses: float) -> float:
    """Largest monthly repayment the borrower can service."""
    return (annual_income / 12 - monthly_expenses) * DEBT_SERVICE_RATIO


def max_loan(
    annual_income: float,
    monthly_expenses: float,
    annual_rate_percent: float,
    years: float,
) -> float:
    """Invert the repayment formula for the serviceable repayment.

    Returns 0 when nothing is serviceable or the rate/term is non-positive.
    """
    payment = serviceable_payment(annual_income, monthly_expenses)
    n = years * 12
    if payment <= 0 or annual_rate_percent <= 0 or n <= 0:
        return 0.0
    r = monthly_rate(annual_rate_percent)
    growth = (1 + r) ** n
    return payment * (growth - 1) / (r * growth)


def max_price(loan: float, deposit_fraction: float) -> float:
    """Purchase price the loan funds once the deposit is added.

    A deposit fraction of 1 or more is treated as a deposit-only purchase
    and returns the loan unchanged.
    """
    deposit_fraction = max(deposit_fraction, 0.0)
    if deposit_fraction >= 1:
        return loan
    return loan / (1 - deposit_fraction)


def affordability(scenario: AffordabilityScenario) -> AffordabilityResult:
    loan = max_loan(
        scenario.annual_income,
        scenario.monthly_expenses,
        scenario.annual_rate_percent,
        scenario.term_years,
    )
    return AffordabilityResult(
        max_loan=round(loan),
        max_price=round(max_price(loan, scenario.deposit_fraction)),
        max_monthly_payment=monthly_repayment(
            loan, scenario.annual_rate_percent, scenario.term_years
        ),
    )


def purchase_costs(
    price: float,
    loan: float,
    jurisdiction: Jurisdiction,
    deposit_fraction: float,
) -> PurchaseCosts:
    """Deposit, stamp duty and LMI when buying at the maximum price.

    Duty is the standard rate; first home concessions are not applied here.
    """
    lvr = (1 - deposit_fraction) * 100
    return PurchaseCosts(
        deposit=round(price * deposit_fraction),
        stamp_duty=calc_stamp_duty(price, jurisdiction, first_home_buyer=False),
        lmi=estimate_lmi(loan, lvr),
    )


def budget_breakdown(
    annual_income: float, monthly_expenses: float, max_monthly_payment: float
) -> BudgetBreakdown:
    monthly_income = annual_income / 12
    repayment = round(max_monthly_payment)
    return BudgetBreakdown(
        monthly_income=monthly_income,
        expenses=monthly_expenses,
        repayment=repayment,
        remaining=round(monthly_income - monthly_expenses - repayment),
    )
