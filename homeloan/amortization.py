"""Principal & interest repayments and the month-by-month amortization schedule.

Rates are given in percent p.a. (6.2 for 6.2%). Interest accrues monthly at
rate/12 on the balance less any offset account balance.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class AmortizationRow:
    """One month of the schedule. Money fields are rounded to whole dollars."""

    period_index: int  # month number, from 1
    year_index: int  # loan year, from 1
    principal_component: float
    interest_component: float
    remaining_balance: float
    total_payment: float


@dataclass(frozen=True)
class YearSummary:
    """Totals for one loan year (the last year may be partial)."""

    year_index: int
    remaining_balance: float  # at the end of the year
    interest: float
    principal: float


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 12 / 100


def monthly_repayment(principal: float, annual_rate_percent: float, years: float) -> float:
    """Calculate monthly P&I repayment.

    Returns 0 for a non-positive principal, rate or term.
    """
    n = years * 12
    if principal <= 0 or annual_rate_percent <= 0 or n <= 0:
        return 0.0
    r = monthly_rate(annual_rate_percent)
    growth = (1 + r) ** n
    return principal * (r * growth) / (growth - 1)


def build_amortization(
    principal: float,
    annual_rate_percent: float,
    years: int,
    extra_monthly: float = 0,
    offset: float = 0,
) -> tuple[AmortizationRow, ...]:
    """Month-by-month schedule until the loan is repaid or the term ends.

    Extra repayments are added to the scheduled repayment. The offset balance
    reduces the interest-bearing balance (never below zero) but not the debt.
    The last instalment is capped at the balance plus that month's interest.
    """
    r = monthly_rate(annual_rate_percent)
    n = int(years * 12)
    base_payment = monthly_repayment(principal, annual_rate_percent, years)

    rows = []
    balance = principal
    month = 1
    while month <= n and balance > 0:
        effective_balance = max(balance - offset, 0)
        interest = effective_balance * r
        payment = min(base_payment + extra_monthly, balance + interest)
        principal_paid = payment - interest
        balance = max(balance - principal_paid, 0)

        rows.append(
            AmortizationRow(
                period_index=month,
                year_index=math.ceil(month / 12),
                principal_component=round(principal_paid),
                interest_component=round(interest),
                remaining_balance=round(balance),
                total_payment=round(payment),
            )
        )
        month += 1

    return tuple(rows)


def yearly_summary(schedule: tuple[AmortizationRow, ...]) -> tuple[YearSummary, ...]:
    """Roll monthly rows up into loan years."""
    years = []
    interest = 0.0
    principal = 0.0
    last = len(schedule)
    for i, row in enumerate(schedule, start=1):
        interest += row.interest_component
        principal += row.principal_component
        if row.period_index % 12 == 0 or i == last:
            years.append(
                YearSummary(
                    year_index=row.year_index,
                    remaining_balance=row.remaining_balance,
                    interest=interest,
                    principal=principal,
                )
            )
            interest = 0.0
            principal = 0.0
    return tuple(years)
