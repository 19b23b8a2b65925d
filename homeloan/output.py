"""Output formatting for calculator results."""

import csv
import io

from homeloan.affordability import budget_breakdown, purchase_costs
from homeloan.amortization import AmortizationRow, YearSummary
from homeloan.frequency import Frequency, frequency_label
from homeloan.jurisdictions import FIRST_HOME_CONCESSIONS, NO_CONCESSION
from homeloan.model import MortgageResults, display_payment
from homeloan.params import LoanScenario


def fmt(value: float) -> str:
    """Format a dollar amount."""
    if abs(value) >= 1_000_000:
        return f"${value / 1_000_000:,.2f}M"
    return f"${value:,.0f}"


def fmt_short(value: float) -> str:
    """Compact amount for axis-style labels: 1.2M, 850k, 600."""
    if abs(value) >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if abs(value) >= 1_000:
        return f"{round(value / 1_000)}k"
    return f"{round(value)}"


def summary_header(scenario: LoanScenario, results: MortgageResults) -> str:
    """Generate the header showing key parameters and upfront costs."""
    lines = [
        "Mortgage Calculator - Repayments, Stamp Duty & Borrowing Power",
        "=" * 70,
        "",
        f"  Purchase price:  {fmt(scenario.property_price)} ({scenario.jurisdiction.full_name})",
        f"  Deposit:         {scenario.deposit_fraction:.0%} ({fmt(results.deposit)})",
        f"  Loan amount:     {fmt(results.loan_amount)} (LVR {results.lvr:.0f}%)",
        f"  Interest rate:   {scenario.annual_rate_percent:.2f}% p.a. ({scenario.term_years}yr)",
        "",
        "Upfront costs:",
        f"  Deposit:         {fmt(results.deposit)}",
        f"  Stamp duty:      {fmt(results.stamp_duty)}{_exempt_note(scenario)}",
    ]
    if results.lmi > 0:
        lines.append(f"  LMI:             {fmt(results.lmi)} (LVR {results.lvr:.0f}%)")
    lines.append(f"  Total:           {fmt(results.upfront_costs)}")
    lines.append("")

    if scenario.extra_monthly_payment > 0:
        lines.insert(7, f"  Extra repayment: {fmt(scenario.extra_monthly_payment)}/mo")
    if scenario.offset_balance > 0:
        lines.insert(7, f"  Offset balance:  {fmt(scenario.offset_balance)}")

    return "\n".join(lines)


def _exempt_note(scenario: LoanScenario) -> str:
    if not scenario.is_first_home_buyer:
        return ""
    concession = FIRST_HOME_CONCESSIONS.get(scenario.jurisdiction, NO_CONCESSION)
    if not concession.offered:
        return " (first home grants, no duty concession)"
    if scenario.property_price <= concession.full_exemption_ceiling:
        return " (first home EXEMPT)"
    if scenario.property_price <= concession.sliding_concession_ceiling:
        return " (first home concession)"
    return ""


def repayment_summary(
    scenario: LoanScenario,
    results: MortgageResults,
    frequency: "Frequency | str" = Frequency.MONTHLY,
) -> str:
    """Repayment at the chosen cadence and lifetime totals."""
    payment = display_payment(results, scenario, frequency)
    years, months = divmod(results.actual_months, 12)
    lines = [
        f"Repayment:         {fmt(round(payment))} per {frequency_label(frequency).lower()}",
        f"Total interest:    {fmt(results.total_interest)}",
        f"Total paid:        {fmt(results.total_paid)}",
        f"Paid off in:       {years} yr {months} mo ({results.actual_months} payments)",
    ]
    return "\n".join(lines)


def yearly_table(yearly: tuple[YearSummary, ...]) -> str:
    """Year-by-year principal, interest and closing balance."""
    header = f"{'Yr':>3} | {'Principal':>12} | {'Interest':>12} | {'Balance':>12}"
    sep = "-" * len(header)
    lines = [header, sep]
    for y in yearly:
        lines.append(
            f"{y.year_index:>3} | {fmt(y.principal):>12} | {fmt(y.interest):>12} | "
            f"{fmt(y.remaining_balance):>12}"
        )
    return "\n".join(lines)


def monthly_table(schedule: tuple[AmortizationRow, ...]) -> str:
    """Month-by-month schedule."""
    header = (
        f"{'Month':>5} | {'Yr':>3} | {'Payment':>10} | {'Principal':>10} | "
        f"{'Interest':>10} | {'Balance':>12}"
    )
    sep = "-" * len(header)
    lines = [header, sep]
    for row in schedule:
        lines.append(
            f"{row.period_index:>5} | {row.year_index:>3} | {fmt(row.total_payment):>10} | "
            f"{fmt(row.principal_component):>10} | {fmt(row.interest_component):>10} | "
            f"{fmt(row.remaining_balance):>12}"
        )
    return "\n".join(lines)


def affordability_report(scenario: LoanScenario, results: MortgageResults) -> str:
    """Borrowing power, the monthly budget behind it and the cost of buying at the limit."""
    budget = budget_breakdown(
        scenario.annual_income, scenario.monthly_expenses, results.max_monthly_payment
    )
    costs = purchase_costs(
        results.max_price, results.max_loan, scenario.jurisdiction, scenario.deposit_fraction
    )
    lines = [
        "Borrowing power:",
        f"  Max purchase price: {fmt(results.max_price)}",
        f"  Max loan:           {fmt(results.max_loan)}",
        f"  Max repayment:      {fmt(round(results.max_monthly_payment))}/mo",
        "",
        "Monthly budget:",
        f"  Income:             {fmt(budget.monthly_income)}/mo",
        f"  Expenses:           {fmt(budget.expenses)}/mo",
        f"  Repayment:          {fmt(budget.repayment)}/mo",
        f"  Remaining:          {fmt(budget.remaining)}/mo",
        "",
        f"Buying at max price ({scenario.jurisdiction.full_name}):",
        f"  Deposit:            {fmt(costs.deposit)}",
        f"  Stamp duty:         {fmt(costs.stamp_duty)}",
    ]
    if costs.lmi > 0:
        lines.append(f"  LMI:                {fmt(costs.lmi)}")
    lines.append(f"  Total:              {fmt(costs.total)}")
    return "\n".join(lines)


def to_csv(schedule: tuple[AmortizationRow, ...]) -> str:
    """Export the amortization schedule to a CSV string."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "month", "year", "total_payment", "principal", "interest", "balance",
    ])
    for row in schedule:
        writer.writerow([
            row.period_index, row.year_index,
            f"{row.total_payment:.0f}", f"{row.principal_component:.0f}",
            f"{row.interest_component:.0f}", f"{row.remaining_balance:.0f}",
        ])
    return output.getvalue()


def full_report(
    scenario: LoanScenario,
    results: MortgageResults,
    frequency: "Frequency | str" = Frequency.MONTHLY,
) -> str:
    """Generate a complete summary report."""
    parts = [
        summary_header(scenario, results),
        repayment_summary(scenario, results, frequency),
        "",
        yearly_table(results.yearly),
        "",
        affordability_report(scenario, results),
    ]
    return "\n".join(parts)
