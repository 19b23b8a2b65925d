"""Sensitivity analysis: sweep one parameter, see how outcomes change."""

from dataclasses import dataclass, fields, replace

from homeloan.model import calculate
from homeloan.output import fmt, fmt_short
from homeloan.params import LoanScenario

# Parameters that make sense to sweep numerically
SWEEPABLE = tuple(
    f.name for f in fields(LoanScenario)
    if f.name not in ("jurisdiction", "is_first_home_buyer")
)


@dataclass
class SweepResult:
    param_value: float
    monthly_payment: float
    total_interest: float
    actual_months: int
    stamp_duty: float
    lmi: float
    max_loan: float
    max_price: float


def sweep(
    scenario: LoanScenario,
    param: str,
    values: list[float],
) -> list[SweepResult]:
    """Run the calculator for each value of a parameter, return results."""
    if param not in SWEEPABLE:
        raise ValueError(f"Cannot sweep '{param}'. Choose from: {list(SWEEPABLE)}")

    results = []
    for val in values:
        if param == "term_years":
            val = int(val)
        r = calculate(replace(scenario, **{param: val}))
        results.append(SweepResult(
            param_value=val,
            monthly_payment=r.monthly_payment,
            total_interest=r.total_interest,
            actual_months=r.actual_months,
            stamp_duty=r.stamp_duty,
            lmi=r.lmi,
            max_loan=r.max_loan,
            max_price=r.max_price,
        ))

    return results


def format_sweep(
    param: str,
    results: list[SweepResult],
    is_percentage: bool = False,
) -> str:
    """Format sweep results as a table."""
    header = (
        f"{'':>2} {param:>20} | {'Repayment':>10} | {'Interest':>12} | {'Months':>6} | "
        f"{'Duty':>10} | {'LMI':>9} | {'Max Loan':>12}"
    )
    sep = "-" * len(header)
    lines = [
        f"Sensitivity: {param}",
        header,
        sep,
    ]

    for r in results:
        if is_percentage:
            val_str = f"{r.param_value:.2%}"
        elif abs(r.param_value) >= 1_000:
            val_str = fmt_short(r.param_value)
        else:
            val_str = f"{r.param_value:,.2f}".rstrip("0").rstrip(".")
        lines.append(
            f"{'':>2} {val_str:>20} | {fmt(r.monthly_payment):>10} | "
            f"{fmt(r.total_interest):>12} | {r.actual_months:>6} | "
            f"{fmt(r.stamp_duty):>10} | {fmt(r.lmi):>9} | {fmt(r.max_loan):>12}"
        )

    return "\n".join(lines)


def frange(start: float, stop: float, step: float) -> list[float]:
    """Generate a list of floats from start to stop (inclusive) by step."""
    if step <= 0:
        raise ValueError("step must be positive")
    values = []
    val = start
    while val <= stop + step / 2:  # tolerance for floating point
        values.append(round(val, 6))
        val += step
    return values
