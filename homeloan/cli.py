"""CLI entry point for the mortgage calculator."""

import argparse
import logging
import sys
from dataclasses import replace

import yaml

from homeloan.config import load_config, params_to_dict
from homeloan.frequency import Frequency
from homeloan.jurisdictions import Jurisdiction
from homeloan.model import calculate
from homeloan.output import (
    affordability_report,
    full_report,
    monthly_table,
    repayment_summary,
    summary_header,
    to_csv,
    yearly_table,
)
from homeloan.params import LoanScenario
from homeloan.sensitivity import format_sweep, frange, sweep

logger = logging.getLogger(__name__)

# CLI flag -> LoanScenario field
_OVERRIDES = {
    "price": "property_price",
    "deposit": "deposit_fraction",
    "rate": "annual_rate_percent",
    "term": "term_years",
    "extra": "extra_monthly_payment",
    "offset": "offset_balance",
    "income": "annual_income",
    "expenses": "monthly_expenses",
}


def _scenario(args: argparse.Namespace) -> LoanScenario:
    """Build the scenario from an optional config file plus command-line overrides."""
    scenario = load_config(args.config) if args.config else LoanScenario()

    changes = {}
    for flag, name in _OVERRIDES.items():
        value = getattr(args, flag, None)
        if value is not None:
            changes[name] = value
    if getattr(args, "state", None):
        changes["jurisdiction"] = Jurisdiction.from_code(args.state)
    if getattr(args, "first_home", False):
        changes["is_first_home_buyer"] = True

    if changes:
        logger.debug("Overriding scenario fields: %s", changes)
        scenario = replace(scenario, **changes)
    return scenario


def cmd_run(args: argparse.Namespace) -> None:
    """Calculate repayments, costs and borrowing power for a scenario."""
    scenario = _scenario(args)
    results = calculate(scenario)
    print(full_report(scenario, results, args.frequency))


def cmd_schedule(args: argparse.Namespace) -> None:
    """Print the amortization schedule."""
    scenario = _scenario(args)
    results = calculate(scenario)

    if args.csv:
        print(to_csv(results.schedule), end="")
    elif args.monthly:
        print(monthly_table(results.schedule))
    else:
        print(summary_header(scenario, results))
        print(repayment_summary(scenario, results, args.frequency))
        print()
        print(yearly_table(results.yearly))


def cmd_afford(args: argparse.Namespace) -> None:
    """Print borrowing power only."""
    scenario = _scenario(args)
    print(affordability_report(scenario, calculate(scenario)))


def cmd_sensitivity(args: argparse.Namespace) -> None:
    """Run sensitivity analysis on a parameter."""
    scenario = _scenario(args)

    parts = args.range.split(",")
    if len(parts) != 3:
        raise ValueError("--range must be start,stop,step (e.g., 5,7,0.25)")

    start, stop, step = float(parts[0]), float(parts[1]), float(parts[2])
    values = frange(start, stop, step)

    results = sweep(scenario, args.param, values)
    print(format_sweep(args.param, results, is_percentage=args.param == "deposit_fraction"))


def cmd_defaults(args: argparse.Namespace) -> None:
    """Print default parameters as YAML."""
    print(yaml.dump(params_to_dict(LoanScenario()), default_flow_style=False, sort_keys=False))


def _add_scenario_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("config", nargs="?", help="YAML/JSON scenario file")
    parser.add_argument("--price", type=float, help="Property price ($)")
    parser.add_argument("--deposit", type=float, help="Deposit as a fraction (0.2 = 20%%)")
    parser.add_argument("--rate", type=float, help="Interest rate, %% p.a. (6.2)")
    parser.add_argument("--term", type=int, help="Loan term in years")
    parser.add_argument("--extra", type=float, help="Extra repayment per month ($)")
    parser.add_argument("--offset", type=float, help="Offset account balance ($)")
    parser.add_argument("--state", help="State/territory code (NSW, VIC, ...)")
    parser.add_argument("--first-home", action="store_true", help="First home buyer")
    parser.add_argument("--income", type=float, help="Gross annual income ($)")
    parser.add_argument("--expenses", type=float, help="Living expenses per month ($)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="homeloan",
        description="Australian mortgage repayment, stamp duty and borrowing power calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  homeloan run                               # Run with defaults
  homeloan run scenario.yaml                 # Run with a scenario file
  homeloan run --price 900000 --state VIC --first-home
  homeloan run --frequency fortnightly --extra 500
  homeloan schedule scenario.yaml --monthly  # Month-by-month breakdown
  homeloan schedule scenario.yaml --csv      # CSV output
  homeloan afford --income 180000 --expenses 3000
  homeloan sensitivity --param annual_rate_percent --range 5,7,0.25
  homeloan defaults                          # Print default scenario
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")
    frequencies = [f.value for f in Frequency]

    # run
    run_parser = subparsers.add_parser("run", help="Full report for a scenario")
    _add_scenario_args(run_parser)
    run_parser.add_argument("--frequency", choices=frequencies, default="monthly")

    # schedule
    sched_parser = subparsers.add_parser("schedule", help="Amortization schedule")
    _add_scenario_args(sched_parser)
    sched_parser.add_argument("--frequency", choices=frequencies, default="monthly")
    sched_parser.add_argument("--monthly", action="store_true", help="Show every month")
    sched_parser.add_argument("--csv", action="store_true", help="Output as CSV")

    # afford
    afford_parser = subparsers.add_parser("afford", help="Maximum borrowing and purchase price")
    _add_scenario_args(afford_parser)

    # sensitivity
    sens_parser = subparsers.add_parser("sensitivity", help="Parameter sensitivity analysis")
    _add_scenario_args(sens_parser)
    sens_parser.add_argument("--param", required=True, help="Scenario field (e.g., annual_rate_percent)")
    sens_parser.add_argument("--range", required=True, help="start,stop,step (e.g., 5,7,0.25)")

    # defaults
    subparsers.add_parser("defaults", help="Print default parameters")

    return parser


COMMANDS = {
    "run": cmd_run,
    "schedule": cmd_schedule,
    "afford": cmd_afford,
    "sensitivity": cmd_sensitivity,
    "defaults": cmd_defaults,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        command(args)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
