"""CLI for the EMI calculator.

Usage:
    python -m emi_calculator.cli 100000 12 1
    python -m emi_calculator.cli 2500000 8.5 20 --frequency quarterly --page 2 --rows 50
    python -m emi_calculator.cli 2500000 8.5 20 --yearly
"""

import argparse
import sys

from emi_calculator.config import configure_logging, settings
from emi_calculator.engine.amortization import compute, yearly_summary
from emi_calculator.engine.display import format_money, format_rate
from emi_calculator.engine.pagination import paginate
from emi_calculator.models.loan import InvalidLoanSpec, PaymentFrequency
from emi_calculator.models.results import AmortizationResult, SchedulePage


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_summary(result: AmortizationResult) -> None:
    loan = result.loan
    _header("EMI Summary")
    print(f"  Principal:        {format_money(loan.principal)}")
    print(f"  Interest Rate:    {loan.annual_rate_percent}% p.a.")
    print(f"  Tenure:           {loan.tenure_years} years ({loan.frequency.value})")
    print(f"  Periodic Rate:    {format_rate(result.period_rate)}")
    print(f"  Payments:         {result.number_of_payments}")
    print(f"  EMI:              {format_money(result.payment)}")
    print(f"  Total Interest:   {format_money(result.total_interest)}")
    print(f"  Total Paid:       {format_money(result.total_paid)}")


def print_schedule(schedule_page: SchedulePage) -> None:
    _header(f"Amortization Schedule (page {schedule_page.page} of {schedule_page.total_pages})")
    print(f"  {'Period':>6}  {'Principal':>16}  {'Interest':>16}  {'Balance':>18}")
    for r in schedule_page.rows:
        print(
            f"  {r.period:>6}  {format_money(r.principal_payment):>16}"
            f"  {format_money(r.interest_payment):>16}  {format_money(r.remaining_balance):>18}"
        )
    print()


def print_yearly(result: AmortizationResult) -> None:
    _header("Yearly Summary")
    print(f"  {'Year':>4}  {'Principal':>16}  {'Interest':>16}  {'Ending Balance':>18}")
    for y in yearly_summary(result):
        print(
            f"  {y.year:>4}  {format_money(y.principal):>16}"
            f"  {format_money(y.interest):>16}  {format_money(y.ending_balance):>18}"
        )
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Loan EMI and amortization schedule calculator")
    parser.add_argument("principal", help="Loan amount")
    parser.add_argument("rate", help="Annual interest rate in percent (e.g. 12)")
    parser.add_argument("tenure", help="Loan tenure in years")
    parser.add_argument(
        "--frequency",
        choices=[f.value for f in PaymentFrequency],
        default=PaymentFrequency.MONTHLY.value,
        help="Payment frequency (default: monthly)",
    )
    parser.add_argument("--page", type=int, default=1, help="Schedule page to print (default: 1)")
    parser.add_argument(
        "--rows",
        type=int,
        default=settings.default_rows_per_page,
        help=f"Rows per page (default: {settings.default_rows_per_page})",
    )
    parser.add_argument("--yearly", action="store_true", help="Print a per-year summary instead of the schedule")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.rows < 1:
        parser.error("--rows must be >= 1")

    try:
        result = compute(args.principal, args.rate, args.tenure, args.frequency)
    except InvalidLoanSpec as e:
        parser.error(str(e))

    print_summary(result)
    if args.yearly:
        print_yearly(result)
    else:
        print_schedule(paginate(result.schedule, args.page, args.rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
