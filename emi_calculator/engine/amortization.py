"""EMI and amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O. Full precision is kept
throughout; rounding to cents happens only at display time.
"""

import logging
from decimal import Decimal, DecimalException, InvalidOperation, ROUND_HALF_UP, localcontext

from emi_calculator.models.loan import (
    DEFAULT_FREQUENCY,
    MAX_TENURE_YEARS,
    InvalidLoanSpec,
    LoanSpec,
    PaymentFrequency,
)
from emi_calculator.models.results import AmortizationResult, AmortizationRow, YearlySummary

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
ONE_PERIOD = Decimal("1")

# Guard digits on top of the working precision for (1+r)^n - 1
GUARD_DIGITS = 20


def _to_decimal(value, name: str) -> Decimal:
    if isinstance(value, Decimal):
        d = value
    else:
        try:
            # str() first so floats keep their shortest repr (0.1 -> "0.1")
            d = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidLoanSpec(f"{name} must be a number, got {value!r}") from e
    if not d.is_finite():
        raise InvalidLoanSpec(f"{name} must be finite, got {value!r}")
    return d


def resolve_frequency(frequency: PaymentFrequency | str) -> PaymentFrequency:
    """Map a frequency value onto PaymentFrequency, defaulting to monthly.

    Anything other than the four named frequencies falls back to
    DEFAULT_FREQUENCY. The fallback is logged so it never happens silently.
    """
    if isinstance(frequency, PaymentFrequency):
        return frequency
    try:
        return PaymentFrequency(frequency)
    except ValueError:
        logger.warning(
            "Unrecognized payment frequency %r, defaulting to %s",
            frequency, DEFAULT_FREQUENCY.value,
        )
        return DEFAULT_FREQUENCY


def periods_per_year(frequency: PaymentFrequency | str) -> int:
    """monthly=12, quarterly=4, semi-annual=2, yearly=1 (unknown -> 12)."""
    return resolve_frequency(frequency).periods_per_year


def period_rate(annual_rate_percent: Decimal, frequency: PaymentFrequency | str) -> Decimal:
    """Periodic rate as a fraction, e.g. 12% p.a. monthly -> 0.01."""
    return annual_rate_percent / (100 * periods_per_year(frequency))


def number_of_payments(tenure_years: Decimal, frequency: PaymentFrequency | str) -> int:
    """Whole number of periods in the tenure, rounded half-up."""
    n = tenure_years * periods_per_year(frequency)
    try:
        return int(n.quantize(ONE_PERIOD, ROUND_HALF_UP))
    except InvalidOperation as e:
        raise InvalidLoanSpec(f"Tenure of {tenure_years} years is too long.") from e


def periodic_payment(principal: Decimal, rate: Decimal, n_periods: int) -> Decimal:
    """Fixed installment that retires `principal` over `n_periods` at `rate`.

    rate is the periodic rate as a fraction.
    """
    if n_periods < 1:
        raise InvalidLoanSpec("Loan must have at least one payment period.")
    if rate == 0:
        return principal / n_periods

    # EMI = P * r * (1+r)^n / [(1+r)^n - 1]
    # (1+r)^n - 1 cancels badly for tiny r, so widen the precision first
    with localcontext() as ctx:
        ctx.prec += n_periods.bit_length() + GUARD_DIGITS
        try:
            factor = (1 + rate) ** n_periods
            if factor == 1:
                # r is below the working precision: indistinguishable from 0%
                payment = principal / n_periods
            else:
                payment = principal * rate * factor / (factor - 1)
        except DecimalException as e:
            raise InvalidLoanSpec(f"Cannot amortize at a periodic rate of {rate}.") from e
    return +payment


def validate_loan(
    principal,
    annual_rate_percent,
    tenure_years,
    frequency: PaymentFrequency | str = DEFAULT_FREQUENCY,
) -> LoanSpec:
    """Build a LoanSpec, failing fast on inputs that would yield NaN/Infinity."""
    p = _to_decimal(principal, "principal")
    rate = _to_decimal(annual_rate_percent, "annual_rate_percent")
    tenure = _to_decimal(tenure_years, "tenure_years")

    if p <= 0:
        raise InvalidLoanSpec("Principal must be greater than 0.")
    if rate < 0:
        raise InvalidLoanSpec("Interest rate cannot be negative.")
    if tenure <= 0:
        raise InvalidLoanSpec("Tenure must be greater than 0.")
    if tenure > MAX_TENURE_YEARS:
        raise InvalidLoanSpec(f"Tenure cannot exceed {MAX_TENURE_YEARS} years.")

    loan = LoanSpec(
        principal=p,
        annual_rate_percent=rate,
        tenure_years=tenure,
        frequency=resolve_frequency(frequency),
    )
    if number_of_payments(loan.tenure_years, loan.frequency) < 1:
        raise InvalidLoanSpec(
            f"Tenure of {tenure} years is shorter than one {loan.frequency.value} period."
        )
    return loan


def compute_loan(loan: LoanSpec) -> AmortizationResult:
    """Amortize a validated LoanSpec into a payment and per-period schedule."""
    r = period_rate(loan.annual_rate_percent, loan.frequency)
    n = number_of_payments(loan.tenure_years, loan.frequency)
    emi = periodic_payment(loan.principal, r, n)

    schedule: list[AmortizationRow] = []
    balance = loan.principal

    for period in range(1, n + 1):
        interest = balance * r
        principal_paid = emi - interest
        balance -= principal_paid
        # Final-period drift can leave a tiny negative residual
        if balance < 0:
            balance = ZERO

        schedule.append(AmortizationRow(
            period=period,
            principal_payment=principal_paid,
            interest_payment=interest,
            remaining_balance=balance,
        ))

    logger.debug(
        "Amortized %s over %d %s periods at %s per period: payment=%s",
        loan.principal, n, loan.frequency.value, r, emi,
    )
    return AmortizationResult(loan=loan, payment=emi, period_rate=r, schedule=schedule)


def compute(
    principal,
    annual_rate_percent,
    tenure_years,
    frequency: PaymentFrequency | str = DEFAULT_FREQUENCY,
) -> AmortizationResult:
    """Validate inputs and compute the EMI with its amortization schedule.

    Args:
        principal: Loan amount (> 0)
        annual_rate_percent: Annual interest rate in percent (e.g. 12 for 12%)
        tenure_years: Loan tenure in years; may be fractional
        frequency: monthly | quarterly | semi-annual | yearly

    Raises:
        InvalidLoanSpec: if the inputs cannot produce a finite schedule
    """
    return compute_loan(validate_loan(principal, annual_rate_percent, tenure_years, frequency))


def yearly_summary(result: AmortizationResult) -> list[YearlySummary]:
    """Aggregate the schedule by loan year.

    A year is `periods_per_year` consecutive periods; a fractional tenure
    leaves a shorter final year.
    """
    per_year = result.loan.periods_per_year
    yearly: list[YearlySummary] = []
    year_principal = ZERO
    year_interest = ZERO
    year_payments = ZERO

    for row in result.schedule:
        year_principal += row.principal_payment
        year_interest += row.interest_payment
        year_payments += row.principal_payment + row.interest_payment

        if row.period % per_year == 0 or row.period == len(result.schedule):
            yearly.append(YearlySummary(
                year=(row.period - 1) // per_year + 1,
                principal=year_principal,
                interest=year_interest,
                payments=year_payments,
                ending_balance=row.remaining_balance,
            ))
            year_principal = ZERO
            year_interest = ZERO
            year_payments = ZERO

    return yearly
