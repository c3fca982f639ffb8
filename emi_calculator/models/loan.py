from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentFrequency(Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUAL = "semi-annual"
    YEARLY = "yearly"

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR[self]


PERIODS_PER_YEAR = {
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.QUARTERLY: 4,
    PaymentFrequency.SEMI_ANNUAL: 2,
    PaymentFrequency.YEARLY: 1,
}

DEFAULT_FREQUENCY = PaymentFrequency.MONTHLY

# Caps a schedule at 1200 monthly periods
MAX_TENURE_YEARS = Decimal("100")


class InvalidLoanSpec(ValueError):
    """Loan inputs that cannot produce a finite amortization schedule."""


@dataclass(frozen=True)
class LoanSpec:
    principal: Decimal
    annual_rate_percent: Decimal  # e.g. Decimal("12") for 12% p.a.
    tenure_years: Decimal
    frequency: PaymentFrequency = DEFAULT_FREQUENCY

    @property
    def periods_per_year(self) -> int:
        return self.frequency.periods_per_year
