from dataclasses import dataclass, field
from decimal import Decimal

from emi_calculator.models.loan import LoanSpec


@dataclass(frozen=True)
class AmortizationRow:
    period: int  # 1-based, not necessarily a month
    principal_payment: Decimal
    interest_payment: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class AmortizationResult:
    loan: LoanSpec
    payment: Decimal  # Fixed periodic installment (EMI)
    period_rate: Decimal
    schedule: list[AmortizationRow] = field(default_factory=list)

    @property
    def number_of_payments(self) -> int:
        return len(self.schedule)

    @property
    def total_principal(self) -> Decimal:
        return sum((r.principal_payment for r in self.schedule), Decimal("0"))

    @property
    def total_interest(self) -> Decimal:
        return sum((r.interest_payment for r in self.schedule), Decimal("0"))

    @property
    def total_paid(self) -> Decimal:
        return self.total_principal + self.total_interest


@dataclass(frozen=True)
class YearlySummary:
    year: int
    principal: Decimal
    interest: Decimal
    payments: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class SchedulePage:
    rows: list[AmortizationRow]
    page: int
    rows_per_page: int
    total_pages: int
    total_rows: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
