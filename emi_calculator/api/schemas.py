"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from emi_calculator.config import settings
from emi_calculator.models.loan import MAX_TENURE_YEARS, PaymentFrequency


# ---- Request schemas ----

class EmiRequest(BaseModel):
    principal: Decimal = Field(..., gt=0, description="Loan amount")
    annual_rate_percent: Decimal = Field(..., ge=0, description="Annual interest rate in percent, e.g. 12")
    tenure_years: Decimal = Field(..., gt=0, le=MAX_TENURE_YEARS, description="Loan tenure in years")
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    # Schedule pagination
    page: int = Field(1, ge=1)
    rows_per_page: int = Field(settings.default_rows_per_page, ge=1, le=1000)


# ---- Response schemas ----
# Monetary values are rounded to 2 decimal places for display.

class AmortizationRowResponse(BaseModel):
    period: int
    principal_payment: Decimal
    interest_payment: Decimal
    remaining_balance: Decimal


class SchedulePageResponse(BaseModel):
    page: int
    rows_per_page: int
    total_pages: int
    total_rows: int
    rows: list[AmortizationRowResponse]


class EmiResponse(BaseModel):
    payment: Decimal
    frequency: PaymentFrequency
    periods_per_year: int
    number_of_payments: int
    period_rate: Decimal
    total_principal: Decimal
    total_interest: Decimal
    total_paid: Decimal
    schedule: SchedulePageResponse


class YearlySummaryResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    payments: Decimal
    ending_balance: Decimal


class YearlyScheduleResponse(BaseModel):
    payment: Decimal
    frequency: PaymentFrequency
    years: list[YearlySummaryResponse]
