"""EMI calculation routes."""

import logging

from fastapi import APIRouter, HTTPException

from emi_calculator.api.schemas import (
    EmiRequest,
    EmiResponse,
    AmortizationRowResponse,
    SchedulePageResponse,
    YearlySummaryResponse,
    YearlyScheduleResponse,
)
from emi_calculator.engine.amortization import compute, yearly_summary
from emi_calculator.engine.display import round_money
from emi_calculator.engine.pagination import paginate
from emi_calculator.models.loan import InvalidLoanSpec
from emi_calculator.models.results import AmortizationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/emi", tags=["emi"])


def _compute(req: EmiRequest) -> AmortizationResult:
    try:
        return compute(req.principal, req.annual_rate_percent, req.tenure_years, req.frequency)
    except InvalidLoanSpec as e:
        logger.info("Rejected loan request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def _result_to_response(result: AmortizationResult, page: int, rows_per_page: int) -> EmiResponse:
    """Convert engine AmortizationResult to API response."""
    schedule_page = paginate(result.schedule, page, rows_per_page)
    rows = [
        AmortizationRowResponse(
            period=r.period,
            principal_payment=round_money(r.principal_payment),
            interest_payment=round_money(r.interest_payment),
            remaining_balance=round_money(r.remaining_balance),
        )
        for r in schedule_page.rows
    ]

    return EmiResponse(
        payment=round_money(result.payment),
        frequency=result.loan.frequency,
        periods_per_year=result.loan.periods_per_year,
        number_of_payments=result.number_of_payments,
        period_rate=result.period_rate,
        total_principal=round_money(result.total_principal),
        total_interest=round_money(result.total_interest),
        total_paid=round_money(result.total_paid),
        schedule=SchedulePageResponse(
            page=schedule_page.page,
            rows_per_page=schedule_page.rows_per_page,
            total_pages=schedule_page.total_pages,
            total_rows=schedule_page.total_rows,
            rows=rows,
        ),
    )


@router.post("", response_model=EmiResponse)
async def calculate_emi(req: EmiRequest):
    """Compute the EMI and return one page of the amortization schedule."""
    result = _compute(req)
    return _result_to_response(result, req.page, req.rows_per_page)


@router.post("/yearly", response_model=YearlyScheduleResponse)
async def calculate_yearly(req: EmiRequest):
    """Compute the EMI and return the schedule aggregated by loan year."""
    result = _compute(req)
    years = [
        YearlySummaryResponse(
            year=y.year,
            principal=round_money(y.principal),
            interest=round_money(y.interest),
            payments=round_money(y.payments),
            ending_balance=round_money(y.ending_balance),
        )
        for y in yearly_summary(result)
    ]
    return YearlyScheduleResponse(
        payment=round_money(result.payment),
        frequency=result.loan.frequency,
        years=years,
    )
