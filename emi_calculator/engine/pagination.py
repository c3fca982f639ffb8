"""Slice an amortization schedule into display pages."""

import math

from emi_calculator.models.results import AmortizationRow, SchedulePage


def total_pages(total_rows: int, rows_per_page: int) -> int:
    """Number of pages needed; an empty schedule still has one (empty) page."""
    return max(1, math.ceil(total_rows / rows_per_page))


def paginate(schedule: list[AmortizationRow], page: int = 1, rows_per_page: int = 10) -> SchedulePage:
    """Return one page of the schedule. Out-of-range pages clamp to the nearest valid page."""
    if rows_per_page < 1:
        raise ValueError("rows_per_page must be >= 1")

    pages = total_pages(len(schedule), rows_per_page)
    page = min(max(page, 1), pages)
    start = (page - 1) * rows_per_page

    return SchedulePage(
        rows=schedule[start:start + rows_per_page],
        page=page,
        rows_per_page=rows_per_page,
        total_pages=pages,
        total_rows=len(schedule),
    )
