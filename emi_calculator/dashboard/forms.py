"""Form validation and page navigation for the calculator page.

Kept free of Dash imports so the rules can be checked without an app.
"""

from emi_calculator.engine.pagination import total_pages


def validate_form(principal, rate, tenure) -> str | None:
    """Return the error message for the first invalid field, or None."""
    if not principal or principal <= 0:
        return "Please enter a valid principal amount."
    if not rate or rate <= 0:
        return "Please enter a valid interest rate."
    if not tenure or tenure <= 0:
        return "Please enter a valid tenure."
    return None


def step_page(trigger: str | None, page: int | None, total_rows: int, rows_per_page: int) -> int:
    """Next page number after a Previous/Next click.

    Any other trigger (new calculation, page size change) resets to page 1.
    """
    page = page or 1
    if trigger == "prev-btn":
        return max(1, page - 1)
    if trigger == "next-btn":
        return min(page + 1, total_pages(total_rows, rows_per_page))
    return 1
