from decimal import Decimal

import pytest

from emi_calculator.engine.pagination import paginate, total_pages
from emi_calculator.models.results import AmortizationRow


def _rows(n: int) -> list[AmortizationRow]:
    return [
        AmortizationRow(period=i, principal_payment=Decimal("1"), interest_payment=Decimal("0"),
                        remaining_balance=Decimal(n - i))
        for i in range(1, n + 1)
    ]


class TestTotalPages:
    def test_exact_fit(self):
        assert total_pages(20, 10) == 2

    def test_partial_last_page(self):
        assert total_pages(25, 10) == 3

    def test_empty_schedule_has_one_page(self):
        assert total_pages(0, 10) == 1


class TestPaginate:
    def test_first_page(self):
        page = paginate(_rows(25), 1, 10)
        assert [r.period for r in page.rows] == list(range(1, 11))
        assert page.total_pages == 3
        assert page.total_rows == 25
        assert not page.has_previous
        assert page.has_next

    def test_last_page_is_short(self):
        page = paginate(_rows(25), 3, 10)
        assert [r.period for r in page.rows] == [21, 22, 23, 24, 25]
        assert page.has_previous
        assert not page.has_next

    def test_page_past_end_clamps(self):
        page = paginate(_rows(25), 99, 10)
        assert page.page == 3

    def test_page_below_one_clamps(self):
        page = paginate(_rows(25), 0, 10)
        assert page.page == 1

    def test_rows_per_page_larger_than_schedule(self, standard_result):
        page = paginate(standard_result.schedule, 1, 200)
        assert len(page.rows) == 12
        assert page.total_pages == 1

    def test_long_schedule_pages(self, long_result):
        page = paginate(long_result.schedule, 5, 50)
        assert page.total_pages == 5
        assert len(page.rows) == 40
        assert page.rows[0].period == 201

    def test_invalid_rows_per_page(self):
        with pytest.raises(ValueError):
            paginate(_rows(5), 1, 0)
