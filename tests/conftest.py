"""Canonical fixtures used across engine, API and CLI tests.

Fixture: 100,000 loan at 12% p.a. over 1 year, monthly payments
(periodic rate exactly 1%, EMI ~8,884.88).
"""

import pytest
from decimal import Decimal

from emi_calculator.engine.amortization import compute
from emi_calculator.models.results import AmortizationResult


@pytest.fixture
def standard_result() -> AmortizationResult:
    """100K at 12% for 1 year, monthly."""
    return compute(Decimal("100000"), Decimal("12"), Decimal("1"), "monthly")


@pytest.fixture
def zero_rate_result() -> AmortizationResult:
    """100K at 0% for 1 year, monthly."""
    return compute(Decimal("100000"), Decimal("0"), Decimal("1"), "monthly")


@pytest.fixture
def long_result() -> AmortizationResult:
    """25 lakh home loan at 8.5% for 20 years, monthly (240 periods)."""
    return compute(Decimal("2500000"), Decimal("8.5"), Decimal("20"), "monthly")
