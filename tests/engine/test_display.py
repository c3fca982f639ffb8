from decimal import Decimal

from emi_calculator.config import settings
from emi_calculator.engine.display import format_money, format_rate, round_money


class TestRoundMoney:
    def test_half_up(self):
        assert round_money(Decimal("2.345")) == Decimal("2.35")
        assert round_money(Decimal("2.344999")) == Decimal("2.34")

    def test_two_places(self):
        assert str(round_money(Decimal("1000"))) == "1000.00"


class TestFormatMoney:
    def test_thousands_separator(self):
        assert format_money(Decimal("8884.878867"), "₹") == "₹8,884.88"

    def test_default_symbol_from_settings(self):
        assert format_money(Decimal("5")).startswith(settings.currency_symbol)

    def test_custom_symbol(self):
        assert format_money(Decimal("1234567.891"), "$") == "$1,234,567.89"


class TestFormatRate:
    def test_monthly_rate(self):
        assert format_rate(Decimal("0.01")) == "1.0000%"
