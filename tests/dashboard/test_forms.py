import pytest

from emi_calculator.dashboard.forms import step_page, validate_form


class TestValidateForm:
    def test_valid_input(self):
        assert validate_form(100000, 12, 1) is None

    @pytest.mark.parametrize("principal", [None, 0, -1])
    def test_principal(self, principal):
        assert validate_form(principal, 12, 1) == "Please enter a valid principal amount."

    @pytest.mark.parametrize("rate", [None, 0, -1])
    def test_rate(self, rate):
        assert validate_form(100000, rate, 1) == "Please enter a valid interest rate."

    @pytest.mark.parametrize("tenure", [None, 0, -1])
    def test_tenure(self, tenure):
        assert validate_form(100000, 12, tenure) == "Please enter a valid tenure."

    def test_first_invalid_field_wins(self):
        assert validate_form(0, 0, 0) == "Please enter a valid principal amount."


class TestStepPage:
    def test_next(self):
        assert step_page("next-btn", 1, 25, 10) == 2

    def test_next_clamps_at_last_page(self):
        assert step_page("next-btn", 3, 25, 10) == 3

    def test_next_without_schedule(self):
        assert step_page("next-btn", 1, 0, 10) == 1

    def test_previous(self):
        assert step_page("prev-btn", 3, 25, 10) == 2

    def test_previous_clamps_at_first_page(self):
        assert step_page("prev-btn", 1, 25, 10) == 1

    def test_missing_page_treated_as_first(self):
        assert step_page("next-btn", None, 25, 10) == 2

    @pytest.mark.parametrize("trigger", ["loan-store", "rows-per-page", None])
    def test_other_triggers_reset(self, trigger):
        assert step_page(trigger, 3, 25, 10) == 1
