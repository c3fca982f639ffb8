import pytest
from fastapi.testclient import TestClient

from emi_calculator.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _payload(**overrides) -> dict:
    payload = {
        "principal": 100000,
        "annual_rate_percent": 12,
        "tenure_years": 1,
        "frequency": "monthly",
    }
    payload.update(overrides)
    return payload


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestCalculateEmi:
    def test_standard_loan(self, client):
        resp = client.post("/api/v1/emi", json=_payload())
        assert resp.status_code == 200
        data = resp.json()
        assert data["payment"] == "8884.88"
        assert data["periods_per_year"] == 12
        assert data["number_of_payments"] == 12
        assert data["total_principal"] == "100000.00"

    def test_first_row_rounded(self, client):
        data = client.post("/api/v1/emi", json=_payload()).json()
        first = data["schedule"]["rows"][0]
        assert first == {
            "period": 1,
            "principal_payment": "7884.88",
            "interest_payment": "1000.00",
            "remaining_balance": "92115.12",
        }

    def test_default_pagination(self, client):
        data = client.post("/api/v1/emi", json=_payload()).json()
        schedule = data["schedule"]
        assert schedule["page"] == 1
        assert schedule["rows_per_page"] == 10
        assert schedule["total_pages"] == 2
        assert schedule["total_rows"] == 12
        assert len(schedule["rows"]) == 10

    def test_second_page(self, client):
        data = client.post("/api/v1/emi", json=_payload(page=2)).json()
        rows = data["schedule"]["rows"]
        assert [r["period"] for r in rows] == [11, 12]
        assert rows[-1]["remaining_balance"] == "0.00"

    def test_zero_rate(self, client):
        data = client.post("/api/v1/emi", json=_payload(annual_rate_percent=0)).json()
        assert data["payment"] == "8333.33"
        assert data["total_interest"] == "0.00"

    def test_quarterly(self, client):
        data = client.post("/api/v1/emi", json=_payload(frequency="quarterly", tenure_years=2)).json()
        assert data["periods_per_year"] == 4
        assert data["number_of_payments"] == 8
        assert data["frequency"] == "quarterly"


class TestValidation:
    @pytest.mark.parametrize("overrides", [
        {"principal": 0},
        {"principal": -100},
        {"annual_rate_percent": -1},
        {"tenure_years": 0},
        {"tenure_years": 101},
        {"frequency": "weekly"},
        {"rows_per_page": 0},
    ])
    def test_schema_rejects(self, client, overrides):
        resp = client.post("/api/v1/emi", json=_payload(**overrides))
        assert resp.status_code == 422

    def test_zero_periods_is_bad_request(self, client):
        resp = client.post("/api/v1/emi", json=_payload(tenure_years=0.01))
        assert resp.status_code == 400
        assert "shorter than one" in resp.json()["detail"]


class TestYearly:
    def test_yearly_summary(self, client):
        resp = client.post("/api/v1/emi/yearly", json=_payload(tenure_years=2))
        assert resp.status_code == 200
        data = resp.json()
        assert [y["year"] for y in data["years"]] == [1, 2]
        assert data["years"][-1]["ending_balance"] == "0.00"
