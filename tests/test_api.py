"""
Tests for the calculation and export API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from equity_payoff.api.calculations import MAX_MONTHS
from equity_payoff.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestValidateAPI:
    """Test the validation endpoint."""

    def test_valid(self, client, underwater_payload):
        """Test valid inputs report no errors."""
        response = client.post("/api/calculate/validate", json=underwater_payload)
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": {}}

    def test_invalid(self, client):
        """Test invalid inputs are reported per field, not rejected."""
        response = client.post(
            "/api/calculate/validate",
            json={
                "remaining_balance": -1000,
                "vehicle_value": 0,
                "current_monthly_payment": 500,
                "annual_interest_rate": 100,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert set(data["errors"]) == {
            "remaining_balance",
            "vehicle_value",
            "annual_interest_rate",
        }

    def test_partial(self, client):
        """Test missing fields are reported."""
        response = client.post("/api/calculate/validate", json={"vehicle_value": 20000})
        data = response.json()
        assert data["is_valid"] is False
        assert "vehicle_value" not in data["errors"]
        assert "remaining_balance" in data["errors"]


class TestCalculationAPI:
    """Test calculation endpoints."""

    def test_negative_equity(self, client):
        response = client.post(
            "/api/calculate/negative-equity",
            json={"remaining_balance": 30000, "vehicle_value": 20800},
        )
        assert response.status_code == 200
        assert response.json()["negative_equity"] == pytest.approx(9200)

    def test_payment(self, client):
        response = client.post(
            "/api/calculate/payment",
            json={"principal": 9200, "annual_interest_rate": 6.5, "months": 12},
        )
        assert response.status_code == 200
        assert 790 < response.json()["monthly_payment"] < 795

    def test_payment_rejects_zero_months(self, client):
        """Test a non-positive term never reaches the solver."""
        response = client.post(
            "/api/calculate/payment",
            json={"principal": 9200, "annual_interest_rate": 6.5, "months": 0},
        )
        assert response.status_code == 422

    def test_oversized_terms_are_rejected(self, client, underwater_payload):
        """Test terms and horizons above the schedule cap never reach the engine."""
        too_long = MAX_MONTHS + 1
        responses = [
            client.post(
                "/api/calculate/payment",
                json={"principal": 9200, "annual_interest_rate": 6.5, "months": too_long},
            ),
            client.post(
                "/api/calculate/schedule",
                json={
                    "principal": 10000,
                    "monthly_payment": 1,
                    "annual_interest_rate": 12,
                    "max_months": 100000000,
                },
            ),
            client.post(
                "/api/calculate/scenario",
                json={"inputs": underwater_payload, "timeline_months": too_long},
            ),
        ]
        assert [r.status_code for r in responses] == [422, 422, 422]

    def test_term_at_cap_is_accepted(self, client):
        response = client.post(
            "/api/calculate/payment",
            json={"principal": 9200, "annual_interest_rate": 6.5, "months": MAX_MONTHS},
        )
        assert response.status_code == 200

    def test_schedule(self, client):
        """Test schedule totals and payoff flag."""
        response = client.post(
            "/api/calculate/schedule",
            json={
                "principal": 1200,
                "monthly_payment": 100,
                "annual_interest_rate": 0,
                "max_months": 24,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["schedule"]) == 12
        assert data["schedule"][0] == {
            "month": 1,
            "payment": 100.0,
            "principal": 100.0,
            "interest": 0.0,
            "remaining_balance": 1100.0,
        }
        assert data["total_interest"] == 0
        assert data["total_principal"] == pytest.approx(1200)
        assert data["paid_off"] is True

    def test_schedule_not_paid_off(self, client):
        """Test a payment below the interest is flagged as unpaid."""
        response = client.post(
            "/api/calculate/schedule",
            json={
                "principal": 10000,
                "monthly_payment": 10,
                "annual_interest_rate": 12,
                "max_months": 6,
            },
        )
        data = response.json()
        assert len(data["schedule"]) == 6
        assert data["paid_off"] is False

    def test_scenario(self, client, underwater_payload):
        response = client.post(
            "/api/calculate/scenario",
            json={"inputs": underwater_payload, "timeline_months": 12},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["timeline"] == 12
        assert 790 < data["extra_monthly_payment"] < 795
        assert data["achievable"] is True

    def test_scenarios(self, client, underwater_payload):
        """Test all timelines are returned in ascending order."""
        response = client.post("/api/calculate/scenarios", json=underwater_payload)
        assert response.status_code == 200
        data = response.json()
        assert data["negative_equity"] == pytest.approx(9200)
        assert data["annual_interest_rate"] == "6.50%"
        assert [s["timeline"] for s in data["scenarios"]] == [6, 12, 18, 24]
        assert [f["timeline"] for f in data["formatted"]] == [6, 12, 18, 24]
        assert data["formatted"][0]["extra_monthly_payment"].startswith("$1,5")

    def test_scenarios_reject_invalid_inputs(self, client):
        """Test invalid inputs return 400 with field messages."""
        response = client.post(
            "/api/calculate/scenarios",
            json={
                "remaining_balance": -1000,
                "vehicle_value": 0,
                "current_monthly_payment": 500,
                "annual_interest_rate": 100,
            },
        )
        assert response.status_code == 400
        assert set(response.json()["detail"]) == {
            "remaining_balance",
            "vehicle_value",
            "annual_interest_rate",
        }

    def test_payoff_curve(self, client, underwater_payload):
        response = client.post("/api/calculate/payoff-curve", json=underwater_payload)
        assert response.status_code == 200
        points = response.json()["points"]
        assert len(points) == 25
        assert points[0]["6mo"] == pytest.approx(9200)


class TestExportAPI:
    """Test CSV export endpoint."""

    def test_export(self, client, underwater_payload):
        response = client.post("/api/export/scenarios", json=underwater_payload)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "negative-equity-scenarios-" in response.headers["content-disposition"]
        assert response.text.startswith('"Negative Equity Payment Calculator - Export"')

    def test_export_without_negative_equity(self, client):
        """Test there is nothing to export when the vehicle is worth more."""
        response = client.post(
            "/api/export/scenarios",
            json={
                "remaining_balance": 15000,
                "vehicle_value": 18000,
                "current_monthly_payment": 350,
                "annual_interest_rate": 4.5,
            },
        )
        assert response.status_code == 400
