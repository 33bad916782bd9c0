"""Integration tests for API endpoints"""

import random
import pytest
from fastapi.testclient import TestClient
from loan_calculator.api.main import create_app
from loan_calculator.api.dependencies import get_random_source


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "loan-calculator"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/quote", json={"income": 5000, "annual_rate_percent": 22, "tenor_months": 12})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_quote_total" in response.text
    assert "loan_schedule_rows" in response.text


def test_request_id_header(client: TestClient):
    """Responses carry a generated or echoed request ID"""
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_quote_endpoint(client: TestClient):
    """Test POST /v1/quote with valid entry"""
    response = client.post(
        "/v1/quote",
        json={"income": 5000, "annual_rate_percent": 22, "tenor_months": 12},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["max_principal"] == 21369
    assert data["monthly_payment"] == 2000.00
    assert data["monthly_rate"] == pytest.approx(0.0183333, rel=1e-5)
    assert data["tenor_months"] == 12
    assert data["currency"] == "GHS"
    assert data["display"] == {
        "max_principal": "GHS 21,369",
        "monthly_payment": "GHS 2,000",
        "income": "GHS 5,000",
        "annual_rate": "22.0",
    }


def test_quote_endpoint_form_strings(client: TestClient):
    """String values from form fields are accepted"""
    response = client.post(
        "/v1/quote",
        json={"income": "3000", "annual_rate_percent": "0", "tenor_months": "10"},
    )

    assert response.status_code == 200
    assert response.json()["max_principal"] == 12000
    assert response.json()["monthly_payment"] == 1200


def test_quote_endpoint_default_rate(client: TestClient):
    """Omitted rate uses the configured default"""
    response = client.post("/v1/quote", json={"income": 5000, "tenor_months": 12})

    assert response.status_code == 200
    assert response.json()["annual_rate_percent"] == 22.0
    assert response.json()["max_principal"] == 21369


@pytest.mark.parametrize(
    "body,code,field",
    [
        ({"income": 0, "annual_rate_percent": 22, "tenor_months": 12}, "missing_field", "income"),
        ({"annual_rate_percent": 22, "tenor_months": 12}, "missing_field", "income"),
        ({"income": 5000, "tenor_months": ""}, "missing_field", "tenor_months"),
        ({"income": "abc", "tenor_months": 12}, "not_a_number", "income"),
        ({"income": 5000, "annual_rate_percent": 22, "tenor_months": 400}, "tenor_out_of_range", "tenor_months"),
        ({"income": 5000, "annual_rate_percent": 75, "tenor_months": 12}, "rate_out_of_range", "annual_rate_percent"),
        ({"income": -10, "tenor_months": 12}, "income_out_of_range", "income"),
    ],
)
def test_quote_endpoint_validation(client: TestClient, body, code, field):
    """Rejected input returns 422 with an error code"""
    response = client.post("/v1/quote", json=body)

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["code"] == code
    assert detail["field"] == field
    assert detail["message"]


def test_schedule_endpoint(client: TestClient):
    """Test POST /v1/schedule returns exact and display rows"""
    response = client.post(
        "/v1/schedule",
        json={"principal": 21369, "monthly_payment": 2000, "annual_rate_percent": 22, "tenor_months": 12},
    )

    assert response.status_code == 200
    data = response.json()
    assert 1 <= data["months"] <= 12
    assert len(data["rows"]) == data["months"]
    assert len(data["display_rows"]) == data["months"]
    assert data["rows"][0]["month"] == 1
    assert data["rows"][0]["interest_paid"] == pytest.approx(391.765)
    assert data["display_rows"][0]["month"] == "1"

    balances = [row["remaining_balance"] for row in data["rows"]]
    assert balances == sorted(balances, reverse=True)


def test_schedule_endpoint_seed_repeatable(client: TestClient):
    """Same seed gives the same schedule"""
    body = {"principal": 21369, "monthly_payment": 2000, "annual_rate_percent": 22, "tenor_months": 12, "seed": 7}

    first = client.post("/v1/schedule", json=body).json()
    second = client.post("/v1/schedule", json=body).json()

    assert first == second


def test_schedule_endpoint_uses_injected_random_source():
    """Random source comes from the dependency"""
    app = create_app()
    app.dependency_overrides[get_random_source] = lambda: random.Random(5)
    client = TestClient(app)
    body = {"principal": 21369, "monthly_payment": 2000, "annual_rate_percent": 22, "tenor_months": 12}

    first = client.post("/v1/schedule", json=body).json()
    second = client.post("/v1/schedule", json=body).json()

    assert first == second


def test_schedule_endpoint_zero_rate_paid_off(client: TestClient):
    """Zero-rate schedule ends when the balance reaches zero"""
    response = client.post(
        "/v1/schedule",
        json={"principal": 12000, "monthly_payment": 1200, "annual_rate_percent": 0, "tenor_months": 24},
    )

    data = response.json()
    assert response.status_code == 200
    assert data["paid_off"] is True
    assert data["months"] < 24
    assert data["rows"][-1]["remaining_balance"] == 0


def test_schedule_endpoint_validation(client: TestClient):
    """Invalid schedule input returns 422"""
    response = client.post(
        "/v1/schedule",
        json={"principal": 21369, "monthly_payment": 2000, "annual_rate_percent": 22, "tenor_months": 0},
    )

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "tenor_out_of_range"


def test_breakdown_endpoint(client: TestClient):
    """Test POST /v1/breakdown returns quote and its schedule"""
    response = client.post(
        "/v1/breakdown",
        json={"income": 5000, "annual_rate_percent": 22, "tenor_months": 12, "seed": 3},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["quote"]["max_principal"] == 21369
    assert 1 <= data["schedule"]["months"] <= 12
    assert data["schedule"]["rows"][0]["interest_paid"] == pytest.approx(21369 * 0.22 / 12)


def test_breakdown_endpoint_validation(client: TestClient):
    """Breakdown rejects invalid entry before scheduling"""
    response = client.post("/v1/breakdown", json={"income": 5000, "tenor_months": 361})

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "tenor_out_of_range"


@pytest.mark.parametrize("field", ["income", "annual_rate_percent", "tenor_months"])
def test_quote_endpoint_rejects_boolean(client: TestClient, field):
    """A JSON boolean reaches the domain validator as a non-number"""
    body = {"income": 5000, "annual_rate_percent": 22, "tenor_months": 12}
    body[field] = True

    response = client.post("/v1/quote", json=body)

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "not_a_number"
    assert response.json()["detail"]["field"] == field


def test_schedule_endpoint_negative_amount(client: TestClient):
    """Negative principal is reported against the amount, not income"""
    response = client.post(
        "/v1/schedule",
        json={"principal": -100, "monthly_payment": 2000, "annual_rate_percent": 22, "tenor_months": 12},
    )

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "code": "amount_out_of_range",
        "field": "principal",
        "message": "principal must not be negative",
    }


def test_schedule_endpoint_default_rate(client: TestClient):
    """Omitted schedule rate uses the configured default"""
    response = client.post(
        "/v1/schedule",
        json={"principal": 21369, "monthly_payment": 2000, "tenor_months": 12},
    )

    assert response.status_code == 200
    assert response.json()["rows"][0]["interest_paid"] == pytest.approx(21369 * 0.22 / 12)


def test_limits_endpoint(client: TestClient):
    """Form bounds match the validator"""
    response = client.get("/v1/limits")

    assert response.status_code == 200
    assert response.json() == {
        "min_tenor_months": 1,
        "max_tenor_months": 360,
        "max_annual_rate_percent": 50.0,
        "rate_step": 0.1,
        "default_annual_rate_percent": 22.0,
        "debt_service_ratio": 0.4,
        "currency": "GHS",
    }


def test_metrics_record_request_latency_by_endpoint(client: TestClient):
    """Request latency is labelled with the route"""
    client.get("/v1/limits")

    response = client.get("/metrics")
    assert 'endpoint="/v1/limits"' in response.text
