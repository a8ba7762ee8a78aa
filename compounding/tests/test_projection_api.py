from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from compounding.app import create_app
from compounding.config import Settings


def projection_payload(**overrides) -> dict:
    payload = {
        "initialInvestment": 1000,
        "annualInterestRatePercent": 3,
        "compoundingFrequency": "yearly",
        "contributionAmount": 0,
        "contributionFrequency": "none",
        "durationMonths": 12,
    }
    payload.update(overrides)
    return payload


def test_projection_endpoint_returns_result(client: FlaskClient):
    resp = client.post("/api/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["principal"] == 1000
    assert body["futureValue"] == pytest.approx(1030.0)
    assert body["interestComponent"] == pytest.approx(30.0)


def test_zero_rate_monthly_contributions(client: FlaskClient):
    resp = client.post(
        "/api/projection",
        json=projection_payload(
            annualInterestRatePercent=0,
            contributionAmount=100,
            contributionFrequency="monthly",
        ),
    )

    assert resp.status_code == 200
    assert resp.get_json()["futureValue"] == 2200.0


def test_negative_rate_returns_400_with_message(client: FlaskClient):
    resp = client.post("/api/projection", json=projection_payload(initialInvestment=500, annualInterestRatePercent=-1))

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == ["annualInterestRatePercent cannot be negative"]
    assert body["message"] == "annualInterestRatePercent cannot be negative"


def test_every_violation_is_reported(client: FlaskClient):
    resp = client.post(
        "/api/projection",
        json=projection_payload(durationMonths=-1, contributionFrequency="daily"),
    )

    assert resp.status_code == 400
    assert len(resp.get_json()["error"]) == 2


@pytest.mark.parametrize(
    "payload",
    [
        {"initialInvestment": 1000},
        projection_payload(initialInvestment="lots"),
        projection_payload(unexpected=True),
        [1, 2, 3],
    ],
)
def test_invalid_payload_shape_returns_422(client: FlaskClient, payload):
    resp = client.post("/api/projection", json=payload)

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_defaults_round_trip_through_projection(client: FlaskClient):
    defaults = client.get("/api/projection/defaults")

    assert defaults.status_code == 200
    body = defaults.get_json()
    assert body["compoundingFrequency"] == "yearly"
    assert body["contributionFrequency"] == "yearly"
    assert body["durationMonths"] == 12

    resp = client.post("/api/projection", json=body)
    assert resp.status_code == 200
    assert resp.get_json()["futureValue"] == pytest.approx(1133.0)


def test_schedule_endpoint(client: FlaskClient):
    resp = client.post("/api/projection/schedule", json=projection_payload(durationMonths=30))

    assert resp.status_code == 200
    body = resp.get_json()
    assert [point["month"] for point in body["points"]] == [0, 12, 24, 30]
    assert body["final"]["futureValue"] == pytest.approx(1000 * 1.03 ** 2.5)


def test_schedule_endpoint_honours_step(client: FlaskClient):
    resp = client.post("/api/projection/schedule?stepMonths=3", json=projection_payload())

    assert resp.status_code == 200
    assert [point["month"] for point in resp.get_json()["points"]] == [0, 3, 6, 9, 12]


def test_schedule_endpoint_rejects_zero_step(client: FlaskClient):
    resp = client.post("/api/projection/schedule?stepMonths=0", json=projection_payload())

    assert resp.status_code == 400
    assert resp.get_json()["error"] == ["stepMonths must be a positive whole number"]


def test_schedule_endpoint_caps_point_count():
    app = create_app(Settings(_env_file=None, MAX_SCHEDULE_POINTS=3))
    with app.test_client() as client:
        resp = client.post("/api/projection/schedule", json=projection_payload(durationMonths=48))

    assert resp.status_code == 400
    assert "within 3" in resp.get_json()["message"]


def test_cors_allows_configured_origin(client: FlaskClient):
    resp = client.post(
        "/api/projection",
        json=projection_payload(),
        headers={"Origin": "http://localhost:5173"},
    )

    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


@pytest.mark.parametrize("step", ["abc", "1.5", ""])
def test_schedule_endpoint_rejects_malformed_step(client: FlaskClient, step):
    resp = client.post(f"/api/projection/schedule?stepMonths={step}", json=projection_payload(durationMonths=24))

    assert resp.status_code == 400
    assert resp.get_json()["error"] == ["stepMonths must be a positive whole number"]


@pytest.mark.parametrize("path", ["/api/projection", "/api/projection/schedule"])
def test_overflowing_projection_returns_400(client: FlaskClient, path):
    resp = client.post(
        path,
        json=projection_payload(
            annualInterestRatePercent=1_000_000,
            compoundingFrequency="weekly",
            durationMonths=12_000,
        ),
        query_string={"stepMonths": 12} if path.endswith("schedule") else None,
    )

    assert resp.status_code == 400
    assert b"Infinity" not in resp.data
    assert resp.get_json()["error"] == ["projection exceeds the representable range"]
