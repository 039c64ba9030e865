from __future__ import annotations

import json

from roi_service.controllers import roi as roi_controller
from roi_service.services.roi import InvalidInput


def test_calculate_scenarios(client, example_payload):
    resp = client.post("/v1/roi/scenarios", json=example_payload)
    assert resp.status_code == 200
    data = resp.json()
    assert data["scenarios"]["mostLikely"] == {
        "totalBenefit": 80000,
        "year1Net": 10000,
        "roiPct": 14.3,
        "paybackMonths": 10.5,
    }
    assert data["scenarios"]["low"]["totalBenefit"] == 60000
    assert data["scenarios"]["high"]["totalBenefit"] == 100000
    assert data["warnings"] == []
    assert data["recommendation"] == "EVALUATE"
    assert data["riskLevel"] == "HIGH"


def test_calculate_scenarios_returns_warnings(client, example_payload):
    resp = client.post(
        "/v1/roi/scenarios", json=example_payload | {"costPerHour": 250}
    )
    assert resp.status_code == 200
    assert resp.json()["warnings"] == ["cost per hour seems high"]


def test_unbounded_payback_serialized_as_null(client, example_payload):
    payload = example_payload | {
        "hoursSavedPerPersonPerMonth": 0,
        "errorReductionPct": 0,
        "cloudReductionPct": 0,
        "riskReductionPct": 0,
    }
    resp = client.post("/v1/roi/scenarios", json=payload)
    assert resp.status_code == 200
    for scenario in resp.json()["scenarios"].values():
        assert scenario["paybackMonths"] is None
        assert scenario["totalBenefit"] == 0


def test_structural_validation(client, example_payload):
    resp = client.post("/v1/roi/scenarios", json=example_payload | {"nPeople": 0})
    assert resp.status_code == 422

    resp = client.post(
        "/v1/roi/scenarios", json=example_payload | {"errorReductionPct": 1.5}
    )
    assert resp.status_code == 422

    missing = dict(example_payload)
    missing.pop("licenseCostAnnual")
    resp = client.post("/v1/roi/scenarios", json=missing)
    assert resp.status_code == 422


def test_invalid_input_maps_to_400(client, example_payload, monkeypatch):
    def _raise(_inputs):
        raise InvalidInput("nPeople", "Number of people must be greater than 0")

    monkeypatch.setattr(roi_controller, "calculate_roi_scenarios", _raise)
    resp = client.post("/v1/roi/scenarios", json=example_payload)
    assert resp.status_code == 400
    assert resp.json()["detail"] == {
        "code": "INVALID_INPUT",
        "message": "nPeople: Number of people must be greater than 0",
    }


def test_warnings_endpoint(client, example_payload):
    resp = client.post(
        "/v1/roi/warnings",
        json=example_payload | {"cloudReductionPct": 0.6, "riskReductionPct": 0.9},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "warnings": [
            "cloud cost reduction >50% may be optimistic",
            "risk reduction >80% may be optimistic",
        ]
    }


def test_summary_endpoint(client, example_payload):
    resp = client.post("/v1/roi/summary", json=example_payload)
    assert resp.status_code == 200
    data = resp.json()
    assert "| Most Likely | $80,000 | $10,000 | 14.3% | 10.5 months |" in data["markdown"]
    assert data["scenarios"]["mostLikely"]["paybackMonthsFormatted"] == "10.5 months"
    assert data["scenarios"]["low"]["year1NetFormatted"] == "-$10,000"


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["version"]
    assert resp.headers["cache-control"] == "no-cache, no-store, must-revalidate"


def test_overflowing_amount_returns_invalid_input(client, example_payload):
    resp = client.post(
        "/v1/roi/scenarios", json=example_payload | {"costPerHour": 1e306}
    )
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["code"] == "INVALID_INPUT"
    assert detail["message"].startswith("totalBenefit:")


def test_infinity_literal_is_rejected(client, example_payload):
    body = json.dumps(example_payload | {"costPerHour": float("inf")})
    assert "Infinity" in body
    resp = client.post(
        "/v1/roi/scenarios",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 422
