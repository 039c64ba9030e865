import os

import pytest

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from fastapi.testclient import TestClient

from roi_service.main import app
from roi_service.services.roi import RoiInputs

EXAMPLE_PAYLOAD = {
    "nPeople": 10,
    "costPerHour": 50,
    "hoursSavedPerPersonPerMonth": 5,
    "errorCostAnnual": 100000,
    "errorReductionPct": 0.3,
    "cloudSpendAnnual": 50000,
    "cloudReductionPct": 0.2,
    "riskCostAnnual": 20000,
    "riskReductionPct": 0.5,
    "licenseCostAnnual": 60000,
    "implementationOneTime": 10000,
}


@pytest.fixture
def example_payload():
    return dict(EXAMPLE_PAYLOAD)


@pytest.fixture
def example_inputs():
    return RoiInputs(
        n_people=10,
        cost_per_hour=50,
        hours_saved_per_person_per_month=5,
        error_cost_annual=100000,
        error_reduction_pct=0.3,
        cloud_spend_annual=50000,
        cloud_reduction_pct=0.2,
        risk_cost_annual=20000,
        risk_reduction_pct=0.5,
        license_cost_annual=60000,
        implementation_one_time=10000,
    )


@pytest.fixture(scope="module")
def client():
    """Yields a TestClient with lifespan events."""
    with TestClient(app) as client:
        yield client
