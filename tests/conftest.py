"""
Shared test fixtures — API test client, sample supplies.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def pla_supply():
    """One PLA line: 100 g at 0.02/g."""
    return {"id": "pla", "name": "PLA", "unit": "g", "unit_cost": 0.02, "quantity": 100}


@pytest.fixture
def quote_payload():
    """Wire payload (camelCase) for a single PLA line at 30% profit."""
    return {
        "profitPercent": 30,
        "supplies": [
            {"id": "pla", "name": "PLA", "unit": "g", "unitCost": 0.02, "quantity": 100},
        ],
    }
