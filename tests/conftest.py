"""
Shared test fixtures: test client, sample materials and job requests.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Pin pricing defaults before importing app modules
os.environ["LABOR_RATE_PER_CUT"] = "0.25"
os.environ["WASTE_ALLOWANCE_PERCENT"] = "15"
os.environ["MARKUP_PERCENT"] = "25"

from cutorder.main import create_app
from cutorder.schemas import JobRequest, Material


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def oak():
    """Imperial material comfortably above its reorder threshold."""
    return Material(
        id="1",
        name="Oak 2x4",
        type="wood",
        unit_cost=8.50,
        current_stock=45.5,
        reorder_threshold=20.0,
        supplier="ABC Lumber Co.",
        measurement_unit="imperial",
    )


@pytest.fixture
def steel_bar():
    """Metric material already below its reorder threshold."""
    return Material(
        id="3",
        name="Steel Bar 12mm",
        type="metal",
        unit_cost=12.00,
        current_stock=8.5,
        reorder_threshold=15.0,
        supplier="MetalWorks Inc.",
        measurement_unit="metric",
    )


@pytest.fixture
def oak_request():
    return JobRequest(
        customer_name="  John Smith ",
        length="5' 3\"",
        input_unit="imperial",
        quantity="2",
        notes=" Square ends ",
    )
