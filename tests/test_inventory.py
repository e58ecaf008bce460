"""
Inventory reporting tests: levels, reorder alerts, purchase orders, dashboard.

Tests:
1-2. Inventory level bands
3-4. Reorder suggestions and alerts
5-6. Purchase orders
7.   Dashboard summary
"""

from datetime import datetime, timezone

import pytest

from cutorder.inventory import (
    build_purchase_order,
    inventory_level,
    reorder_alerts,
    suggested_reorder_quantity,
    summarize_dashboard,
)
from cutorder.jobs import JobBuilder, update_job_status
from cutorder.models import InventoryLevel
from cutorder.pricing_engine import PricingEngine
from cutorder.schemas import JobRequest, Material


def _material(stock, threshold=20.0, **overrides):
    data = {
        "id": "m1", "name": "Pine 2x4", "type": "wood", "unit_cost": 4.0,
        "current_stock": stock, "reorder_threshold": threshold,
        "supplier": "ABC Lumber Co.", "measurement_unit": "imperial",
    }
    data.update(overrides)
    return Material(**data)


# ============================================================
# 1-2. Levels
# ============================================================

def test_inventory_level_bands():
    assert inventory_level(_material(10)) == InventoryLevel.CRITICAL
    assert inventory_level(_material(12)) == InventoryLevel.LOW
    assert inventory_level(_material(20)) == InventoryLevel.LOW
    assert inventory_level(_material(30)) == InventoryLevel.WARNING
    assert inventory_level(_material(30.5)) == InventoryLevel.IN_STOCK


def test_zero_threshold_material():
    assert inventory_level(_material(0, threshold=0)) == InventoryLevel.CRITICAL
    assert inventory_level(_material(1, threshold=0)) == InventoryLevel.IN_STOCK


# ============================================================
# 3-4. Reorder
# ============================================================

def test_suggested_reorder_quantity():
    # max(40, (20 - 12) + 20 = 28) -> 40
    assert suggested_reorder_quantity(_material(12)) == 40
    # max(40, (20 - -25) + 20 = 65) -> 65
    assert suggested_reorder_quantity(_material(-25)) == 65


def test_reorder_alerts_only_for_low_materials(oak, steel_bar):
    alerts = reorder_alerts([oak, steel_bar])
    assert len(alerts) == 1
    alert = alerts[0]
    assert alert.material_id == "3"
    assert alert.material_name == "Steel Bar 12mm"
    assert alert.current_stock == 8.5
    assert alert.reorder_threshold == 15.0
    assert alert.supplier == "MetalWorks Inc."
    assert alert.measurement_unit == "metric"
    assert alert.suggested_quantity == 30.0
    assert alert.inventory_level == InventoryLevel.LOW


# ============================================================
# 5-6. Purchase orders
# ============================================================

def test_build_purchase_order(steel_bar):
    pine = _material(12)
    order = build_purchase_order([pine, steel_bar], order_number="BULK-123456")
    assert order.order_number == "BULK-123456"
    assert [item.quantity for item in order.items] == [40, 30]
    assert [item.cost for item in order.items] == [160.0, 360.0]
    assert order.total == pytest.approx(520.0)


def test_purchase_order_number_default():
    order = build_purchase_order([])
    assert order.order_number.startswith("BULK-")
    assert len(order.order_number) == len("BULK-") + 6
    assert order.items == []
    assert order.total == 0.0


# ============================================================
# 7. Dashboard
# ============================================================

def test_summarize_dashboard(oak, steel_bar):
    builder = JobBuilder(PricingEngine())
    request = JobRequest(customer_name="John Smith", length="5' 3\"", quantity="2")
    pending = builder.create_job(request, oak)
    completed = update_job_status(builder.create_job(request, oak), "completed",
                                  now=datetime(2024, 1, 15, tzinfo=timezone.utc))
    cancelled = update_job_status(builder.create_job(request, oak), "cancelled")

    summary = summarize_dashboard([pending, completed, cancelled], [oak, steel_bar])
    assert summary.pending_jobs == 1
    assert summary.completed_jobs == 1
    assert summary.total_revenue == pytest.approx(128.92)
    assert [a.material_id for a in summary.reorder_alerts] == ["3"]
