"""
Inventory reporting: reorder alerts, reorder suggestions, bulk purchase orders
and the dashboard rollup. Read-only over the records it is given.
"""

import time
from typing import Iterable, List, Optional

from .models import InventoryLevel, JobStatus
from .schemas import (
    CutJob, DashboardSummary, Material, PurchaseOrder, PurchaseOrderItem, ReorderAlert,
)
from .stock import is_stock_low

# Inventory badge bands, as fractions of the reorder threshold
CRITICAL_FRACTION = 0.5
WARNING_FRACTION = 1.5


def inventory_level(material: Material) -> InventoryLevel:
    threshold = material.reorder_threshold
    stock = material.current_stock
    if stock <= threshold * CRITICAL_FRACTION:
        return InventoryLevel.CRITICAL
    if stock <= threshold:
        return InventoryLevel.LOW
    if stock <= threshold * WARNING_FRACTION:
        return InventoryLevel.WARNING
    return InventoryLevel.IN_STOCK


def suggested_reorder_quantity(material: Material) -> float:
    """
    Reorder enough to get back to the threshold and then double it:
    max(2 × threshold, shortfall + threshold).
    """
    threshold = material.reorder_threshold
    shortfall = threshold - material.current_stock
    return max(threshold * 2, shortfall + threshold)


def reorder_alerts(materials: Iterable[Material]) -> List[ReorderAlert]:
    """One alert per material at or below its reorder threshold."""
    return [
        ReorderAlert(
            material_id=m.id,
            material_name=m.name,
            current_stock=m.current_stock,
            reorder_threshold=m.reorder_threshold,
            supplier=m.supplier,
            measurement_unit=m.measurement_unit,
            suggested_quantity=suggested_reorder_quantity(m),
            inventory_level=inventory_level(m),
        )
        for m in materials
        if is_stock_low(m.current_stock, m.reorder_threshold)
    ]


def generate_order_number() -> str:
    return f"BULK-{str(int(time.time() * 1000))[-6:]}"


def build_purchase_order(materials: Iterable[Material],
                         order_number: Optional[str] = None) -> PurchaseOrder:
    """Line quantities use suggested_reorder_quantity; cost = quantity × unit_cost."""
    items = []
    for material in materials:
        quantity = suggested_reorder_quantity(material)
        items.append(PurchaseOrderItem(
            material=material,
            quantity=quantity,
            cost=round(quantity * material.unit_cost, 2),
        ))
    return PurchaseOrder(
        order_number=order_number or generate_order_number(),
        items=items,
        total=round(sum(item.cost for item in items), 2),
    )


def summarize_dashboard(jobs: Iterable[CutJob], materials: Iterable[Material]) -> DashboardSummary:
    """Revenue counts completed jobs only."""
    jobs = list(jobs)
    pending = [j for j in jobs if j.status == JobStatus.PENDING]
    completed = [j for j in jobs if j.status == JobStatus.COMPLETED]
    return DashboardSummary(
        pending_jobs=len(pending),
        completed_jobs=len(completed),
        total_revenue=round(sum(j.total_cost for j in completed), 2),
        reorder_alerts=reorder_alerts(materials),
    )
