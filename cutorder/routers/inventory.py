from typing import List

from fastapi import APIRouter

from .. import schemas
from ..inventory import build_purchase_order, reorder_alerts
from ..stock import get_stock_status

router = APIRouter(tags=["inventory"])


@router.post("/stock/status", response_model=schemas.StockCheckSchema)
def stock_status(body: schemas.StockStatusRequest):
    """Requested length must already be in the material's unit."""
    check = get_stock_status(
        body.current_stock, body.reorder_threshold,
        body.requested_length, body.requested_quantity,
    )
    return check.to_dict()


@router.post("/inventory/reorder-alerts", response_model=List[schemas.ReorderAlert])
def list_reorder_alerts(materials: List[schemas.Material]):
    return reorder_alerts(materials)


@router.post("/inventory/purchase-order", response_model=schemas.PurchaseOrder)
def purchase_order(body: schemas.PurchaseOrderRequest):
    return build_purchase_order(body.materials, body.order_number)
