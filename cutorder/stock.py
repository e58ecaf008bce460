"""
Stock evaluator: can a material cover a requested cut?

All lengths must already be in the material's own unit; no conversion here.
"""

from dataclasses import dataclass, asdict
from typing import Optional

from .models import StockStatus


@dataclass(frozen=True)
class StockCheck:
    status: StockStatus
    message: str
    color: str  # display hint for badges

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


SUFFICIENT = StockCheck(StockStatus.SUFFICIENT, "Stock Available", "green")
LOW = StockCheck(StockStatus.LOW, "Low Stock Warning", "orange")
INSUFFICIENT = StockCheck(StockStatus.INSUFFICIENT, "Insufficient Stock", "red")


def is_stock_low(current_stock: float, reorder_threshold: float) -> bool:
    return current_stock <= reorder_threshold


def has_sufficient_stock(current_stock: float, requested_length: float,
                         requested_quantity: int) -> bool:
    return current_stock >= requested_length * requested_quantity


def stock_after(current_stock: float, requested_length: float, requested_quantity: int) -> float:
    """Stock left once the job is cut. Negative means the job overdraws."""
    return current_stock - requested_length * requested_quantity


def get_stock_status(current_stock: float, reorder_threshold: float,
                     requested_length: Optional[float] = None,
                     requested_quantity: Optional[int] = None) -> StockCheck:
    """
    First match wins:
        need > stock       -> insufficient   (need == stock is still sufficient)
        stock <= threshold -> low            (regardless of this job)
        otherwise          -> sufficient

    Without a request (length or quantity missing/zero) only the threshold rule applies.
    """
    if requested_length and requested_quantity:
        if not has_sufficient_stock(current_stock, requested_length, requested_quantity):
            return INSUFFICIENT

    if is_stock_low(current_stock, reorder_threshold):
        return LOW

    return SUFFICIENT
