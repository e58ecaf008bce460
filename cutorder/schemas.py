from pydantic import BaseModel, Field
from typing import Optional, List, Union
from datetime import datetime
from .models import MeasurementUnit, MaterialType, JobStatus, StockStatus, InventoryLevel


# --- Records ---

class Material(BaseModel):
    id: str
    name: str
    type: MaterialType = MaterialType.OTHER
    unit_cost: float                # per foot (imperial) or per meter (metric)
    current_stock: float            # in measurement_unit
    reorder_threshold: float        # in measurement_unit
    supplier: str = ""
    measurement_unit: MeasurementUnit = MeasurementUnit.IMPERIAL


class CutJob(BaseModel):
    id: str
    order_code: Optional[str] = None
    customer_name: str
    material: Material              # snapshot at time of order
    length: float                   # in material.measurement_unit
    quantity: int
    total_cost: float
    labor_cost: float
    waste_cost: float
    status: JobStatus = JobStatus.PENDING
    created_at: datetime
    completed_at: Optional[datetime] = None
    notes: Optional[str] = None
    measurement_unit: MeasurementUnit


class JobRequest(BaseModel):
    """Raw job form input. length and quantity arrive as typed by the user."""
    customer_name: str = ""
    length: str = ""
    input_unit: MeasurementUnit = MeasurementUnit.IMPERIAL
    quantity: Union[int, str] = ""
    notes: Optional[str] = None


class ReorderAlert(BaseModel):
    material_id: str
    material_name: str
    current_stock: float
    reorder_threshold: float
    supplier: str
    measurement_unit: MeasurementUnit
    suggested_quantity: float
    inventory_level: InventoryLevel


class PurchaseOrderItem(BaseModel):
    material: Material
    quantity: float
    cost: float


class PurchaseOrder(BaseModel):
    order_number: str
    items: List[PurchaseOrderItem] = []
    total: float = 0.0


class DashboardSummary(BaseModel):
    pending_jobs: int
    completed_jobs: int
    total_revenue: float
    reorder_alerts: List[ReorderAlert] = []


# --- API payloads ---

class MeasurementParseRequest(BaseModel):
    text: str
    unit: MeasurementUnit


class MeasurementValue(BaseModel):
    value: float
    unit: MeasurementUnit
    display: str


class MeasurementConvertRequest(BaseModel):
    value: float = Field(allow_inf_nan=False)
    from_unit: MeasurementUnit
    to_unit: MeasurementUnit


class MeasurementFormatRequest(BaseModel):
    value: float = Field(allow_inf_nan=False)
    unit: MeasurementUnit


class PricingConfigSchema(BaseModel):
    labor_rate_per_cut: float
    waste_allowance_percent: float
    markup_percent: float


class QuoteRequest(BaseModel):
    material_unit_cost: float
    length: float
    quantity: int
    labor_rate_per_cut: Optional[float] = Field(default=None, ge=0)
    waste_allowance_percent: Optional[float] = Field(default=None, ge=0)
    markup_percent: Optional[float] = Field(default=None, ge=0)


class CostBreakdownSchema(BaseModel):
    material_cost: float
    labor_cost: float
    waste_cost: float
    subtotal: float
    markup: float
    total_cost: float
    priced: bool
    is_zero: bool
    display_total: str


class StockStatusRequest(BaseModel):
    current_stock: float
    reorder_threshold: float
    requested_length: Optional[float] = None
    requested_quantity: Optional[int] = None


class StockCheckSchema(BaseModel):
    status: StockStatus
    message: str
    color: str


class JobCreateRequest(BaseModel):
    request: JobRequest
    material: Material


class JobPreviewSchema(BaseModel):
    length: float
    length_display: str
    quantity: int
    costs: CostBreakdownSchema
    stock: StockCheckSchema
    stock_after: float


class JobCreateResponse(BaseModel):
    job: CutJob
    material: Material              # with current_stock decremented


class JobStatusRequest(BaseModel):
    job: CutJob
    status: JobStatus


class JobSearchRequest(BaseModel):
    jobs: List[CutJob] = []
    search: Optional[str] = None
    status: Optional[str] = None    # a JobStatus value or 'all'


class PurchaseOrderRequest(BaseModel):
    materials: List[Material]
    order_number: Optional[str] = None


class DashboardRequest(BaseModel):
    jobs: List[CutJob] = []
    materials: List[Material] = []
