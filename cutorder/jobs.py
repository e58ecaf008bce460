"""
Cut job workflow: turns a raw job form into a priced CutJob.

Order of operations (same as the order form):
    parse length -> convert to the material's unit -> check stock -> price -> snapshot

Nothing here persists anything. Stock decrement and status changes return
updated copies; saving them is up to the caller.
"""

import logging
import random
import re
import string
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from .measurements import convert_measurement, format_measurement, parse_length, unit_label
from .models import JobStatus, MeasurementUnit, StockStatus
from .pricing_engine import CostBreakdown, PricingEngine
from .schemas import CutJob, JobRequest, Material
from .stock import StockCheck, get_stock_status, stock_after

logger = logging.getLogger(__name__)

ORDER_CODE_CHARS = string.ascii_uppercase + string.digits
ORDER_CODE_LENGTH = 4

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class JobValidationError(ValueError):
    """Raised by JobBuilder.create_job. `errors` maps form field -> message."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


@dataclass(frozen=True)
class JobPreview:
    length: float               # in the material's unit
    quantity: int
    costs: CostBreakdown
    stock: StockCheck
    stock_after: float
    measurement_unit: MeasurementUnit

    @property
    def length_display(self) -> str:
        return format_measurement(self.length, self.measurement_unit)


def generate_order_code(rng: Optional[random.Random] = None) -> str:
    """4 characters from A-Z0-9. Not unique: collisions are possible."""
    rng = rng or random
    return "".join(rng.choice(ORDER_CODE_CHARS) for _ in range(ORDER_CODE_LENGTH))


def parse_quantity(value) -> Optional[int]:
    """Whole pieces from form input ('3', 3, '3 pcs' -> 3). None if there is no integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value else None
    match = _LEADING_INT_RE.match(str(value or ""))
    return int(match.group(1)) if match else None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobBuilder:
    """
    Builds cut jobs against one pricing engine.
    The app constructs a single instance and injects it into the job routes.
    """

    def __init__(self, pricing_engine: PricingEngine,
                 clock: Callable[[], datetime] = _utcnow,
                 order_code_factory: Callable[[], str] = generate_order_code):
        self.pricing_engine = pricing_engine
        self.clock = clock
        self.order_code_factory = order_code_factory

    def normalize_length(self, request: JobRequest, material: Material) -> Optional[float]:
        """Parse the entered length and convert it to the material's unit. None if unparseable."""
        length = parse_length(request.length, request.input_unit)
        if length is None:
            return None
        return convert_measurement(length, request.input_unit, material.measurement_unit)

    def validate(self, request: JobRequest, material: Optional[Material]) -> Dict[str, str]:
        """Field -> message for everything wrong with the request. Empty dict means OK."""
        errors = {}

        if not request.customer_name.strip():
            errors["customer_name"] = "Customer name is required"

        if material is None:
            errors["material"] = "Please select a material"

        length = None
        if not request.length.strip():
            errors["length"] = "Length is required"
        else:
            length = parse_length(request.length, request.input_unit)
            if length is None or length <= 0:
                if request.input_unit == MeasurementUnit.IMPERIAL:
                    errors["length"] = "Please enter a valid length (e.g., 5' 3\" or 5.25')"
                else:
                    errors["length"] = "Please enter a valid length (e.g., 2.5m or 250cm)"
                length = None

        quantity = parse_quantity(request.quantity)
        if quantity is None or quantity <= 0:
            errors["quantity"] = "Quantity must be greater than 0"
            quantity = None

        if material is not None and length is not None and quantity is not None:
            length = convert_measurement(length, request.input_unit, material.measurement_unit)
            needed = length * quantity
            if needed > material.current_stock:
                label = unit_label(material.measurement_unit)
                errors["stock"] = (
                    f"Insufficient stock. Available: {material.current_stock:g}{label}, "
                    f"Needed: {needed:.2f}{label}"
                )

        return errors

    def preview(self, request: JobRequest, material: Material) -> Optional[JobPreview]:
        """
        Live costs and stock check for the form as it stands.
        None until both length and quantity parse to positive values.
        """
        length = self.normalize_length(request, material)
        quantity = parse_quantity(request.quantity)
        if length is None or quantity is None or length <= 0 or quantity <= 0:
            return None

        stock = get_stock_status(
            material.current_stock, material.reorder_threshold, length, quantity,
        )
        if stock.status == StockStatus.INSUFFICIENT:
            logger.warning(
                "Preview for %s needs %.2f%s, only %s in stock",
                material.name, length * quantity,
                unit_label(material.measurement_unit), material.current_stock,
            )

        return JobPreview(
            length=length,
            quantity=quantity,
            costs=self.pricing_engine.calculate_job_cost(material.unit_cost, length, quantity),
            stock=stock,
            stock_after=stock_after(material.current_stock, length, quantity),
            measurement_unit=material.measurement_unit,
        )

    def create_job(self, request: JobRequest, material: Optional[Material]) -> CutJob:
        """Validate and build a pending CutJob. Raises JobValidationError."""
        errors = self.validate(request, material)
        if errors:
            logger.warning("Rejected cut job for %r: %s", request.customer_name, errors)
            raise JobValidationError(errors)

        length = self.normalize_length(request, material)
        quantity = parse_quantity(request.quantity)
        costs = self.pricing_engine.calculate_job_cost(material.unit_cost, length, quantity)
        notes = (request.notes or "").strip() or None

        job = CutJob(
            id=str(uuid.uuid4()),
            order_code=self.order_code_factory(),
            customer_name=request.customer_name.strip(),
            material=material.model_copy(deep=True),
            length=length,
            quantity=quantity,
            total_cost=costs.total_cost,
            labor_cost=costs.labor_cost,
            waste_cost=costs.waste_cost,
            status=JobStatus.PENDING,
            created_at=self.clock(),
            notes=notes,
            measurement_unit=material.measurement_unit,
        )
        logger.info(
            "Created cut job %s (%s) for %s: %d x %s %s, total %.2f",
            job.id, job.order_code, job.customer_name, quantity,
            format_measurement(length, material.measurement_unit), material.name,
            costs.total_cost,
        )
        return job


def apply_stock_decrement(material: Material, job: CutJob) -> Material:
    """Copy of `material` with the job's total length taken out of stock."""
    if material.id != job.material.id:
        raise ValueError(
            f"Job {job.id} was cut from material {job.material.id}, not {material.id}"
        )
    used = job.length * job.quantity
    return material.model_copy(update={"current_stock": material.current_stock - used})


def update_job_status(job: CutJob, status, now: Optional[datetime] = None) -> CutJob:
    """
    Any status may follow any other. Completing a job stamps completed_at;
    re-completing an already completed job keeps the original stamp.
    """
    status = JobStatus(status)
    update = {"status": status}
    if status == JobStatus.COMPLETED and job.status != JobStatus.COMPLETED:
        update["completed_at"] = now or _utcnow()
    return job.model_copy(update=update)


def filter_jobs(jobs: Iterable[CutJob], search: Optional[str] = None,
                status: Optional[str] = None) -> List[CutJob]:
    """
    Case-insensitive search over customer name, material name and order code,
    optionally restricted to one status ('all' or None keeps every status).
    Newest first.
    """
    result = list(jobs)

    if search:
        term = search.lower()
        result = [
            j for j in result
            if term in j.customer_name.lower()
            or term in j.material.name.lower()
            or (j.order_code and term in j.order_code.lower())
        ]

    if status and status != "all":
        wanted = JobStatus(status)
        result = [j for j in result if j.status == wanted]

    return sorted(result, key=lambda j: j.created_at, reverse=True)
