import enum


# --- Enums ---
# str-valued so they compare equal to the raw strings coming off forms and JSON.

class MeasurementUnit(str, enum.Enum):
    IMPERIAL = "imperial"   # lengths in feet
    METRIC = "metric"       # lengths in meters


class MaterialType(str, enum.Enum):
    WOOD = "wood"
    METAL = "metal"
    OTHER = "other"


class JobStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class StockStatus(str, enum.Enum):
    SUFFICIENT = "sufficient"
    LOW = "low"
    INSUFFICIENT = "insufficient"


class InventoryLevel(str, enum.Enum):
    CRITICAL = "critical"
    LOW = "low"
    WARNING = "warning"
    IN_STOCK = "in_stock"
