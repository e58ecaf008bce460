"""
Pricing Engine: cost breakdown for a single cut job.

Pure math, no state. Unit cost × length × quantity, plus per-cut labor,
waste allowance on material, and markup on the subtotal.

Input: material unit cost, length (in the material's own unit), quantity
Output: CostBreakdown: callers always show the full breakdown, never just the total
"""

import math
from dataclasses import asdict, dataclass, replace
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


@dataclass(frozen=True)
class PricingConfig:
    labor_rate_per_cut: float = 0.25
    waste_allowance_percent: float = 15.0
    markup_percent: float = 25.0

    @classmethod
    def from_settings(cls, settings) -> "PricingConfig":
        return cls(
            labor_rate_per_cut=settings.LABOR_RATE_PER_CUT,
            waste_allowance_percent=settings.WASTE_ALLOWANCE_PERCENT,
            markup_percent=settings.MARKUP_PERCENT,
        )

    def override(self, **changes) -> "PricingConfig":
        """Copy with the non-None values in `changes` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


@dataclass(frozen=True)
class CostBreakdown:
    material_cost: float
    labor_cost: float
    waste_cost: float
    subtotal: float
    markup: float
    total_cost: float
    priced: bool = True  # False only for the zero result below

    @classmethod
    def zero(cls) -> "CostBreakdown":
        """The result for unpriceable input. Not a free job: nothing was priced."""
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, priced=False)

    @property
    def is_zero(self) -> bool:
        """True for unpriceable input only. A priced job may still total 0.00."""
        return not self.priced

    def to_dict(self) -> dict:
        return asdict(self)


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


class PricingEngine:
    """
    Computes job costs against one PricingConfig.
    Constructed once by the app and injected where needed.
    """

    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config or PricingConfig()

    def calculate_job_cost(self, material_unit_cost: float, length: float, quantity: int,
                           config: Optional[PricingConfig] = None) -> CostBreakdown:
        """
        Fixed order:
            material = unit_cost * length * quantity
            labor    = quantity * labor_rate_per_cut   (per piece, not per foot)
            waste    = material * waste%
            subtotal = material + labor + waste
            markup   = subtotal * markup%
            total    = subtotal + markup

        Non-numeric input, length <= 0, quantity <= 0 or a fractional quantity
        gives CostBreakdown.zero().
        """
        config = config or self.config
        if not all(_is_number(v) for v in (material_unit_cost, length, quantity)):
            return CostBreakdown.zero()
        if isinstance(quantity, float) and not quantity.is_integer():
            return CostBreakdown.zero()
        if length <= 0 or quantity <= 0:
            return CostBreakdown.zero()

        material_cost = self._calculate_material_cost(material_unit_cost, length, quantity)
        labor_cost = self._calculate_labor_cost(quantity, config)
        waste_cost = self._calculate_waste_cost(material_cost, config)
        subtotal = material_cost + labor_cost + waste_cost
        markup = subtotal * (config.markup_percent / 100.0)

        return CostBreakdown(
            material_cost=material_cost,
            labor_cost=labor_cost,
            waste_cost=waste_cost,
            subtotal=subtotal,
            markup=markup,
            total_cost=subtotal + markup,
        )

    def _calculate_material_cost(self, unit_cost: float, length: float, quantity: int) -> float:
        return unit_cost * length * quantity

    def _calculate_labor_cost(self, quantity: int, config: PricingConfig) -> float:
        """Labor scales with number of pieces cut, not their size."""
        return quantity * config.labor_rate_per_cut

    def _calculate_waste_cost(self, material_cost: float, config: PricingConfig) -> float:
        return material_cost * (config.waste_allowance_percent / 100.0)


def calculate_job_cost(material_unit_cost: float, length: float, quantity: int,
                       config: Optional[PricingConfig] = None) -> CostBreakdown:
    """Module-level shortcut using default pricing."""
    return PricingEngine(config).calculate_job_cost(material_unit_cost, length, quantity)


def format_currency(amount: float, symbol: str = "$") -> str:
    """Two-decimal display, half-up: 144.375 -> '$144.38', 1234.5 -> '$1,234.50'."""
    cents = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if cents < 0 else ""
    return f"{sign}{symbol}{abs(cents):,.2f}"
