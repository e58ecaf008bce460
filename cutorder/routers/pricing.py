from dataclasses import asdict

from fastapi import APIRouter, Depends

from .. import schemas
from ..deps import get_pricing_engine
from ..pricing_engine import CostBreakdown, PricingEngine, format_currency

router = APIRouter(prefix="/pricing", tags=["pricing"])


def breakdown_schema(costs: CostBreakdown) -> schemas.CostBreakdownSchema:
    return schemas.CostBreakdownSchema(
        **costs.to_dict(),
        is_zero=costs.is_zero,
        display_total=format_currency(costs.total_cost),
    )


@router.get("/config", response_model=schemas.PricingConfigSchema)
def get_config(engine: PricingEngine = Depends(get_pricing_engine)):
    return asdict(engine.config)


@router.post("/quote", response_model=schemas.CostBreakdownSchema)
def quote(body: schemas.QuoteRequest, engine: PricingEngine = Depends(get_pricing_engine)):
    """
    Full cost breakdown for one cut job. Per-request rate overrides are optional.
    Unpriceable input (length or quantity <= 0) comes back all zeros with priced false.
    """
    config = engine.config.override(
        labor_rate_per_cut=body.labor_rate_per_cut,
        waste_allowance_percent=body.waste_allowance_percent,
        markup_percent=body.markup_percent,
    )
    costs = engine.calculate_job_cost(body.material_unit_cost, body.length, body.quantity, config)
    return breakdown_schema(costs)
