import math

from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..config import Settings
from ..deps import get_settings
from ..measurements import (
    convert_measurement, format_measurement, input_placeholder, parse_length, unit_label,
)
from ..models import MeasurementUnit

router = APIRouter(prefix="/measurements", tags=["measurements"])


@router.get("/units")
def list_units(settings: Settings = Depends(get_settings)):
    """Unit systems for the order form, with the shop's default first-choice unit."""
    return {
        "default": settings.DEFAULT_MEASUREMENT_UNIT,
        "units": [
            {"unit": unit.value, "label": unit_label(unit), "placeholder": input_placeholder(unit)}
            for unit in MeasurementUnit
        ],
    }


@router.post("/parse", response_model=schemas.MeasurementValue)
def parse(body: schemas.MeasurementParseRequest):
    """Parse a typed length (5' 3", 2m 50cm, ...) into feet or meters."""
    value = parse_length(body.text, body.unit)
    if value is None or not math.isfinite(value):
        raise HTTPException(status_code=422, detail=f"Could not read a length from {body.text!r}")
    return schemas.MeasurementValue(
        value=value, unit=body.unit, display=format_measurement(value, body.unit),
    )


@router.post("/convert", response_model=schemas.MeasurementValue)
def convert(body: schemas.MeasurementConvertRequest):
    value = convert_measurement(body.value, body.from_unit, body.to_unit)
    return schemas.MeasurementValue(
        value=value, unit=body.to_unit, display=format_measurement(value, body.to_unit),
    )


@router.post("/format")
def format_(body: schemas.MeasurementFormatRequest):
    return {"display": format_measurement(body.value, body.unit)}
