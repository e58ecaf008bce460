"""
Measurement utility: length parsing, unit conversion and display formatting.

Two unit systems:
    imperial: canonical value in feet, entered/displayed as F' I"
    metric  : canonical value in meters, entered/displayed as Mm Ccm

Parsers return None when the input has no numeral at all. That is the only
failure signal; nothing here raises on bad user input, so every caller must
check for None before using a parsed length.
"""

import math
import re
from typing import Optional, Tuple

from .models import MeasurementUnit

FEET_TO_METERS = 0.3048
# Reciprocal rather than the rounded 3.28084 so feet -> meters -> feet is stable
METERS_TO_FEET = 1 / FEET_TO_METERS
INCHES_TO_CM = 2.54

_NUMBER = r"(\d+(?:\.\d+)?)"
_FEET_RE = re.compile(_NUMBER + r"\s*'")
_INCHES_RE = re.compile(_NUMBER + r'\s*"')
_METERS_RE = re.compile(_NUMBER + r"\s*m(?!m)", re.IGNORECASE)
_CM_RE = re.compile(_NUMBER + r"\s*cm", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def _unit(unit) -> MeasurementUnit:
    """Coerce a unit name to MeasurementUnit, or raise ValueError."""
    try:
        return MeasurementUnit(unit)
    except ValueError:
        raise ValueError(
            f"Unknown measurement unit: {unit!r}. "
            f"Available: {[u.value for u in MeasurementUnit]}"
        )


def _leading_number(text: str) -> Optional[float]:
    """Read the numeric prefix of a string ('5.5abc' -> 5.5). None if there is none."""
    match = _LEADING_NUMBER_RE.match(text)
    if not match:
        return None
    return float(match.group(0))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# --- Simple conversions ---

def feet_to_meters(feet: float) -> float:
    return feet * FEET_TO_METERS


def meters_to_feet(meters: float) -> float:
    return meters * METERS_TO_FEET


def inches_to_cm(inches: float) -> float:
    return inches * INCHES_TO_CM


def cm_to_inches(cm: float) -> float:
    return cm / INCHES_TO_CM


def feet_inches_to_inches(feet: float, inches: float) -> float:
    return feet * 12 + inches


def inches_to_feet_inches(total_inches: float) -> Tuple[int, float]:
    """Split total inches into whole feet and remaining inches."""
    feet = int(math.floor(total_inches / 12))
    return feet, total_inches - feet * 12


def meters_cm_to_cm(meters: float, cm: float) -> float:
    return meters * 100 + cm


def cm_to_meters_cm(total_cm: float) -> Tuple[int, float]:
    """Split total centimeters into whole meters and remaining centimeters."""
    meters = int(math.floor(total_cm / 100))
    return meters, total_cm - meters * 100


# --- Parsing ---

def parse_feet_inches(text: str) -> Optional[float]:
    """
    Parse a length like 5' 3", 5', 3", 5.5' or 5.5 into feet.

    A bare number is feet. Inches alone are divided by 12.
    Returns None when no numeral can be found.
    """
    if text is None:
        return None
    trimmed = str(text).strip()

    feet_match = _FEET_RE.search(trimmed)
    inches_match = _INCHES_RE.search(trimmed)
    feet = float(feet_match.group(1)) if feet_match else 0.0
    inches = float(inches_match.group(1)) if inches_match else 0.0

    if feet == 0 and inches > 0:
        return inches / 12
    if feet == 0 and inches == 0:
        return _leading_number(trimmed)
    return feet + inches / 12


def parse_meters_cm(text: str) -> Optional[float]:
    """
    Parse a length like 2m 50cm, 2.5m, 150cm or 2.5 into meters.

    A bare number is meters. Centimeters alone are divided by 100.
    Returns None when no numeral can be found.
    """
    if text is None:
        return None
    trimmed = str(text).strip()

    meters_match = _METERS_RE.search(trimmed)
    cm_match = _CM_RE.search(trimmed)
    meters = float(meters_match.group(1)) if meters_match else 0.0
    cm = float(cm_match.group(1)) if cm_match else 0.0

    if meters == 0 and cm > 0:
        return cm / 100
    if meters == 0 and cm == 0:
        return _leading_number(trimmed)
    return meters + cm / 100


def parse_length(text: str, unit) -> Optional[float]:
    """Parse user input in the given unit system (feet for imperial, meters for metric)."""
    if _unit(unit) == MeasurementUnit.IMPERIAL:
        return parse_feet_inches(text)
    return parse_meters_cm(text)


# --- Conversion ---

def convert_measurement(value: float, from_unit, to_unit) -> float:
    """Convert a length between feet (imperial) and meters (metric)."""
    source = _unit(from_unit)
    target = _unit(to_unit)
    if source == target:
        return value
    if source == MeasurementUnit.IMPERIAL:
        return feet_to_meters(value)
    return meters_to_feet(value)


# --- Formatting ---

def format_measurement(value: float, unit) -> str:
    """
    Render a canonical length for display.

    Imperial: 5' 3", 5', 3"    Metric: 2m 50cm, 2m, 50cm
    Sub-units round to the nearest whole inch / centimeter on the total,
    so 5.99 ft shows as 6' rather than 5' 12". Zero components are dropped.
    NaN and infinity raise ValueError.
    """
    unit = _unit(unit)
    if not math.isfinite(value):
        raise ValueError(f"Cannot format a non-finite length: {value!r}")
    sign = "-" if value < 0 else ""
    value = abs(value)

    if unit == MeasurementUnit.IMPERIAL:
        total_inches = _round_half_up(value * 12)
        feet, inches = divmod(total_inches, 12)
        if feet == 0:
            return f'{sign}{inches}"'
        if inches == 0:
            return f"{sign}{feet}'"
        return f"{sign}{feet}' {inches}\""

    total_cm = _round_half_up(value * 100)
    meters, cm = divmod(total_cm, 100)
    if meters == 0:
        return f"{sign}{cm}cm"
    if cm == 0:
        return f"{sign}{meters}m"
    return f"{sign}{meters}m {cm}cm"


def unit_label(unit) -> str:
    """Short label for the canonical unit: 'ft' or 'm'."""
    return "ft" if _unit(unit) == MeasurementUnit.IMPERIAL else "m"


def input_placeholder(unit) -> str:
    if _unit(unit) == MeasurementUnit.IMPERIAL:
        return "e.g., 5' 3\" or 5.25' or 5.5"
    return "e.g., 2.5m or 250cm or 2.5"
