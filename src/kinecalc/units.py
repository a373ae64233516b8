# -----------------------------------------------------------------------------
# Units & Conversion Utilities
# Purpose:
#   (1) Reduce a value tagged with a time or length unit down to a canonical
#       unit (seconds / meters) through a fixed ladder of rewrite steps.
#   (2) Bridge labeled quantities to pint for inputs given in other units.
# Scope:
#   - The ladder is a closed table, not a dimensional analysis engine.
#   - Raises UnitError on unknown or incompatible units.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
import re
from tokenize import TokenError
from typing import Dict, Tuple

from pint import UnitRegistry
from pint.errors import DimensionalityError, PintError, UndefinedUnitError

from .types import ConvertedValue, Quantity, QuantityKind


class UnitError(Exception): pass


SECONDS = "seconds"
METERS = "meters"
RADIANS = "radians"

# One rewrite per tag: tag -> (factor, next_tag). Walking the chain always
# ends on a canonical tag, e.g. yr -> day -> hr -> min -> sec.
LADDER: Dict[str, Tuple[float, str]] = {
    # time
    "yr": (365.0, "day"),
    "month": (30.0, "day"),
    "week": (7.0, "day"),
    "day": (24.0, "hr"),
    "hr": (60.0, "min"),
    "min": (60.0, "sec"),
    "ns": (1 / 1000, "us"),
    "us": (1 / 1000, "ms"),
    "ms": (1 / 1000, "sec"),

    # imperial length
    "mile": (1760.0, "yard"),
    "yard": (0.9144, "meter"),
    "feet": (1 / 3, "yard"),
    "inch": (1 / 12, "feet"),

    # metric length
    "kilo": (1000.0, "meter"),
    "nano": (1 / 1000, "micro"),
    "micro": (1 / 1000, "milli"),
    "milli": (1 / 10, "centi"),
    "centi": (1 / 10, "deci"),
    "deci": (1 / 10, "meter"),
}

# Tags where the walk stops, and the label they report
TERMINALS = {
    "sec": SECONDS,
    "meter": METERS,
}

# Long-form spellings → ladder tag (runs before LADDER lookups)
ALIASES = {
    "year": "yr", "years": "yr", "yrs": "yr",
    "months": "month",
    "weeks": "week",
    "days": "day",
    "hour": "hr", "hours": "hr", "hrs": "hr", "h": "hr",
    "minute": "min", "minutes": "min", "mins": "min",
    "second": "sec", "seconds": "sec", "secs": "sec", "s": "sec",
    "millisecond": "ms", "milliseconds": "ms",
    "microsecond": "us", "microseconds": "us", "µs": "us",
    "nanosecond": "ns", "nanoseconds": "ns",

    "miles": "mile", "mi": "mile",
    "yards": "yard", "yd": "yard",
    "foot": "feet", "ft": "feet",
    "inches": "inch", "in": "inch",

    "km": "kilo", "kilometer": "kilo", "kilometers": "kilo",
    "meters": "meter", "metre": "meter", "metres": "meter", "m": "meter",
    "dm": "deci", "decimeter": "deci", "decimeters": "deci",
    "cm": "centi", "centimeter": "centi", "centimeters": "centi",
    "mm": "milli", "millimeter": "milli", "millimeters": "milli",
    "µm": "micro", "micrometer": "micro", "micrometers": "micro",
    "nm": "nano", "nanometer": "nano", "nanometers": "nano",

    "degree": "degrees", "deg": "degrees", "°": "degrees",
}


def _canonicalize(raw: str) -> str:
    """
    Normalize a unit tag: lowercase, collapse whitespace, resolve aliases.
    Returns the tag unchanged when no alias applies; the caller decides
    whether it is known.
    """
    if raw is None:
        raise UnitError("Unit is None")
    u = re.sub(r"\s+", " ", str(raw).strip().lower())
    return ALIASES.get(u, u)


def _degrees_to_radian_cosine(value: float) -> ConvertedValue:
    # Not an angle conversion: reports cos(angle) under the 'radians' label.
    return ConvertedValue(RADIANS, math.cos(value * math.pi / 180))


def convert(value: float, unit: str) -> ConvertedValue:
    """
    Walk `value` down the ladder until it reaches a canonical unit.
        convert(1, "yr")    -> ConvertedValue('seconds', 31536000.0)
        convert(1, "mile")  -> ConvertedValue('meters', 1609.344)
        convert(60, "degrees") -> ConvertedValue('radians', cos(pi/3))
    """
    tag = _canonicalize(unit)
    if tag == "degrees":
        return _degrees_to_radian_cosine(value)
    if tag not in LADDER and tag not in TERMINALS:
        raise UnitError(f"Unsupported unit: {unit}")

    v = float(value)
    while tag not in TERMINALS:
        factor, tag = LADDER[tag]
        v *= factor
    return ConvertedValue(TERMINALS[tag], v)


# ---------------- pint bridge -------------------------------------------------

_UR = UnitRegistry()
_Q_ = _UR.Quantity


def as_pint(quantity: Quantity):
    """Return a pint Quantity carrying the kind's SI unit."""
    return _Q_(quantity.value, quantity.kind.si_unit)


def to_si(kind: QuantityKind | str, value: float, unit: str | None) -> Quantity:
    """
    Build a labeled quantity from a value in any pint-understood unit.
    - unit None/empty means the value is already SI
    - raises UnitError on unknown or malformed units, or a dimension that
      does not fit `kind`
    """
    k = QuantityKind.parse(kind)
    if not unit or not str(unit).strip():
        return Quantity(k, float(value))
    try:
        q = _Q_(float(value), str(unit).strip()).to(k.si_unit)
    except UndefinedUnitError as e:
        raise UnitError(f"Unknown unit: {unit}") from e
    except DimensionalityError as e:
        raise UnitError(f"Unit '{unit}' does not fit {k.value} ({k.si_unit})") from e
    except (PintError, AssertionError, TokenError, ValueError) as e:
        # pint's expression parser fails on strings like "m/" or "(m"
        raise UnitError(f"Malformed unit: {unit}") from e
    return Quantity(k, float(q.magnitude))
