# -----------------------------------------------------------------------------
# Types module: Shared value types for the kinecalc dispatchers
# Purpose:
#   Define the closed set of quantity kinds, the immutable labeled quantity,
#   catalog entries, and the converter's canonical pair.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, NamedTuple, Tuple

from .errors import UnrecognizedInput


class QuantityKind(str, Enum):
    """
    Label of a physical quantity. Values are the wire labels used in
    requests, catalog files and results.
    """
    ACCELERATION = "acceleration"
    DISTANCE = "distance"
    TIME = "time"
    VELOCITY_INITIAL = "velocityi"
    VELOCITY_FINAL = "velocityf"
    MASS = "mass"
    RADIUS = "radius"
    FORCE = "force"
    VELOCITY = "velocity"
    # result-only: the two roots of the quadratic in t
    TIME1 = "time1"
    TIME2 = "time2"

    @property
    def si_unit(self) -> str:
        return SI_UNITS[self]

    @classmethod
    def parse(cls, label: Any) -> "QuantityKind":
        """
        Resolve a label to a kind.
        - accepts a QuantityKind, its value ('velocityi'), its member name
          ('velocity_initial', any case) or a short alias ('vi', 'v0')
        - raises UnrecognizedInput otherwise
        """
        if isinstance(label, cls):
            return label
        key = str(label).strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        if key.upper() in cls.__members__:
            return cls.__members__[key.upper()]
        if key in ALIASES:
            return ALIASES[key]
        raise UnrecognizedInput(f"Unknown token: {label!r}")


SI_UNITS = {
    QuantityKind.ACCELERATION: "m/s^2",
    QuantityKind.DISTANCE: "m",
    QuantityKind.TIME: "s",
    QuantityKind.TIME1: "s",
    QuantityKind.TIME2: "s",
    QuantityKind.VELOCITY_INITIAL: "m/s",
    QuantityKind.VELOCITY_FINAL: "m/s",
    QuantityKind.VELOCITY: "m/s",
    QuantityKind.MASS: "kg",
    QuantityKind.RADIUS: "m",
    QuantityKind.FORCE: "N",
}

# Short symbols people type for the same kinds
ALIASES = {
    "a": QuantityKind.ACCELERATION,
    "d": QuantityKind.DISTANCE,
    "t": QuantityKind.TIME,
    "vi": QuantityKind.VELOCITY_INITIAL,
    "v0": QuantityKind.VELOCITY_INITIAL,
    "vf": QuantityKind.VELOCITY_FINAL,
    "m": QuantityKind.MASS,
    "r": QuantityKind.RADIUS,
    "f": QuantityKind.FORCE,
    "v": QuantityKind.VELOCITY,
}


@dataclass(frozen=True)
class Quantity:
    """A (kind, value) pair; value is in the kind's SI unit."""
    kind: QuantityKind
    value: float

    @classmethod
    def of(cls, item: Any) -> "Quantity":
        # Coerce a Quantity or a (label, value) pair.
        if isinstance(item, cls):
            return item
        try:
            label, value = item
            value = float(value)
        except (TypeError, ValueError):
            raise UnrecognizedInput(f"Not a (kind, value) pair: {item!r}") from None
        return cls(QuantityKind.parse(label), value)

    def as_tuple(self) -> Tuple[str, float]:
        return self.kind.value, self.value


@dataclass
class FormulaSpec:
    """
    One recognized combination of given kinds within a family.
    Example:
        id: "atv1"
        family: "linear"
        given: (acceleration, time, velocityi)   # sorted by value
        produces: [distance, velocityf]
    Attributes:
        - eq: human-readable equations, one per produced kind
        - supported: False for combinations that are recognized but cannot
          be solved; `error` then names the failure kind to raise
    """
    id: str
    family: str
    name: str
    given: Tuple[QuantityKind, ...]
    produces: List[QuantityKind] = field(default_factory=list)
    eq: List[str] = field(default_factory=list)
    supported: bool = True
    error: str | None = None
    message: str = ""

    @property
    def key(self) -> Tuple[str, ...]:
        return tuple(k.value for k in self.given)


class ConvertedValue(NamedTuple):
    # Canonical pair returned by units.convert: ('seconds'|'meters'|'radians', value)
    unit: str
    value: float
