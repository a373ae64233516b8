# -----------------------------------------------------------------------------
# Closed-form relations
# Purpose:
#   One function per recognized combination, named after the quantities it
#   takes. Arguments arrive in sorted kind order (the catalog's `given`), all
#   values in SI base units. Each returns the previously unknown quantities.
# Notes:
#   - No guarding: math.sqrt raises ValueError on a negative discriminant and
#     '/' raises ZeroDivisionError; the dispatcher turns both into
#     NumericDomainError.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import Callable, Dict, List

from .types import Quantity, QuantityKind as K

PI2 = math.pi * math.pi


# ---------------- linear motion (constant acceleration) ----------------------

def adv2(a: float, d: float, vf: float) -> List[Quantity]:
    # d = vf*t - a*t^2/2 is quadratic in t; both roots are returned.
    vi = math.sqrt(vf * vf - 2 * a * d)
    return [
        Quantity(K.TIME1, (vf - vi) / a),
        Quantity(K.TIME2, (vf + vi) / a),
        Quantity(K.VELOCITY_INITIAL, vi),
    ]


def adv1(a: float, d: float, vi: float) -> List[Quantity]:
    # d = vi*t + a*t^2/2
    vf = math.sqrt(vi * vi + 2 * a * d)
    return [
        Quantity(K.TIME1, -(vi + vf) / a),
        Quantity(K.TIME2, (-vi + vf) / a),
        Quantity(K.VELOCITY_FINAL, vf),
    ]


def atv2(a: float, t: float, vf: float) -> List[Quantity]:
    return [
        Quantity(K.DISTANCE, vf * t - a * t * t / 2),
        Quantity(K.VELOCITY_INITIAL, vf - a * t),
    ]


def atv1(a: float, t: float, vi: float) -> List[Quantity]:
    return [
        Quantity(K.DISTANCE, vi * t + a * t * t / 2),
        Quantity(K.VELOCITY_FINAL, a * t + vi),
    ]


def av2v1(a: float, vf: float, vi: float) -> List[Quantity]:
    return [
        Quantity(K.TIME, (vf - vi) / a),
        Quantity(K.DISTANCE, (vf * vf - vi * vi) / (2 * a)),
    ]


def dtv2(d: float, t: float, vf: float) -> List[Quantity]:
    # d = (vi + vf)*t/2, so vi = 2d/t - vf (not vf - 2d/t, which is -vi)
    return [
        Quantity(K.ACCELERATION, 2 * (vf * t - d) / (t * t)),
        Quantity(K.VELOCITY_INITIAL, 2 * d / t - vf),
    ]


def dtv1(d: float, t: float, vi: float) -> List[Quantity]:
    # d = (vi + vf)*t/2, so vf = 2d/t - vi (not 2*d*t - vi, which is not a velocity)
    return [
        Quantity(K.ACCELERATION, 2 * (d - vi * t) / (t * t)),
        Quantity(K.VELOCITY_FINAL, 2 * d / t - vi),
    ]


def dv2v1(d: float, vf: float, vi: float) -> List[Quantity]:
    return [
        Quantity(K.ACCELERATION, (vf * vf - vi * vi) / (2 * d)),
        Quantity(K.TIME, 2 * d / (vf + vi)),
    ]


def tv2v1(t: float, vf: float, vi: float) -> List[Quantity]:
    return [
        Quantity(K.ACCELERATION, (vf - vi) / t),
        Quantity(K.DISTANCE, (vf + vi) * t / 2),
    ]


# ---------------- uniform circular motion ------------------------------------

def am(a: float, m: float) -> List[Quantity]:
    return [Quantity(K.FORCE, m * a)]


def fm(f: float, m: float) -> List[Quantity]:
    return [Quantity(K.ACCELERATION, f / m)]


def mrv(m: float, r: float, v: float) -> List[Quantity]:
    return [Quantity(K.FORCE, m * (v * v) / r)]


def mrt(m: float, r: float, t: float) -> List[Quantity]:
    return [Quantity(K.FORCE, m * (4 * PI2 * r) / (t * t))]


def rt(r: float, t: float) -> List[Quantity]:
    return [
        Quantity(K.VELOCITY, (2 * math.pi * r) / t),
        Quantity(K.ACCELERATION, (4 * PI2 * r) / (t * t)),
    ]


def rv(r: float, v: float) -> List[Quantity]:
    return [Quantity(K.ACCELERATION, (v * v) / r)]


# Catalog id → implementation
REGISTRY: Dict[str, Callable[..., List[Quantity]]] = {
    "adv2": adv2,
    "adv1": adv1,
    "atv2": atv2,
    "atv1": atv1,
    "av2v1": av2v1,
    "dtv2": dtv2,
    "dtv1": dtv1,
    "dv2v1": dv2v1,
    "tv2v1": tv2v1,
    "am": am,
    "fm": fm,
    "mrv": mrv,
    "mrt": mrt,
    "rt": rt,
    "rv": rv,
}
