"""
Newtonian gravitation helpers.

All inputs in SI base units (kg, m); results in newtons.
"""

from __future__ import annotations

from .errors import NumericDomainError

# Gravitational constant as used by the solver (m^3 kg^-1 s^-2)
G = 6.673e-11

# Standard surface gravity used for weight (m/s^2)
G_SURFACE = 9.8


def force_grav(mass: float, other_mass: float | None = None, distance: float | None = None) -> float:
    """
    Gravitational force.

    force_grav(m)           -> weight under surface gravity, m * 9.8
    force_grav(m1, m2, d)   -> G * m1 * m2 / d^2
    """
    if other_mass is None and distance is None:
        return mass * G_SURFACE
    if other_mass is None or distance is None:
        raise TypeError("force_grav needs both other_mass and distance, or neither")
    if distance == 0:
        raise NumericDomainError("distance between masses must be non-zero")
    return (G * mass * other_mass) / (distance * distance)
