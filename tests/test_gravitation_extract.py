import pytest

from kinecalc.errors import NumericDomainError, QuantityNotFound, UnrecognizedInput
from kinecalc.extract import get_from
from kinecalc.gravitation import G, force_grav
from kinecalc.types import Quantity, QuantityKind


def test_weight_under_surface_gravity():
    assert force_grav(10) == pytest.approx(98.0)


def test_earth_moon_attraction():
    m1, m2, d = 5.972e24, 7.342e22, 3.844e8
    assert force_grav(m1, m2, d) == pytest.approx(6.673e-11 * m1 * m2 / d ** 2)
    assert force_grav(m1, m2, d) == pytest.approx(1.98e20, rel=1e-2)
    assert G == 6.673e-11


def test_partial_two_body_arguments():
    with pytest.raises(TypeError):
        force_grav(1.0, other_mass=2.0)
    with pytest.raises(TypeError):
        force_grav(1.0, distance=2.0)


def test_zero_distance():
    with pytest.raises(NumericDomainError):
        force_grav(1.0, 2.0, 0.0)


def test_get_from_returns_first_match():
    items = [("distance", 23), ("time", 2), ("distance", 99)]
    assert get_from("distance", items) == 23
    assert get_from(QuantityKind.TIME, items) == 2


def test_get_from_accepts_quantities():
    items = [Quantity(QuantityKind.MASS, 4.0)]
    assert get_from("m", items) == 4.0


@pytest.mark.parametrize("items", [[], [("time", 1.0), ("velocityf", 2.0)]])
def test_get_from_fails_loudly(items):
    with pytest.raises(QuantityNotFound):
        get_from("distance", items)
    with pytest.raises(LookupError):
        get_from("distance", items)


def test_get_from_unknown_label():
    with pytest.raises(UnrecognizedInput):
        get_from("jerk", [("time", 1.0)])
