import math

import pytest

from kinecalc.types import Quantity, QuantityKind
from kinecalc.units import UnitError, as_pint, convert, to_si


def test_year_walks_down_to_seconds():
    assert convert(1, "yr") == ("seconds", 31_536_000)


@pytest.mark.parametrize("value,unit,expected", [
    (1, "month", 30 * 86400),
    (2, "week", 14 * 86400),
    (1, "day", 86400),
    (1.5, "hr", 5400),
    (3, "min", 180),
    (7, "sec", 7),
    (250, "ms", 0.25),
    (1, "us", 1e-6),
    (1, "ns", 1e-9),
])
def test_time_ladder(value, unit, expected):
    out = convert(value, unit)
    assert out.unit == "seconds"
    assert out.value == pytest.approx(expected)


@pytest.mark.parametrize("value,unit,expected", [
    (1, "mile", 1609.344),
    (1, "yard", 0.9144),
    (3, "feet", 0.9144),
    (12, "inch", 0.3048),
    (2, "kilo", 2000),
    (5, "meter", 5),
    (1, "deci", 0.1),
    (1, "centi", 0.01),
    (1, "milli", 0.001),
    (1, "micro", 1e-6),
    (1, "nano", 1e-9),
])
def test_length_ladder(value, unit, expected):
    out = convert(value, unit)
    assert out.unit == "meters"
    assert out.value == pytest.approx(expected)


def test_degrees_report_cosine():
    out = convert(60, "degrees")
    assert out.unit == "radians"
    assert out.value == pytest.approx(math.cos(math.pi / 3))
    assert out.value == pytest.approx(0.5)


@pytest.mark.parametrize("alias,tag", [
    ("Years", "yr"), ("hour", "hr"), (" minutes ", "min"), ("ft", "feet"),
    ("km", "kilo"), ("millimeters", "milli"), ("°", "degrees"),
])
def test_aliases_match_short_tags(alias, tag):
    assert convert(4, alias) == convert(4, tag)


@pytest.mark.parametrize("unit", ["furlong", "kelvin", ""])
def test_unsupported_unit(unit):
    with pytest.raises(UnitError, match="Unsupported unit"):
        convert(1, unit)


def test_to_si_uses_kind_unit():
    q = to_si("distance", 30, "ft")
    assert q.kind is QuantityKind.DISTANCE
    assert q.value == pytest.approx(9.144)
    assert to_si("velocityi", 10, "mile/hour").value == pytest.approx(4.4704)
    assert to_si("acceleration", 32.174, "ft/s^2").value == pytest.approx(9.8066, rel=1e-4)


def test_to_si_without_unit_keeps_value():
    assert to_si("mass", 3, None) == Quantity(QuantityKind.MASS, 3.0)


@pytest.mark.parametrize("unit", ["ft", "blorp", "m/", "(m", "ft**"])
def test_to_si_rejects_bad_units(unit):
    with pytest.raises(UnitError):
        to_si("mass", 1, unit)


def test_as_pint_carries_si_unit():
    q = as_pint(Quantity(QuantityKind.FORCE, 10.0))
    assert q.to("kN").magnitude == pytest.approx(0.01)
