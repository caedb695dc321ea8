"""Check the bundled definitions against Pint's unit data."""

import pint
import pytest

# (graph source, pint source, graph target, pint target)
PAIRS = [
    ("C", "degC", "K", "kelvin"),
    ("C", "degC", "F", "degF"),
    ("F", "degF", "K", "kelvin"),
    ("F", "degF", "R", "degR"),
    ("R", "degR", "C", "degC"),
    ("km", "kilometer", "mi", "mile"),
    ("in", "inch", "mm", "millimeter"),
    ("ft", "foot", "m", "meter"),
    ("yd", "yard", "cm", "centimeter"),
    ("lb", "pound", "kg", "kilogram"),
    ("oz", "ounce", "g", "gram"),
    ("kcal", "kilocalorie", "kJ", "kilojoule"),
    ("kWh", "kilowatt_hour", "cal", "calorie"),
    ("J", "joule", "kWh", "kilowatt_hour"),
]


@pytest.fixture(scope="module")
def ureg():
    return pint.UnitRegistry()


@pytest.mark.parametrize("graph_from,pint_from,graph_to,pint_to", PAIRS)
@pytest.mark.parametrize("value", [-40.0, 0.0, 37.5, 1000.0])
def test_matches_pint(default_graph, ureg, graph_from, pint_from, graph_to, pint_to, value):
    expected = ureg.Quantity(value, pint_from).to(pint_to).magnitude

    result = default_graph.convert(graph_from, graph_to, value)

    assert result == pytest.approx(expected, rel=1e-9, abs=1e-9)


def test_fahrenheit_freezing_and_boiling(default_graph):
    assert default_graph.convert("F", "C", 32.0) == pytest.approx(0.0, abs=1e-9)
    assert default_graph.convert("C", "F", 100.0) == pytest.approx(212.0)
    assert default_graph.convert("F", "C", -40.0) == pytest.approx(-40.0)
