"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest

from conversion_wiz.definitions import load_graph
from conversion_wiz.graph import ConversionGraph


@pytest.fixture
def graph():
    """An empty conversion graph."""
    return ConversionGraph()


@pytest.fixture
def temperature_graph():
    """Celsius, Kelvin and Rankine linked by one offset and one scale edge."""
    g = ConversionGraph()
    g.register_unit("Celsius", ["C"])
    g.register_unit("Kelvin", ["K"])
    g.register_unit("Rankine", ["R"])
    g.add_offset_edge("C", "K", 273.15)
    g.add_scale_edge("K", "R", 1.8)
    return g


@pytest.fixture
def chain_graph():
    """A -> B by scale 2, B -> C by offset 3."""
    g = ConversionGraph()
    g.register_unit("A", ["a"])
    g.register_unit("B", ["b"])
    g.register_unit("C", ["c"])
    g.add_scale_edge("A", "B", 2.0)
    g.add_offset_edge("B", "C", 3.0)
    return g


@pytest.fixture(scope="session")
def default_graph():
    """Graph built from the bundled definition file."""
    return load_graph()


@pytest.fixture
def write_definition(tmp_path):
    """Write a definition mapping (or raw text) to a temporary JSON file."""

    def _write(content, name="units.json"):
        path = Path(tmp_path) / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
