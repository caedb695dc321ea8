"""Loading declarative unit definitions and building graphs from them."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

from .errors import DefinitionError
from .graph import ConversionGraph

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).resolve().parent / "defaults" / "units.json"


def _require_key(data: Mapping[str, Any], key: str, kind: str) -> Any:
    if key not in data:
        raise DefinitionError(f"{kind} entry is missing '{key}'")
    return data[key]


def _as_mapping(entry: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(entry, Mapping):
        raise DefinitionError(f"{kind} entry must be an object, got {type(entry).__name__}")
    return entry


def _as_number(value: Any, kind: str, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DefinitionError(f"{kind} '{key}' must be a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise DefinitionError(f"{kind} '{key}' must be finite, got {number!r}")
    return number


def _as_text(value: Any, kind: str, key: str) -> str:
    if not isinstance(value, str):
        raise DefinitionError(f"{kind} '{key}' must be a string, got {value!r}")
    return value


def _as_list(value: Any, kind: str, key: str) -> list[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise DefinitionError(f"{kind} '{key}' must be a list")
    return list(value)


@dataclass(frozen=True)
class UnitDefinition:
    name: str
    aliases: tuple[str, ...] = ()
    intermediate: bool = False

    @classmethod
    def from_mapping(cls, entry: Any) -> "UnitDefinition":
        data = _as_mapping(entry, "unit")
        name = _as_text(_require_key(data, "name", "unit"), "unit", "name")
        raw_aliases = _as_list(data.get("aliases", []), "unit", "aliases")
        aliases = tuple(_as_text(alias, "unit", "aliases") for alias in raw_aliases)
        intermediate = data.get("intermediate", False)
        if not isinstance(intermediate, bool):
            raise DefinitionError(f"unit 'intermediate' must be true or false, got {intermediate!r}")
        return cls(name=name, aliases=aliases, intermediate=intermediate)


@dataclass(frozen=True)
class ScaleConversion:
    source: str
    target: str
    factor: float

    @classmethod
    def from_mapping(cls, entry: Any) -> "ScaleConversion":
        data = _as_mapping(entry, "scale conversion")
        return cls(
            source=_as_text(_require_key(data, "from", "scale conversion"), "scale conversion", "from"),
            target=_as_text(_require_key(data, "to", "scale conversion"), "scale conversion", "to"),
            factor=_as_number(_require_key(data, "factor", "scale conversion"), "scale conversion", "factor"),
        )


@dataclass(frozen=True)
class OffsetConversion:
    source: str
    target: str
    offset: float

    @classmethod
    def from_mapping(cls, entry: Any) -> "OffsetConversion":
        data = _as_mapping(entry, "offset conversion")
        return cls(
            source=_as_text(_require_key(data, "from", "offset conversion"), "offset conversion", "from"),
            target=_as_text(_require_key(data, "to", "offset conversion"), "offset conversion", "to"),
            offset=_as_number(_require_key(data, "offset", "offset conversion"), "offset conversion", "offset"),
        )


@dataclass
class GraphDefinition:
    """Declarative description of a conversion graph."""

    units: list[UnitDefinition] = field(default_factory=list)
    conversions_scale: list[ScaleConversion] = field(default_factory=list)
    conversions_offset: list[OffsetConversion] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Any) -> "GraphDefinition":
        root = _as_mapping(data, "definition")
        return cls(
            units=[UnitDefinition.from_mapping(entry) for entry in _as_list(root.get("units", []), "definition", "units")],
            conversions_scale=[
                ScaleConversion.from_mapping(entry)
                for entry in _as_list(root.get("conversions_scale", []), "definition", "conversions_scale")
            ],
            conversions_offset=[
                OffsetConversion.from_mapping(entry)
                for entry in _as_list(root.get("conversions_offset", []), "definition", "conversions_offset")
            ],
        )


def load_definition(path: Path = DEFAULTS_PATH) -> GraphDefinition:
    """Read a JSON definition file."""

    with Path(path).open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise DefinitionError(f"{path}: {exc}") from exc
    return GraphDefinition.from_mapping(data)


def build_graph(definition: GraphDefinition) -> ConversionGraph:
    """Populate a new graph: units first, then scale edges, then offset edges."""

    graph = ConversionGraph()
    for unit in definition.units:
        graph.register_unit(unit.name, unit.aliases, unit.intermediate)
    for conversion in definition.conversions_scale:
        graph.add_scale_edge(conversion.source, conversion.target, conversion.factor)
    for conversion in definition.conversions_offset:
        graph.add_offset_edge(conversion.source, conversion.target, conversion.offset)
    logger.info(
        "Built conversion graph with %d units, %d scale and %d offset conversions",
        len(definition.units),
        len(definition.conversions_scale),
        len(definition.conversions_offset),
    )
    return graph


def load_graph(path: Path = DEFAULTS_PATH) -> ConversionGraph:
    logger.debug("Loading unit definitions from %s", path)
    return build_graph(load_definition(path))


__all__ = [
    "DEFAULTS_PATH",
    "UnitDefinition",
    "ScaleConversion",
    "OffsetConversion",
    "GraphDefinition",
    "load_definition",
    "build_graph",
    "load_graph",
]
