"""Conversion graph with breadth-first path discovery."""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable

from .errors import (
    ConversionPathNotFound,
    ConversionRateBothValues,
    ConversionRateZero,
    MissingConversionFactor,
    NonFiniteConversionRate,
    UnitNotFound,
)
from .registry import Unit, UnitRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionFactor:
    """Directed rule ``to_value = from_value * scale + offset``.

    A factor either scales or shifts, never both.
    """

    scale: float
    offset: float = 0.0

    def __post_init__(self) -> None:
        for value in (self.scale, self.offset):
            if not math.isfinite(value):
                raise NonFiniteConversionRate(value)
        if self.scale == 0.0:
            raise ConversionRateZero()
        if self.scale != 1.0 and self.offset != 0.0:
            raise ConversionRateBothValues()

    def apply(self, value: float) -> float:
        return value * self.scale + self.offset

    def inverse(self) -> "ConversionFactor":
        return ConversionFactor(1.0 / self.scale, -self.offset)


class ConversionGraph:
    """Units linked by invertible scale/offset edges.

    Edges are stored in both directions; adding ``A -> B`` also stores the
    inverse ``B -> A``. Conversions between units without a direct edge
    follow the shortest chain of edges by hop count.
    """

    def __init__(self) -> None:
        self._registry = UnitRegistry()
        self._edges: Dict[str, Dict[str, ConversionFactor]] = {}

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def register_unit(self, name: str, aliases: Iterable[str] = (), intermediate: bool = False) -> Unit:
        """Register a unit; see :meth:`UnitRegistry.register`."""

        return self._registry.register(name, aliases, intermediate)

    add_unit = register_unit

    def add_edge(self, from_token: str, to_token: str, scale: float, offset: float) -> None:
        """Link two registered units and store the inverse edge as well.

        Re-adding an edge between the same pair replaces the earlier factors.
        """

        factor = ConversionFactor(float(scale), float(offset))
        source = self._require(from_token)
        target = self._require(to_token)

        inverse = factor.inverse()
        self._edges.setdefault(source, {})
        self._edges.setdefault(target, {})
        self._edges[source][target] = factor
        self._edges[target][source] = inverse
        logger.debug("Added edge %s -> %s (scale=%s, offset=%s)", source, target, factor.scale, factor.offset)

    def add_scale_edge(self, from_token: str, to_token: str, scale: float) -> None:
        self.add_edge(from_token, to_token, scale, 0.0)

    def add_offset_edge(self, from_token: str, to_token: str, offset: float) -> None:
        self.add_edge(from_token, to_token, 1.0, offset)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains_unit(self, token: str) -> bool:
        return self._registry.contains(token)

    def units_formatted(self) -> list[str]:
        """Display strings for all non-intermediate units."""

        return self._registry.format_listing()

    list_units = units_formatted

    def find_path(self, from_token: str, to_token: str) -> list[str]:
        """Return canonical unit names along a shortest path, source first."""

        source = self._require(from_token)
        target = self._require(to_token)
        if source == target:
            return [source]

        parents = self._search(source, target)
        if target not in parents:
            raise ConversionPathNotFound(from_token, to_token)

        path = [target]
        while path[-1] != source:
            path.append(parents[path[-1]])
        path.reverse()
        logger.debug("Found path %s -> %s: %s", source, target, " -> ".join(path))
        return path

    def convert(self, from_token: str, to_token: str, value: float) -> float:
        """Convert *value* expressed in *from_token* into *to_token*."""

        source = self._require(from_token)
        target = self._require(to_token)
        if source == target:
            return value

        parents = self._search(source, target)
        if target not in parents:
            raise ConversionPathNotFound(from_token, to_token)

        # Parent chain runs target -> source; factors apply source -> target.
        factors: list[ConversionFactor] = []
        current = target
        while current != source:
            parent = parents[current]
            factor = self._edges.get(parent, {}).get(current)
            if factor is None:
                raise MissingConversionFactor()
            factors.append(factor)
            current = parent

        result = value
        for factor in reversed(factors):
            result = factor.apply(result)
        logger.debug("Converted %s %s -> %s %s over %d hop(s)", value, source, result, target, len(factors))
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _require(self, token: str) -> str:
        name = self._registry.resolve(token)
        if name is None:
            raise UnitNotFound(token)
        return name

    def _search(self, source: str, target: str) -> Dict[str, str]:
        """Breadth-first search from *source*; returns the parent of each reached node."""

        parents: Dict[str, str] = {}
        visited = {source}
        queue: Deque[str] = deque([source])
        while queue:
            current = queue.popleft()
            if current == target:
                break
            for neighbour in self._edges.get(current, {}):
                if neighbour in visited:
                    continue
                visited.add(neighbour)
                parents[neighbour] = current
                queue.append(neighbour)
        return parents


__all__ = ["ConversionFactor", "ConversionGraph"]
