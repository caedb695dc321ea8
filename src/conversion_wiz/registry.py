"""Unit identities and alias resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator

from .errors import DuplicateAlias, DuplicateUnit, EmptyAlias, EmptyUnitName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unit:
    """A measurement unit known to the registry.

    ``aliases`` always contains ``name`` itself so the canonical name is a
    valid lookup key. ``intermediate`` units only link other units together
    and are left out of listings.
    """

    name: str
    aliases: tuple[str, ...]
    intermediate: bool = False

    def display_name(self) -> str:
        """Return ``"Kilojoule (kJ, kJoule)"`` style text for listings."""

        extra = [alias for alias in self.aliases if alias != self.name]
        if not extra:
            return self.name
        return f"{self.name} ({', '.join(extra)})"


class UnitRegistry:
    """Owns canonical units and the alias index pointing at them."""

    def __init__(self) -> None:
        self._units: Dict[str, Unit] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, name: str, aliases: Iterable[str] = (), intermediate: bool = False) -> Unit:
        """Register *name* with *aliases*, all or nothing."""

        if not name:
            raise EmptyUnitName()
        if name in self._units:
            raise DuplicateUnit(name)

        if isinstance(aliases, str):
            raise TypeError(f"aliases for {name} must be a list of strings, not a single string")
        candidates = list(aliases)
        if any(not alias for alias in candidates):
            raise EmptyAlias()
        if name not in candidates:
            candidates.append(name)

        seen: set[str] = set()
        for alias in candidates:
            if alias in self._aliases or alias in seen:
                raise DuplicateAlias(alias)
            seen.add(alias)

        unit = Unit(name=name, aliases=tuple(candidates), intermediate=bool(intermediate))
        self._units[name] = unit
        for alias in unit.aliases:
            self._aliases[alias] = name
        logger.debug("Registered unit %s with aliases %s", name, unit.aliases)
        return unit

    def resolve(self, token: str) -> str | None:
        """Return the canonical name *token* refers to, if any."""

        return self._aliases.get(token)

    def contains(self, token: str) -> bool:
        return token in self._aliases

    def get(self, token: str) -> Unit | None:
        name = self._aliases.get(token)
        if name is None:
            return None
        return self._units[name]

    def format_listing(self) -> list[str]:
        """Display strings for every non-intermediate unit, in registration order."""

        return [unit.display_name() for unit in self._units.values() if not unit.intermediate]

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.contains(token)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)


__all__ = ["Unit", "UnitRegistry"]
