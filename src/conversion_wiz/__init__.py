"""Top-level package for the conversion-wiz unit converter."""

from importlib import metadata

from .errors import ConversionError
from .graph import ConversionFactor, ConversionGraph
from .registry import Unit, UnitRegistry


def get_version() -> str:
    """Return the installed package version."""
    try:
        return metadata.version("conversion-wiz")
    except metadata.PackageNotFoundError:  # pragma: no cover - local dev fallback
        return "0.0.0"


__all__ = [
    "ConversionError",
    "ConversionFactor",
    "ConversionGraph",
    "Unit",
    "UnitRegistry",
    "get_version",
]
