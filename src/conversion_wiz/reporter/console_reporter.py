"""Console presentation helpers for unit listings and conversion results."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO


def _format_block(title: str, lines: list[str]) -> str:
    divider = "=" * len(title)
    return "\n".join([title, divider, *lines])


def format_number(value: float) -> str:
    """Render *value* without float noise such as ``288.15000000000003``."""

    return f"{value:.12g}"


def format_unit_listing(units: Sequence[str]) -> list[str]:
    return [f"\t{index}: {unit}" for index, unit in enumerate(units, start=1)]


def format_conversion(value: float, from_unit: str, result: float, to_unit: str) -> str:
    return f"{format_number(value)} {from_unit} = {format_number(result)} {to_unit}"


def render_unit_listing(units: Sequence[str], stream: TextIO | None = None, title: str | None = None) -> None:
    """Print a numbered unit listing, optionally under an underlined *title*."""

    out = stream if stream is not None else sys.stdout
    lines = format_unit_listing(units)
    if title:
        print(_format_block(title, lines), file=out)
        return
    print("Units:", file=out)
    for line in lines:
        print(line, file=out)


__all__ = ["format_number", "format_unit_listing", "format_conversion", "render_unit_listing"]
