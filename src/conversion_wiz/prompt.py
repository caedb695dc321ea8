"""Interactive line-based conversion prompt."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .errors import ConversionError
from .graph import ConversionGraph
from .reporter.console_reporter import format_conversion, render_unit_listing

logger = logging.getLogger(__name__)

EXIT_KEYWORD = "exit"
LIST_KEYWORD = "list"


class _EndOfInput(Exception):
    """Raised internally when the input stream is exhausted or the user exits."""


@dataclass
class ConversionPrompt:
    """Reads two unit tokens and a value per round and prints the conversion."""

    graph: ConversionGraph
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def run(self) -> None:
        """Loop until ``exit`` or end of input."""

        while True:
            try:
                self._round()
            except _EndOfInput:
                return

    # ------------------------------------------------------------------
    # Single query round
    # ------------------------------------------------------------------
    def _round(self) -> None:
        self._say("Enter first unit of conversion query or 'exit' to quit:")
        self._say("or type 'list' to list all units")
        first = self._read()
        if first.lower() == LIST_KEYWORD:
            render_unit_listing(self.graph.units_formatted(), self.stdout)
            return
        if not self.graph.contains_unit(first):
            self._say("Please enter a valid unit.")
            return

        self._say("Enter second unit of conversion query:")
        second = self._read()
        if not self.graph.contains_unit(second):
            self._say("Please enter a valid unit.")
            return

        self._say("Enter value to convert:")
        raw_value = self._read()
        try:
            value = float(raw_value)
        except ValueError:
            self._say("Please enter a valid number.")
            return

        try:
            result = self.graph.convert(first, second, value)
        except ConversionError as exc:
            logger.debug("Conversion %s -> %s failed: %s", first, second, exc)
            self._say(f"Error: {exc}")
            return
        self._say(format_conversion(value, first, result, second))

    def _read(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput()
        token = line.strip()
        if token.lower() == EXIT_KEYWORD:
            raise _EndOfInput()
        return token

    def _say(self, message: str) -> None:
        print(message, file=self.stdout)


def run_prompt(graph: ConversionGraph, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    streams: dict[str, TextIO] = {}
    if stdin is not None:
        streams["stdin"] = stdin
    if stdout is not None:
        streams["stdout"] = stdout
    ConversionPrompt(graph, **streams).run()


__all__ = ["ConversionPrompt", "run_prompt"]
