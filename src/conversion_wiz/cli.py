"""CLI entry point for unit conversions."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import get_version
from .definitions import DEFAULTS_PATH, load_graph
from .errors import ConversionError
from .prompt import run_prompt
from .reporter.console_reporter import format_conversion, render_unit_listing

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_FAILED = 1
EXIT_DEFINITION_FAILED = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(
        prog="conversion-wiz",
        description="Convert values between units linked by scale and offset rules",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=DEFAULTS_PATH,
        metavar="FILE",
        help="JSON unit definition file (defaults to the bundled definitions)",
    )
    parser.add_argument("--list", action="store_true", help="List the available units and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument(
        "query",
        nargs="*",
        metavar="FROM TO VALUE",
        help="Run a single conversion instead of the interactive prompt",
    )
    args = parser.parse_args(argv)
    if args.query and len(args.query) != 3:
        parser.error("a query needs exactly three arguments: FROM TO VALUE")
    if args.query:
        try:
            args.query[2] = float(args.query[2])
        except ValueError:
            parser.error(f"invalid value: {args.query[2]!r}")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Load the definitions and either answer one query or start the prompt."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        graph = load_graph(args.config)
    except (OSError, ConversionError) as exc:
        print(f"Failed to load unit definitions from {args.config}: {exc}", file=sys.stderr)
        return EXIT_DEFINITION_FAILED

    if args.list:
        render_unit_listing(graph.list_units(), title="Available Units")
        return EXIT_OK

    if args.query:
        from_unit, to_unit, value = args.query
        try:
            result = graph.convert(from_unit, to_unit, value)
        except ConversionError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_CONVERSION_FAILED
        print(format_conversion(value, from_unit, result, to_unit))
        return EXIT_OK

    run_prompt(graph)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
