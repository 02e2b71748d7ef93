"""Command-line entry point printing servings as line protocol."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from nutrition_flux.adapters.line_sink import StreamLineSink
from nutrition_flux.app_logging import configure_logging
from nutrition_flux.config import settings_with_overrides
from nutrition_flux.containers import AppContainer, build_container
from nutrition_flux.domain.date_range import DateRange, parse_date_range
from nutrition_flux.errors import ExportError, OutputFailed

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="nutrition-flux",
        description="Export nutrition servings as time-series line protocol.",
    )
    parser.add_argument(
        "--username", help="Export username (or set CRONOMETER_USER)"
    )
    parser.add_argument(
        "--password", help="Export password (or set CRONOMETER_PASS)"
    )
    parser.add_argument("--start", help="Start date (YYYY-MM-DD), default yesterday")
    parser.add_argument("--end", help="End date (YYYY-MM-DD), default yesterday")
    parser.add_argument(
        "--input", help="Read servings from a CSV export instead of the network"
    )
    parser.add_argument(
        "--url", help="Servings export URL (or set SERVINGS_EXPORT_URL)"
    )
    parser.add_argument("--timezone", help="IANA timezone of the export times")
    parser.add_argument("--output", help="Write lines to a file instead of stdout")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser

async def _export(container: AppContainer, date_range: DateRange) -> list[str]:
    try:
        return await container.export_service.export_lines(date_range)
    finally:
        await container.close_resources()


def _write_output(path: str, lines: list[str]) -> int:
    """Write lines to a file, replacing it only once lines are available."""
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            return StreamLineSink(stream).write(lines)
    except OSError as exc:
        raise OutputFailed(f"Cannot write output {path}: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the export and return a process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.INFO)
    try:
        date_range = parse_date_range(args.start, args.end)
        settings = settings_with_overrides(
            cronometer_user=args.username,
            cronometer_pass=args.password,
            servings_export_url=args.url,
            servings_csv_path=args.input,
            timezone=args.timezone,
        )
        container = build_container(settings)
        lines = asyncio.run(_export(container, date_range))
        if args.output:
            written = _write_output(args.output, lines)
        else:
            written = StreamLineSink(sys.stdout).write(lines)
        _logger.debug("Wrote %s lines", written)
    except ExportError as exc:
        _logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0
