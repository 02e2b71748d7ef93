"""Export service fetching servings and encoding them as line protocol."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from nutrition_flux.domain.date_range import DateRange
from nutrition_flux.domain.servings import ServingRecord
from nutrition_flux.errors import ConfigurationError
from nutrition_flux.services.line_protocol import format_servings

_logger = logging.getLogger(__name__)


class ServingSource(Protocol):
    """Interface for anything that yields serving records for a date range."""

    async def fetch_servings(self, start: date, end: date) -> list[ServingRecord]:
        """Return servings recorded between start and end, inclusive."""


class LineSink(Protocol):
    """Interface for destinations of encoded lines."""

    def write(self, lines: Iterable[str]) -> int:
        """Write lines and return how many were written."""


@dataclass
class ExportService:
    """Fetch servings from a source and encode them."""

    source: ServingSource | None = None

    async def export_lines(self, date_range: DateRange) -> list[str]:
        """Return encoded lines for every serving in the range."""
        if self.source is None:
            raise ConfigurationError(
                "No servings source configured. Set SERVINGS_CSV_PATH or "
                "SERVINGS_EXPORT_URL"
            )
        servings = await self.source.fetch_servings(date_range.start, date_range.end)
        lines = format_servings(servings)
        _logger.info(
            "Encoded %s servings into %s lines (%s..%s)",
            len(servings),
            len(lines),
            date_range.start.isoformat(),
            date_range.end.isoformat(),
        )
        return lines

    async def export_to(self, date_range: DateRange, sink: LineSink) -> int:
        """Encode servings in the range and write them to a sink."""
        lines = await self.export_lines(date_range)
        written = sink.write(lines)
        _logger.debug("Wrote %s lines", written)
        return written
