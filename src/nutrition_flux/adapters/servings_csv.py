"""Servings CSV export parsing."""

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from nutrition_flux.domain.date_range import DATE_FORMAT, DateRange
from nutrition_flux.domain.nutrients import NUTRIENT_CATALOG
from nutrition_flux.domain.servings import ServingRecord, to_unix_nanos
from nutrition_flux.errors import ConfigurationError, FetchFailed
from nutrition_flux.services.export import ServingSource

_TIME_FORMATS = ("%I:%M %p", "%H:%M", "%H:%M:%S", "%I:%M:%S %p")

_logger = logging.getLogger(__name__)


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Resolve an IANA timezone name; ``None`` means local time."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown timezone: {name}") from exc


def parse_amount(raw: str) -> tuple[float, str]:
    """Split an amount like ``1.00 medium`` into value and units."""
    cleaned = raw.strip()
    if not cleaned:
        return 0.0, ""
    number, _, units = cleaned.partition(" ")
    return float(number.replace(",", "")), units.strip()


def _parse_time(raw: str) -> time:
    cleaned = raw.strip()
    if not cleaned:
        return time()
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(cleaned.upper(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized time: {raw!r}")


def _parse_number(raw: str | None) -> float:
    if raw is None:
        return 0.0
    cleaned = raw.strip()
    if not cleaned:
        return 0.0
    return float(cleaned)


def _recorded_time_ns(day: date, clock: time, zone: tzinfo | None) -> int:
    moment = datetime.combine(day, clock)
    if zone is None:
        return to_unix_nanos(moment.astimezone())
    return to_unix_nanos(moment.replace(tzinfo=zone))


def _parse_row(row: dict[str, str], day: date, zone: tzinfo | None) -> ServingRecord:
    quantity_value, quantity_units = parse_amount(row.get("Amount") or "")
    clock = _parse_time(row.get("Time") or "")
    nutrients = {
        descriptor.attribute: _parse_number(row.get(descriptor.column))
        for descriptor in NUTRIENT_CATALOG
    }
    return ServingRecord(
        food_name=(row.get("Food Name") or "").strip(),
        group=(row.get("Group") or "").strip(),
        category=(row.get("Category") or "").strip(),
        recorded_time_ns=_recorded_time_ns(day, clock, zone),
        quantity_value=quantity_value,
        quantity_units=quantity_units,
        **nutrients,
    )


def parse_servings_csv(
    text: str,
    zone: tzinfo | None = None,
    date_range: DateRange | None = None,
) -> list[ServingRecord]:
    """Parse a servings CSV export into serving records.

    Rows whose day falls outside ``date_range`` are skipped. Missing nutrient
    columns and empty cells read as zero.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    if reader.fieldnames is None:
        return []
    if "Day" not in reader.fieldnames:
        raise FetchFailed("Servings export is missing the Day column")

    records: list[ServingRecord] = []
    # Header is line 1.
    for line_number, row in enumerate(reader, start=2):
        try:
            day = datetime.strptime((row.get("Day") or "").strip(), DATE_FORMAT).date()
            if date_range is not None and not date_range.contains(day):
                continue
            records.append(_parse_row(row, day, zone))
        except ValueError as exc:
            raise FetchFailed(
                f"Malformed servings export at line {line_number}: {exc}"
            ) from exc
    return records


@dataclass
class CsvFileServingSource(ServingSource):
    """Reads servings from a CSV export on disk."""

    path: Path
    zone: tzinfo | None = None

    async def fetch_servings(self, start: date, end: date) -> list[ServingRecord]:
        """Read the export and return servings within the range."""
        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise FetchFailed(
                f"Cannot read servings export {self.path}: {exc}"
            ) from exc
        records = parse_servings_csv(
            text, zone=self.zone, date_range=DateRange(start=start, end=end)
        )
        _logger.info("Loaded %s servings from %s", len(records), self.path)
        return records
