"""Export date range model."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from nutrition_flux.errors import InvalidDateRange

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        """Return whether a day falls inside the range."""
        return self.start <= day <= self.end


def yesterday(today: date | None = None) -> date:
    """Return the day before ``today`` (local date by default)."""
    resolved_today = today or datetime.now().astimezone().date()
    return resolved_today - timedelta(days=1)


def parse_date(raw: str) -> date:
    """Parse a YYYY-MM-DD date."""
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateRange(
            f"Invalid date {raw!r}, must be YYYY-MM-DD"
        ) from exc


def parse_date_range(
    start: str | None, end: str | None, today: date | None = None
) -> DateRange:
    """Build a validated range, defaulting missing bounds to yesterday."""
    default_day = yesterday(today)
    start_day = parse_date(start) if start else default_day
    end_day = parse_date(end) if end else default_day
    if end_day < start_day:
        raise InvalidDateRange("End date must not be before start date")
    return DateRange(start=start_day, end=end_day)
