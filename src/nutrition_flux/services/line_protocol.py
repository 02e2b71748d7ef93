"""Line protocol encoder for serving records.

Each serving becomes one ``nutrition_serving`` line for the quantity eaten and
one ``nutrition_nutrient`` line per non-zero nutrient. Lines look like::

    nutrition_nutrient,food=Tea,group=Drinks,category=unknown,nutrient=caffeine
    value=47.400,units="mg" 1700000000000000000

(wrapped here; each is a single line).

The encoder is a pure transformation: it does not validate input and never
raises. Negative or non-finite amounts are written as-is.
"""

from collections.abc import Iterable

from nutrition_flux.domain.line_protocol import (
    NUTRIENT_SERIES,
    QUANTITY_KEY,
    SERVING_SERIES,
    UNKNOWN_TAG_VALUE,
    EncodedLine,
)
from nutrition_flux.domain.nutrients import nutrient_values
from nutrition_flux.domain.servings import ServingRecord


def escape_tag(value: str) -> str:
    """Escape a tag value; empty values become ``unknown``."""
    if not value:
        value = UNKNOWN_TAG_VALUE
    return value.replace(",", "\\,").replace("=", "\\=").replace(" ", "\\ ")


def quote_field(value: str) -> str:
    """Quote a string field value, escaping embedded double quotes."""
    return '"' + value.replace('"', '\\"') + '"'


def format_value(value: float) -> str:
    """Format a numeric field with exactly three decimals."""
    return f"{value:.3f}"


def render_line(line: EncodedLine) -> str:
    """Render an encoded line as ``<series>,<tags> <fields> <timestamp>``."""
    tags = ",".join(f"{name}={escape_tag(value)}" for name, value in line.tags)
    fields = f"value={format_value(line.value)},units={quote_field(line.units)}"
    return f"{line.series},{tags} {fields} {line.timestamp_ns}"


def serving_lines(record: ServingRecord) -> list[EncodedLine]:
    """Build the quantity line and one line per non-zero nutrient."""
    context = (
        ("food", record.food_name),
        ("group", record.group),
        ("category", record.category),
    )
    lines = [
        EncodedLine(
            series=SERVING_SERIES,
            tags=(*context, ("nutrient", QUANTITY_KEY)),
            value=record.quantity_value,
            units=record.quantity_units,
            timestamp_ns=record.recorded_time_ns,
        )
    ]
    for descriptor, value in nutrient_values(record):
        # Zero means "absent" as far as the store is concerned.
        if value == 0:
            continue
        lines.append(
            EncodedLine(
                series=NUTRIENT_SERIES,
                tags=(*context, ("nutrient", descriptor.key)),
                value=value,
                units=descriptor.unit,
                timestamp_ns=record.recorded_time_ns,
            )
        )
    return lines


def format_serving(record: ServingRecord) -> list[str]:
    """Encode a single serving record."""
    return [render_line(line) for line in serving_lines(record)]


def format_servings(records: Iterable[ServingRecord]) -> list[str]:
    """Encode serving records, keeping record order."""
    lines: list[str] = []
    for record in records:
        lines.extend(format_serving(record))
    return lines
