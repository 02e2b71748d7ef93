"""Line protocol domain models."""

from dataclasses import dataclass

SERVING_SERIES = "nutrition_serving"
NUTRIENT_SERIES = "nutrition_nutrient"
QUANTITY_KEY = "quantity"
UNKNOWN_TAG_VALUE = "unknown"


@dataclass(frozen=True)
class EncodedLine:
    """A single measurement ready to be rendered as one line."""

    series: str
    tags: tuple[tuple[str, str], ...]
    value: float
    units: str
    timestamp_ns: int
