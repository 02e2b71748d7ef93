"""Pydantic models for the HTTP API payloads."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from nutrition_flux.domain.nutrients import NUTRIENT_CATALOG, descriptor_for
from nutrition_flux.domain.servings import ServingRecord, to_unix_nanos

_KNOWN_KEYS = {descriptor.key for descriptor in NUTRIENT_CATALOG}


class ServingPayload(BaseModel):
    """A serving posted for encoding.

    ``recorded_time_ns`` wins over ``recorded_time`` when both are given.
    """

    food_name: str
    group: str = ""
    category: str = ""
    recorded_time: datetime | None = None
    recorded_time_ns: int | None = None
    quantity_value: float
    quantity_units: str = ""
    nutrients: dict[str, float] = Field(default_factory=dict)

    @field_validator("nutrients")
    @classmethod
    def _known_nutrients(cls, value: dict[str, float]) -> dict[str, float]:
        unknown = sorted(set(value) - _KNOWN_KEYS)
        if unknown:
            raise ValueError(f"Unknown nutrients: {', '.join(unknown)}")
        return value

    @model_validator(mode="after")
    def _has_timestamp(self) -> "ServingPayload":
        if self.recorded_time is None and self.recorded_time_ns is None:
            raise ValueError("recorded_time or recorded_time_ns is required")
        return self

    def timestamp_ns(self) -> int:
        """Resolve the recorded instant in epoch nanoseconds."""
        if self.recorded_time_ns is not None:
            return self.recorded_time_ns
        return to_unix_nanos(self.recorded_time)

    def to_record(self) -> ServingRecord:
        """Convert the payload into a domain serving record."""
        amounts = {
            descriptor_for(key).attribute: amount
            for key, amount in self.nutrients.items()
        }
        return ServingRecord(
            food_name=self.food_name,
            group=self.group,
            category=self.category,
            recorded_time_ns=self.timestamp_ns(),
            quantity_value=self.quantity_value,
            quantity_units=self.quantity_units,
            **amounts,
        )
