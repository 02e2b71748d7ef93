"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

import pytest

from nutrition_flux.config import Settings
from nutrition_flux.containers import AppContainer
from nutrition_flux.domain.servings import ServingRecord, to_unix_nanos
from nutrition_flux.services.export import ExportService, ServingSource

RECORDED_AT = datetime(2024, 1, 15, 8, 30, tzinfo=UTC)
RECORDED_NS = to_unix_nanos(RECORDED_AT)


def make_serving(**overrides: object) -> ServingRecord:
    """Build a serving record with sensible defaults."""
    values: dict[str, object] = {
        "food_name": "Apples, Raw",
        "group": "Fruits",
        "category": "",
        "recorded_time_ns": RECORDED_NS,
        "quantity_value": 1.0,
        "quantity_units": "medium",
    }
    values.update(overrides)
    return ServingRecord(**values)  # type: ignore[arg-type]


@dataclass
class FakeServingSource(ServingSource):
    """Serving source returning canned records and recording calls."""

    servings: list[ServingRecord] = field(default_factory=list)
    calls: list[tuple[date, date]] = field(default_factory=list)
    error: Exception | None = None

    async def fetch_servings(self, start: date, end: date) -> list[ServingRecord]:
        self.calls.append((start, end))
        if self.error is not None:
            raise self.error
        return list(self.servings)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        cronometer_user="user@example.com",
        cronometer_pass="secret",
        servings_export_url="https://export.test/export",
        timezone="UTC",
    )


@pytest.fixture
def serving_source() -> FakeServingSource:
    return FakeServingSource(
        servings=[make_serving(energy_kcal=95.0, fiber_g=4.4)],
    )


@pytest.fixture
def container(settings: Settings, serving_source: FakeServingSource) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        serving_source=serving_source,
        export_service=ExportService(source=serving_source),
        close_resources=close_resources,
    )
