"""Tests for the export service and line sink."""

import asyncio
import io
from datetime import date

import pytest

from nutrition_flux.adapters.line_sink import StreamLineSink
from nutrition_flux.domain.date_range import DateRange
from nutrition_flux.errors import ConfigurationError, FetchFailed
from nutrition_flux.services.export import ExportService
from tests.conftest import FakeServingSource, make_serving

RANGE = DateRange(start=date(2024, 1, 15), end=date(2024, 1, 16))


def test_export_lines_encodes_source_servings() -> None:
    source = FakeServingSource(
        servings=[
            make_serving(energy_kcal=95.0),
            make_serving(food_name="Milk", sodium_mg=44.0, calcium_mg=125.0),
        ]
    )
    service = ExportService(source)

    lines = asyncio.run(service.export_lines(RANGE))

    assert len(lines) == 2 + 3
    assert source.calls == [(date(2024, 1, 15), date(2024, 1, 16))]


def test_export_lines_propagates_source_failures() -> None:
    source = FakeServingSource(error=FetchFailed("down"))
    service = ExportService(source)

    with pytest.raises(FetchFailed):
        asyncio.run(service.export_lines(RANGE))


def test_export_to_writes_newline_terminated_lines() -> None:
    source = FakeServingSource(servings=[make_serving(energy_kcal=95.0)])
    stream = io.StringIO()

    written = asyncio.run(
        ExportService(source).export_to(RANGE, StreamLineSink(stream))
    )

    assert written == 2
    output = stream.getvalue()
    assert output.endswith("\n")
    assert output.count("\n") == 2
    assert output.splitlines()[1].startswith("nutrition_nutrient,")


def test_stream_sink_with_no_lines() -> None:
    stream = io.StringIO()

    assert StreamLineSink(stream).write([]) == 0
    assert stream.getvalue() == ""


def test_export_lines_without_source_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        asyncio.run(ExportService().export_lines(RANGE))
