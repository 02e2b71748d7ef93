"""Tests for the nutrient catalog."""

from dataclasses import fields

import pytest

from nutrition_flux.domain.nutrients import (
    NUTRIENT_CATALOG,
    descriptor_for,
    nutrient_values,
)
from nutrition_flux.domain.servings import ServingRecord
from tests.conftest import make_serving

_CONTEXT_FIELDS = {
    "food_name",
    "group",
    "category",
    "recorded_time_ns",
    "quantity_value",
    "quantity_units",
}


def test_catalog_covers_every_nutrient_field() -> None:
    nutrient_fields = {
        item.name for item in fields(ServingRecord) if item.name not in _CONTEXT_FIELDS
    }

    assert {descriptor.attribute for descriptor in NUTRIENT_CATALOG} == nutrient_fields


def test_catalog_keys_and_columns_are_unique() -> None:
    keys = [descriptor.key for descriptor in NUTRIENT_CATALOG]
    columns = [descriptor.column for descriptor in NUTRIENT_CATALOG]

    assert len(set(keys)) == len(keys)
    assert len(set(columns)) == len(columns)


def test_catalog_units_are_known() -> None:
    assert {descriptor.unit for descriptor in NUTRIENT_CATALOG} == {
        "kcal",
        "g",
        "mg",
        "µg",
        "IU",
    }


def test_catalog_keys_are_lowercase_identifiers() -> None:
    for descriptor in NUTRIENT_CATALOG:
        assert descriptor.key == descriptor.key.lower()
        assert descriptor.key.replace("_", "").isalnum()


@pytest.mark.parametrize(
    ("key", "unit"),
    [
        ("energy", "kcal"),
        ("vitamin_b12", "µg"),
        ("vitamin_k", "µg"),
        ("vitamin_d", "IU"),
        ("net_carbs", "g"),
        ("cholesterol", "mg"),
        ("omega3", "g"),
        ("alcohol", "g"),
    ],
)
def test_descriptor_units(key: str, unit: str) -> None:
    assert descriptor_for(key).unit == unit


def test_descriptor_for_unknown_key_raises() -> None:
    with pytest.raises(KeyError):
        descriptor_for("unobtainium")


def test_nutrient_values_follow_catalog_order() -> None:
    record = make_serving(energy_kcal=95.0, valine_g=0.012)

    values = nutrient_values(record)

    assert [descriptor for descriptor, _ in values] == list(NUTRIENT_CATALOG)
    by_key = {descriptor.key: value for descriptor, value in values}
    assert by_key["energy"] == 95.0
    assert by_key["valine"] == 0.012
    assert by_key["protein"] == 0.0
