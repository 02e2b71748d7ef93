"""Serving record domain model."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_unix_nanos(moment: datetime) -> int:
    """Convert a datetime to integer nanoseconds since the Unix epoch.

    Naive datetimes are interpreted in the local timezone.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    delta = moment - _EPOCH
    return (delta.days * 86400 + delta.seconds) * 1_000_000_000 + (
        delta.microseconds * 1000
    )


def from_unix_nanos(value: int) -> datetime:
    """Convert epoch nanoseconds to an aware UTC datetime (microsecond precision)."""
    return _EPOCH + timedelta(microseconds=value // 1000)


@dataclass(frozen=True)
class ServingRecord:
    """One logged serving with its quantity and nutrient breakdown."""

    food_name: str
    group: str
    category: str
    recorded_time_ns: int
    quantity_value: float
    quantity_units: str

    # Energy and water
    energy_kcal: float = 0.0
    water_g: float = 0.0
    caffeine_mg: float = 0.0
    alcohol_g: float = 0.0

    # B vitamins
    vitamin_b1_mg: float = 0.0
    vitamin_b2_mg: float = 0.0
    vitamin_b3_mg: float = 0.0
    vitamin_b5_mg: float = 0.0
    vitamin_b6_mg: float = 0.0
    vitamin_b12_ug: float = 0.0
    biotin_ug: float = 0.0
    choline_mg: float = 0.0
    folate_ug: float = 0.0

    # Other vitamins
    vitamin_a_iu: float = 0.0
    vitamin_c_mg: float = 0.0
    vitamin_d_iu: float = 0.0
    vitamin_e_mg: float = 0.0
    vitamin_k_ug: float = 0.0

    # Minerals
    calcium_mg: float = 0.0
    chromium_ug: float = 0.0
    copper_mg: float = 0.0
    fluoride_ug: float = 0.0
    iodine_ug: float = 0.0
    iron_mg: float = 0.0
    magnesium_mg: float = 0.0
    manganese_mg: float = 0.0
    phosphorus_mg: float = 0.0
    potassium_mg: float = 0.0
    selenium_ug: float = 0.0
    sodium_mg: float = 0.0
    zinc_mg: float = 0.0

    # Carbohydrates
    carbs_g: float = 0.0
    fiber_g: float = 0.0
    fructose_g: float = 0.0
    galactose_g: float = 0.0
    glucose_g: float = 0.0
    lactose_g: float = 0.0
    maltose_g: float = 0.0
    starch_g: float = 0.0
    sucrose_g: float = 0.0
    sugars_g: float = 0.0
    net_carbs_g: float = 0.0

    # Fats
    fat_g: float = 0.0
    cholesterol_mg: float = 0.0
    monounsaturated_g: float = 0.0
    polyunsaturated_g: float = 0.0
    saturated_g: float = 0.0
    trans_fat_g: float = 0.0
    omega3_g: float = 0.0
    omega6_g: float = 0.0

    # Amino acids
    cystine_g: float = 0.0
    histidine_g: float = 0.0
    isoleucine_g: float = 0.0
    leucine_g: float = 0.0
    lysine_g: float = 0.0
    methionine_g: float = 0.0
    phenylalanine_g: float = 0.0
    threonine_g: float = 0.0
    tryptophan_g: float = 0.0
    tyrosine_g: float = 0.0
    valine_g: float = 0.0
    protein_g: float = 0.0

    @property
    def recorded_at(self) -> datetime:
        """Recorded instant as an aware UTC datetime."""
        return from_unix_nanos(self.recorded_time_ns)
