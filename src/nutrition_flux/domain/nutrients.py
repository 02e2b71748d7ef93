"""Nutrient catalog for serving records."""

from dataclasses import dataclass

from nutrition_flux.domain.servings import ServingRecord

KILOCALORIE = "kcal"
GRAM = "g"
MILLIGRAM = "mg"
MICROGRAM = "µg"
INTERNATIONAL_UNIT = "IU"


@dataclass(frozen=True)
class NutrientDescriptor:
    """Describes how one nutrient is read from a serving and exported.

    ``key`` is the canonical tag value, ``attribute`` the ServingRecord field
    holding the amount and ``column`` the header of the servings CSV export.
    """

    key: str
    attribute: str
    unit: str
    column: str


def _nutrient(key: str, attribute: str, unit: str, column: str) -> NutrientDescriptor:
    return NutrientDescriptor(key=key, attribute=attribute, unit=unit, column=column)


NUTRIENT_CATALOG: tuple[NutrientDescriptor, ...] = (
    # Energy and water
    _nutrient("energy", "energy_kcal", KILOCALORIE, "Energy (kcal)"),
    _nutrient("water", "water_g", GRAM, "Water (g)"),
    _nutrient("caffeine", "caffeine_mg", MILLIGRAM, "Caffeine (mg)"),
    # B vitamins
    _nutrient("vitamin_b1", "vitamin_b1_mg", MILLIGRAM, "B1 (Thiamine) (mg)"),
    _nutrient("vitamin_b2", "vitamin_b2_mg", MILLIGRAM, "B2 (Riboflavin) (mg)"),
    _nutrient("vitamin_b3", "vitamin_b3_mg", MILLIGRAM, "B3 (Niacin) (mg)"),
    _nutrient(
        "vitamin_b5", "vitamin_b5_mg", MILLIGRAM, "B5 (Pantothenic Acid) (mg)"
    ),
    _nutrient("vitamin_b6", "vitamin_b6_mg", MILLIGRAM, "B6 (Pyridoxine) (mg)"),
    _nutrient("vitamin_b12", "vitamin_b12_ug", MICROGRAM, "B12 (Cobalamin) (µg)"),
    _nutrient("biotin", "biotin_ug", MICROGRAM, "Biotin (µg)"),
    _nutrient("choline", "choline_mg", MILLIGRAM, "Choline (mg)"),
    _nutrient("folate", "folate_ug", MICROGRAM, "Folate (µg)"),
    # Other vitamins
    _nutrient("vitamin_a", "vitamin_a_iu", INTERNATIONAL_UNIT, "Vitamin A (IU)"),
    _nutrient("vitamin_c", "vitamin_c_mg", MILLIGRAM, "Vitamin C (mg)"),
    _nutrient("vitamin_d", "vitamin_d_iu", INTERNATIONAL_UNIT, "Vitamin D (IU)"),
    _nutrient("vitamin_e", "vitamin_e_mg", MILLIGRAM, "Vitamin E (mg)"),
    _nutrient("vitamin_k", "vitamin_k_ug", MICROGRAM, "Vitamin K (µg)"),
    # Minerals
    _nutrient("calcium", "calcium_mg", MILLIGRAM, "Calcium (mg)"),
    _nutrient("chromium", "chromium_ug", MICROGRAM, "Chromium (µg)"),
    _nutrient("copper", "copper_mg", MILLIGRAM, "Copper (mg)"),
    _nutrient("fluoride", "fluoride_ug", MICROGRAM, "Fluoride (µg)"),
    _nutrient("iodine", "iodine_ug", MICROGRAM, "Iodine (µg)"),
    _nutrient("iron", "iron_mg", MILLIGRAM, "Iron (mg)"),
    _nutrient("magnesium", "magnesium_mg", MILLIGRAM, "Magnesium (mg)"),
    _nutrient("manganese", "manganese_mg", MILLIGRAM, "Manganese (mg)"),
    _nutrient("phosphorus", "phosphorus_mg", MILLIGRAM, "Phosphorus (mg)"),
    _nutrient("potassium", "potassium_mg", MILLIGRAM, "Potassium (mg)"),
    _nutrient("selenium", "selenium_ug", MICROGRAM, "Selenium (µg)"),
    _nutrient("sodium", "sodium_mg", MILLIGRAM, "Sodium (mg)"),
    _nutrient("zinc", "zinc_mg", MILLIGRAM, "Zinc (mg)"),
    # Carbohydrates
    _nutrient("carbs", "carbs_g", GRAM, "Carbs (g)"),
    _nutrient("fiber", "fiber_g", GRAM, "Fiber (g)"),
    _nutrient("fructose", "fructose_g", GRAM, "Fructose (g)"),
    _nutrient("galactose", "galactose_g", GRAM, "Galactose (g)"),
    _nutrient("glucose", "glucose_g", GRAM, "Glucose (g)"),
    _nutrient("lactose", "lactose_g", GRAM, "Lactose (g)"),
    _nutrient("maltose", "maltose_g", GRAM, "Maltose (g)"),
    _nutrient("starch", "starch_g", GRAM, "Starch (g)"),
    _nutrient("sucrose", "sucrose_g", GRAM, "Sucrose (g)"),
    _nutrient("sugars", "sugars_g", GRAM, "Sugars (g)"),
    _nutrient("net_carbs", "net_carbs_g", GRAM, "Net Carbs (g)"),
    # Fats
    _nutrient("fat", "fat_g", GRAM, "Fat (g)"),
    _nutrient("cholesterol", "cholesterol_mg", MILLIGRAM, "Cholesterol (mg)"),
    _nutrient("monounsaturated", "monounsaturated_g", GRAM, "Monounsaturated (g)"),
    _nutrient("polyunsaturated", "polyunsaturated_g", GRAM, "Polyunsaturated (g)"),
    _nutrient("saturated", "saturated_g", GRAM, "Saturated (g)"),
    _nutrient("trans_fat", "trans_fat_g", GRAM, "Trans-Fats (g)"),
    _nutrient("omega3", "omega3_g", GRAM, "Omega-3 (g)"),
    _nutrient("omega6", "omega6_g", GRAM, "Omega-6 (g)"),
    # Amino acids
    _nutrient("cystine", "cystine_g", GRAM, "Cystine (g)"),
    _nutrient("histidine", "histidine_g", GRAM, "Histidine (g)"),
    _nutrient("isoleucine", "isoleucine_g", GRAM, "Isoleucine (g)"),
    _nutrient("leucine", "leucine_g", GRAM, "Leucine (g)"),
    _nutrient("lysine", "lysine_g", GRAM, "Lysine (g)"),
    _nutrient("methionine", "methionine_g", GRAM, "Methionine (g)"),
    _nutrient("phenylalanine", "phenylalanine_g", GRAM, "Phenylalanine (g)"),
    _nutrient("threonine", "threonine_g", GRAM, "Threonine (g)"),
    _nutrient("tryptophan", "tryptophan_g", GRAM, "Tryptophan (g)"),
    _nutrient("tyrosine", "tyrosine_g", GRAM, "Tyrosine (g)"),
    _nutrient("valine", "valine_g", GRAM, "Valine (g)"),
    _nutrient("protein", "protein_g", GRAM, "Protein (g)"),
    # Alcohol
    _nutrient("alcohol", "alcohol_g", GRAM, "Alcohol (g)"),
)

_BY_KEY = {descriptor.key: descriptor for descriptor in NUTRIENT_CATALOG}


def descriptor_for(key: str) -> NutrientDescriptor:
    """Return the catalog entry for a nutrient key."""
    return _BY_KEY[key]


def nutrient_values(record: ServingRecord) -> list[tuple[NutrientDescriptor, float]]:
    """Return every catalog nutrient of a serving, in catalog order."""
    return [
        (descriptor, getattr(record, descriptor.attribute))
        for descriptor in NUTRIENT_CATALOG
    ]
