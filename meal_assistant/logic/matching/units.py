"""Measurement units: family classification and base-unit conversion.

Volume converts through milliliters, weight through grams. Count units
(each, clove, can, ...) have no conversion factor.
"""
from __future__ import annotations
from typing import Dict, Optional, Tuple

__all__ = [
    "UNIT_INFO", "VOLUME", "WEIGHT", "COUNT",
    "canonical_unit", "unit_family", "convert_to_base_unit", "convert_from_base_unit",
    "convert_unit", "units_compatible", "quantity_covers",
]

VOLUME = "volume"
WEIGHT = "weight"
COUNT = "count"

# unit -> (family, base unit factor)
UNIT_INFO: Dict[str, Tuple[str, Optional[float]]] = {
    # volume, us
    "tsp": (VOLUME, 4.929),
    "tbsp": (VOLUME, 14.787),
    "fl_oz": (VOLUME, 29.574),
    "cup": (VOLUME, 236.588),
    "pint_us": (VOLUME, 473.176),
    "quart": (VOLUME, 946.353),
    "gallon_us": (VOLUME, 3785.41),
    # volume, metric
    "ml": (VOLUME, 1.0),
    "l": (VOLUME, 1000.0),
    # volume, uk
    "pint_uk": (VOLUME, 568.261),
    "gallon_uk": (VOLUME, 4546.09),
    # weight
    "oz": (WEIGHT, 28.3495),
    "lb": (WEIGHT, 453.592),
    "g": (WEIGHT, 1.0),
    "kg": (WEIGHT, 1000.0),
    "stone": (WEIGHT, 6350.29),
    # count
    "each": (COUNT, None),
    "slice": (COUNT, None),
    "clove": (COUNT, None),
    "bunch": (COUNT, None),
    "can": (COUNT, None),
    "package": (COUNT, None),
    "pinch": (COUNT, None),
    "dash": (COUNT, None),
    "to_taste": (COUNT, None),
}

_ALIASES: Dict[str, str] = {
    "teaspoon": "tsp", "teaspoons": "tsp",
    "tablespoon": "tbsp", "tablespoons": "tbsp",
    "fl oz": "fl_oz", "fluid ounce": "fl_oz", "fluid ounces": "fl_oz",
    "cups": "cup",
    "pint": "pint_us", "pints": "pint_us", "pt": "pint_us",
    "quarts": "quart", "qt": "quart",
    "gallon": "gallon_us", "gallons": "gallon_us", "gal": "gallon_us",
    "milliliter": "ml", "milliliters": "ml", "millilitre": "ml", "millilitres": "ml",
    "liter": "l", "liters": "l", "litre": "l", "litres": "l",
    "ounce": "oz", "ounces": "oz",
    "pound": "lb", "pounds": "lb", "lbs": "lb",
    "gram": "g", "grams": "g", "gr": "g",
    "kilogram": "kg", "kilograms": "kg",
    "st": "stone",
    "pcs": "each", "pc": "each", "piece": "each", "pieces": "each",
    "slices": "slice", "cloves": "clove", "bunches": "bunch", "cans": "can",
    "packages": "package", "pkg": "package",
    "to taste": "to_taste",
}


def canonical_unit(unit: Optional[str]) -> Optional[str]:
    """Fold spelling variants onto the unit table key; unknown units pass through lowercased."""
    if not unit:
        return None
    u = unit.strip().lower()
    if not u:
        return None
    return _ALIASES.get(u, u)


def unit_family(unit: Optional[str]) -> Optional[str]:
    """volume / weight / count, or None for an absent or unknown unit."""
    info = UNIT_INFO.get(canonical_unit(unit) or "")
    return info[0] if info else None


def _factor(unit: Optional[str]) -> Optional[float]:
    info = UNIT_INFO.get(canonical_unit(unit) or "")
    if not info or info[0] == COUNT:
        return None
    return info[1]


def convert_to_base_unit(quantity: float, unit: Optional[str]) -> Optional[float]:
    """quantity in ml or g; None when the unit is absent or count-typed."""
    factor = _factor(unit)
    if factor is None:
        return None
    return quantity * factor


def convert_from_base_unit(base_quantity: float, unit: Optional[str]) -> Optional[float]:
    factor = _factor(unit)
    if factor is None:
        return None
    return base_quantity / factor


def convert_unit(quantity: float, from_unit: Optional[str], to_unit: Optional[str]) -> Optional[float]:
    """Convert between two units of the same family; None when not possible."""
    if canonical_unit(from_unit) == canonical_unit(to_unit):
        return quantity
    if unit_family(from_unit) != unit_family(to_unit):
        return None
    base = convert_to_base_unit(quantity, from_unit)
    if base is None:
        return None
    return convert_from_base_unit(base, to_unit)


def units_compatible(unit1: Optional[str], unit2: Optional[str]) -> bool:
    """Identical, either absent, or both in the same family."""
    u1, u2 = canonical_unit(unit1), canonical_unit(unit2)
    if u1 == u2:
        return True
    if u1 is None or u2 is None:
        return True
    family1, family2 = unit_family(u1), unit_family(u2)
    return family1 is not None and family1 == family2


def quantity_covers(available: float, available_unit: Optional[str],
                    needed: float, needed_unit: Optional[str]) -> bool:
    """Whether `available` is at least `needed`, comparing in base units when they differ.

    Incompatible units, or a compatible pair without a base conversion,
    count as covered: the ingredient is present, its amount just cannot be
    compared.
    """
    if canonical_unit(available_unit) == canonical_unit(needed_unit):
        return available >= needed
    if units_compatible(available_unit, needed_unit):
        available_base = convert_to_base_unit(available, available_unit)
        needed_base = convert_to_base_unit(needed, needed_unit)
        if available_base is not None and needed_base is not None:
            return available_base >= needed_base
    return True
