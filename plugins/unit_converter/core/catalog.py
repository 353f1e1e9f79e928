"""Static unit catalogue shared by the converter and the UI selectors."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """A selectable unit; ``factor`` is its size in the category's base unit."""

    name: str
    abbreviation: str
    factor: float | None = None

    @property
    def label(self) -> str:
        return f"{self.abbreviation} ({self.name})"


TEMPERATURE = "temperature"

BASE_UNITS: Mapping[str, str] = MappingProxyType(
    {
        "length": "m",
        "mass": "g",
        TEMPERATURE: "°C",
        "volume": "L",
        "time": "s",
    }
)

UNIT_CATEGORIES: Mapping[str, tuple[UnitDefinition, ...]] = MappingProxyType(
    {
        "length": (
            UnitDefinition("Millimeter", "mm", 0.001),
            UnitDefinition("Centimeter", "cm", 0.01),
            UnitDefinition("Decimeter", "dm", 0.1),
            UnitDefinition("Meter", "m", 1),
            UnitDefinition("Decameter", "dam", 10),
            UnitDefinition("Hectometer", "hm", 100),
            UnitDefinition("Kilometer", "km", 1000),
            UnitDefinition("Inch", "in", 0.0254),
            UnitDefinition("Foot", "ft", 0.3048),
            UnitDefinition("Yard", "yd", 0.9144),
            UnitDefinition("Mile", "mi", 1609.344),
            UnitDefinition("Nautical Mile", "nmi", 1852),
        ),
        "mass": (
            UnitDefinition("Milligram", "mg", 0.001),
            UnitDefinition("Centigram", "cg", 0.01),
            UnitDefinition("Decigram", "dg", 0.1),
            UnitDefinition("Gram", "g", 1),
            UnitDefinition("Decagram", "dag", 10),
            UnitDefinition("Hectogram", "hg", 100),
            UnitDefinition("Kilogram", "kg", 1000),
            UnitDefinition("Metric Ton", "t", 1_000_000),
            UnitDefinition("Ounce", "oz", 28.3495),
            UnitDefinition("Pound", "lb", 453.592),
            UnitDefinition("Stone", "st", 6350.29),
        ),
        TEMPERATURE: (
            UnitDefinition("Celsius", "°C"),
            UnitDefinition("Fahrenheit", "°F"),
            UnitDefinition("Kelvin", "K"),
        ),
        "volume": (
            UnitDefinition("Milliliter", "ml", 0.001),
            UnitDefinition("Centiliter", "cl", 0.01),
            UnitDefinition("Deciliter", "dl", 0.1),
            UnitDefinition("Liter", "L", 1),
            UnitDefinition("Decaliter", "dal", 10),
            UnitDefinition("Hectoliter", "hl", 100),
            UnitDefinition("Cubic Meter", "m³", 1000),
            UnitDefinition("Fluid Ounce", "fl oz", 0.0295735),
            UnitDefinition("Cup", "cup", 0.236588),
            UnitDefinition("Pint", "pt", 0.473176),
            UnitDefinition("Quart", "qt", 0.946353),
            UnitDefinition("Gallon", "gal", 3.78541),
        ),
        "time": (
            UnitDefinition("Nanosecond", "ns", 1e-9),
            UnitDefinition("Microsecond", "µs", 1e-6),
            UnitDefinition("Millisecond", "ms", 0.001),
            UnitDefinition("Second", "s", 1),
            UnitDefinition("Minute", "min", 60),
            UnitDefinition("Hour", "h", 3600),
            UnitDefinition("Day", "d", 86400),
            UnitDefinition("Week", "wk", 604800),
            UnitDefinition("Month", "mo", 2629746),
            UnitDefinition("Year", "yr", 31556952),
        ),
    }
)


def get_units(category: str) -> tuple[UnitDefinition, ...] | None:
    """Return the ordered units of ``category`` or ``None`` when it is unknown."""

    return UNIT_CATEGORIES.get(category)


def default_indices(category: str) -> tuple[int, int]:
    """Initial (from, to) selection: the first two units, or the only one twice."""

    units = UNIT_CATEGORIES.get(category) or ()
    if len(units) >= 2:
        return 0, 1
    return 0, 0


__all__ = [
    "BASE_UNITS",
    "TEMPERATURE",
    "UNIT_CATEGORIES",
    "UnitDefinition",
    "default_indices",
    "get_units",
]
