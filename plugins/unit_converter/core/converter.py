"""Conversion arithmetic for the unit converter panel.

Linear categories convert through their base unit using the catalogue
factors. Temperature is affine and always pivots through Celsius.
Invalid requests never raise: they convert to ``0``.
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from .catalog import TEMPERATURE, UnitDefinition, get_units

_ABSOLUTE_ZERO_OFFSET = 273.15

_TO_CELSIUS: Dict[str, Callable[[float], float]] = {
    "°C": lambda value: value,
    "°F": lambda value: (value - 32) * 5 / 9,
    "K": lambda value: value - _ABSOLUTE_ZERO_OFFSET,
}

_FROM_CELSIUS: Dict[str, Callable[[float], float]] = {
    "°C": lambda celsius: celsius,
    "°F": lambda celsius: (celsius * 9 / 5) + 32,
    "K": lambda celsius: celsius + _ABSOLUTE_ZERO_OFFSET,
}


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def _lookup(units: tuple[UnitDefinition, ...], index: object) -> UnitDefinition | None:
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    if 0 <= index < len(units):
        return units[index]
    return None


def _convert_temperature(value: float, source: UnitDefinition, target: UnitDefinition) -> float:
    to_celsius = _TO_CELSIUS.get(source.abbreviation)
    from_celsius = _FROM_CELSIUS.get(target.abbreviation)
    if to_celsius is None or from_celsius is None:
        return 0
    return from_celsius(to_celsius(value))


def convert(value: float, from_index: int, to_index: int, category: str) -> float:
    """Convert ``value`` between two units of ``category`` selected by index.

    Returns ``0`` when ``value`` is NaN or not a number, when the category is
    unknown, or when an index is out of range. Converting a unit to itself
    returns ``value`` untouched. The result is not rounded.
    """

    if not _is_number(value):
        return 0
    units = get_units(category)
    if not units:
        return 0
    source = _lookup(units, from_index)
    target = _lookup(units, to_index)
    if source is None or target is None:
        return 0
    if source is target:
        return float(value)

    if category == TEMPERATURE:
        return _convert_temperature(value, source, target)

    if not source.factor or not target.factor:
        return 0
    base_value = value * source.factor
    return base_value / target.factor


__all__ = ["convert"]
