"""Facade for the unit converter core utilities."""

from __future__ import annotations

import math
from typing import Dict, List

from common.numbers import parse_float, round_result

from .catalog import (
    BASE_UNITS,
    TEMPERATURE,
    UNIT_CATEGORIES,
    UnitDefinition,
    default_indices,
    get_units,
)
from .converter import convert
from .formatting import (
    DEFAULT_MAX_BYTES,
    byte_size,
    limit_output_size,
    validate_and_limit_input,
)


class UnknownCategoryError(LookupError):
    """Raised when a caller asks for a category that is not in the catalogue."""


def list_categories() -> List[str]:
    """Return the category names in catalogue order."""

    return list(UNIT_CATEGORIES.keys())


def list_units(category: str) -> List[Dict[str, object]]:
    """Return selector metadata for the units of ``category``."""

    units = get_units(category)
    if units is None:
        raise UnknownCategoryError(f"Unknown unit category '{category}'.")
    return [
        {
            "index": index,
            "name": unit.name,
            "abbreviation": unit.abbreviation,
            "factor": unit.factor,
            "label": unit.label,
        }
        for index, unit in enumerate(units)
    ]


def describe_catalog() -> Dict[str, object]:
    """Return the whole catalogue with base units and default selections."""

    categories = {}
    for name in list_categories():
        from_index, to_index = default_indices(name)
        categories[name] = {
            "base_unit": BASE_UNITS.get(name),
            "units": list_units(name),
            "default_from": from_index,
            "default_to": to_index,
        }
    return {"categories": list_categories(), "catalog": categories}


def convert_text(
    category: str,
    raw_value: str | None,
    from_index: int,
    to_index: int,
    *,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> Dict[str, object]:
    """Run one converter panel update for what the user typed.

    Returns the normalised input text, the byte-limited output text and the
    rounded numeric value (``None`` when nothing could be converted).
    """

    validated = validate_and_limit_input(raw_value, max_bytes)
    if not validated:
        return {"input": validated, "output": "", "value": None}
    result = round_result(convert(parse_float(validated), from_index, to_index, category))
    return {
        "input": validated,
        "output": limit_output_size(result, max_bytes),
        "value": result if math.isfinite(result) else None,
    }


__all__ = [
    "BASE_UNITS",
    "DEFAULT_MAX_BYTES",
    "TEMPERATURE",
    "UNIT_CATEGORIES",
    "UnitDefinition",
    "UnknownCategoryError",
    "byte_size",
    "convert",
    "convert_text",
    "default_indices",
    "describe_catalog",
    "limit_output_size",
    "list_categories",
    "list_units",
    "round_result",
    "validate_and_limit_input",
]
