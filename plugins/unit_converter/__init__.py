"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Length, mass, temperature, volume and time conversions sized for a compact display.",
    "blueprint": "unit_converter",
    "category": "General Utilities",
}


__all__ = ["manifest"]
