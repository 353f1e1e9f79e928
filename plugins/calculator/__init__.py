"""Calculator plugin manifest."""

manifest = {
    "title": "Calculator",
    "summary": "Four-function keypad calculator with left-to-right chaining, percent and sign toggle.",
    "category": "General Utilities",
    "blueprint": "calculator",
}

__all__ = ["manifest"]
