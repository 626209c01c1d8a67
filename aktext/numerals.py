"""Alphabetic and Roman numerals, and HTML entity escaping."""

from __future__ import annotations

from typing import Optional

__all__ = ["bijective_base_from", "roman_number_from", "escape_html_entities"]

_DEFAULT_MAP = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_HTML_ENTITIES = {"<": "&lt;", ">": "&gt;", "&": "&amp;", '"': "&quot;"}


def bijective_base_from(value: int, base: int = 26, mapping: Optional[str] = None) -> str:
    """Render ``value`` as spreadsheet-style letters: 0 is "A", and after "Z" comes "AA"."""
    if mapping is None:
        mapping = _DEFAULT_MAP
    if not 2 <= base <= len(mapping):
        raise ValueError(f"base must be between 2 and {len(mapping)}, got {base}")
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")

    digits = []
    while True:
        value, digit = divmod(value, base)
        digits.append(mapping[digit])
        if value == 0:
            break

    # Only the most significant digit runs from one, unless it is the only digit.
    if len(digits) > 1:
        digits[-1] = chr(ord(digits[-1]) - 1)

    return "".join(reversed(digits))


def roman_number_from(value: int) -> str:
    """Render ``value`` in Roman numerals; values above 3999 are given in decimal."""
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    if value > 3999:
        return str(value)
    parts = []
    for amount, numeral in _ROMAN_TABLE:
        times, value = divmod(value, amount)
        parts.append(numeral * times)
    return "".join(parts)


def escape_html_entities(html: str) -> str:
    """Escape '<', '>', '&' and '"' as HTML entities."""
    return "".join(_HTML_ENTITIES.get(ch, ch) for ch in html)