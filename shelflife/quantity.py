"""Free-form quantity string parsing and merging."""

from __future__ import annotations

import re

# Leading decimal magnitude, then whatever follows as the unit label
_QTY_PATTERN = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)\s*(.*)$", re.DOTALL)


def normalize_unit(unit: str) -> str:
    """Normalize a unit label for comparison.

    Lowercases and strips a single trailing "s", so "Unit" and "units" share
    a key. Irregular plurals ("loaves") are not reduced.
    """
    unit = unit.strip().lower()
    if unit.endswith("s"):
        unit = unit[:-1]
    return unit


def parse_quantity(text: str) -> tuple[float, str] | None:
    """Split a quantity string into (magnitude, normalized unit).

    Args:
        text: e.g. "1.5 kg", "2 units", "10"

    Returns:
        (amount, unit) tuple, or None if the string does not start with a
        decimal number.
    """
    m = _QTY_PATTERN.match(text.strip())
    if not m:
        return None
    return (float(m.group(1)), normalize_unit(m.group(2)))


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def merge_quantities(qty1: str, qty2: str) -> str:
    """Combine two quantity strings into one.

    Same-unit quantities are summed ("1 unit" + "2 units" -> "3 units").
    Anything else is joined verbatim ("2 kg" + "3 units" -> "2 kg + 3 units").
    """
    p1 = parse_quantity(qty1)
    p2 = parse_quantity(qty2)

    if p1 is not None and p2 is not None and p1[1] == p2[1]:
        total = p1[0] + p2[0]
        unit = p1[1]
        if unit and total != 1:
            unit += "s"
        return f"{_format_number(total)} {unit}".strip()

    return f"{qty1} + {qty2}"
