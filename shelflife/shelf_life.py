"""Shelf-life estimation from item names."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta

logger = logging.getLogger(__name__)

DEFAULT_SHELF_LIFE_DAYS = 7

# Typical days until expiry, in lookup order. The fuzzy phase returns the
# first key contained in the item name, so earlier entries win.
SHELF_LIFE_RULES: list[tuple[str, int]] = [
    # Produce
    ("tomato", 5), ("tomatoes", 5),
    ("milk", 7),
    ("egg", 21), ("eggs", 21),
    ("bread", 5),
    ("spinach", 5), ("lettuce", 7), ("kale", 7),
    ("cucumber", 7),
    ("apple", 30), ("apples", 30),
    ("banana", 5), ("bananas", 5),
    ("strawberry", 3), ("strawberries", 3),
    ("blueberry", 7), ("blueberries", 7),
    ("raspberry", 2), ("raspberries", 2),
    ("grapes", 10),
    ("orange", 14), ("oranges", 14),
    ("lemon", 21), ("lemons", 21),
    ("avocado", 4), ("avocados", 4),
    ("broccoli", 7), ("cauliflower", 7),
    ("mushroom", 5), ("mushrooms", 5),
    ("potato", 60), ("potatoes", 60),
    ("onion", 30), ("onions", 30),
    ("garlic", 90),
    ("carrot", 21), ("carrots", 21),
    ("bell pepper", 7), ("peppers", 7),
    ("zucchini", 5), ("asparagus", 4), ("celery", 14), ("corn", 3),
    # Proteins
    ("chicken", 2), ("beef", 3), ("pork", 3), ("fish", 2),
    ("ham", 5), ("salami", 30), ("bacon", 7), ("tofu", 7),
    # Dairy / fridge
    ("yogurt", 14), ("cheese", 21), ("butter", 60), ("cream", 7),
    ("hummus", 7), ("juice", 10),
    # Pantry
    ("rice", 365), ("pasta", 365), ("flour", 365), ("sugar", 730),
    ("salt", 1000), ("pepper", 365), ("spice", 365), ("oil", 180),
    ("cereal", 180), ("coffee", 365), ("tea", 730),
]

_EXACT: dict[str, int] = {}
for _key, _days in SHELF_LIFE_RULES:
    _EXACT.setdefault(_key, _days)


def estimate_shelf_life(name: str) -> int:
    """Estimate days until expiry from an item name.

    Exact table key first, then the first key (in table order) that appears
    inside the name, then DEFAULT_SHELF_LIFE_DAYS.
    """
    normalized = name.strip().lower()
    if normalized in _EXACT:
        return _EXACT[normalized]
    for key, days in SHELF_LIFE_RULES:
        if key in normalized:
            return days
    return DEFAULT_SHELF_LIFE_DAYS


def _parse_target(raw: str) -> datetime:
    """Parse a date or timestamp into naive local time (dates at midnight)."""
    raw = raw.strip()
    try:
        return datetime.combine(date.fromisoformat(raw), time())
    except ValueError:
        pass
    value = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def days_until(raw_date: str | None, name: str, today: date) -> int:
    """Days from today until an absolute date supplied by a provider.

    Partial days round up, so a timestamp later today counts as one day.
    Missing, malformed or already elapsed dates fall back to the
    name-based estimate.
    """
    if not raw_date or not str(raw_date).strip():
        return estimate_shelf_life(name)

    try:
        target = _parse_target(str(raw_date))
    except ValueError:
        logger.warning(
            "Invalid date %r for %r, using standard shelf life", raw_date, name
        )
        return estimate_shelf_life(name)

    days = math.ceil((target - datetime.combine(today, time())) / timedelta(days=1))
    if days < 0:
        logger.debug("Date %s for %r already elapsed", raw_date, name)
        return estimate_shelf_life(name)
    return days
