"""Storage-location categories and free-text category normalization."""

from __future__ import annotations

from .models import CATEGORIES

DEFAULT_CATEGORY = "Fridge"

# Keyword → category rules, checked in this order. First hit wins.
CATEGORY_RULES: list[tuple[str, list[str]]] = [
    ("Freezer", ["freez", "ice", "frozen"]),
    ("Spice Rack", ["spice", "herb", "season", "salt", "pepper"]),
    ("Countertop", ["counter", "fruit", "banana", "bread", "avocado"]),
    ("Pantry", [
        "pantry", "can", "dry", "box", "snack", "baking", "cereal",
        "rice", "pasta", "oil", "sugar", "flour",
    ]),
    ("Cabinet", ["cabinet", "plate", "dish", "utensil"]),
]


def normalize_category(hint: str | None) -> str:
    """Map a free-text category or item-type hint to a storage category.

    Anything unrecognised goes to the fridge.
    """
    if not hint:
        return DEFAULT_CATEGORY

    text = str(hint).strip().lower()
    # Canonical names pass through ("spice rack" would otherwise hit "ice")
    for category in CATEGORIES:
        if text == category.lower():
            return category

    for category, keywords in CATEGORY_RULES:
        for keyword in keywords:
            if keyword in text:
                return category
    return DEFAULT_CATEGORY


def is_category(value: str) -> bool:
    return value in CATEGORIES
