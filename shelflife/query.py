"""Filtered and sorted inventory views, expiry status and statistics."""

from __future__ import annotations

import math
import unicodedata
from dataclasses import dataclass
from datetime import date

from .models import FoodItem
from .reconcile import ALL_CATEGORIES, ViewFilters

EXPIRING_WINDOW_DAYS = 3


def days_remaining(item: FoodItem, today: date) -> int:
    return (item.expiry_date - today).days


def classify_status(item: FoodItem, today: date) -> str:
    """Return "expired", "expiring" (0-3 days left) or "fresh"."""
    days = days_remaining(item, today)
    if days < 0:
        return "expired"
    if days <= EXPIRING_WINDOW_DAYS:
        return "expiring"
    return "fresh"


def _collation_key(name: str) -> str:
    # Accent- and case-insensitive, like a locale-aware comparison
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def _matches(item: FoodItem, filters: ViewFilters, today: date) -> bool:
    if filters.search and filters.search.lower() not in item.name.lower():
        return False
    if filters.category != ALL_CATEGORIES and item.category != filters.category:
        return False
    if filters.status == "all":
        return True
    return classify_status(item, today) == filters.status


def query_inventory(
    items: list[FoodItem],
    filters: ViewFilters | None = None,
    today: date | None = None,
) -> list[FoodItem]:
    """Apply search, category and status filters, then sort.

    Ties keep their input order.
    """
    filters = filters or ViewFilters()
    today = today or date.today()

    filtered = [i for i in items if _matches(i, filters, today)]

    match filters.sort:
        case "name":
            return sorted(filtered, key=lambda i: _collation_key(i.name))
        case "expiry":
            return sorted(filtered, key=lambda i: i.expiry_date)
        case "added":
            return sorted(filtered, key=lambda i: i.added_at, reverse=True)
        case _:
            raise ValueError(f"Unknown sort key: {filters.sort!r}")


@dataclass
class InventoryStats:
    total: int
    expiring: int
    expired: int
    fridge: int
    total_value: float
    wasted_value: float
    freshness_percent: int

    def display(self) -> str:
        lines = [
            f"Total items:     {self.total}",
            f"Expiring soon:   {self.expiring}",
            f"Expired:         {self.expired}",
            f"In the fridge:   {self.fridge}",
            f"Kitchen value:   ${self.total_value:.2f}",
            f"Wasted money:    -${self.wasted_value:.2f}",
            f"Freshness:       {self.freshness_percent}%",
        ]
        return "\n".join(lines)


def compute_stats(items: list[FoodItem], today: date | None = None) -> InventoryStats:
    """Aggregate statistics over the whole, unfiltered inventory."""
    today = today or date.today()

    statuses = [classify_status(i, today) for i in items]
    total = len(items)
    expired = statuses.count("expired")

    if total:
        freshness = math.floor(100 * (total - expired) / total + 0.5)
    else:
        freshness = 100

    return InventoryStats(
        total=total,
        expiring=statuses.count("expiring"),
        expired=expired,
        fridge=sum(1 for i in items if i.category == "Fridge"),
        total_value=sum(i.price or 0 for i in items),
        wasted_value=sum(
            i.price or 0 for i, s in zip(items, statuses) if s == "expired"
        ),
        freshness_percent=freshness,
    )
