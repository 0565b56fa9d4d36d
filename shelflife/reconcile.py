"""Merging new items into the inventory and the manual-entry path."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Callable

from .categories import is_category
from .models import FoodItem, NewItem
from .quantity import merge_quantities
from .shelf_life import estimate_shelf_life

ALL_CATEGORIES = "All"
STATUS_FILTERS = ("all", "expiring", "expired")
SORT_KEYS = ("expiry", "name", "added")


@dataclass
class ViewFilters:
    """What the presentation layer is currently narrowing the inventory to."""

    search: str = ""
    category: str = ALL_CATEGORIES
    status: str = "all"
    sort: str = "expiry"


@dataclass
class ReconcileResult:
    items: list[FoodItem]
    filters: ViewFilters = field(default_factory=ViewFilters)
    filters_reset: bool = False


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


def _match_key(name: str) -> str:
    return name.strip().lower()


def _find_match(items: list[FoodItem], candidate: NewItem) -> int:
    key = _match_key(candidate.name)
    for idx, item in enumerate(items):
        if (
            _match_key(item.name) == key
            and item.category == candidate.category
            and item.expiry_date == candidate.expiry_date
        ):
            return idx
    return -1


def _reset_filters(
    filters: ViewFilters, candidates: list[NewItem]
) -> ViewFilters:
    category = filters.category
    if category != ALL_CATEGORIES and any(
        c.category != category for c in candidates
    ):
        category = ALL_CATEGORIES
    return replace(filters, search="", category=category, status="all")


def reconcile(
    inventory: list[FoodItem],
    candidates: list[NewItem],
    *,
    now: datetime | None = None,
    filters: ViewFilters | None = None,
    new_id: Callable[[], str] = _new_id,
) -> ReconcileResult:
    """Merge a batch of candidates into the inventory.

    A candidate whose (name, category, expiry date) matches an item already in
    the inventory, or an earlier candidate of the same batch, restocks that
    item: quantities are merged, prices summed and added_at reset. Other
    candidates become new items, placed ahead of the existing ones.

    The input list is not modified.
    """
    now = now or datetime.now()
    filters = filters or ViewFilters()

    existing = list(inventory)
    added: list[FoodItem] = []
    used_ids = {item.id for item in existing}

    for candidate in candidates:
        for pool in (added, existing):
            idx = _find_match(pool, candidate)
            if idx != -1:
                current = pool[idx]
                pool[idx] = replace(
                    current,
                    quantity=merge_quantities(current.quantity, candidate.quantity),
                    price=(current.price or 0) + (candidate.price or 0),
                    added_at=now,
                )
                break
        else:
            item_id = new_id()
            while item_id in used_ids:
                item_id = new_id()
            used_ids.add(item_id)
            added.append(
                FoodItem(
                    id=item_id,
                    name=candidate.name,
                    category=candidate.category,
                    expiry_date=candidate.expiry_date,
                    quantity=candidate.quantity,
                    added_at=now,
                    price=candidate.price or 0.0,
                )
            )

    new_filters = _reset_filters(filters, candidates)
    return ReconcileResult(
        items=added + existing,
        filters=new_filters,
        filters_reset=new_filters != filters,
    )


def delete_item(inventory: list[FoodItem], item_id: str) -> list[FoodItem]:
    """Return the inventory without the item with the given id.

    Raises:
        KeyError: If no item has that id.
    """
    remaining = [item for item in inventory if item.id != item_id]
    if len(remaining) == len(inventory):
        raise KeyError(item_id)
    return remaining


def new_manual_item(
    name: str,
    category: str = "Fridge",
    quantity: str = "1 unit",
    expiry_date: date | None = None,
    price: float | None = None,
    today: date | None = None,
) -> NewItem:
    """Build a candidate from manual entry.

    Without an explicit expiry date, the standard shelf life for the name is
    added to today.
    """
    name = name.strip()
    if not name:
        raise ValueError("Item name must not be empty")
    if not is_category(category):
        raise ValueError(f"Unknown category: {category!r}")
    if price is not None and price < 0:
        raise ValueError(f"Price must not be negative: {price}")

    if expiry_date is None:
        today = today or date.today()
        expiry_date = today + timedelta(days=estimate_shelf_life(name))

    return NewItem(
        name=name,
        category=category,
        expiry_date=expiry_date,
        quantity=quantity.strip() or "1 unit",
        price=price or 0.0,
    )
