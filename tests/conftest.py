"""Shared fixtures."""

from datetime import date, datetime

import pytest

from shelflife.models import FoodItem


def _make_item(
    item_id: str,
    name: str,
    expiry: date,
    category: str = "Fridge",
    quantity: str = "1 unit",
    price: float = 0.0,
    added_at: datetime = datetime(2025, 1, 1, 12, 0),
) -> FoodItem:
    return FoodItem(
        id=item_id,
        name=name,
        category=category,
        expiry_date=expiry,
        quantity=quantity,
        added_at=added_at,
        price=price,
    )


@pytest.fixture
def make_item():
    """Factory for FoodItem instances with test defaults."""
    return _make_item


@pytest.fixture
def milk():
    return _make_item("m1", "Milk", date(2025, 1, 10), price=2.00)
