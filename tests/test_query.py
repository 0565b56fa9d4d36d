"""Tests for inventory views, status classification and statistics."""

from datetime import date, datetime

import pytest

from shelflife.query import (
    classify_status,
    compute_stats,
    days_remaining,
    query_inventory,
)
from shelflife.reconcile import ViewFilters

TODAY = date(2025, 1, 10)


class TestClassifyStatus:
    @pytest.mark.parametrize(
        "expiry,days,status",
        [
            (date(2025, 1, 12), 2, "expiring"),
            (date(2025, 1, 9), -1, "expired"),
            (date(2025, 1, 20), 10, "fresh"),
            (date(2025, 1, 10), 0, "expiring"),
            (date(2025, 1, 13), 3, "expiring"),
            (date(2025, 1, 14), 4, "fresh"),
        ],
    )
    def test_window(self, make_item, expiry, days, status):
        item = make_item("x", "Thing", expiry)
        assert days_remaining(item, TODAY) == days
        assert classify_status(item, TODAY) == status


@pytest.fixture
def inventory(make_item):
    return [
        make_item("1", "Spinach", date(2025, 1, 11), price=2.49,
                  added_at=datetime(2025, 1, 5, 8, 0)),
        make_item("2", "banana", date(2025, 1, 8), category="Countertop",
                  price=1.00, added_at=datetime(2025, 1, 9, 8, 0)),
        make_item("3", "Basmati Rice", date(2025, 6, 1), category="Pantry",
                  price=8.50, added_at=datetime(2025, 1, 7, 8, 0)),
        make_item("4", "Almond Milk", date(2025, 1, 11), price=3.99,
                  added_at=datetime(2025, 1, 9, 8, 0)),
    ]


class TestQueryInventory:
    def test_default_sorts_by_expiry(self, inventory):
        result = query_inventory(inventory, ViewFilters(), TODAY)
        # Ties (Spinach, Almond Milk) keep input order
        assert [i.id for i in result] == ["2", "1", "4", "3"]

    def test_search_is_case_insensitive_substring(self, inventory):
        result = query_inventory(inventory, ViewFilters(search="MILK"), TODAY)
        assert [i.name for i in result] == ["Almond Milk"]

    def test_category_filter(self, inventory):
        result = query_inventory(inventory, ViewFilters(category="Fridge"), TODAY)
        assert {i.id for i in result} == {"1", "4"}

    def test_status_expiring(self, inventory):
        result = query_inventory(inventory, ViewFilters(status="expiring"), TODAY)
        assert {i.id for i in result} == {"1", "4"}

    def test_status_expired(self, inventory):
        result = query_inventory(inventory, ViewFilters(status="expired"), TODAY)
        assert [i.id for i in result] == ["2"]

    def test_filters_are_conjunctive(self, inventory):
        filters = ViewFilters(search="a", category="Fridge", status="expiring")
        result = query_inventory(inventory, filters, TODAY)
        assert [i.id for i in result] == ["1", "4"]
        filters = ViewFilters(search="rice", category="Fridge")
        assert query_inventory(inventory, filters, TODAY) == []

    def test_sort_by_name_ignores_case(self, inventory):
        result = query_inventory(inventory, ViewFilters(sort="name"), TODAY)
        assert [i.name for i in result] == [
            "Almond Milk", "banana", "Basmati Rice", "Spinach",
        ]

    def test_sort_by_name_ignores_accents(self, make_item):
        items = [
            make_item("1", "Zucchini", TODAY),
            make_item("2", "Éclair", TODAY),
            make_item("3", "Apple", TODAY),
        ]
        result = query_inventory(items, ViewFilters(sort="name"), TODAY)
        assert [i.id for i in result] == ["3", "2", "1"]

    def test_sort_by_added_most_recent_first(self, inventory):
        result = query_inventory(inventory, ViewFilters(sort="added"), TODAY)
        # "2" and "4" share a timestamp and keep input order
        assert [i.id for i in result] == ["2", "4", "3", "1"]

    def test_unknown_sort(self, inventory):
        with pytest.raises(ValueError, match="sort"):
            query_inventory(inventory, ViewFilters(sort="price"), TODAY)

    def test_input_not_reordered(self, inventory):
        before = list(inventory)
        query_inventory(inventory, ViewFilters(sort="name"), TODAY)
        assert inventory == before


class TestComputeStats:
    def test_empty_inventory(self):
        stats = compute_stats([], TODAY)
        assert stats.total == 0
        assert stats.freshness_percent == 100
        assert stats.total_value == 0
        assert stats.wasted_value == 0

    def test_counts_and_values(self, inventory):
        stats = compute_stats(inventory, TODAY)
        assert stats.total == 4
        assert stats.expiring == 2
        assert stats.expired == 1
        assert stats.fridge == 2
        assert stats.total_value == pytest.approx(15.98)
        assert stats.wasted_value == pytest.approx(1.00)
        assert stats.freshness_percent == 75

    def test_freshness_rounds_half_up(self, make_item):
        items = [make_item(str(n), "Rice", date(2026, 1, 1)) for n in range(7)]
        items.append(make_item("old", "Milk", date(2025, 1, 1)))
        assert compute_stats(items, TODAY).freshness_percent == 88

    def test_display(self, inventory):
        text = compute_stats(inventory, TODAY).display()
        assert "Freshness:       75%" in text
        assert "$15.98" in text
