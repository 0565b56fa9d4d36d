"""Tests for the inventory service."""

from datetime import date, datetime, timedelta

import pytest

from shelflife.acquisition import Pipeline, ProviderError, ReceiptImage, StaticTier, Tier
from shelflife.acquisition.fields import recipe_from_raw, scanned_item_from_raw
from shelflife.acquisition.static import FALLBACK_RECIPES, FALLBACK_SCANNED_ITEMS
from shelflife.models import InventoryState
from shelflife.reconcile import ViewFilters
from shelflife.service import InventoryService, seed_items
from shelflife.store import MemoryInventoryStore

NOW = datetime(2025, 1, 10, 9, 30)
TODAY = NOW.date()


class FailingTier(Tier):
    name = "ocr"

    def __init__(self):
        self.calls = 0

    async def fetch(self, request):
        self.calls += 1
        raise ProviderError("unreachable")


def _service(store=None, tier=None):
    tier = tier or FailingTier()
    return InventoryService(
        store or MemoryInventoryStore(),
        receipt_pipeline=Pipeline(
            tiers=[tier],
            fallback=StaticTier("static", FALLBACK_SCANNED_ITEMS),
            normalize=scanned_item_from_raw,
        ),
        recipe_pipeline=Pipeline(
            tiers=[tier],
            fallback=StaticTier("static", FALLBACK_RECIPES),
            normalize=lambda record, today: recipe_from_raw(record),
        ),
        clock=lambda: NOW,
    )


class TestLoad:
    def test_seeds_empty_store(self):
        store = MemoryInventoryStore()
        items = _service(store).load()

        assert [i.name for i in items] == ["Almond Milk", "Fresh Spinach", "Basmati Rice"]
        assert items[0].expiry_date == TODAY + timedelta(days=2)
        assert store.load() is not None
        assert len(store.load().items) == 3

    def test_existing_state_not_reseeded(self, milk):
        store = MemoryInventoryStore(InventoryState(items=[milk]))
        assert _service(store).load() == [milk]

    def test_empty_saved_inventory_stays_empty(self):
        store = MemoryInventoryStore(InventoryState(items=[]))
        assert _service(store).load() == []

    def test_seed_items(self):
        items = seed_items(TODAY, NOW)
        assert [i.id for i in items] == ["1", "2", "3"]
        assert items[2].category == "Pantry"
        assert items[2].expiry_date == date(2025, 4, 20)


class TestMutations:
    def test_add_manual_persists(self):
        store = MemoryInventoryStore(InventoryState(items=[]))
        service = _service(store)
        service.load()

        service.add_manual("Tomatoes", quantity="4 units", price=2.5)

        saved = store.load().items
        assert len(saved) == 1
        assert saved[0].expiry_date == TODAY + timedelta(days=5)
        assert saved[0].added_at == NOW

    def test_add_manual_merges(self, milk):
        store = MemoryInventoryStore(InventoryState(items=[milk]))
        service = _service(store)
        service.load()

        result = service.add_manual("milk", expiry_date=date(2025, 1, 10), price=1.0)

        assert len(result.items) == 1
        assert result.items[0].quantity == "2 units"
        assert result.items[0].price == 3.0
        assert store.load().items[0].quantity == "2 units"

    def test_add_manual_invalid(self):
        service = _service()
        service.load()
        with pytest.raises(ValueError):
            service.add_manual("  ")

    def test_delete(self):
        store = MemoryInventoryStore()
        service = _service(store)
        service.load()

        service.delete("2")

        assert [i.id for i in store.load().items] == ["1", "3"]

    def test_delete_unknown(self):
        service = _service()
        service.load()
        with pytest.raises(KeyError):
            service.delete("nope")


class TestScanReceipt:
    @pytest.mark.asyncio
    async def test_failed_tiers_add_static_items(self):
        store = MemoryInventoryStore()
        service = _service(store)
        service.load()
        service.filters = ViewFilters(search="milk", category="Freezer", status="expired")

        scan, result = await service.scan_receipt(ReceiptImage(data=b"img"))

        assert scan.source == "static"
        assert len(result.items) == len(FALLBACK_SCANNED_ITEMS) + 3
        assert result.items[0].name == "Organic Bananas"
        assert [i.id for i in result.items[-3:]] == ["1", "2", "3"]
        assert result.filters_reset is True
        assert service.filters == ViewFilters()
        assert len(store.load().items) == len(result.items)

    @pytest.mark.asyncio
    async def test_expiry_anchored_to_today(self):
        service = _service(MemoryInventoryStore(InventoryState(items=[])))
        service.load()

        _, result = await service.scan_receipt(ReceiptImage(data=b"img"))

        milk = next(i for i in result.items if i.name == "Almond Milk")
        assert milk.expiry_date == TODAY + timedelta(days=7)

    @pytest.mark.asyncio
    async def test_requires_pipeline(self):
        service = InventoryService(MemoryInventoryStore())
        with pytest.raises(RuntimeError):
            await service.scan_receipt(ReceiptImage(data=b"img"))


class TestSuggestRecipes:
    @pytest.mark.asyncio
    async def test_static_recipes(self):
        service = _service()
        service.load()

        result = await service.suggest_recipes()

        assert result.source == "static"
        assert len(result.items) == len(FALLBACK_RECIPES)

    @pytest.mark.asyncio
    async def test_empty_inventory_skips_providers(self):
        tier = FailingTier()
        service = _service(MemoryInventoryStore(InventoryState(items=[])), tier=tier)
        service.load()

        result = await service.suggest_recipes()

        assert result.items == []
        assert tier.calls == 0


class TestQueries:
    def test_view_uses_current_filters(self):
        service = _service()
        service.load()
        assert [i.name for i in service.view()] == [
            "Fresh Spinach", "Almond Milk", "Basmati Rice"
        ]
        service.filters = ViewFilters(category="Pantry")
        assert [i.name for i in service.view()] == ["Basmati Rice"]

    def test_stats(self):
        service = _service()
        service.load()
        stats = service.stats()
        assert stats.total == 3
        assert stats.expiring == 2
        assert stats.fridge == 2
        assert stats.total_value == pytest.approx(14.98)
