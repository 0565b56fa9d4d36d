"""Inventory state holder: hydrate, mutate, persist, query."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable

from .acquisition import AcquisitionResult, Pipeline, ReceiptImage
from .models import FoodItem, InventoryState, NewItem
from .query import InventoryStats, compute_stats, query_inventory
from .reconcile import (
    ReconcileResult,
    ViewFilters,
    delete_item,
    new_manual_item,
    reconcile,
)
from .store import InventoryStore

logger = logging.getLogger(__name__)


def seed_items(today: date | None = None, now: datetime | None = None) -> list[FoodItem]:
    """Demonstration inventory used when the store is empty."""
    today = today or date.today()
    now = now or datetime.now()
    return [
        FoodItem(id="1", name="Almond Milk", category="Fridge",
                 expiry_date=today + timedelta(days=2), quantity="1L",
                 added_at=now, price=3.99),
        FoodItem(id="2", name="Fresh Spinach", category="Fridge",
                 expiry_date=today + timedelta(days=1), quantity="200g",
                 added_at=now, price=2.49),
        FoodItem(id="3", name="Basmati Rice", category="Pantry",
                 expiry_date=today + timedelta(days=100), quantity="2kg",
                 added_at=now, price=8.50),
    ]


class InventoryService:
    """Owns the authoritative inventory.

    Every mutation runs to completion and the full snapshot is saved to the
    store before the method returns.
    """

    def __init__(
        self,
        store: InventoryStore,
        receipt_pipeline: Pipeline | None = None,
        recipe_pipeline: Pipeline | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._receipt_pipeline = receipt_pipeline
        self._recipe_pipeline = recipe_pipeline
        self._clock = clock
        self._items: list[FoodItem] = []
        self.filters = ViewFilters()

    @property
    def items(self) -> list[FoodItem]:
        return list(self._items)

    def today(self) -> date:
        return self._clock().date()

    def load(self) -> list[FoodItem]:
        """Hydrate from the store, seeding it on first use."""
        state = self._store.load()
        if state is None:
            logger.info("Seeding inventory with demonstration items")
            self._items = seed_items(self.today(), self._clock())
            self._persist()
        else:
            self._items = list(state.items)
            logger.debug("Loaded %d items", len(self._items))
        return self.items

    def _persist(self) -> None:
        self._store.save(InventoryState(items=list(self._items)))

    def add_items(self, candidates: list[NewItem]) -> ReconcileResult:
        result = reconcile(
            self._items, candidates, now=self._clock(), filters=self.filters
        )
        self._items = result.items
        self.filters = result.filters
        self._persist()
        logger.info("Reconciled %d candidates, inventory has %d items",
                    len(candidates), len(self._items))
        return result

    def add_manual(
        self,
        name: str,
        category: str = "Fridge",
        quantity: str = "1 unit",
        expiry_date: date | None = None,
        price: float | None = None,
    ) -> ReconcileResult:
        candidate = new_manual_item(
            name, category, quantity, expiry_date, price, today=self.today()
        )
        return self.add_items([candidate])

    def delete(self, item_id: str) -> None:
        self._items = delete_item(self._items, item_id)
        self._persist()
        logger.info("Deleted item %s", item_id)

    async def scan_receipt(
        self, image: ReceiptImage
    ) -> tuple[AcquisitionResult, ReconcileResult]:
        """Read a receipt through the tier chain and add what it found."""
        if self._receipt_pipeline is None:
            raise RuntimeError("No receipt pipeline configured")

        today = self.today()
        scan = await self._receipt_pipeline.run(image, today=today)
        result = self.add_items([s.to_new_item(today) for s in scan.items])
        return scan, result

    async def suggest_recipes(self) -> AcquisitionResult:
        """Recipe ideas for the current inventory; empty when there is nothing."""
        if self._recipe_pipeline is None:
            raise RuntimeError("No recipe pipeline configured")
        if not self._items:
            return AcquisitionResult()
        names = [item.name for item in self._items]
        return await self._recipe_pipeline.run(names, today=self.today())

    def view(self, filters: ViewFilters | None = None) -> list[FoodItem]:
        return query_inventory(self._items, filters or self.filters, self.today())

    def stats(self) -> InventoryStats:
        return compute_stats(self._items, self.today())
