"""Household food inventory with shelf-life inference."""

from .acquisition import (
    AcquisitionResult,
    ReceiptImage,
    create_receipt_pipeline,
    create_recipe_pipeline,
)
from .categories import normalize_category
from .config import (
    AIConfig,
    OCRConfig,
    RecipesConfig,
    ShelfLifeConfig,
    StoreConfig,
    load_config,
)
from .models import (
    CATEGORIES,
    FoodItem,
    InventoryState,
    NewItem,
    Recipe,
    ScannedItem,
)
from .quantity import merge_quantities, parse_quantity
from .query import InventoryStats, classify_status, compute_stats, query_inventory
from .reconcile import ReconcileResult, ViewFilters, reconcile
from .service import InventoryService
from .shelf_life import estimate_shelf_life
from .store import InventoryStore, MemoryInventoryStore, SQLiteInventoryStore

__all__ = [
    "CATEGORIES",
    "FoodItem",
    "NewItem",
    "ScannedItem",
    "Recipe",
    "InventoryState",
    "parse_quantity",
    "merge_quantities",
    "estimate_shelf_life",
    "normalize_category",
    "reconcile",
    "ReconcileResult",
    "ViewFilters",
    "query_inventory",
    "classify_status",
    "compute_stats",
    "InventoryStats",
    "InventoryStore",
    "MemoryInventoryStore",
    "SQLiteInventoryStore",
    "InventoryService",
    "ReceiptImage",
    "AcquisitionResult",
    "create_receipt_pipeline",
    "create_recipe_pipeline",
    "ShelfLifeConfig",
    "StoreConfig",
    "OCRConfig",
    "AIConfig",
    "RecipesConfig",
    "load_config",
]
