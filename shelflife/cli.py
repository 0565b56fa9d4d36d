"""CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import date

from dotenv import load_dotenv

from .acquisition import ReceiptImage, create_receipt_pipeline, create_recipe_pipeline
from .config import load_config
from .models import CATEGORIES
from .query import classify_status, days_remaining
from .reconcile import ALL_CATEGORIES, SORT_KEYS, STATUS_FILTERS, ViewFilters
from .service import InventoryService
from .store import SQLiteInventoryStore

QUOTA_MESSAGE = (
    "AI Limit Reached: the scanning service is currently busy. "
    "Please try manual add for now."
)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="shelflife",
        description="Track household food and how long it has left",
    )
    parser.add_argument(
        "--config", "-c", type=str, default=None,
        help="Path to the configuration file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show log messages",
    )

    sub = parser.add_subparsers(dest="command")

    # list
    list_parser = sub.add_parser("list", help="Show the inventory")
    list_parser.add_argument("--search", type=str, default="")
    list_parser.add_argument(
        "--category", choices=(ALL_CATEGORIES, *CATEGORIES), default=ALL_CATEGORIES
    )
    list_parser.add_argument("--status", choices=STATUS_FILTERS, default="all")
    list_parser.add_argument("--sort", choices=SORT_KEYS, default="expiry")
    list_parser.add_argument("--json", action="store_true", help="Print JSON")

    # stats
    stats_parser = sub.add_parser("stats", help="Show inventory statistics")
    stats_parser.add_argument("--json", action="store_true", help="Print JSON")

    # add
    add_parser = sub.add_parser("add", help="Add an item by hand")
    add_parser.add_argument("name", type=str)
    add_parser.add_argument("--category", choices=CATEGORIES, default="Fridge")
    add_parser.add_argument("--quantity", type=str, default="1 unit")
    add_parser.add_argument(
        "--expiry", type=date.fromisoformat, default=None,
        help="Expiry date (YYYY-MM-DD); estimated from the name if omitted",
    )
    add_parser.add_argument("--price", type=float, default=None)

    # remove
    remove_parser = sub.add_parser("remove", help="Delete an item")
    remove_parser.add_argument("item_id", type=str)

    # scan
    scan_parser = sub.add_parser("scan", help="Add groceries from a receipt photo")
    scan_parser.add_argument("image", type=str)
    scan_parser.add_argument("--json", action="store_true", help="Print JSON")

    # recipes
    recipes_parser = sub.add_parser("recipes", help="Suggest recipes for what you have")
    recipes_parser.add_argument("--json", action="store_true", help="Print JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    load_dotenv()
    config = load_config(args.config)

    store = SQLiteInventoryStore(config.store.path, key=config.store.key)
    try:
        service = InventoryService(
            store,
            receipt_pipeline=create_receipt_pipeline(config),
            recipe_pipeline=create_recipe_pipeline(config),
        )
        service.load()

        match args.command:
            case "list":
                _cmd_list(service, args)
            case "stats":
                _cmd_stats(service, args)
            case "add":
                _cmd_add(service, args)
            case "remove":
                _cmd_remove(service, args)
            case "scan":
                asyncio.run(_cmd_scan(service, args))
            case "recipes":
                asyncio.run(_cmd_recipes(service, args))
    finally:
        store.close()


def _status_text(item, today: date) -> str:
    match classify_status(item, today):
        case "expired":
            return "Expired"
        case "expiring":
            return "Warning"
        case _:
            return f"{days_remaining(item, today)}d left"


def _print_items(items, today: date) -> None:
    for item in items:
        print(
            f"  {item.id:<12} {item.name:<24} {item.quantity:<12} "
            f"[{item.category}] {item.expiry_date.isoformat()}  "
            f"{_status_text(item, today)}  ${item.price:.2f}"
        )


def _cmd_list(service: InventoryService, args) -> None:
    filters = ViewFilters(
        search=args.search, category=args.category,
        status=args.status, sort=args.sort,
    )
    items = service.view(filters)

    if args.json:
        print(json.dumps([i.to_dict() for i in items], ensure_ascii=False, indent=2))
        return
    if not items:
        print("No items match.")
        return
    print(f"🥬 {len(items)} items:")
    _print_items(items, service.today())


def _cmd_stats(service: InventoryService, args) -> None:
    stats = service.stats()
    if args.json:
        print(json.dumps(stats.__dict__, indent=2))
    else:
        print(stats.display())


def _cmd_add(service: InventoryService, args) -> None:
    try:
        result = service.add_manual(
            args.name,
            category=args.category,
            quantity=args.quantity,
            expiry_date=args.expiry,
            price=args.price,
        )
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    # The newest restock or creation carries the latest timestamp
    item = max(result.items, key=lambda i: i.added_at)
    print(f"Saved {item.name} ({item.quantity}), expires {item.expiry_date.isoformat()}")


def _cmd_remove(service: InventoryService, args) -> None:
    try:
        service.delete(args.item_id)
    except KeyError:
        print(f"No item with id {args.item_id}", file=sys.stderr)
        sys.exit(1)
    print(f"Removed {args.item_id}")


async def _cmd_scan(service: InventoryService, args) -> None:
    image = ReceiptImage.from_path(args.image)

    print("🔍 Reading receipt...")
    scan, _ = await service.scan_receipt(image)

    if scan.quota_exceeded:
        print(QUOTA_MESSAGE, file=sys.stderr)

    if args.json:
        data = [
            {
                "name": s.name,
                "quantity": s.quantity,
                "category": s.category,
                "estimatedExpiryDays": s.estimated_expiry_days,
                "estimatedPrice": s.estimated_price,
            }
            for s in scan.items
        ]
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    print(f"\n🛒 {len(scan.items)} items added (source: {scan.source}):")
    for s in scan.items:
        print(f"  {s.name:<24} {s.quantity:<12} [{s.category}] ~{s.estimated_expiry_days}d")


async def _cmd_recipes(service: InventoryService, args) -> None:
    print("🍳 Finding recipes...")
    result = await service.suggest_recipes()

    if result.quota_exceeded:
        print(QUOTA_MESSAGE, file=sys.stderr)

    if args.json:
        print(json.dumps([r.to_dict() for r in result.items], ensure_ascii=False, indent=2))
        return
    if not result.items:
        print("Your inventory is empty.")
        return

    for recipe in result.items:
        print(f"\n{recipe.title}  ({recipe.estimated_time}, {recipe.difficulty})")
        for ingredient in recipe.ingredients:
            print(f"  - {ingredient}")
        for n, step in enumerate(recipe.instructions, 1):
            print(f"  {n}. {step}")
        if recipe.video_url:
            print(f"  ▶ {recipe.video_url}")
