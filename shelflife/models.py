"""Data models for inventory items, scan candidates and recipes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Literal

Category = Literal[
    "Fridge", "Pantry", "Freezer", "Cabinet", "Countertop", "Spice Rack"
]
Difficulty = Literal["Easy", "Medium", "Hard"]

CATEGORIES: tuple[str, ...] = (
    "Fridge",
    "Pantry",
    "Freezer",
    "Cabinet",
    "Countertop",
    "Spice Rack",
)
DIFFICULTIES: tuple[str, ...] = ("Easy", "Medium", "Hard")


def _parse_timestamp(raw: str) -> datetime:
    """Parse an ISO timestamp into naive local time ("Z" suffix allowed)."""
    value = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


@dataclass
class FoodItem:
    """An item in the authoritative inventory."""

    id: str
    name: str
    category: str
    expiry_date: date
    quantity: str
    added_at: datetime
    price: float = 0.0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "expiryDate": self.expiry_date.isoformat(),
            "quantity": self.quantity,
            "addedAt": self.added_at.isoformat(),
            "price": self.price,
        }

    @classmethod
    def from_dict(cls, data: dict) -> FoodItem:
        return cls(
            id=str(data["id"]),
            name=data["name"],
            category=data["category"],
            expiry_date=date.fromisoformat(data["expiryDate"][:10]),
            quantity=data.get("quantity", ""),
            added_at=_parse_timestamp(data["addedAt"]),
            price=float(data.get("price") or 0),
        )


@dataclass
class NewItem:
    """A candidate entry waiting to be reconciled (no id, no timestamp yet)."""

    name: str
    category: str
    expiry_date: date
    quantity: str = "1 unit"
    price: float = 0.0


@dataclass
class ScannedItem:
    """An untrusted item read from a receipt by OCR or AI."""

    name: str
    quantity: str
    category: str
    estimated_expiry_days: int
    estimated_price: float | None = None

    def to_new_item(self, today: date) -> NewItem:
        """Anchor the relative expiry estimate to the acquisition date."""
        return NewItem(
            name=self.name,
            category=self.category,
            expiry_date=today + timedelta(days=self.estimated_expiry_days),
            quantity=self.quantity,
            price=self.estimated_price or 0.0,
        )


@dataclass
class Recipe:
    title: str
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    estimated_time: str = ""
    difficulty: str = "Easy"
    video_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "estimatedTime": self.estimated_time,
            "difficulty": self.difficulty,
            "videoUrl": self.video_url,
        }


@dataclass
class InventoryState:
    """A full snapshot of the inventory, as loaded from and saved to a store."""

    items: list[FoodItem] = field(default_factory=list)

    def to_list(self) -> list[dict]:
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_list(cls, data: list[dict]) -> InventoryState:
        return cls(items=[FoodItem.from_dict(d) for d in data])
