"""Tolerant extraction of canonical items from provider payloads.

Neither the receipt OCR service nor the AI models are bound to a fixed
schema, so every logical field is looked up under several key names, in
order. Nothing outside this module sees provider field names.
"""

from __future__ import annotations

import json
import math
from datetime import date
from typing import Any
from urllib.parse import quote

from ..categories import normalize_category
from ..models import DIFFICULTIES, Recipe, ScannedItem
from ..shelf_life import days_until
from . import ProviderError

VIDEO_SEARCH_TEMPLATE = "https://www.youtube.com/results?search_query="

LIST_KEYS = ("items", "grocery_list", "list", "data")

NAME_KEYS = ("name", "item", "food_item")
QUANTITY_KEYS = ("quantity", "qty")
CATEGORY_KEYS = ("category", "type")
# Line total before unit price: "2 @ $0.89  $1.78" is 1.78
PRICE_KEYS = ("total_price", "total", "price", "cost", "estimatedPrice", "estimated_price")
EXPIRY_DAYS_KEYS = ("estimatedExpiryDays", "estimated_expiry_days", "expiry_days", "days")
EXPIRY_DATE_KEYS = ("expiration_date", "expiry_date", "expiry", "expires_on")

TITLE_KEYS = ("title", "name")
INGREDIENT_KEYS = ("ingredients",)
INSTRUCTION_KEYS = ("instructions", "steps", "method")
TIME_KEYS = ("estimatedTime", "estimated_time", "time", "cookingTime")
DIFFICULTY_KEYS = ("difficulty", "level")
VIDEO_QUERY_KEYS = (
    "youtubeSearchQuery",
    "youtube_search_query",
    "videoSearchQuery",
    "searchQuery",
    "search_query",
)

DEFAULT_NAME = "Unidentified Item"
DEFAULT_QUANTITY = "1 unit"


def pick(record: dict, keys: tuple[str, ...]) -> Any:
    """Return the first non-empty value found under any of the keys."""
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def extract_records(payload: Any) -> list:
    """Accept a bare list or an object holding the list under a known key."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in LIST_KEYS:
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def parse_json_text(text: str | None) -> Any:
    """Parse JSON from a model response, stripping markdown fences."""
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        lines = [l for l in lines[1:] if not l.strip().startswith("```")]
        cleaned = "\n".join(lines).strip()

    if not cleaned:
        raise ProviderError("Empty response")
    return json.loads(cleaned)


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().lstrip("$€£¥").replace(",", "")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _parse_price(value: Any) -> float:
    price = _to_float(value)
    if price is None or price < 0:
        return 0.0
    return price


def _quantity_text(value: Any) -> str:
    if value is None:
        return DEFAULT_QUANTITY
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or DEFAULT_QUANTITY


def _expiry_days(record: dict, name: str, today: date) -> int:
    relative = _to_float(pick(record, EXPIRY_DAYS_KEYS))
    # Beyond date.max the day count cannot be anchored to a calendar date
    if relative is not None and 0 <= relative <= (date.max - today).days:
        return int(math.ceil(relative))
    return days_until(pick(record, EXPIRY_DATE_KEYS), name, today)


def scanned_item_from_raw(record: Any, today: date) -> ScannedItem | None:
    """Build a ScannedItem from one provider record, or None if it isn't one."""
    if not isinstance(record, dict):
        return None

    name = str(pick(record, NAME_KEYS) or DEFAULT_NAME).strip()
    return ScannedItem(
        name=name,
        quantity=_quantity_text(pick(record, QUANTITY_KEYS)),
        category=normalize_category(pick(record, CATEGORY_KEYS)),
        estimated_expiry_days=_expiry_days(record, name, today),
        estimated_price=_parse_price(pick(record, PRICE_KEYS)),
    )


def video_search_url(query: str) -> str:
    """Percent-encode a search phrase into the video search template."""
    return VIDEO_SEARCH_TEMPLATE + quote(query.strip(), safe="-_.!~*'()")


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    return []


def _difficulty(value: Any) -> str:
    text = str(value or "").strip().capitalize()
    return text if text in DIFFICULTIES else "Medium"


def recipe_from_raw(record: Any) -> Recipe | None:
    """Build a Recipe from one model record, or None if it has no title."""
    if not isinstance(record, dict):
        return None

    title = pick(record, TITLE_KEYS)
    if not title:
        return None
    title = str(title).strip()

    query = pick(record, VIDEO_QUERY_KEYS)
    query = str(query) if query else f"{title} recipe tutorial"

    return Recipe(
        title=title,
        ingredients=_string_list(pick(record, INGREDIENT_KEYS)),
        instructions=_string_list(pick(record, INSTRUCTION_KEYS)),
        estimated_time=str(pick(record, TIME_KEYS) or ""),
        difficulty=_difficulty(pick(record, DIFFICULTY_KEYS)),
        video_url=video_search_url(query),
    )
