"""Tiered data acquisition: provider tiers, the fallback driver and factories."""

from __future__ import annotations

import logging
import mimetypes
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from ..config import ShelfLifeConfig

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """A provider tier could not produce a usable payload."""


class QuotaExceededError(ProviderError):
    """A provider refused the request because of a quota or rate limit."""


def is_quota_error(exc: BaseException) -> bool:
    """Whether an exception from any provider SDK signals a quota/rate limit."""
    if isinstance(exc, QuotaExceededError):
        return True
    for attr in ("status_code", "code", "status"):
        if getattr(exc, attr, None) == 429:
            return True
    if type(exc).__name__ in ("RateLimitError", "ResourceExhausted", "TooManyRequests"):
        return True
    return "quota" in str(exc).lower()


@dataclass
class ReceiptImage:
    data: bytes
    mime_type: str = "image/jpeg"
    filename: str = "receipt.jpg"

    @classmethod
    def from_path(cls, path: str | Path) -> ReceiptImage:
        path = Path(path)
        return cls(
            data=path.read_bytes(),
            mime_type=mimetypes.guess_type(path.name)[0] or "image/jpeg",
            filename=path.name,
        )


@dataclass
class AcquisitionResult:
    items: list[Any] = field(default_factory=list)
    source: str = ""
    quota_exceeded: bool = False


class Tier(ABC):
    """One provider strategy in a fallback chain."""

    name: str = "tier"

    @abstractmethod
    async def fetch(self, request: Any) -> Any:
        """Return the provider's raw payload (list or object of records).

        Any exception means this tier failed.
        """
        ...


class StaticTier:
    """The last tier of every chain: fixed records that are always available."""

    def __init__(self, name: str, records: list[dict]) -> None:
        if not records:
            raise ValueError("StaticTier needs at least one record")
        self.name = name
        self._records = records

    def payload(self) -> list[dict]:
        return [dict(r) for r in self._records]


class Pipeline:
    """Tries each tier in order and stops at the first usable result.

    Payloads go through ``normalize(record, today)``; records it rejects
    (returns None for) are dropped, and a payload with no surviving record
    counts as a failure. When every tier fails, the static fallback is used.
    """

    def __init__(
        self,
        tiers: list[Tier],
        fallback: StaticTier,
        normalize: Callable[[Any, date], Any],
    ) -> None:
        self._tiers = tiers
        self._fallback = fallback
        self._normalize = normalize

    @property
    def tiers(self) -> list[Tier]:
        return list(self._tiers)

    def _normalize_all(self, payload: Any, today: date) -> list:
        from .fields import extract_records

        items = []
        for record in extract_records(payload):
            item = self._normalize(record, today)
            if item is not None:
                items.append(item)
        return items

    async def run(self, request: Any, today: date | None = None) -> AcquisitionResult:
        today = today or date.today()
        quota_exceeded = False

        for tier in self._tiers:
            try:
                payload = await tier.fetch(request)
                items = self._normalize_all(payload, today)
            except Exception as e:
                if is_quota_error(e):
                    quota_exceeded = True
                    logger.warning("%s tier hit a quota limit: %s", tier.name, e)
                else:
                    logger.warning("%s tier failed: %s", tier.name, e)
                continue

            if items:
                logger.info("%s tier returned %d items", tier.name, len(items))
                return AcquisitionResult(
                    items=items, source=tier.name, quota_exceeded=quota_exceeded
                )
            logger.warning("%s tier returned nothing usable", tier.name)

        logger.info("All provider tiers failed, using %s data", self._fallback.name)
        return AcquisitionResult(
            items=self._normalize_all(self._fallback.payload(), today),
            source=self._fallback.name,
            quota_exceeded=quota_exceeded,
        )


def _create_ai_tier(config: ShelfLifeConfig, kind: str) -> Tier:
    backend_name = config.ai.backend
    extra = {"count": config.recipes.count} if kind == "recipes" else {}

    match backend_name:
        case "gemini":
            from .gemini import GeminiReceiptTier, GeminiRecipeTier

            cls = GeminiReceiptTier if kind == "receipt" else GeminiRecipeTier
            return cls(
                api_key=config.ai.gemini.api_key,
                model=config.ai.gemini.model,
                timeout=config.ai.timeout,
                **extra,
            )
        case "claude":
            from .claude import ClaudeReceiptTier, ClaudeRecipeTier

            cls = ClaudeReceiptTier if kind == "receipt" else ClaudeRecipeTier
            return cls(
                api_key=config.ai.claude.api_key,
                model=config.ai.claude.model,
                timeout=config.ai.timeout,
                **extra,
            )
        case _:
            raise ValueError(
                f"Unknown AI backend: {backend_name!r} (choose gemini or claude)"
            )


def create_receipt_pipeline(config: ShelfLifeConfig) -> Pipeline:
    """Receipt OCR service → AI vision → static groceries."""
    from .fields import scanned_item_from_raw
    from .ocr import ReceiptOCRTier
    from .static import FALLBACK_SCANNED_ITEMS

    tiers: list[Tier] = []
    if config.ocr.enabled:
        tiers.append(ReceiptOCRTier(url=config.ocr.url, timeout=config.ocr.timeout))
    tiers.append(_create_ai_tier(config, "receipt"))

    return Pipeline(
        tiers=tiers,
        fallback=StaticTier("static", FALLBACK_SCANNED_ITEMS),
        normalize=scanned_item_from_raw,
    )


def create_recipe_pipeline(config: ShelfLifeConfig) -> Pipeline:
    """AI text generation → static recipes."""
    from .fields import recipe_from_raw
    from .static import FALLBACK_RECIPES

    return Pipeline(
        tiers=[_create_ai_tier(config, "recipes")],
        fallback=StaticTier("static", FALLBACK_RECIPES),
        normalize=lambda record, today: recipe_from_raw(record),
    )


__all__ = [
    "AcquisitionResult",
    "Pipeline",
    "ProviderError",
    "QuotaExceededError",
    "ReceiptImage",
    "StaticTier",
    "Tier",
    "create_receipt_pipeline",
    "create_recipe_pipeline",
    "is_quota_error",
]
