"""TOML configuration loader."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DEFAULT_OCR_URL = "https://shelf-life-sfhacks.vercel.app/ai-ocr"


@dataclass
class StoreConfig:
    path: str = "~/.config/shelflife/inventory.db"
    key: str = "shelf-life-items"


@dataclass
class OCRConfig:
    enabled: bool = True
    url: str = DEFAULT_OCR_URL
    timeout: float = 30.0


@dataclass
class GeminiConfig:
    api_key: str = ""
    model: str = "gemini-2.0-flash"


@dataclass
class ClaudeConfig:
    api_key: str = ""
    model: str = "claude-sonnet-4-5-20250929"


@dataclass
class AIConfig:
    backend: str = "gemini"
    timeout: float = 60.0
    gemini: GeminiConfig = field(default_factory=GeminiConfig)
    claude: ClaudeConfig = field(default_factory=ClaudeConfig)


@dataclass
class RecipesConfig:
    count: int = 3


@dataclass
class ShelfLifeConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    ocr: OCRConfig = field(default_factory=OCRConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    recipes: RecipesConfig = field(default_factory=RecipesConfig)


def load_config(path: str | Path | None = None) -> ShelfLifeConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    API keys can be overridden via environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    sto = raw.get("store", {})
    ocr = raw.get("ocr", {})
    ai = raw.get("ai", {})
    rcp = raw.get("recipes", {})

    gemini_cfg = ai.get("gemini", {})
    claude_cfg = ai.get("claude", {})

    # Resolve API keys: config file → environment variable
    gemini_api_key = gemini_cfg.get("api_key", "") or os.environ.get(
        "GEMINI_API_KEY", ""
    )
    claude_api_key = claude_cfg.get("api_key", "") or os.environ.get(
        "ANTHROPIC_API_KEY", ""
    )

    return ShelfLifeConfig(
        store=StoreConfig(
            path=sto.get("path", "~/.config/shelflife/inventory.db"),
            key=sto.get("key", "shelf-life-items"),
        ),
        ocr=OCRConfig(
            enabled=ocr.get("enabled", True),
            url=ocr.get("url", DEFAULT_OCR_URL),
            timeout=float(ocr.get("timeout", 30.0)),
        ),
        ai=AIConfig(
            backend=ai.get("backend", "gemini"),
            timeout=float(ai.get("timeout", 60.0)),
            gemini=GeminiConfig(
                api_key=gemini_api_key,
                model=gemini_cfg.get("model", "gemini-2.0-flash"),
            ),
            claude=ClaudeConfig(
                api_key=claude_api_key,
                model=claude_cfg.get("model", "claude-sonnet-4-5-20250929"),
            ),
        ),
        recipes=RecipesConfig(
            count=rcp.get("count", 3),
        ),
    )
