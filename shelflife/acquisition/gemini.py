"""Gemini API tiers for receipt reading and recipe suggestions."""

from __future__ import annotations

from typing import Any

from . import ReceiptImage, Tier
from .fields import parse_json_text
from .prompts import RECEIPT_PROMPT, RECIPE_PROMPT

RECIPE_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "title": {"type": "STRING"},
            "ingredients": {"type": "ARRAY", "items": {"type": "STRING"}},
            "instructions": {"type": "ARRAY", "items": {"type": "STRING"}},
            "estimatedTime": {"type": "STRING"},
            "difficulty": {"type": "STRING"},
            "youtubeSearchQuery": {"type": "STRING"},
        },
        "required": ["title", "ingredients", "instructions"],
    },
}


class _GeminiTier(Tier):
    def __init__(
        self,
        api_key: str = "",
        model: str = "gemini-2.0-flash",
        timeout: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout

    async def _generate(self, contents: Any, generation_config: dict) -> Any:
        if not self._api_key:
            raise ValueError(
                "Gemini API key is not set. "
                "Check the config file or the GEMINI_API_KEY environment variable."
            )

        try:
            import google.generativeai as genai
        except ImportError:
            raise ImportError(
                "google-generativeai SDK is required: pip install google-generativeai"
            ) from None

        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(self._model)

        response = await model.generate_content_async(
            contents,
            generation_config=generation_config,
            request_options={"timeout": self._timeout},
        )
        return parse_json_text(response.text)


class GeminiReceiptTier(_GeminiTier):
    """Read receipt line items with Gemini's vision capability."""

    name = "gemini"

    async def fetch(self, request: ReceiptImage) -> Any:
        parts = [
            {"mime_type": request.mime_type, "data": request.data},
            RECEIPT_PROMPT,
        ]
        return await self._generate(
            parts,
            {"response_mime_type": "application/json", "temperature": 0.1},
        )


class GeminiRecipeTier(_GeminiTier):
    """Suggest recipes for the current inventory with Gemini."""

    name = "gemini"

    def __init__(self, *args, count: int = 3, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.count = count

    async def fetch(self, request: list[str]) -> Any:
        prompt = RECIPE_PROMPT.format(count=self.count, items=", ".join(request))
        return await self._generate(
            prompt,
            {
                "response_mime_type": "application/json",
                "response_schema": RECIPE_SCHEMA,
            },
        )
