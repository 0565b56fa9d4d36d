"""Claude API tiers for receipt reading and recipe suggestions."""

from __future__ import annotations

import base64
from typing import Any

from . import ReceiptImage, Tier
from .fields import parse_json_text
from .prompts import RECEIPT_PROMPT, RECIPE_PROMPT

_JSON_ONLY = "\nReturn only the JSON array, no other text."


class _ClaudeTier(Tier):
    def __init__(
        self,
        api_key: str = "",
        model: str = "claude-sonnet-4-5-20250929",
        timeout: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout

    async def _create(self, content: list[dict]) -> Any:
        if not self._api_key:
            raise ValueError(
                "Anthropic API key is not set. "
                "Check the config file or the ANTHROPIC_API_KEY environment variable."
            )

        try:
            import anthropic
        except ImportError:
            raise ImportError(
                "anthropic SDK is required: pip install anthropic"
            ) from None

        client = anthropic.AsyncAnthropic(api_key=self._api_key, timeout=self._timeout)
        response = await client.messages.create(
            model=self._model,
            max_tokens=4096,
            messages=[{"role": "user", "content": content}],
        )
        return parse_json_text(response.content[0].text)


class ClaudeReceiptTier(_ClaudeTier):
    """Read receipt line items with Claude's vision capability."""

    name = "claude"

    async def fetch(self, request: ReceiptImage) -> Any:
        content = [
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": request.mime_type,
                    "data": base64.standard_b64encode(request.data).decode(),
                },
            },
            {"type": "text", "text": RECEIPT_PROMPT + _JSON_ONLY},
        ]
        return await self._create(content)


class ClaudeRecipeTier(_ClaudeTier):
    """Suggest recipes for the current inventory with Claude."""

    name = "claude"

    def __init__(self, *args, count: int = 3, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.count = count

    async def fetch(self, request: list[str]) -> Any:
        prompt = RECIPE_PROMPT.format(count=self.count, items=", ".join(request))
        return await self._create([{"type": "text", "text": prompt + _JSON_ONLY}])
