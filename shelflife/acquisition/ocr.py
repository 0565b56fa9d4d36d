"""Remote receipt OCR service tier."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from . import ProviderError, QuotaExceededError, ReceiptImage, Tier

logger = logging.getLogger(__name__)


class ReceiptOCRTier(Tier):
    """Upload a receipt photo to the OCR backend as multipart form data."""

    name = "ocr"

    def __init__(self, url: str, timeout: float = 30.0) -> None:
        self._url = url
        self._timeout = timeout

    async def fetch(self, request: ReceiptImage) -> Any:
        logger.info("Starting OCR analysis using backend at %s", self._url)
        return await self._post(request)

    async def _post(self, image: ReceiptImage) -> Any:
        form = aiohttp.FormData()
        form.add_field(
            "file",
            image.data,
            filename=image.filename,
            content_type=image.mime_type,
        )

        timeout = aiohttp.ClientTimeout(total=self._timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(
                self._url,
                data=form,
                headers={"Accept": "application/json"},
            ) as response:
                if response.status == 429:
                    raise QuotaExceededError("OCR backend is rate limiting requests")
                if response.status >= 300:
                    raise ProviderError(
                        f"OCR backend responded with status {response.status}"
                    )
                return await response.json(content_type=None)
