"""
Shared httpx plumbing for translation providers.
"""

import logging
from typing import Optional

import httpx

from core.interfaces.translation import ITranslationProvider

logger = logging.getLogger(__name__)


class HttpTranslationProvider(ITranslationProvider):
    """Base for providers that talk JSON over HTTP"""

    def __init__(self, base_url: str, timeout: float, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    @property
    def name(self) -> str:
        return self.base_url

    async def _post_json(self, path: str, payload: dict):
        """POST payload and return the decoded JSON body. Raises on HTTP or decode errors."""
        response = await self.client.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
