"""
LibreTranslate-compatible public mirrors.

Each mirror exposes POST {base}/translate with
{q, source, target, format: "text", api_key: ""} -> {translatedText}.
Mirrors are configured as an ordered list (EXTERNAL_TRANSLATE_URLS).
"""

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx
from pydantic import ValidationError

from core.domain.constants import EXTERNAL_TIMEOUT
from core.domain.models import LibreTranslateRequest, LibreTranslateResponse
from core.interfaces.translation import TranslationResult
from infrastructure.translation.http_base import HttpTranslationProvider

logger = logging.getLogger(__name__)


class LibreTranslateProvider(HttpTranslationProvider):
    """One public mirror, bounded by a per-attempt timeout"""

    def __init__(
        self,
        base_url: str,
        timeout: float = EXTERNAL_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(base_url, timeout, client)

    async def attempt_translate(
        self, text: str, source_lang: str, target_lang: str
    ) -> TranslationResult[str]:
        payload = LibreTranslateRequest(q=text, source=source_lang, target=target_lang).model_dump()
        try:
            data = await asyncio.wait_for(self._post_json("/translate", payload), timeout=self.timeout)
            parsed = LibreTranslateResponse.model_validate(data)
        except asyncio.TimeoutError:
            logger.warning(f"Mirror {self.name} timed out after {self.timeout}s")
            return TranslationResult.failure("timeout", source=self.name)
        except httpx.HTTPError as e:
            logger.warning(f"Mirror {self.name} request failed: {e!r}")
            return TranslationResult.failure(f"request failed: {e!r}", source=self.name)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Mirror {self.name} returned malformed body: {e}")
            return TranslationResult.failure("malformed response", source=self.name)

        if not parsed.translated_text:
            return TranslationResult.failure("empty translation", source=self.name)
        return TranslationResult.success(parsed.translated_text, source=self.name)


def build_mirror_providers(
    urls: Sequence[str],
    timeout: float = EXTERNAL_TIMEOUT,
    client: Optional[httpx.AsyncClient] = None,
) -> List[LibreTranslateProvider]:
    """One provider per mirror URL, order preserved"""
    return [LibreTranslateProvider(url, timeout=timeout, client=client) for url in urls if url]
