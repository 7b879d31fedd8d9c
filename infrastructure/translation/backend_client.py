"""
Client for the application's own translation endpoint.

POST /translate/text   {text, targetLanguage, sourceLanguage} -> {success, translation}
POST /translate/batch  {texts, targetLanguage, sourceLanguage} -> {success, translations}
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from core.domain.models import (
    BatchTranslationRequest,
    BatchTranslationResponse,
    TextTranslationRequest,
    TextTranslationResponse,
)
from core.interfaces.translation import IBatchTranslationProvider, TranslationResult
from infrastructure.translation.http_base import HttpTranslationProvider

logger = logging.getLogger(__name__)


class BackendTranslationProvider(HttpTranslationProvider, IBatchTranslationProvider):
    """Own backend - first remote step of the fallback chain"""

    def __init__(self, base_url: str, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        super().__init__(base_url, timeout, client)

    @property
    def name(self) -> str:
        return "backend"

    async def attempt_translate(
        self, text: str, source_lang: str, target_lang: str
    ) -> TranslationResult[str]:
        payload = TextTranslationRequest(
            text=text, target_language=target_lang, source_language=source_lang
        ).model_dump(by_alias=True)
        try:
            data = await self._post_json("/translate/text", payload)
            parsed = TextTranslationResponse.model_validate(data)
        except httpx.HTTPError as e:
            logger.warning(f"Backend translation request failed: {e!r}")
            return TranslationResult.failure(f"request failed: {e!r}", source=self.name)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Backend translation returned malformed body: {e}")
            return TranslationResult.failure("malformed response", source=self.name)

        if not parsed.success:
            return TranslationResult.failure("backend reported failure", source=self.name)
        return TranslationResult.success(parsed.translation, source=self.name)

    async def attempt_translate_batch(
        self, texts: List[str], source_lang: str, target_lang: str
    ) -> TranslationResult[List[str]]:
        payload = BatchTranslationRequest(
            texts=texts, target_language=target_lang, source_language=source_lang
        ).model_dump(by_alias=True)
        try:
            data = await self._post_json("/translate/batch", payload)
            parsed = BatchTranslationResponse.model_validate(data)
        except httpx.HTTPError as e:
            logger.warning(f"Backend batch request failed: {e!r}")
            return TranslationResult.failure(f"request failed: {e!r}", source=self.name)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Backend batch returned malformed body: {e}")
            return TranslationResult.failure("malformed response", source=self.name)

        if not parsed.success:
            return TranslationResult.failure("backend reported failure", source=self.name)
        if len(parsed.translations) != len(texts):
            return TranslationResult.failure(
                f"expected {len(texts)} translations, got {len(parsed.translations)}",
                source=self.name,
            )
        return TranslationResult.success(parsed.translations, source=self.name)
