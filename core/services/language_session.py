"""
Language session - the selected UI language and translation health.

One session is built per application run (see adapters/loader.py) and
handed to every consumer. Changing the language clears the cache and
runs a health probe: "Hello" is translated from English and, if it comes
back unchanged, the session is marked degraded / offline.
"""

import logging
from typing import Any, Dict, List, Optional

from core.domain.constants import AMHARIC, ENGLISH, LANGUAGE_STORAGE_KEY, PROBE_TEXT
from core.domain.models import SessionState, TranslationStatus
from core.interfaces.translation import ILanguageStore
from core.services.fallback_resolver import FallbackResolver
from locales import is_supported, normalize_code

logger = logging.getLogger(__name__)


class LanguageSession:
    """Current language, translation status and the translate operations used by the UI"""

    def __init__(
        self,
        resolver: FallbackResolver,
        store: Optional[ILanguageStore] = None,
        default_language: str = ENGLISH,
    ):
        self.resolver = resolver
        self.store = store
        self.default_language = normalize_code(default_language) if is_supported(default_language) else ENGLISH
        self.current_language: str = self.default_language
        if self.current_language == ENGLISH:
            self.status = TranslationStatus.healthy()
            self.state = SessionState.ENGLISH_ACTIVE
        else:
            # Not probed yet; initialize() settles the real state.
            self.status = TranslationStatus.degraded(
                f"Translation service not checked yet for '{self.current_language}'"
            )
            self.state = SessionState.NON_ENGLISH_DEGRADED

    @property
    def cache(self):
        return self.resolver.cache

    # === LIFECYCLE ===

    async def initialize(self) -> str:
        """Load the persisted language (falls back to the default) and probe it"""
        stored = self._load_language()
        if stored and is_supported(stored):
            self.current_language = normalize_code(stored)
        else:
            if stored:
                logger.warning(f"Ignoring unsupported stored language '{stored}'")
            self.current_language = self.default_language

        await self._apply_language()
        logger.info(f"Language session ready: {self.current_language} ({self.state.value})")
        return self.current_language

    async def change_language(self, code: str) -> bool:
        """Switch language. Unknown codes are ignored and logged; returns True on switch."""
        if not is_supported(code):
            logger.warning(f"Unsupported language code: {code}")
            return False

        self.current_language = normalize_code(code)
        self._save_language(self.current_language)
        self.resolver.cache.clear()
        await self._apply_language()
        logger.info(f"Language changed to {self.current_language} ({self.state.value})")
        return True

    async def refresh_translation_service(self) -> TranslationStatus:
        """Re-run the health probe for the current language, keeping the cache"""
        await self._apply_language()
        return self.status

    async def _apply_language(self) -> None:
        if self.current_language == ENGLISH:
            self.state = SessionState.ENGLISH_ACTIVE
            self.status = TranslationStatus.healthy()
            return
        await self._probe()

    async def _probe(self) -> None:
        try:
            result = await self.resolver.translate(PROBE_TEXT, self.current_language, ENGLISH)
        except Exception as e:
            logger.error(f"Health probe raised for {self.current_language}: {e}", exc_info=True)
            result = PROBE_TEXT

        if result != PROBE_TEXT:
            self.state = SessionState.NON_ENGLISH_HEALTHY
            self.status = TranslationStatus.healthy()
            return

        error = f"Translation service unavailable for '{self.current_language}', using local dictionary"
        details = self.resolver.describe_failures()
        if details:
            error = f"{error} ({details})"
        self._mark_degraded(error)

    def _mark_degraded(self, error: str) -> None:
        self.state = SessionState.NON_ENGLISH_DEGRADED
        self.status = TranslationStatus.degraded(error)
        logger.warning(error)

    # === TRANSLATION ===

    async def translate(self, text: str, source_lang: str = ENGLISH) -> str:
        source_lang = normalize_code(source_lang)
        if source_lang == self.current_language:
            return text
        try:
            return await self.resolver.translate(text, self.current_language, source_lang)
        except Exception as e:
            self._mark_degraded(f"Translation failed: {e}")
            return text

    async def translate_texts(self, texts: List[str], source_lang: str = ENGLISH) -> List[str]:
        """Translate a list in order; a failing element falls back to its original text"""
        source_lang = normalize_code(source_lang)
        if source_lang == self.current_language:
            return list(texts)
        try:
            return await self.resolver.translate_batch(texts, self.current_language, source_lang)
        except Exception as e:
            logger.warning(f"Batch translation raised, translating one by one: {e}")
        return [await self.translate(text, source_lang) for text in texts]

    async def translate_object(self, obj: Dict[str, Any], source_lang: str = ENGLISH) -> Dict[str, Any]:
        """Translate every non-empty string value; other values are passed through"""
        keys = [k for k, v in obj.items() if isinstance(v, str) and v.strip()]
        translated = await self.translate_texts([obj[k] for k in keys], source_lang)
        result = dict(obj)
        result.update(zip(keys, translated))
        return result

    # === QUERIES ===

    def is_language(self, code: str) -> bool:
        return self.current_language == normalize_code(code)

    def is_english(self) -> bool:
        return self.is_language(ENGLISH)

    def is_amharic(self) -> bool:
        return self.is_language(AMHARIC)

    # === PERSISTENCE ===

    def _load_language(self) -> Optional[str]:
        if not self.store:
            return None
        try:
            return self.store.get(LANGUAGE_STORAGE_KEY)
        except Exception as e:
            logger.warning(f"Could not read stored language: {e}")
            return None

    def _save_language(self, code: str) -> None:
        if not self.store:
            return
        try:
            self.store.set(LANGUAGE_STORAGE_KEY, code)
        except Exception as e:
            logger.warning(f"Could not persist language '{code}': {e}")
