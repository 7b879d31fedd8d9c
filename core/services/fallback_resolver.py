"""
Fallback resolver - ordered chain of translation strategies.

Order (first success wins):
    1. identity (blank text, or source == target)
    2. cache
    3. dictionary exact match            -> cached
    4. own backend                       -> cached
    5. public mirrors, one after another -> cached
    6. dictionary substring substitution (not cached)
    7. word-by-word substitution (always returns)

Provider failures are collected as TranslationResult objects in
`last_failures`; nothing is raised to the caller.
"""

import logging
from typing import List, Optional, Sequence

from config.features import features
from core.domain.constants import BATCH_THRESHOLD
from core.interfaces.translation import (
    IBatchTranslationProvider,
    ITranslationProvider,
    TranslationResult,
)
from core.services.static_dictionary import StaticDictionary
from core.services.translation_cache import TranslationCache
from locales import normalize_code

logger = logging.getLogger(__name__)


class FallbackResolver:
    """Resolves a translation through cache, dictionary and remote providers"""

    def __init__(
        self,
        cache: TranslationCache,
        dictionary: StaticDictionary,
        backend: Optional[ITranslationProvider] = None,
        external: Optional[Sequence[ITranslationProvider]] = None,
        batch_threshold: int = BATCH_THRESHOLD,
    ):
        self.cache = cache
        self.dictionary = dictionary
        self.backend = backend
        self.external: List[ITranslationProvider] = list(external or [])
        self.batch_threshold = batch_threshold
        self.last_failures: List[TranslationResult] = []

    @property
    def providers(self) -> List[ITranslationProvider]:
        """Remote providers in the order they are tried"""
        chain = [self.backend] if self.backend else []
        return chain + self.external

    async def translate(self, text: str, target_lang: str, source_lang: str) -> str:
        target_lang = normalize_code(target_lang)
        source_lang = normalize_code(source_lang)
        if not text or not text.strip() or source_lang == target_lang:
            return text

        cached = self.cache.get(target_lang, text)
        if cached is not None:
            return cached

        exact = self.dictionary.lookup_exact(source_lang, text, target_lang)
        if exact is not None:
            self.cache.put(target_lang, text, exact)
            return exact

        failures: List[TranslationResult] = []
        for provider in self.providers:
            result = await self._attempt(provider, text, source_lang, target_lang)
            if result.ok and result.value:
                # An unchanged echo is returned but never cached so a later
                # health probe still reaches the providers.
                if result.value != text:
                    self.cache.put(target_lang, text, result.value)
                self.last_failures = failures
                if features.LOG_TRANSLATIONS:
                    logger.debug(f"[{provider.name}] '{text[:40]}' -> '{result.value[:40]}'")
                return result.value
            failures.append(result)
        self.last_failures = failures

        if failures:
            logger.info(
                f"All {len(failures)} provider(s) failed for {source_lang}->{target_lang}, "
                f"using dictionary fallback"
            )

        partial = self.dictionary.lookup_substring(source_lang, text, target_lang)
        if partial is not None:
            return partial

        return self.dictionary.lookup_word_by_word(source_lang, text, target_lang)

    async def translate_batch(
        self, texts: Sequence[str], target_lang: str, source_lang: str
    ) -> List[str]:
        """
        Translate texts keeping their order.

        Above the batch threshold, uncached texts are first sent to the
        backend in one request; whatever it returns lands in the cache and
        every element then resolves individually through translate().
        """
        texts = list(texts)
        target_lang = normalize_code(target_lang)
        source_lang = normalize_code(source_lang)
        if source_lang == target_lang:
            return texts

        if len(texts) > self.batch_threshold and isinstance(self.backend, IBatchTranslationProvider):
            await self._prefetch_batch(texts, target_lang, source_lang)

        # Sequential so last_failures always describes the element just resolved.
        return [await self.translate(text, target_lang, source_lang) for text in texts]

    async def _prefetch_batch(self, texts: List[str], target_lang: str, source_lang: str) -> None:
        pending = list(dict.fromkeys(
            text for text in texts
            if text and text.strip()
            and self.cache.get(target_lang, text) is None
            and self.dictionary.lookup_exact(source_lang, text, target_lang) is None
        ))
        if not pending:
            return

        try:
            result = await self.backend.attempt_translate_batch(pending, source_lang, target_lang)
        except Exception as e:
            logger.warning(f"[{self.backend.name}] batch attempt raised: {e}")
            return

        if not result.ok or result.value is None or len(result.value) != len(pending):
            logger.warning(
                f"[{self.backend.name}] batch of {len(pending)} failed "
                f"({result.error or 'length mismatch'}), translating one by one"
            )
            return

        for text, translation in zip(pending, result.value):
            if translation and translation != text:
                self.cache.put(target_lang, text, translation)

    async def _attempt(
        self,
        provider: ITranslationProvider,
        text: str,
        source_lang: str,
        target_lang: str,
    ) -> TranslationResult:
        try:
            return await provider.attempt_translate(text, source_lang, target_lang)
        except Exception as e:
            logger.warning(f"[{provider.name}] attempt raised: {e}")
            return TranslationResult.failure(str(e), source=provider.name)

    def describe_failures(self) -> Optional[str]:
        """Compact summary of the last failed provider attempts"""
        if not self.last_failures:
            return None
        return "; ".join(f"{r.source}: {r.error}" for r in self.last_failures)
