"""In-memory translation providers for tests."""

from typing import Dict, List, Optional

from core.interfaces.translation import (
    IBatchTranslationProvider,
    ITranslationProvider,
    TranslationResult,
)


class FakeProvider(ITranslationProvider):
    """Answers from a fixed table; records every call."""

    def __init__(
        self,
        name: str = "fake",
        translations: Optional[Dict[str, str]] = None,
        raises: Optional[Exception] = None,
    ):
        self._name = name
        self.translations = dict(translations or {})
        self.raises = raises
        self.calls: List[tuple] = []
        self.closed = False

    @property
    def name(self) -> str:
        return self._name

    async def attempt_translate(self, text, source_lang, target_lang):
        self.calls.append((text, source_lang, target_lang))
        if self.raises:
            raise self.raises
        if text not in self.translations:
            return TranslationResult.failure("no translation", source=self.name)
        return TranslationResult.success(self.translations[text], source=self.name)

    async def aclose(self):
        self.closed = True


class FakeBatchProvider(FakeProvider, IBatchTranslationProvider):
    """FakeProvider that also serves batches from the same table."""

    def __init__(self, *args, batch_fails: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.batch_fails = batch_fails
        self.batch_calls: List[list] = []

    async def attempt_translate_batch(self, texts, source_lang, target_lang):
        self.batch_calls.append(list(texts))
        if self.batch_fails:
            return TranslationResult.failure("batch down", source=self.name)
        return TranslationResult.success(
            [self.translations.get(t, t) for t in texts], source=self.name
        )
