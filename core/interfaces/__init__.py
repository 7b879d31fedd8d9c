from core.interfaces.translation import (
    TranslationResult,
    ITranslationProvider,
    IBatchTranslationProvider,
    ILanguageStore,
)

__all__ = [
    # Translation
    "TranslationResult",
    "ITranslationProvider",
    "IBatchTranslationProvider",
    "ILanguageStore",
]
