from core.services.translation_cache import TranslationCache
from core.services.static_dictionary import StaticDictionary
from core.services.fallback_resolver import FallbackResolver
from core.services.language_session import LanguageSession

__all__ = [
    "TranslationCache",
    "StaticDictionary",
    "FallbackResolver",
    "LanguageSession",
]
