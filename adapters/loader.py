"""
Loader - builds the translation services from settings.

Nothing here is a module-level singleton: callers construct one session
(or one server resolver) per application run and pass it along.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config.features import Features, features as default_features
from config.settings import Settings
from core.interfaces.translation import ILanguageStore, ITranslationProvider
from core.services import FallbackResolver, LanguageSession, StaticDictionary, TranslationCache
from infrastructure.storage import FileLanguageStore
from infrastructure.translation import BackendTranslationProvider, build_mirror_providers
from locales import phrase_tables

logger = logging.getLogger(__name__)


@dataclass
class TranslationServices:
    """Everything one application run needs; close() releases HTTP clients"""
    resolver: FallbackResolver
    session: Optional[LanguageSession] = None
    providers: List[ITranslationProvider] = field(default_factory=list)

    async def close(self) -> None:
        for provider in self.providers:
            try:
                await provider.aclose()
            except Exception as e:
                logger.warning(f"Failed to close provider {provider.name}: {e}")


def _mirrors(settings: Settings, features: Features) -> List[ITranslationProvider]:
    if not features.EXTERNAL_TRANSLATION_ENABLED:
        return []
    return build_mirror_providers(settings.external_translate_urls, timeout=settings.external_timeout)


def build_client_services(
    settings: Settings,
    features: Features = default_features,
    store: Optional[ILanguageStore] = None,
) -> TranslationServices:
    """Session side: backend first, then public mirrors, then the dictionary"""
    backend = None
    if features.BACKEND_TRANSLATION_ENABLED:
        backend = BackendTranslationProvider(settings.backend_base_url, timeout=settings.backend_timeout)
    mirrors = _mirrors(settings, features)

    resolver = FallbackResolver(
        cache=TranslationCache(),
        dictionary=StaticDictionary(phrase_tables()),
        backend=backend,
        external=mirrors,
        batch_threshold=settings.batch_threshold,
    )
    session = LanguageSession(
        resolver=resolver,
        store=store or FileLanguageStore(settings.language_store_path),
        default_language=settings.default_language,
    )
    logger.info(
        f"Client translation services built: backend={'on' if backend else 'off'}, "
        f"mirrors={len(mirrors)}"
    )
    providers = ([backend] if backend else []) + mirrors
    return TranslationServices(resolver=resolver, session=session, providers=providers)


def build_server_services(settings: Settings, features: Features = default_features) -> TranslationServices:
    """Web API side: the same chain without the backend step"""
    mirrors = _mirrors(settings, features)
    resolver = FallbackResolver(
        cache=TranslationCache(),
        dictionary=StaticDictionary(phrase_tables()),
        external=mirrors,
        batch_threshold=settings.batch_threshold,
    )
    logger.info(f"Server translation services built: mirrors={len(mirrors)}")
    return TranslationServices(resolver=resolver, providers=list(mirrors))
