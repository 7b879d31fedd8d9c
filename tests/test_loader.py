import asyncio

from adapters.loader import build_client_services, build_server_services
from config.features import Features
from config.settings import Settings
from infrastructure.storage import MemoryLanguageStore
from infrastructure.translation import BackendTranslationProvider, LibreTranslateProvider


class NoBackend(Features):
    BACKEND_TRANSLATION_ENABLED = False


class Offline(Features):
    BACKEND_TRANSLATION_ENABLED = False
    EXTERNAL_TRANSLATION_ENABLED = False


def make_settings(**overrides):
    values = {
        "backend_base_url": "http://api.local",
        "external_translate_urls": "https://a.example/, https://b.example",
        "external_timeout": 4,
        "batch_threshold": 7,
    }
    values.update(overrides)
    return Settings(**values)


def test_mirror_urls_are_split_from_env_string():
    settings = make_settings()
    assert settings.external_translate_urls == ["https://a.example", "https://b.example"]


def test_debug_flag_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    assert make_settings().debug is True
    assert not hasattr(make_settings(), "env")


def test_client_services_chain_order():
    services = build_client_services(make_settings(), Features(), store=MemoryLanguageStore())
    resolver = services.resolver
    assert isinstance(resolver.backend, BackendTranslationProvider)
    assert [p.name for p in resolver.providers] == ["backend", "https://a.example", "https://b.example"]
    assert all(isinstance(p, LibreTranslateProvider) and p.timeout == 4 for p in resolver.external)
    assert resolver.batch_threshold == 7
    assert services.session.resolver is resolver
    asyncio.run(services.close())


def test_client_services_without_backend():
    services = build_client_services(make_settings(), NoBackend(), store=MemoryLanguageStore())
    assert services.resolver.backend is None
    assert len(services.providers) == 2
    asyncio.run(services.close())


def test_offline_session_uses_dictionary_only():
    services = build_client_services(make_settings(), Offline(), store=MemoryLanguageStore())
    session = services.session
    assert services.providers == []
    asyncio.run(session.change_language("am"))
    assert asyncio.run(session.translate("Welcome")) == "እንኳን ደህና መጣህ"
    assert session.status.offline_mode


def test_server_services_have_no_backend():
    services = build_server_services(make_settings(), Features())
    assert services.resolver.backend is None
    assert services.session is None
    assert len(services.resolver.external) == 2
    asyncio.run(services.close())
