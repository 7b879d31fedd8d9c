import pytest

from core.services import FallbackResolver, StaticDictionary, TranslationCache

PHRASES = {
    "am": {
        "Welcome": "እንኳን ደህና መጣህ",
        "Login": "ግባ",
        "Visitor": "ጎብኚ",
    }
}


@pytest.fixture
def dictionary():
    return StaticDictionary(PHRASES)


@pytest.fixture
def cache():
    return TranslationCache()


@pytest.fixture
def make_resolver(cache, dictionary):
    def _make(backend=None, external=None, batch_threshold=5):
        return FallbackResolver(
            cache=cache,
            dictionary=dictionary,
            backend=backend,
            external=external or [],
            batch_threshold=batch_threshold,
        )
    return _make
