import asyncio

import pytest
from aiohttp.test_utils import TestClient, TestServer

from adapters.web.translate_api import create_translate_app, infer_source_language
from fakes import FakeProvider

TOKEN = "secret"


@pytest.fixture
def mirror():
    return FakeProvider("mirror", {"Visitors": "ጎብኚዎች", "ጎብኚዎች": "Visitors"})


@pytest.fixture
def resolver(make_resolver, mirror):
    return make_resolver(external=[mirror])


def call(resolver, method, path, **kwargs):
    async def _call():
        app = create_translate_app(resolver, TOKEN)
        async with TestClient(TestServer(app)) as client:
            resp = await client.request(method, path, **kwargs)
            return resp.status, await resp.json()
    return asyncio.run(_call())


def test_translate_text(resolver):
    status, body = call(resolver, "POST", "/translate/text", json={
        "text": "Visitors", "targetLanguage": "am", "sourceLanguage": "en",
    })
    assert status == 200
    assert body == {"success": True, "translation": "ጎብኚዎች"}


def test_translate_text_infers_source(resolver):
    status, body = call(resolver, "POST", "/translate/text", json={"text": "ግባ", "targetLanguage": "en"})
    assert status == 200
    assert body["translation"] == "Login"


def test_translate_text_same_language_is_identity(resolver, mirror):
    status, body = call(resolver, "POST", "/translate/text", json={
        "text": "Visitors", "targetLanguage": "en", "sourceLanguage": "en",
    })
    assert body["translation"] == "Visitors"
    assert mirror.calls == []


def test_translate_text_requires_text_and_target(resolver):
    status, body = call(resolver, "POST", "/translate/text", json={"targetLanguage": "am"})
    assert status == 400
    assert body["message"] == "Text is required"

    status, body = call(resolver, "POST", "/translate/text", json={"text": "Visitors"})
    assert status == 400
    assert body["message"] == "Target language is required"


def test_translate_text_rejects_non_json(resolver):
    status, body = call(resolver, "POST", "/translate/text", data="nope")
    assert status == 400
    assert body["success"] is False


def test_translate_batch(resolver):
    status, body = call(resolver, "POST", "/translate/batch", json={
        "texts": ["Visitors", "", "Login"], "targetLanguage": "am",
    })
    assert status == 200
    assert body == {"success": True, "translations": ["ጎብኚዎች", "", "ግባ"]}


def test_translate_batch_requires_array(resolver):
    status, body = call(resolver, "POST", "/translate/batch", json={"texts": "Visitors", "targetLanguage": "am"})
    assert status == 400


def test_translate_object(resolver):
    status, body = call(resolver, "POST", "/translate/object", json={
        "object": {"title": "Visitors", "limit": 20, "empty": ""}, "targetLanguage": "am",
    })
    assert status == 200
    assert body["translation"] == {"title": "ጎብኚዎች", "limit": 20, "empty": ""}


def test_languages(resolver):
    status, body = call(resolver, "GET", "/translate/languages")
    assert status == 200
    assert {"code": "am", "name": "Amharic"} in body["languages"]
    assert {"code": "en", "name": "English"} in body["languages"]


def test_cache_stats_requires_token(resolver):
    status, _ = call(resolver, "GET", "/translate/cache/stats")
    assert status == 401
    status, _ = call(resolver, "GET", "/translate/cache/stats?token=wrong")
    assert status == 401


def test_cache_stats(resolver, cache):
    cache.put("am", "Visitors", "ጎብኚዎች")
    status, body = call(resolver, "GET", f"/translate/cache/stats?token={TOKEN}")
    assert status == 200
    stats = body["stats"]
    assert stats["am"] == 1
    assert stats["total"] == 1
    assert stats["dictionarySize"] == {"en": 3, "am": 3}


def test_infer_source_language():
    assert infer_source_language("am", None) == "en"
    assert infer_source_language("en", "") == "am"
    assert infer_source_language("am", "EN") == "en"
