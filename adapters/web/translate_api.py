"""
Translation web API - lightweight aiohttp app serving the backend contract.

POST /translate/text        {text, targetLanguage, sourceLanguage}
POST /translate/batch       {texts, targetLanguage, sourceLanguage}
POST /translate/object      {object, targetLanguage, sourceLanguage}
GET  /translate/languages
GET  /translate/cache/stats?token=SECRET

Requests are resolved server-side with the same fallback chain as the
client, minus the backend step (this app *is* the backend).
"""

import logging
from typing import Optional

from aiohttp import web
from pydantic import ValidationError

from core.domain.constants import AMHARIC, ENGLISH
from core.domain.models import (
    BatchTranslationRequest,
    ObjectTranslationRequest,
    TextTranslationRequest,
)
from core.services.fallback_resolver import FallbackResolver
from locales import normalize_code, supported_languages

logger = logging.getLogger(__name__)


def infer_source_language(target_lang: str, source_lang: Optional[str]) -> str:
    """Use the given source, otherwise assume the other side of English <-> Amharic"""
    if source_lang:
        return normalize_code(source_lang)
    return ENGLISH if normalize_code(target_lang) != ENGLISH else AMHARIC


def _bad_request(message: str) -> web.Response:
    return web.json_response({"success": False, "message": message}, status=400)


def create_translate_app(resolver: FallbackResolver, stats_token: str) -> web.Application:
    """Create aiohttp app with the /translate routes."""

    async def _read(request: web.Request, model):
        try:
            body = await request.json()
        except ValueError:
            return None, _bad_request("Request body must be JSON")
        if not isinstance(body, dict):
            return None, _bad_request("Request body must be a JSON object")
        try:
            return model.model_validate(body), None
        except ValidationError as e:
            return None, _bad_request(f"Invalid request: {e.errors()[0]['msg']}")

    async def handle_text(request: web.Request) -> web.Response:
        req, error = await _read(request, TextTranslationRequest)
        if error:
            return error
        if not req.text:
            return _bad_request("Text is required")
        if not req.target_language:
            return _bad_request("Target language is required")

        target = normalize_code(req.target_language)
        source = infer_source_language(target, req.source_language)
        try:
            translation = await resolver.translate(req.text, target, source)
        except Exception as e:
            logger.error(f"Translation failed: {e}", exc_info=True)
            return web.json_response(
                {"success": False, "error": "Translation failed", "original": req.text}, status=500
            )
        return web.json_response({"success": True, "translation": translation})

    async def handle_batch(request: web.Request) -> web.Response:
        req, error = await _read(request, BatchTranslationRequest)
        if error:
            return error
        if not req.target_language:
            return _bad_request("Target language is required")

        target = normalize_code(req.target_language)
        source = infer_source_language(target, req.source_language)
        try:
            translations = await resolver.translate_batch(req.texts, target, source)
        except Exception as e:
            logger.error(f"Batch translation failed: {e}", exc_info=True)
            return web.json_response(
                {"success": False, "error": "Batch translation failed", "originals": req.texts},
                status=500,
            )
        return web.json_response({"success": True, "translations": translations})

    async def handle_object(request: web.Request) -> web.Response:
        req, error = await _read(request, ObjectTranslationRequest)
        if error:
            return error
        if not req.target_language:
            return _bad_request("Target language is required")

        target = normalize_code(req.target_language)
        source = infer_source_language(target, req.source_language)
        keys = [k for k, v in req.object.items() if isinstance(v, str) and v.strip()]
        try:
            values = await resolver.translate_batch([req.object[k] for k in keys], target, source)
        except Exception as e:
            logger.error(f"Object translation failed: {e}", exc_info=True)
            return web.json_response(
                {"success": False, "error": "Object translation failed", "original": req.object},
                status=500,
            )
        translation = dict(req.object)
        translation.update(zip(keys, values))
        return web.json_response({"success": True, "translation": translation})

    async def handle_languages(request: web.Request) -> web.Response:
        return web.json_response({"success": True, "languages": supported_languages()})

    async def handle_cache_stats(request: web.Request) -> web.Response:
        token = request.query.get("token", "")
        if not stats_token or token != stats_token:
            return web.json_response({"success": False, "error": "Unauthorized"}, status=401)

        dictionary = resolver.dictionary
        stats = resolver.cache.stats()
        stats["dictionarySize"] = {ENGLISH: dictionary.size(ENGLISH)}
        for lang in dictionary.languages():
            stats["dictionarySize"][lang] = dictionary.size(lang)
        return web.json_response({"success": True, "stats": stats})

    app = web.Application()
    app.router.add_post("/translate/text", handle_text)
    app.router.add_post("/translate/batch", handle_batch)
    app.router.add_post("/translate/object", handle_object)
    app.router.add_get("/translate/languages", handle_languages)
    app.router.add_get("/translate/cache/stats", handle_cache_stats)
    return app
