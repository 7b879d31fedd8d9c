"""
Language registry - display names and English->X phrase tables.
English is the authoring language; every other language ships a phrase table.
New languages can be registered at runtime with add_language().
"""

from typing import Dict, Optional

from locales.am import AM_PHRASES

_NAMES: Dict[str, str] = {"en": "English", "am": "Amharic"}
_PHRASES: Dict[str, Dict[str, str]] = {"am": AM_PHRASES}


def normalize_code(code: Optional[str]) -> str:
    return (code or "").strip().lower()


def is_supported(code: Optional[str]) -> bool:
    return normalize_code(code) in _NAMES


def get_language_name(code: str) -> str:
    """Human-readable language name. Unknown codes are returned as-is."""
    return _NAMES.get(normalize_code(code), code)


def supported_languages() -> list:
    return [{"code": code, "name": name} for code, name in _NAMES.items()]


def phrase_tables() -> Dict[str, Dict[str, str]]:
    """English->X tables keyed by target language code."""
    return {code: dict(table) for code, table in _PHRASES.items()}


def add_language(code: str, name: str, phrases: Optional[Dict[str, str]] = None):
    """Register a new language at runtime."""
    code = normalize_code(code)
    _NAMES[code] = name
    if phrases is not None:
        _PHRASES[code] = dict(phrases)
