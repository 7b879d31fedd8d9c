"""
Domain models - the core of the translation layer.
These models are transport-agnostic (used by the session, the providers and the web API).
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any
from enum import Enum


# === ENUMS ===

class SessionState(str, Enum):
    """Health state of a language session"""
    ENGLISH_ACTIVE = "english_active"
    NON_ENGLISH_HEALTHY = "non_english_healthy"
    NON_ENGLISH_DEGRADED = "non_english_degraded"


# === STATUS ===

class TranslationStatus(BaseModel):
    """Aggregate health of the translation pipeline, shown by the UI"""
    working: bool = True
    error: Optional[str] = None
    offline_mode: bool = False

    @classmethod
    def healthy(cls) -> "TranslationStatus":
        return cls(working=True, error=None, offline_mode=False)

    @classmethod
    def degraded(cls, error: str) -> "TranslationStatus":
        return cls(working=False, error=error, offline_mode=True)


# === BACKEND WIRE FORMAT ===

class TextTranslationRequest(BaseModel):
    """Body of POST /translate/text"""
    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    target_language: str = Field("", alias="targetLanguage")
    source_language: str = Field("", alias="sourceLanguage")


class TextTranslationResponse(BaseModel):
    """Successful reply of POST /translate/text"""
    success: bool
    translation: str


class BatchTranslationRequest(BaseModel):
    """Body of POST /translate/batch"""
    model_config = ConfigDict(populate_by_name=True)

    texts: List[str] = Field(default_factory=list)
    target_language: str = Field("", alias="targetLanguage")
    source_language: str = Field("", alias="sourceLanguage")


class BatchTranslationResponse(BaseModel):
    """Successful reply of POST /translate/batch (same order as the request)"""
    success: bool
    translations: List[str]


class ObjectTranslationRequest(BaseModel):
    """Body of POST /translate/object"""
    model_config = ConfigDict(populate_by_name=True)

    object: Dict[str, Any] = Field(default_factory=dict)
    target_language: str = Field("", alias="targetLanguage")
    source_language: str = Field("", alias="sourceLanguage")


# === EXTERNAL API WIRE FORMAT ===

class LibreTranslateRequest(BaseModel):
    """Body of POST {mirror}/translate"""
    q: str
    source: str
    target: str
    format: str = "text"
    api_key: str = ""  # Intentionally blank for public mirrors


class LibreTranslateResponse(BaseModel):
    translated_text: str = Field("", alias="translatedText")
