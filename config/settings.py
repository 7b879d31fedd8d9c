from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from typing import Annotated, List
from pathlib import Path


DEFAULT_EXTERNAL_TRANSLATE_URLS = [
    "https://libretranslate.com",
    "https://translate.argosopentech.com",
    "https://libretranslate.de",
]


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Own backend (POST /translate/text, /translate/batch)
    backend_base_url: str = "http://localhost:8080"
    backend_timeout: float = 10.0

    # Public translation mirrors, tried in order
    external_translate_urls: Annotated[List[str], NoDecode] = list(DEFAULT_EXTERNAL_TRANSLATE_URLS)
    external_timeout: float = 10.0

    # Translation behaviour
    default_language: str = "en"
    batch_threshold: int = 5
    language_store_path: str = ".language.json"

    # Web API
    web_host: str = "0.0.0.0"
    web_port: int = 8080
    stats_token: str = ""

    # Environment
    debug: bool = False

    @field_validator('external_translate_urls', mode='before')
    @classmethod
    def parse_urls(cls, v):
        if isinstance(v, str):
            return [x.strip().rstrip("/") for x in v.split(",") if x.strip()]
        if isinstance(v, list):
            return [str(x).rstrip("/") for x in v]
        return []

    @field_validator('default_language', mode='before')
    @classmethod
    def normalize_language(cls, v):
        return (v or "en").strip().lower()

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # BACKEND_BASE_URL == backend_base_url
    )


# Create settings instance
settings = Settings()

if settings.debug:
    print("Settings loaded:")
    print(f"  BACKEND_BASE_URL: {settings.backend_base_url}")
    print(f"  EXTERNAL_TRANSLATE_URLS: {len(settings.external_translate_urls)} mirror(s)")
