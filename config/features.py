"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === TRANSLATION PROVIDERS ===
    # Own backend call (step 4 of the fallback chain)
    BACKEND_TRANSLATION_ENABLED: bool = os.getenv("BACKEND_TRANSLATION_ENABLED", "true").lower() == "true"
    # Public LibreTranslate mirrors (step 5)
    EXTERNAL_TRANSLATION_ENABLED: bool = os.getenv("EXTERNAL_TRANSLATION_ENABLED", "true").lower() == "true"

    # === WEB API ===
    WEB_API_ENABLED: bool = os.getenv("WEB_API_ENABLED", "true").lower() == "true"

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_TRANSLATIONS: bool = os.getenv("LOG_TRANSLATIONS", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "backend_translation_enabled": cls.BACKEND_TRANSLATION_ENABLED,
            "external_translation_enabled": cls.EXTERNAL_TRANSLATION_ENABLED,
            "web_api_enabled": cls.WEB_API_ENABLED,
            "debug_mode": cls.DEBUG_MODE,
            "log_translations": cls.LOG_TRANSLATIONS,
        }


# Shortcut
features = Features()
