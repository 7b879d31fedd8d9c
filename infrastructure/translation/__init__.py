from infrastructure.translation.backend_client import BackendTranslationProvider
from infrastructure.translation.libre_client import (
    LibreTranslateProvider,
    build_mirror_providers,
)

__all__ = [
    "BackendTranslationProvider",
    "LibreTranslateProvider",
    "build_mirror_providers",
]
