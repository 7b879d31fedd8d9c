"""
Translation interfaces - abstractions for translation providers and language storage.
Allows swapping providers (own backend, LibreTranslate mirrors, test fakes).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class TranslationResult(Generic[T]):
    """Outcome of one provider attempt. Failures keep their reason for diagnostics."""
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    source: str = ""  # Provider that produced this result

    @classmethod
    def success(cls, value: T, source: str = "") -> "TranslationResult[T]":
        return cls(ok=True, value=value, source=source)

    @classmethod
    def failure(cls, error: str, source: str = "") -> "TranslationResult[T]":
        return cls(ok=False, error=error, source=source)


class ITranslationProvider(ABC):
    """Interface for a remote translation strategy"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short provider name used in logs and diagnostics"""
        pass

    @abstractmethod
    async def attempt_translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str
    ) -> TranslationResult[str]:
        """
        Try to translate text. Must never raise.

        Returns:
            TranslationResult with the translation, or the failure reason
        """
        pass

    async def aclose(self) -> None:
        """Release network resources"""
        pass


class IBatchTranslationProvider(ITranslationProvider):
    """Provider that can also translate many texts in one request"""

    @abstractmethod
    async def attempt_translate_batch(
        self,
        texts: List[str],
        source_lang: str,
        target_lang: str
    ) -> TranslationResult[List[str]]:
        """Translate texts in order. Must never raise."""
        pass


class ILanguageStore(ABC):
    """Interface for persisting the selected language (file, memory, browser storage)"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Read a stored value, None if absent"""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value"""
        pass
