"""
In-memory translation cache.

One sub-map per target language, keyed by the exact source text
(no case or whitespace normalization). Entries live until clear().
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class TranslationCache:
    """Memo table: target language -> source text -> translation"""

    def __init__(self):
        self._entries: Dict[str, Dict[str, str]] = {}

    def get(self, target_lang: str, text: str) -> Optional[str]:
        return self._entries.get(target_lang, {}).get(text)

    def put(self, target_lang: str, text: str, translation: str) -> None:
        self._entries.setdefault(target_lang, {})[text] = translation

    def clear(self) -> None:
        total = self.size()
        self._entries = {}
        logger.debug(f"Translation cache cleared ({total} entries dropped)")

    def size(self, target_lang: Optional[str] = None) -> int:
        if target_lang is not None:
            return len(self._entries.get(target_lang, {}))
        return sum(len(m) for m in self._entries.values())

    def stats(self) -> Dict[str, int]:
        """Entry counts per target language plus total"""
        stats = {lang: len(m) for lang, m in self._entries.items()}
        stats["total"] = self.size()
        return stats
