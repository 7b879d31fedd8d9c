"""
Static phrase dictionary used when no translation service is reachable.

Built once from the English->X phrase tables; the X->English direction
is produced by inverting each table. If two English phrases share a
translation, the one inverted last wins.

Three fidelity tiers:
- lookup_exact: whole phrase, case-sensitive
- lookup_substring: first known phrase found inside the text
- lookup_word_by_word: per-word substitution, never fails
"""

import re
from typing import Dict, Optional

from core.domain.constants import ENGLISH


class StaticDictionary:
    """Bidirectional English <-> X phrase tables"""

    def __init__(self, tables: Dict[str, Dict[str, str]]):
        # {target: {english: translation}}
        self._forward: Dict[str, Dict[str, str]] = {}
        # {source: {translation: english}}
        self._reverse: Dict[str, Dict[str, str]] = {}
        for lang, table in tables.items():
            self._forward[lang] = dict(table)
            reverse: Dict[str, str] = {}
            for english, translated in table.items():
                reverse[translated] = english
            self._reverse[lang] = reverse

    def _table(self, source_lang: str, target_lang: Optional[str] = None) -> Dict[str, str]:
        if source_lang == ENGLISH:
            if target_lang is None:
                # Default to the first registered language
                target_lang = next(iter(self._forward), None)
            return self._forward.get(target_lang, {})
        if target_lang not in (None, ENGLISH):
            # No pivoting between two non-English languages
            return {}
        return self._reverse.get(source_lang, {})

    def lookup_exact(
        self, source_lang: str, text: str, target_lang: Optional[str] = None
    ) -> Optional[str]:
        return self._table(source_lang, target_lang).get(text)

    def lookup_substring(
        self, source_lang: str, text: str, target_lang: Optional[str] = None
    ) -> Optional[str]:
        """Replace every occurrence of the first phrase found in text (case-insensitive)"""
        lowered = text.lower()
        for phrase, translated in self._table(source_lang, target_lang).items():
            if phrase.lower() in lowered:
                pattern = re.compile(re.escape(phrase), re.IGNORECASE)
                return pattern.sub(lambda _: translated, text)
        return None

    def lookup_word_by_word(
        self, source_lang: str, text: str, target_lang: Optional[str] = None
    ) -> str:
        table = self._table(source_lang, target_lang)
        return " ".join(table.get(word, word) for word in text.split(" "))

    def size(self, source_lang: str) -> int:
        if source_lang == ENGLISH:
            return sum(len(t) for t in self._forward.values())
        return len(self._reverse.get(source_lang, {}))

    def languages(self) -> list:
        return list(self._forward)
