"""
Script-based language detection for processed content.
"""

from __future__ import annotations

import re
from typing import Tuple

UNKNOWN = "unknown"


class LanguageDetector:
    """
    Detects a language tag from the first characters of a text.

    Checks run in order: Hangul, CJK ideographs, kana, then a Latin-only
    pattern covering the whole sample. Anything else is ``unknown``.
    """

    SAMPLE_SIZE = 1000

    SCRIPT_PATTERNS: Tuple[Tuple[str, re.Pattern[str]], ...] = (
        ("ko", re.compile("[ᄀ-ᇿ㄰-㆏가-힯]")),
        ("zh", re.compile("[一-鿿]")),
        ("ja", re.compile("[぀-ゟ゠-ヿ]")),
    )

    # Latin letters, digits, whitespace and the punctuation the processor emits.
    LATIN_ONLY = re.compile("[a-z0-9\\s.,!?;:'\"()\\[\\]{}#*/&%+=@_\\-–—‘’“”•…]+")

    def detect(self, text: str) -> str:
        sample = text[: self.SAMPLE_SIZE].lower()
        if not sample.strip():
            return UNKNOWN

        for language, pattern in self.SCRIPT_PATTERNS:
            if pattern.search(sample):
                return language

        if self.LATIN_ONLY.fullmatch(sample):
            return "en"
        return UNKNOWN
