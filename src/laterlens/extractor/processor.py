"""
Assembly of structured content into a single, bounded text block.
"""

from __future__ import annotations

import re
from typing import List, Optional

import structlog

from ..config.config import ExtractionConfig
from .language_detector import UNKNOWN, LanguageDetector
from .models import ProcessedContent, StructuredContent
from .patterns import TRUNCATION_MARKER

logger = structlog.get_logger(__name__)

_INLINE_WHITESPACE = re.compile(r"[^\S\n]+")
_SPACE_AROUND_NEWLINE = re.compile(r" *\n *")
_BLANK_LINES = re.compile(r"\n{3,}")
_SENTENCE = re.compile(r"[^.!?]+[.!?]*")

# Room kept free for the truncation marker.
TRUNCATION_RESERVE = 50
PARAGRAPH_KEEP_RATIO = 0.7


def clean_text(text: str) -> str:
    """Collapse whitespace runs while keeping line and paragraph breaks."""
    text = _INLINE_WHITESPACE.sub(" ", text)
    text = _SPACE_AROUND_NEWLINE.sub("\n", text)
    text = _BLANK_LINES.sub("\n\n", text)
    return text.strip()


def intelligent_truncate(text: str, max_length: int) -> str:
    """
    Cut ``text`` to at most ``max_length`` characters on a natural boundary.

    Whole paragraphs are kept when they fill at least 70% of the budget,
    otherwise whole sentences are kept. Either way a truncation marker is
    appended. Text already within the budget is returned unchanged.
    """
    if len(text) <= max_length:
        return text

    budget = max_length - TRUNCATION_RESERVE

    kept = ""
    for paragraph in text.split("\n\n"):
        if len(kept) + len(paragraph) + 2 > budget:
            break
        kept += paragraph + "\n\n"

    if len(kept) >= max_length * PARAGRAPH_KEEP_RATIO:
        return f"{kept.strip()}\n\n{TRUNCATION_MARKER}"

    kept = ""
    for sentence in _SENTENCE.findall(text):
        if len(kept) + len(sentence) > budget:
            break
        kept += sentence

    kept = kept.strip()
    return f"{kept} {TRUNCATION_MARKER}" if kept else TRUNCATION_MARKER


class ContentProcessor:
    """Formats structured content for a summarization model."""

    def __init__(self, language_detector: Optional[LanguageDetector] = None) -> None:
        self.language_detector = language_detector or LanguageDetector()

    def process(self, content: StructuredContent, config: ExtractionConfig) -> ProcessedContent:
        text = clean_text(self.assemble(content, config))
        language = self.language_detector.detect(text) if config.detect_language else UNKNOWN

        if len(text) > config.max_content_length:
            logger.debug("Truncating processed content", length=len(text), limit=config.max_content_length)
            text = intelligent_truncate(text, config.max_content_length)

        return ProcessedContent(
            text=text,
            language=language,
            structure=content.structure,
            word_count=len(text.split()),
        )

    def assemble(self, content: StructuredContent, config: ExtractionConfig) -> str:
        parts: List[str] = []

        if config.include_headings and content.headings:
            parts.append("# Main Topics:\n")
            for heading in content.headings:
                parts.append(f"{'#' * min(heading.level, 3)} {heading.text}\n")
            parts.append("\n")

        if content.paragraphs:
            parts.append("# Content:\n")
            for paragraph in content.paragraphs:
                parts.append(f"{paragraph.text}\n\n")

        if config.include_lists and content.lists:
            parts.append("# Key Points:\n")
            for block in content.lists:
                for item in block.items:
                    parts.append(f"• {item}\n")
                parts.append("\n")

        if config.include_quotes and content.quotes:
            parts.append("# Notable Quotes:\n")
            for quote in content.quotes:
                parts.append(f'"{quote.text}"\n\n')

        if content.images:
            parts.append("# Visual Content:\n")
            for image in content.images:
                if image.alt:
                    parts.append(f"Image: {image.alt}\n")
                if image.caption:
                    parts.append(f"Caption: {image.caption}\n")
            parts.append("\n")

        return "".join(parts)
