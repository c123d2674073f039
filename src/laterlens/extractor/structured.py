"""
Structured extraction of headings, paragraphs, lists, quotes and images.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from bs4 import Tag

from ..config.config import ExtractionConfig
from .cleaner import TreeCleaner
from .dom import count_words, node_text, normalize_whitespace, split_sentences
from .exceptions import StructuredExtractionError
from .models import (
    Heading,
    ImageDescription,
    ListBlock,
    ListType,
    Paragraph,
    Quote,
    StructureStats,
    StructuredContent,
)
from .patterns import AD_INDICATORS, HEADING_TAGS, NAVIGATION_INDICATORS, SPECIAL_CHARACTER

logger = structlog.get_logger(__name__)

MAX_HEADINGS = 20
MAX_HEADING_LENGTH = 200
MAX_PARAGRAPH_LENGTH = 2000
MAX_LISTS = 5
MAX_LIST_ITEMS = 10
MAX_LIST_ITEM_LENGTH = 500
MAX_QUOTES = 5
QUOTE_LENGTH_RANGE = (20, 1000)
MAX_IMAGES = 10
MIN_ALT_LENGTH = 5


def is_likely_non_content(text: str) -> bool:
    """Reject ad copy, navigation crumbs, symbol soup and repetitive filler."""
    lowered = text.lower()

    if sum(1 for indicator in AD_INDICATORS if indicator in lowered) > 2:
        return True

    nav_count = sum(1 for indicator in NAVIGATION_INDICATORS if indicator in lowered)
    if nav_count > 1 and len(text) < 100:
        return True

    if text and len(SPECIAL_CHARACTER.findall(text)) / len(text) > 0.3:
        return True

    # Short paragraphs are exempt from the repetition check.
    words = text.split()
    if len(words) > 10 and len({w.lower() for w in words}) / len(words) < 0.3:
        return True

    return False


class StructuredExtractor:
    """Decomposes a content region into typed records."""

    CAPTION_SELECTOR = ".caption, .img-caption, .image-caption"

    def __init__(self, cleaner: Optional[TreeCleaner] = None) -> None:
        self.cleaner = cleaner or TreeCleaner()

    def extract(self, node: Tag, config: ExtractionConfig) -> StructuredContent:
        try:
            region = self.cleaner.clean(node)
            headings = self.extract_headings(region) if config.include_headings else []
            paragraphs = self.extract_paragraphs(region, config)
            lists = self.extract_lists(region) if config.include_lists else []
            quotes = self.extract_quotes(region) if config.include_quotes else []
            images = self.extract_images(region)
            original_length = len(node_text(region))
        except StructuredExtractionError:
            raise
        except Exception as e:
            raise StructuredExtractionError(f"Structured extraction failed: {e}") from e

        logger.debug(
            "Structured content extracted",
            headings=len(headings),
            paragraphs=len(paragraphs),
            lists=len(lists),
            quotes=len(quotes),
            images=len(images),
        )
        return StructuredContent(
            headings=tuple(headings),
            paragraphs=tuple(paragraphs),
            lists=tuple(lists),
            quotes=tuple(quotes),
            images=tuple(images),
            original_length=original_length,
            structure=self.analyze_structure(headings, paragraphs, lists, quotes, images),
        )

    def extract_headings(self, region: Tag) -> List[Heading]:
        headings = []
        for index, element in enumerate(region.find_all(list(HEADING_TAGS))):
            text = normalize_whitespace(node_text(element))
            if 0 < len(text) < MAX_HEADING_LENGTH:
                headings.append(Heading(int(element.name[1]), text, count_words(text), index))
        return headings[:MAX_HEADINGS]

    def extract_paragraphs(self, region: Tag, config: ExtractionConfig) -> List[Paragraph]:
        paragraphs = []
        for index, element in enumerate(region.find_all("p")):
            text = normalize_whitespace(node_text(element))
            if not config.min_sentence_length <= len(text) <= MAX_PARAGRAPH_LENGTH:
                continue
            if is_likely_non_content(text):
                continue
            paragraphs.append(Paragraph(text, count_words(text), len(split_sentences(text)), index))
        return paragraphs[: config.max_paragraphs]

    def extract_lists(self, region: Tag) -> List[ListBlock]:
        lists = []
        for index, element in enumerate(region.find_all(["ul", "ol"])):
            items = [normalize_whitespace(node_text(li)) for li in element.find_all("li")]
            items = [item for item in items if 0 < len(item) <= MAX_LIST_ITEM_LENGTH]
            if items:
                list_type = ListType.ORDERED if element.name == "ol" else ListType.UNORDERED
                lists.append(ListBlock(list_type, tuple(items[:MAX_LIST_ITEMS]), index))
        return lists[:MAX_LISTS]

    def extract_quotes(self, region: Tag) -> List[Quote]:
        low, high = QUOTE_LENGTH_RANGE
        quotes = []
        for index, element in enumerate(region.select("blockquote, q, .quote")):
            text = normalize_whitespace(node_text(element))
            if low < len(text) < high:
                quotes.append(Quote(text, element.name, index))
        return quotes[:MAX_QUOTES]

    def extract_images(self, region: Tag) -> List[ImageDescription]:
        images = []
        for index, img in enumerate(region.find_all("img")):
            alt = normalize_whitespace(img.get("alt") or img.get("title") or "")
            caption = self.find_image_caption(img)
            if len(alt) > MIN_ALT_LENGTH or caption:
                images.append(ImageDescription(alt, caption, index))
        return images[:MAX_IMAGES]

    def find_image_caption(self, img: Tag) -> Optional[str]:
        parent = img.parent
        if parent is None:
            return None

        caption = parent.find("figcaption") or parent.select_one(self.CAPTION_SELECTOR)
        if caption is None:
            return None
        return normalize_whitespace(node_text(caption)) or None

    @staticmethod
    def analyze_structure(
        headings: List[Heading],
        paragraphs: List[Paragraph],
        lists: List[ListBlock],
        quotes: List[Quote],
        images: List[ImageDescription],
    ) -> StructureStats:
        paragraph_words = sum(p.word_count for p in paragraphs)
        return StructureStats(
            heading_count=len(headings),
            paragraph_count=len(paragraphs),
            list_count=len(lists),
            quote_count=len(quotes),
            image_count=len(images),
            has_hierarchy=any(h.level > 1 for h in headings),
            avg_paragraph_words=paragraph_words / len(paragraphs) if paragraphs else 0.0,
            total_words=paragraph_words + sum(h.word_count for h in headings),
        )
