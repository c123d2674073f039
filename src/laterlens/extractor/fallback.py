"""
Degraded extraction used when the main pipeline cannot produce content.
"""

from __future__ import annotations

import copy
import re
from typing import Callable, Optional, Sequence, Tuple

import structlog
from bs4 import BeautifulSoup

from ..config.config import ExtractionConfig
from .dom import normalize_whitespace
from .models import FallbackResult

logger = structlog.get_logger(__name__)

FALLBACK_BODY = "fallback-body"
FALLBACK_META = "fallback-meta"
FALLBACK_ERROR = "fallback-error"
FAILURE_TEXT = "Content extraction failed"

# Fragments parsed without a <body> keep their <head> content at the top level.
_NON_TEXT_TAGS = ["head", "title", "script", "style", "noscript", "template"]
_DESCRIPTION = re.compile(r"^description$", re.IGNORECASE)

FallbackStep = Callable[[BeautifulSoup, ExtractionConfig], Optional[FallbackResult]]


def body_text(document: BeautifulSoup, config: ExtractionConfig) -> Optional[FallbackResult]:
    """Whole-document text, accepted only when it is long enough."""
    root = document.body or document
    clone = copy.copy(root)
    for element in clone.find_all(_NON_TEXT_TAGS):
        if not element.decomposed:
            element.decompose()

    text = normalize_whitespace(clone.get_text(" "))[: config.max_content_length].strip()
    if len(text) > config.min_content_length:
        return FallbackResult(text, FALLBACK_BODY, 0.3)
    return None


def _page_title(document: BeautifulSoup) -> str:
    # Inline SVG icons carry <title> elements of their own.
    for title in document.find_all("title"):
        if title.find_parent("svg") is None:
            return title.get_text(strip=True)
    return ""


def title_and_description(document: BeautifulSoup, config: ExtractionConfig) -> Optional[FallbackResult]:
    """Page title and meta description; may legitimately be empty."""
    title = _page_title(document)
    meta = document.find("meta", attrs={"name": _DESCRIPTION})
    description = str(meta.get("content") or "") if meta else ""
    return FallbackResult(f"{title}\n\n{description.strip()}".strip(), FALLBACK_META, 0.1)


DEFAULT_STEPS: Tuple[FallbackStep, ...] = (body_text, title_and_description)


class FallbackExtractor:
    """Runs fallback steps in order; the first one returning a result wins."""

    def __init__(self, steps: Sequence[FallbackStep] = DEFAULT_STEPS) -> None:
        self.steps = tuple(steps)
        self.logger = logger.bind(component="FallbackExtractor")

    def extract(self, document: BeautifulSoup, config: ExtractionConfig) -> FallbackResult:
        for step in self.steps:
            try:
                result = step(document, config)
            except Exception as e:
                self.logger.warning("Fallback step failed", step=step.__name__, error=str(e))
                continue
            if result is not None:
                self.logger.info("Fallback content produced", source=result.source, length=len(result.content))
                return result

        self.logger.error("All fallback steps failed")
        return FallbackResult(FAILURE_TEXT, FALLBACK_ERROR, 0.0)
