"""
Main Content Locator

Runs four independent strategies over a cleaned tree and keeps the candidate
with the highest raw score:

1. Semantic tags: ``main``, ``article``, ``[role=main]`` and common content
   container selectors, probed in priority order.
2. Whole-tree scoring: the best ``ElementScorer`` score among containers.
3. Text density: text-to-markup ratio, damped for short texts.
4. Structural analysis: paragraph, heading and list counts.

Scores are not normalised across strategies, so a density score (0-100)
competes directly with a structure score (usually 10-50).
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

import structlog
from bs4 import Tag

from ..observability.metrics import MetricsRecorder
from .dom import count, html_length, node_text, text_length
from .models import CandidateSource, ContentCandidate
from .patterns import HEADING_TAGS
from .scorer import ElementScorer

logger = structlog.get_logger(__name__)


class LocatorStrategy(Protocol):
    """Uniform contract for the four main-content strategies."""

    source: CandidateSource

    def evaluate(self, tree: Tag) -> Optional[ContentCandidate]:
        ...


class SemanticTagStrategy:
    source = CandidateSource.SEMANTIC

    SELECTORS: tuple[tuple[str, int], ...] = (
        ("main", 10),
        ("article", 9),
        ('[role="main"]', 8),
        (".main-content, .content, #content", 7),
        (".post-content, .entry-content, .article-content", 6),
    )
    THRESHOLD = 15.0
    CONFIDENCE = 0.9

    def __init__(self, scorer: ElementScorer) -> None:
        self.scorer = scorer

    def evaluate(self, tree: Tag) -> Optional[ContentCandidate]:
        for selector, priority in self.SELECTORS:
            for element in tree.select(selector):
                score = self.scorer.score(element) + priority
                if score > self.THRESHOLD:
                    return ContentCandidate(element, score, self.source, self.CONFIDENCE)
        return None


class ScoringStrategy:
    source = CandidateSource.SCORING

    CONTAINERS = ("div", "section", "article", "main")
    THRESHOLD = 10.0

    def __init__(self, scorer: ElementScorer) -> None:
        self.scorer = scorer

    def evaluate(self, tree: Tag) -> Optional[ContentCandidate]:
        best: Optional[Tag] = None
        best_score = 0.0
        for element in tree.find_all(list(self.CONTAINERS)):
            score = self.scorer.score(element)
            if score > best_score and score > self.THRESHOLD:
                best, best_score = element, score

        if best is None:
            return None
        return ContentCandidate(best, best_score, self.source, min(best_score / 50, 1.0))


class TextDensityStrategy:
    source = CandidateSource.DENSITY

    CONTAINERS = ("div", "section", "article")
    MIN_TEXT_LENGTH = 200
    THRESHOLD = 0.3

    def evaluate(self, tree: Tag) -> Optional[ContentCandidate]:
        best: Optional[Tag] = None
        best_density = 0.0
        for element in tree.find_all(list(self.CONTAINERS)):
            length = text_length(element)
            if length < self.MIN_TEXT_LENGTH:
                continue

            density = length / max(html_length(element), 1)
            adjusted = density * min(length / 1000, 1)
            if adjusted > best_density:
                best, best_density = element, adjusted

        if best is None or best_density <= self.THRESHOLD:
            return None
        return ContentCandidate(best, best_density * 100, self.source, min(best_density * 2, 1.0))


class StructuralStrategy:
    source = CandidateSource.STRUCTURE

    CONTAINERS = ("div", "section", "article")
    MIN_PARAGRAPHS = 2
    MIN_AVG_PARAGRAPH_LENGTH = 50
    THRESHOLD = 10.0

    def evaluate(self, tree: Tag) -> Optional[ContentCandidate]:
        best: Optional[Tag] = None
        best_score = 0.0
        for element in tree.find_all(list(self.CONTAINERS)):
            paragraphs = element.find_all("p")
            if len(paragraphs) < self.MIN_PARAGRAPHS:
                continue

            avg_length = sum(len(node_text(p).strip()) for p in paragraphs) / len(paragraphs)
            if avg_length < self.MIN_AVG_PARAGRAPH_LENGTH:
                continue

            score = (
                len(paragraphs) * 2
                + count(element, *HEADING_TAGS) * 3
                + count(element, "ul", "ol") * 1.5
                + avg_length / 100
            )
            if score > best_score:
                best, best_score = element, score

        if best is None or best_score <= self.THRESHOLD:
            return None
        return ContentCandidate(best, best_score, self.source, min(best_score / 30, 1.0))


class MainContentLocator:
    """Evaluates every strategy and selects the highest-scoring candidate."""

    def __init__(
        self,
        scorer: Optional[ElementScorer] = None,
        strategies: Optional[Sequence[LocatorStrategy]] = None,
        metrics: Optional[MetricsRecorder] = None,
    ) -> None:
        scorer = scorer or ElementScorer()
        self.strategies: tuple[LocatorStrategy, ...] = tuple(
            strategies
            or (
                SemanticTagStrategy(scorer),
                ScoringStrategy(scorer),
                TextDensityStrategy(),
                StructuralStrategy(),
            )
        )
        self.metrics = metrics
        self.logger = logger.bind(component="MainContentLocator")

    def locate(self, tree: Tag) -> Optional[ContentCandidate]:
        best: Optional[ContentCandidate] = None
        for strategy in self.strategies:
            try:
                candidate = strategy.evaluate(tree)
            except Exception as e:
                self.logger.warning(
                    "Content finding strategy failed",
                    strategy=strategy.source.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                if self.metrics:
                    self.metrics.record_strategy_failure(strategy.source.value)
                continue

            self.logger.debug(
                "Strategy evaluated",
                strategy=strategy.source.value,
                score=candidate.score if candidate else None,
            )
            if candidate and (best is None or candidate.score > best.score):
                best = candidate

        return best
