"""
Content-quality score for a single tree node.

This is the one scoring primitive shared by the locator strategies; changing
a weight here changes main-content selection everywhere.
"""

from __future__ import annotations

from bs4 import Tag

from .dom import class_name, count, node_text
from .patterns import AD_INDICATORS, HEADING_TAGS, SCORING_WEIGHTS, SEMANTIC_TAGS, ScoringWeights


class ElementScorer:
    """Weighted sum of text density, structure and negative signals."""

    def __init__(self, weights: ScoringWeights = SCORING_WEIGHTS) -> None:
        self.weights = weights

    def score(self, node: Tag) -> float:
        w = self.weights
        text = node_text(node)
        paragraphs = count(node, "p")

        score = min(len(text.strip()) / 100, 30) * w.text_length
        score += min(paragraphs * 2, 20) * w.paragraph_count
        score += min(count(node, *HEADING_TAGS) * 3, 15) * w.heading_count
        score += min(count(node, "ul", "ol", "li"), 10) * w.list_count

        link_density = count(node, "a") / max(paragraphs, 1)
        if link_density > 2:
            score += link_density * 5 * w.link_density

        lowered = text.lower()
        classes = class_name(node).lower()
        ad_count = sum(1 for indicator in AD_INDICATORS if indicator in lowered or indicator in classes)
        score += ad_count * 5 * w.ad_indicators

        if (node.name or "").lower() in SEMANTIC_TAGS:
            score += 10 * w.semantic_tags

        return max(score, 0.0)
