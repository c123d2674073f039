"""
Fixed pattern tables shared by every extraction call.

All tables are immutable and safe to share between concurrent extractions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Ad/spam phrases looked up in lowercase text and class names.
AD_INDICATORS: tuple[str, ...] = (
    "advertisement",
    "sponsored",
    "promo",
    "banner",
    "popup",
    "subscribe",
    "newsletter",
    "cookie",
    "privacy policy",
    "terms of service",
    "buy now",
    "click here",
    "learn more",
)

NAVIGATION_INDICATORS: tuple[str, ...] = (
    "menu",
    "navigation",
    "nav",
    "breadcrumb",
    "sidebar",
    "header",
    "footer",
    "home",
    "about",
    "contact",
    "search",
)

# Subtrees dropped before any analysis.
UNWANTED_TAGS: frozenset[str] = frozenset({"script", "style", "noscript", "iframe", "nav", "menu"})

# Structural roles matched against individual class tokens and the id.
UNWANTED_ROLES: frozenset[str] = frozenset(
    {
        "ad",
        "ads",
        "advertisement",
        "banner",
        "social",
        "share",
        "comments",
        "related",
        "sidebar",
        "menu",
        "navigation",
        "nav",
        "popup",
        "modal",
        "overlay",
    }
)

SUSPICIOUS_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        r"ads?[-_]",
        r"banner",
        r"popup",
        r"modal",
        r"sidebar",
        r"widget",
        r"promo",
        r"sponsor",
        r"affiliate",
    )
)

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")
SEMANTIC_TAGS: frozenset[str] = frozenset({"article", "main", "section"})

# Characters outside this set count as "special" for the non-content check.
SPECIAL_CHARACTER = re.compile("[^a-zA-Z0-9\\sÀ-ÖØ-öø-ɏ가-힣]")


@dataclass(frozen=True)
class ScoringWeights:
    text_length: float = 0.3
    paragraph_count: float = 0.2
    heading_count: float = 0.15
    list_count: float = 0.1
    link_density: float = -0.2
    ad_indicators: float = -0.3
    semantic_tags: float = 0.2


SCORING_WEIGHTS = ScoringWeights()

TRUNCATION_MARKER = "[Content truncated for length]"
