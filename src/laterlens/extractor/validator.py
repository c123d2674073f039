"""
Quality gate applied to processed content before it is handed to summarization.
"""

from __future__ import annotations

from ..config.config import ExtractionConfig
from .language_detector import UNKNOWN
from .models import ProcessedContent, ValidationResult
from .patterns import TRUNCATION_MARKER

MIN_WORD_COUNT = 50
MIN_PARAGRAPHS = 2
QUALITY_FLOOR = 0.1


class QualityValidator:
    """Multiplicative quality score with blocking issues and soft warnings."""

    def validate(self, content: ProcessedContent, config: ExtractionConfig) -> ValidationResult:
        issues = []
        warnings = []
        quality = 1.0

        if len(content.text) < config.min_content_length:
            issues.append("Content too short for meaningful summarization")
            quality *= 0.3

        if content.word_count < MIN_WORD_COUNT:
            issues.append("Insufficient word count")
            quality *= 0.4

        if content.structure.paragraph_count < MIN_PARAGRAPHS:
            warnings.append("Limited paragraph structure")
            quality *= 0.8

        if content.language == UNKNOWN:
            warnings.append("Could not detect content language")
            quality *= 0.9

        if TRUNCATION_MARKER in content.text:
            warnings.append("Content was truncated due to length limits")
            quality *= 0.9

        return ValidationResult(
            is_valid=not issues,
            issues=tuple(issues),
            warnings=tuple(warnings),
            quality=max(quality, QUALITY_FLOOR),
        )
