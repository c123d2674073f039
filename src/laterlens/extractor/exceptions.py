"""
Errors raised inside the extraction pipeline.

Everything below ``ExtractionError`` is recovered by the orchestrator through
the fallback extractor. ``DocumentLoadError`` is the only error a caller sees.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ValidationResult


class ExtractionError(Exception):
    """Base class for recoverable extraction failures."""

    kind = "extraction-error"


class NoContentFoundError(ExtractionError):
    kind = "no-content-found"

    def __init__(self, message: str = "No suitable content found for summarization") -> None:
        super().__init__(message)


class StructuredExtractionError(ExtractionError):
    kind = "extraction-exception"


class ContentValidationError(ExtractionError):
    kind = "validation-failure"

    def __init__(self, validation: ValidationResult) -> None:
        self.validation = validation
        super().__init__(f"Content validation failed: {', '.join(validation.issues)}")


class DocumentLoadError(Exception):
    """The document tree could not be obtained from its source."""
