"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from bs4 import Tag


class CandidateSource(str, Enum):
    """Locator strategy that proposed a content candidate."""

    SEMANTIC = "semantic"
    SCORING = "scoring"
    DENSITY = "density"
    STRUCTURE = "structure"


class ListType(str, Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass(slots=True, frozen=True)
class ContentCandidate:
    """A scored proposal for the main content region."""

    node: "Tag"
    score: float
    source: CandidateSource
    confidence: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.confidence <= 1.0):
            raise ValueError("Confidence must be between 0.0 and 1.0")


@dataclass(slots=True, frozen=True)
class Heading:
    level: int
    text: str
    word_count: int
    index: int = 0


@dataclass(slots=True, frozen=True)
class Paragraph:
    text: str
    word_count: int
    sentence_count: int
    index: int = 0


@dataclass(slots=True, frozen=True)
class ListBlock:
    type: ListType
    items: tuple[str, ...]
    index: int = 0


@dataclass(slots=True, frozen=True)
class Quote:
    text: str
    type: str
    index: int = 0


@dataclass(slots=True, frozen=True)
class ImageDescription:
    alt: str
    caption: Optional[str]
    index: int = 0


@dataclass(slots=True, frozen=True)
class StructureStats:
    heading_count: int = 0
    paragraph_count: int = 0
    list_count: int = 0
    quote_count: int = 0
    image_count: int = 0
    has_hierarchy: bool = False
    avg_paragraph_words: float = 0.0
    total_words: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "headingCount": self.heading_count,
            "paragraphCount": self.paragraph_count,
            "listCount": self.list_count,
            "quoteCount": self.quote_count,
            "imageCount": self.image_count,
            "hasHierarchy": self.has_hierarchy,
            "avgParagraphWords": self.avg_paragraph_words,
            "totalWords": self.total_words,
        }


@dataclass(slots=True, frozen=True)
class StructuredContent:
    """Typed decomposition of a content region."""

    headings: tuple[Heading, ...] = ()
    paragraphs: tuple[Paragraph, ...] = ()
    lists: tuple[ListBlock, ...] = ()
    quotes: tuple[Quote, ...] = ()
    images: tuple[ImageDescription, ...] = ()
    original_length: int = 0
    structure: StructureStats = field(default_factory=StructureStats)


@dataclass(slots=True, frozen=True)
class ProcessedContent:
    text: str
    language: str
    structure: StructureStats
    word_count: int


@dataclass(slots=True, frozen=True)
class ValidationResult:
    is_valid: bool
    issues: tuple[str, ...]
    warnings: tuple[str, ...]
    quality: float

    def __post_init__(self) -> None:
        if not (0.1 <= self.quality <= 1.0):
            raise ValueError("Quality must be between 0.1 and 1.0")


@dataclass(slots=True, frozen=True)
class FallbackResult:
    content: str
    source: str
    quality: float

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "source": self.source, "quality": self.quality}


@dataclass(slots=True, frozen=True)
class ExtractionMetadata:
    original_length: int
    processed_length: int
    language: str
    structure: StructureStats
    quality: float
    extracted_at: int  # epoch milliseconds
    source: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalLength": self.original_length,
            "processedLength": self.processed_length,
            "language": self.language,
            "structure": self.structure.to_dict(),
            "quality": self.quality,
            "extractedAt": self.extracted_at,
            "source": self.source,
            "confidence": self.confidence,
        }


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Terminal output of an extraction call: either content or a fallback."""

    success: bool
    content: Optional[str] = None
    metadata: Optional[ExtractionMetadata] = None
    error: Optional[str] = None
    fallback: Optional[FallbackResult] = None

    def __post_init__(self) -> None:
        if self.success and (self.content is None or self.metadata is None):
            raise ValueError("Successful results need content and metadata")
        if not self.success and self.fallback is None:
            raise ValueError("Failed results need a fallback")

    @classmethod
    def succeeded(cls, content: str, metadata: ExtractionMetadata) -> "ExtractionResult":
        return cls(success=True, content=content, metadata=metadata)

    @classmethod
    def failed(cls, error: str, fallback: FallbackResult) -> "ExtractionResult":
        return cls(success=False, error=error, fallback=fallback)

    @property
    def summary_input(self) -> str:
        """Text the caller should hand to the summarization provider."""
        if self.success:
            return self.content or ""
        return self.fallback.content if self.fallback else ""

    @property
    def quality(self) -> float:
        if self.metadata is not None:
            return self.metadata.quality
        return self.fallback.quality if self.fallback else 0.0

    @property
    def source(self) -> str:
        if self.metadata is not None:
            return self.metadata.source
        return self.fallback.source if self.fallback else "fallback-error"

    def to_dict(self) -> Dict[str, Any]:
        if self.success and self.metadata is not None:
            return {"success": True, "content": self.content, "metadata": self.metadata.to_dict()}
        return {
            "success": False,
            "error": self.error,
            "fallback": self.fallback.to_dict() if self.fallback else None,
        }
